"""Pytest configuration and fixtures."""

import logging
from pathlib import Path

import pytest

SAMPLE_ASS = """[Script Info]
; Script generated by Aegisub
Title: Sample
ScriptType: v4.00+
PlayResX: 1920
PlayResY: 1080

[V4+ Styles]
Format: Name, Fontname, Fontsize, PrimaryColour, SecondaryColour, OutlineColour, BackColour, Bold, Italic, Underline, StrikeOut, ScaleX, ScaleY, Spacing, Angle, BorderStyle, Outline, Shadow, Alignment, MarginL, MarginR, MarginV, Encoding
Style: Default,Arial,48,&H00FFFFFF,&H000000FF,&H00000000,&H00000000,0,0,0,0,100,100,0,0,1,2,2,2,10,10,10,1

[Events]
Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
Dialogue: 0,0:00:05.00,0:00:07.00,Default,Bob,0,0,0,,Second line, with a comma
Comment: 0,0:00:00.00,0:00:01.00,Default,,0,0,0,,Not shown
Dialogue: 0,0:00:01.50,0:00:03.25,Default,Alice,0,0,0,,{\\i1}First{\\i0} line
Dialogue: 0,0:00:09.00,0:00:10.00,Default,,0,0,0,,
Dialogue: 0,0:00:08.00,0:00:09.00,Default,,0,0,0,,{\\an8}Top\\Ncenter
"""

EXPECTED_VTT = """WEBVTT

1
00:00:01.500 --> 00:00:03.250
<i>First</i> line

2
00:00:05.000 --> 00:00:07.000
Second line, with a comma

3
00:00:08.000 --> 00:00:09.000 line:0%
Top
center

"""

# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def sample_ass_file(tmp_path: Path) -> Path:
    """Write the sample .ass script to a temp file."""
    path = tmp_path / "sample.ass"
    path.write_text(SAMPLE_ASS, encoding="utf-8")
    return path


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a minimal config that keeps logging off the console."""
    path = tmp_path / "config.yaml"
    path.write_text(
        "logging:\n"
        "  console_level: CRITICAL\n"
        "  file_level: DEBUG\n"
        "  log_to_file: false\n"
        "input:\n"
        "  encoding: utf-8-sig\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def restore_root_logger():
    """Drop the handlers setup_logging adds to the root logger."""
    root = logging.getLogger()
    level = root.level
    yield
    # pytest's own capture handlers live outside the stdlib logging package
    for handler in root.handlers[:]:
        if type(handler).__module__.startswith("logging"):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


@pytest.fixture
def sample_ass_text() -> str:
    """The sample .ass script as text."""
    return SAMPLE_ASS


@pytest.fixture
def expected_vtt() -> str:
    """The WebVTT document the sample script converts to."""
    return EXPECTED_VTT
