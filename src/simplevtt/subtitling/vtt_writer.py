import re
from collections.abc import Iterable
from pathlib import Path
import logging

from simplevtt.constants import MARKUP_REPLACEMENTS, VTT_HEADER
from simplevtt.subtitling.types import DialogueRecord

logger = logging.getLogger(__name__)

_markup_map: dict[str, str] = dict(MARKUP_REPLACEMENTS)
_markup_pattern = re.compile("|".join(re.escape(tag) for tag, _ in MARKUP_REPLACEMENTS))

def translate_markup(text: str) -> str:
    """Converts .ass override tags in cue text to WebVTT markup.

    Conversion rules:
    - \\N becomes a line break
    - {\\i1}/{\\i0} become <i>/</i>
    - {\\b1}/{\\b0} become <b>/</b>
    - {\\an1} through {\\an9} are removed

    Replacements are made in a single left-to-right pass. Any other tag is
    left untouched.
    """
    return _markup_pattern.sub(lambda m: _markup_map[m.group(0)], text)

def sort_dialogue(dialogue: Iterable[DialogueRecord]) -> list[DialogueRecord]:
    """Sorts records by start time, keeping input order for equal starts.

    Records with an unparseable start come before every valid start, including 0:00:00.00.
    """
    return sorted(dialogue, key=lambda d: (d.start_valid, d.start_ms))

def marshal_cue(record: DialogueRecord, index: int) -> str:
    """Formats a record as a WebVTT cue block.

        INDEX
        START --> END[ POSITION]
        TEXT
        (blank line)

    Args:
        record: The dialogue record to format.
        index: The 1-based cue number.

    Returns:
        The cue block, ending with a blank line.
    """
    return (
        f"{index}\n"
        f"{record.format_start()} --> {record.format_end()}{record.position()}\n"
        f"{translate_markup(record.text)}\n\n"
    )

def render(dialogue: Iterable[DialogueRecord]) -> str:
    """Renders records, in the given order, as a complete WebVTT document."""
    cues = [marshal_cue(record, i) for i, record in enumerate(dialogue, 1)]
    logger.debug(f"Rendered {len(cues)} cue(s)")
    return VTT_HEADER + "".join(cues)

def write(document: str, output_file: Path) -> Path:
    """Saves a rendered WebVTT document to a file.

    Returns:
        The path to the saved file.
    """
    with open(output_file, 'w', encoding='utf-8', newline='\n') as f:
        f.write(document)
    logger.debug(f"Saved file to {output_file}")
    return output_file
