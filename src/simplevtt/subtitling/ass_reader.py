from collections.abc import Iterable, Iterator
from pathlib import Path
import logging

from simplevtt.constants import DIALOGUE_PREFIX, DIALOGUE_FIELD_COUNT
from simplevtt.subtitling.types import DialogueRecord

logger = logging.getLogger(__name__)


class SubtitleError(Exception):
    """Base error for subtitle input that can't be converted."""


class SubtitleReadError(SubtitleError):
    """The subtitle file couldn't be opened or read."""


class SubtitleScanError(SubtitleError):
    """The subtitle file was read but couldn't be scanned into lines."""


def read_bytes(file: Path) -> bytes:
    """Reads a subtitle file fully into memory.

    Args:
        file: The path to the .ass file.

    Returns:
        The raw file contents.

    Raises:
        SubtitleReadError: If the file can't be opened or read.
    """
    try:
        return file.read_bytes()
    except OSError as e:
        logger.error(f"Could not read subtitle file {file}: {e}")
        raise SubtitleReadError(str(e)) from e

def decode(data: bytes, encoding: str = "utf-8-sig") -> str:
    """Decodes raw subtitle bytes into text.

    Raises:
        SubtitleScanError: If the bytes aren't valid in the given encoding.
    """
    try:
        return data.decode(encoding)
    except (UnicodeDecodeError, LookupError) as e:
        logger.error(f"Could not decode subtitle data as {encoding}: {e}")
        raise SubtitleScanError(str(e)) from e

def iter_lines(content: str) -> Iterator[str]:
    """Yields each line of the content, dropping the line ending.

    Only `\\n` separates lines. A single trailing `\\r` is removed so CRLF files
    scan the same as LF files.
    """
    for line in content.split("\n"):
        yield line[:-1] if line.endswith("\r") else line

def is_dialogue(line: str) -> bool:
    """Checks if the line is a dialogue event."""
    return line.startswith(DIALOGUE_PREFIX)

def parse_line(line: str) -> DialogueRecord | None:
    """Parses a single dialogue line into a DialogueRecord.

    The text field is the last of ten comma-separated fields, so any commas
    inside it are kept as-is.

    Args:
        line: A line starting with `Dialogue:`.

    Returns:
        The parsed record, or None if the line has too few fields or no text.
    """
    body = line.removeprefix(DIALOGUE_PREFIX).removeprefix(" ")
    sections = body.split(",", DIALOGUE_FIELD_COUNT - 1)

    if len(sections) < DIALOGUE_FIELD_COUNT:
        logger.warning(f"Skipping dialogue line with {len(sections)} of {DIALOGUE_FIELD_COUNT} fields: {line!r}")
        return None

    text = sections[9]
    if not text:
        logger.debug(f"Skipping dialogue line with empty text: {line!r}")
        return None

    return DialogueRecord(
        start=sections[1],
        end=sections[2],
        style=sections[3],
        name=sections[4],
        text=text,
    )

def parse_dialogue(lines: Iterable[str]) -> list[DialogueRecord]:
    """Collects every usable dialogue record from the lines, in input order.

    Args:
        lines: Lines of an .ass file.

    Returns:
        The parsed records. Non-dialogue, malformed and empty lines are skipped.
    """
    dialogue: list[DialogueRecord] = []
    skipped = 0

    for line in lines:
        # Only dialogue matters
        if not is_dialogue(line):
            continue

        record = parse_line(line)
        if record is None:
            skipped += 1
            continue

        dialogue.append(record)

    logger.info(f"Parsed {len(dialogue)} dialogue line(s), skipped {skipped}")
    return dialogue
