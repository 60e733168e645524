import re
import logging

from pysubs2.time import Times, ms_to_times, times_to_ms

logger = logging.getLogger(__name__)

# H:MM:SS.cc, hours unpadded
ASS_TIMESTAMP = re.compile(r"([0-9]{1,2}):([0-5][0-9]):([0-5][0-9])\.([0-9]{2})")

MS_PER_DAY: int = 24 * 60 * 60 * 1000

def _read_times(text: str) -> Times | None:
    """Splits an .ass timestamp into its parts, or returns None if it isn't one."""
    match = ASS_TIMESTAMP.fullmatch(text)
    if not match:
        return None

    hours, minutes, seconds, centiseconds = map(int, match.groups())
    if hours >= 24:
        return None

    return Times(h=hours, m=minutes, s=seconds, ms=centiseconds * 10)

def is_timestamp(text: str) -> bool:
    """Checks if the text is a parseable `H:MM:SS.cc` timestamp under 24 hours."""
    return _read_times(text) is not None

def parse_timestamp(text: str) -> int:
    """Parses an .ass timestamp into a millisecond offset.

    Values that don't match `H:MM:SS.cc`, or that run past 23 hours, are
    treated as zero rather than rejected. Use `is_timestamp` to tell them
    apart from a real `0:00:00.00`.

    Args:
        text: The timestamp as written in the dialogue line.

    Returns:
        The offset in milliseconds, or 0 if the text is unparseable.
    """
    times = _read_times(text)
    if times is None:
        logger.debug(f"Unparseable timestamp treated as zero: {text!r}")
        return 0

    return times_to_ms(*times)

def format_timestamp(ms: int) -> str:
    """Formats a millisecond offset as a WebVTT `HH:MM:SS.mmm` timestamp."""
    h, m, s, ms = ms_to_times(ms % MS_PER_DAY)
    return f"{h:02d}:{m:02d}:{s:02d}.{ms:03d}"
