import pydantic

from simplevtt.constants import ALIGNMENT_TAG_PREFIX, POSITIONS
from simplevtt.subtitling import sub_timing

class DialogueRecord(pydantic.BaseModel):
    """A single dialogue cue as read from an .ass file.

    Format: Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text
    Only Start, End, Style, Name and Text are kept.
    """
    model_config = pydantic.ConfigDict(frozen=True)

    start: str
    end: str
    style: str = ""
    name: str = ""
    text: str

    @property
    def start_ms(self) -> int:
        return sub_timing.parse_timestamp(self.start)

    @property
    def start_valid(self) -> bool:
        return sub_timing.is_timestamp(self.start)

    @property
    def end_ms(self) -> int:
        return sub_timing.parse_timestamp(self.end)

    def format_start(self) -> str:
        return sub_timing.format_timestamp(self.start_ms)

    def format_end(self) -> str:
        return sub_timing.format_timestamp(self.end_ms)

    def position(self) -> str:
        """Returns the WebVTT cue settings for a leading `{\\anN}` tag, or an empty string."""
        if len(self.text) > 5 and self.text.startswith(ALIGNMENT_TAG_PREFIX):
            return POSITIONS.get(self.text[4], "")
        return ""
