from types import MappingProxyType

APP_NAME: str = "simplevtt"

DIALOGUE_PREFIX: str = "Dialogue:"
DIALOGUE_FIELD_COUNT: int = 10  # Layer, Start, End, Style, Name, MarginL, MarginR, MarginV, Effect, Text

VTT_HEADER: str = "WEBVTT\n\n"
ALIGNMENT_TAG_PREFIX: str = "{\\an"

SUBTITLE_SUFFIXES = frozenset([".ass", ".ssa"])

# Found by trial and error against what YouTube accepts; it doesn't follow the WebVTT cue settings rules
POSITIONS = MappingProxyType({
    "1": " align:left position:0% size:60%",
    "2": "",                          # default is align:center
    "3": " align:right position:100% size:60%",
    "4": " align:left position:0% line:50% size:60%",
    "5": " position:50% line:50%",    # default is align:center
    "6": " align:right position:100% line:50% size:60%",
    "7": " align:left position:0% line:0% size:60%",
    "8": " line:0%",                  # default is align:center
    "9": " align:right position:100% line:0% size:60%",
})

MARKUP_REPLACEMENTS: tuple[tuple[str, str], ...] = (
    ("\\N", "\n"),
    ("{\\i1}", "<i>"), ("{\\i0}", "</i>"),
    ("{\\b1}", "<b>"), ("{\\b0}", "</b>"),
    ("{\\an7}", ""), ("{\\an8}", ""), ("{\\an9}", ""),
    ("{\\an4}", ""), ("{\\an5}", ""), ("{\\an6}", ""),
    ("{\\an1}", ""), ("{\\an2}", ""), ("{\\an3}", ""),
)
