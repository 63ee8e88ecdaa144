"""Constants and enums for hl7slice."""

from enum import StrEnum
from typing import Final


class Extraction(StrEnum):
    """Extraction characters used by the path query language."""

    FIELD = "F"
    REPEAT = "R"
    COMPONENT = "C"
    SUBCOMPONENT = "S"


# Extraction level ordering (path elements must appear in this order)
EXTRACTION_ORDER: Final[dict[Extraction, int]] = {
    Extraction.FIELD: 0,
    Extraction.REPEAT: 1,
    Extraction.COMPONENT: 2,
    Extraction.SUBCOMPONENT: 3,
}

HEADER_SEGMENT_ID: Final[str] = "MSH"
# "MSH" plus field, component, repeat, escape and subcomponent characters
MIN_HEADER_LENGTH: Final[int] = 8

# HL7 v2 recommended delimiter values
SEGMENT_SEPARATOR: Final[str] = "\r"
FIELD_SEPARATOR: Final[str] = "|"
REPEAT_SEPARATOR: Final[str] = "~"
COMPONENT_SEPARATOR: Final[str] = "^"
SUBCOMPONENT_SEPARATOR: Final[str] = "&"
ESCAPE_CHARACTER: Final[str] = "\\"

# Highlight start/stop, left for the consuming application
HIGHLIGHT_ESCAPES: Final[frozenset[str]] = frozenset({"H", "N"})
CUSTOM_ESCAPE_PREFIX: Final[str] = "Z"

__all__ = [
    "Extraction",
    "EXTRACTION_ORDER",
    "HEADER_SEGMENT_ID",
    "MIN_HEADER_LENGTH",
    "SEGMENT_SEPARATOR",
    "FIELD_SEPARATOR",
    "REPEAT_SEPARATOR",
    "COMPONENT_SEPARATOR",
    "SUBCOMPONENT_SEPARATOR",
    "ESCAPE_CHARACTER",
    "HIGHLIGHT_ESCAPES",
    "CUSTOM_ESCAPE_PREFIX",
]
