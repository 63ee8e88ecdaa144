"""Zero-validation parser for pipe-and-hat HL7 v2 messages."""

from hl7slice.parser.separators import Separators
from hl7slice.parser.fields import Field
from hl7slice.parser.segments import Segment
from hl7slice.parser.msh import MshHeader
from hl7slice.parser.message import Message, normalize_line_endings, parse_message

__all__ = [
    "Separators",
    "Field",
    "Segment",
    "MshHeader",
    "Message",
    "normalize_line_endings",
    "parse_message",
]
