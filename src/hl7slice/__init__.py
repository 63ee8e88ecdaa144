"""hl7slice: parse, query and decode HL7 v2 pipe-and-hat messages."""

from hl7slice.common import (
    Hl7GenericError,
    Hl7ParseError,
    Hl7SliceConfig,
    MessageSummary,
    MissingRequiredValue,
    MshHeaderMalformed,
)
from hl7slice.parser import Field, Message, MshHeader, Segment, Separators, parse_message
from hl7slice.escaping import EscapeDecoder, decode

__version__ = "0.1.0"

__all__ = [
    "Separators",
    "Field",
    "Segment",
    "Message",
    "MshHeader",
    "parse_message",
    "EscapeDecoder",
    "decode",
    "Hl7SliceConfig",
    "MessageSummary",
    "Hl7ParseError",
    "MshHeaderMalformed",
    "MissingRequiredValue",
    "Hl7GenericError",
]
