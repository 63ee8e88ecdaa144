"""Delimiter discovery from the MSH header."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from hl7slice.common.constants import (
    COMPONENT_SEPARATOR,
    ESCAPE_CHARACTER,
    FIELD_SEPARATOR,
    HEADER_SEGMENT_ID,
    MIN_HEADER_LENGTH,
    REPEAT_SEPARATOR,
    SEGMENT_SEPARATOR,
    SUBCOMPONENT_SEPARATOR,
)
from hl7slice.common.errors import MshHeaderMalformed

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Separators:
    """The six delimiter characters used by a single message.

    HL7 lets every message declare its own delimiters in the first
    characters of the MSH segment; most senders use the defaults.
    """

    segment: str = SEGMENT_SEPARATOR
    field: str = FIELD_SEPARATOR
    repeat: str = REPEAT_SEPARATOR
    component: str = COMPONENT_SEPARATOR
    subcomponent: str = SUBCOMPONENT_SEPARATOR
    escape: str = ESCAPE_CHARACTER

    @classmethod
    def default(cls) -> Separators:
        """Separators with the HL7 recommended values."""
        return cls()

    @classmethod
    def from_header(cls, message: str) -> Separators:
        """Read the delimiters declared at positions 3-7 of the header.

        Args:
            message: A full message, or at least its MSH segment.

        Returns:
            Separators for the message. The segment separator is always CR.

        Raises:
            MshHeaderMalformed: If the input does not start with ``MSH`` or
                is too short to declare all five delimiters.
        """
        if not message.startswith(HEADER_SEGMENT_ID):
            raise MshHeaderMalformed("message doesn't start with 'MSH'", message)
        if len(message) < MIN_HEADER_LENGTH:
            raise MshHeaderMalformed(
                f"header shorter than {MIN_HEADER_LENGTH} characters", message
            )

        separators = cls(
            segment=SEGMENT_SEPARATOR,
            field=message[3],
            component=message[4],
            repeat=message[5],
            escape=message[6],
            subcomponent=message[7],
        )
        logger.debug("Discovered separators %r", separators)
        return separators

    @property
    def encoding_characters(self) -> str:
        """MSH-2 as declared: component, repeat, escape, subcomponent."""
        return f"{self.component}{self.repeat}{self.escape}{self.subcomponent}"

    def __str__(self) -> str:
        return self.encoding_characters


__all__ = ["Separators"]
