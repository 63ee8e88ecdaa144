"""HL7 escape sequence decoding.

Replaces the delimiter escapes ``\\E\\``, ``\\F\\``, ``\\R\\``, ``\\S\\`` and
``\\T\\`` with the escape, field, repeat, component and subcomponent
characters of the message. Other sequences are left in the value:

- ``\\H\\`` / ``\\N\\`` (highlighting on/off) belong to the consuming
  application.
- ``\\Z..\\`` sequences are application defined.
- ``\\Cxxyy\\``, ``\\Mxxyyzz\\`` and ``\\Xdd..\\`` local character encodings
  are not decoded; they pass through like any unknown sequence.

The escape character is whatever the message header declares, so a
decoder is built per set of separators and may be reused across values.
"""

from __future__ import annotations

import logging

from hl7slice.common.constants import (
    CUSTOM_ESCAPE_PREFIX,
    HIGHLIGHT_ESCAPES,
)
from hl7slice.parser.separators import Separators

logger = logging.getLogger(__name__)


class EscapeDecoder:
    """Decode escape sequences using a message's separators."""

    def __init__(self, separators: Separators) -> None:
        self._separators = separators
        self._escape = separators.escape
        self._substitutions: dict[str, str] = {
            "E": separators.escape,
            "F": separators.field,
            "R": separators.repeat,
            "S": separators.component,
            "T": separators.subcomponent,
        }

    @property
    def separators(self) -> Separators:
        return self._separators

    def decode(self, value: str) -> str:
        """Return ``value`` with escape sequences replaced.

        When the value holds no escape character the same object is returned
        untouched. Unmatched or unknown sequences are preserved verbatim.
        """
        escape = self._escape
        start = value.find(escape)
        if start == -1:
            return value

        output: list[str] = [value[:start]]
        cursor = start
        length = len(value)

        while cursor < length:
            start = value.find(escape, cursor)
            if start == -1:
                output.append(value[cursor:])
                break

            end = value.find(escape, start + 1)
            if end == -1:
                # Lone escape character, not a sequence
                output.append(value[cursor:])
                break

            output.append(value[cursor:start])
            payload = value[start + 1 : end]
            output.append(self._translate(payload, value[start : end + 1]))
            cursor = end + 1

        return "".join(output)

    def _translate(self, payload: str, sequence: str) -> str:
        replacement = self._substitutions.get(payload)
        if replacement is not None:
            return replacement
        if payload in HIGHLIGHT_ESCAPES or payload.startswith(CUSTOM_ESCAPE_PREFIX):
            return sequence
        logger.debug("Unknown escape sequence %r, keeping it", sequence)
        return sequence

    def __repr__(self) -> str:
        return f"EscapeDecoder(separators={self._separators!r})"


def decode(value: str, separators: Separators | None = None) -> str:
    """One-off decode; prefer a cached EscapeDecoder when decoding many values."""
    return EscapeDecoder(separators or Separators.default()).decode(value)


__all__ = ["EscapeDecoder", "decode"]
