"""Error types raised while parsing HL7 v2 messages."""

from __future__ import annotations


class Hl7ParseError(ValueError):
    """Base class for every failure raised by hl7slice."""


class MshHeaderMalformed(Hl7ParseError):
    """Raised when delimiter discovery cannot read the MSH header."""

    def __init__(self, reason: str, header: str = "") -> None:
        self.reason = reason
        self.header = header[:8]
        super().__init__(f"Malformed MSH header: {reason} (header={self.header!r})")


class MissingRequiredValue(Hl7ParseError):
    """Raised when a mandatory field is absent (present-but-empty is allowed)."""

    def __init__(self, field_name: str = "") -> None:
        self.field_name = field_name
        detail = f": {field_name}" if field_name else ""
        super().__init__(f"Missing required value{detail}")


class Hl7GenericError(Hl7ParseError):
    """Unexpected condition during parsing."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


__all__ = [
    "Hl7ParseError",
    "MshHeaderMalformed",
    "MissingRequiredValue",
    "Hl7GenericError",
]
