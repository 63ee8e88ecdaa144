"""Common constants, configuration, errors and schemas for hl7slice."""

from hl7slice.common.config import Hl7SliceConfig
from hl7slice.common.constants import Extraction
from hl7slice.common.errors import (
    Hl7GenericError,
    Hl7ParseError,
    MissingRequiredValue,
    MshHeaderMalformed,
)
from hl7slice.common.schemas import MessageSummary

__all__ = [
    "Extraction",
    "Hl7SliceConfig",
    "Hl7ParseError",
    "MshHeaderMalformed",
    "MissingRequiredValue",
    "Hl7GenericError",
    "MessageSummary",
]
