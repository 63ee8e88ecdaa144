"""Library configuration using Pydantic Settings."""

from typing import Literal

from pydantic_settings import BaseSettings


class Hl7SliceConfig(BaseSettings):
    """Parser configuration, loadable from environment variables."""

    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"

    # Keep the empty line produced by a final segment separator
    keep_trailing_segment: bool = False
    # Rewrite CRLF / LF to CR before parsing
    normalize_line_endings: bool = False

    model_config = {"env_prefix": "HL7SLICE_", "case_sensitive": False}


__all__ = ["Hl7SliceConfig"]
