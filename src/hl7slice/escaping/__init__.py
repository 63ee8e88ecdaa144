"""Escape sequence decoding for HL7 values."""

from hl7slice.escaping.decoder import EscapeDecoder, decode

__all__ = ["EscapeDecoder", "decode"]
