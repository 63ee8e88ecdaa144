"""Dotted-path queries over parsed HL7 messages."""

from hl7slice.query.selector import PathTail, parse_tail, query, query_field, query_segment

__all__ = ["PathTail", "parse_tail", "query", "query_field", "query_segment"]
