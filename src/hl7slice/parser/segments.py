"""Segment view: one CR-delimited line of a message."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from hl7slice.common.constants import HEADER_SEGMENT_ID
from hl7slice.parser.fields import Field
from hl7slice.parser.separators import Separators
from hl7slice.query.selector import PathTail, query_segment, resolve_atomic


@dataclass(frozen=True)
class Segment:
    """A single segment (e.g., MSH, PID, OBX) and its fields.

    ``fields`` holds the raw positional split on the field character, so
    ``fields[0]`` is the identifier. For the header this means MSH-1 (the
    field separator itself) has no entry and ``fields[1]`` is MSH-2;
    ``get_field`` and ``query`` compensate.
    """

    source: str
    separators: Separators
    fields: tuple[Field, ...]

    @classmethod
    def parse(cls, source: str, separators: Separators) -> Segment:
        """Split a segment line on the field character and parse each field."""
        fields = tuple(Field.parse(value, separators) for value in source.split(separators.field))
        return cls(source=source, separators=separators, fields=fields)

    @property
    def identifier(self) -> str:
        """Segment name, the first field's source ("" for an empty line)."""
        return self.fields[0].source if self.fields else ""

    @property
    def is_header(self) -> bool:
        return self.identifier == HEADER_SEGMENT_ID

    def field_view(self, number: int) -> Field | None:
        """Field by HL7 number (1-based), or None when out of range.

        MSH-1 and MSH-2 are delimiter declarations rather than parsed
        fields; for the header they return None.
        """
        if number < 1:
            return None
        if self.is_header:
            if number < 3:
                return None
            position = number - 1
        else:
            position = number
        if position >= len(self.fields):
            return None
        return self.fields[position]

    def get_field(self, number: int) -> str:
        """Field value by 1-based HL7 number; "" when out of range."""
        if self.is_header and number == 1:
            return self.separators.field
        if self.is_header and number == 2:
            return self.separators.encoding_characters
        field = self.field_view(number)
        return field.source if field is not None else ""

    def get_component(self, field_number: int, component_number: int) -> str:
        """Component of a field, both 1-based."""
        if self.is_header and field_number in (1, 2):
            tail = PathTail(field=field_number, component=component_number)
            return resolve_atomic(self.get_field(field_number), tail)
        field = self.field_view(field_number)
        if field is None:
            return ""
        return field.component(component_number - 1)

    def query(self, path: str) -> str:
        """Select a value with an ``F3.R1.C2.S1`` style path (1-based)."""
        return query_segment(self, path)

    def __getitem__(self, index: int) -> str:
        """Raw positional field source (0 is the identifier); "" when out of range."""
        if index < 0 or index >= len(self.fields):
            return ""
        return self.fields[index].source

    def __iter__(self) -> Iterator[str]:
        return (field.source for field in self.fields)

    def __len__(self) -> int:
        return len(self.fields)

    def __str__(self) -> str:
        return self.source


__all__ = ["Segment"]
