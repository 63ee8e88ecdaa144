r"""Path query engine.

Addresses any leaf of a parsed message with a dotted path such as
``PID.F11.C5`` (segment, field, repeat, component, subcomponent). All
indexers are 1-based, matching HL7 documentation. Every query is total:
unknown segments, out-of-range indices and malformed paths all yield
the empty string.

Example:
    >>> from hl7slice.parser.message import Message
    >>> msg = Message.parse("MSH|^~\\&|GHH LAB|ELAB-3\rPID|||555-44-4444")
    >>> query(msg, "PID.F3")
    '555-44-4444'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Sequence

from hl7slice.common.constants import EXTRACTION_ORDER, Extraction

if TYPE_CHECKING:
    from hl7slice.parser.fields import Field
    from hl7slice.parser.message import Message
    from hl7slice.parser.segments import Segment

logger = logging.getLogger(__name__)

PATH_SEPARATOR = "."


@dataclass(frozen=True)
class PathTail:
    """Parsed indexers of a path below the segment (1-based, None = absent)."""

    field: int | None = None
    repeat: int | None = None
    component: int | None = None
    subcomponent: int | None = None

    @property
    def descends(self) -> bool:
        """Whether any element below the field is present."""
        return any(i is not None for i in (self.repeat, self.component, self.subcomponent))


def parse_tail(text: str, *, require_field: bool = True) -> PathTail | None:
    """Parse ``F2.R1.C3.S1`` style tails; returns None when malformed.

    With ``require_field`` the tail must start with an ``F`` element (segment
    queries); without it the ``F`` element is not allowed (field queries).
    """
    indices: dict[Extraction, int] = {}
    last_level = -1

    for position, element in enumerate(text.split(PATH_SEPARATOR)):
        if len(element) < 2:
            return None
        try:
            extraction = Extraction(element[0])
        except ValueError:
            return None
        digits = element[1:]
        if not (digits.isascii() and digits.isdigit()):
            return None

        level = EXTRACTION_ORDER[extraction]
        if position == 0 and require_field != (extraction is Extraction.FIELD):
            return None
        if level <= last_level:
            return None

        index = int(digits)
        if index < 1:
            return None
        indices[extraction] = index
        last_level = level

    return PathTail(
        field=indices.get(Extraction.FIELD),
        repeat=indices.get(Extraction.REPEAT),
        component=indices.get(Extraction.COMPONENT),
        subcomponent=indices.get(Extraction.SUBCOMPONENT),
    )


def _pick(values: Sequence[str], index: int) -> str:
    """1-based lookup returning "" when out of range."""
    if index < 1 or index > len(values):
        return ""
    return values[index - 1]


def resolve_field(field: Field, tail: PathTail) -> str:
    """Descend from a field into its repeat, component and subcomponent."""
    if not tail.descends:
        return field.source

    repeats = field.repeats
    repeat_index = tail.repeat or 1
    if repeat_index > len(repeats):
        return ""
    repeat_value = repeats[repeat_index - 1]
    if tail.component is None and tail.subcomponent is None:
        return repeat_value

    component_index = tail.component or 1
    if len(repeats) == 1:
        # A single repeat is the whole field: use the precomputed partition
        if tail.subcomponent is None:
            return field[component_index - 1]
        return field[(component_index - 1, tail.subcomponent - 1)]

    separators = field.separators
    component_value = _pick(repeat_value.split(separators.component), component_index)
    if tail.subcomponent is None:
        return component_value
    return _pick(component_value.split(separators.subcomponent), tail.subcomponent)


def resolve_atomic(value: str, tail: PathTail) -> str:
    """Header fields MSH-1 and MSH-2 cannot be partitioned any further."""
    deeper = (tail.repeat, tail.component, tail.subcomponent)
    if all(i is None or i == 1 for i in deeper):
        return value
    return ""


def resolve_segment(segment: Segment, tail: PathTail) -> str:
    """Resolve a parsed tail against a segment, compensating for MSH-1/MSH-2."""
    number = tail.field
    if number is None:
        return segment.source

    if segment.is_header and number in (1, 2):
        separators = segment.separators
        value = separators.field if number == 1 else separators.encoding_characters
        return resolve_atomic(value, tail)

    field = segment.field_view(number)
    if field is None:
        return ""
    return resolve_field(field, tail)


def query_field(field: Field, path: str) -> str:
    """Query a field with an ``R1.C2.S1`` style tail."""
    tail = parse_tail(path, require_field=False)
    if tail is None:
        logger.debug("Malformed field query %r, returning empty", path)
        return ""
    return resolve_field(field, tail)


def query_segment(segment: Segment, path: str) -> str:
    """Query a segment with an ``F3.R1.C2.S1`` style tail."""
    tail = parse_tail(path, require_field=True)
    if tail is None:
        logger.debug("Malformed segment query %r, returning empty", path)
        return ""
    return resolve_segment(segment, tail)


def query(message: Message, path: str) -> str:
    """Select a single value from a message by its dotted path.

    Args:
        message: Parsed message.
        path: ``SEG`` or ``SEG.Fn[.Rm[.Ck[.Sl]]]``; R and C may be omitted
            when lower elements are present and default to 1.

    Returns:
        The addressed value, the segment source when no tail is given, or ""
        when nothing matches.
    """
    name, dot, tail = path.partition(PATH_SEPARATOR)
    segment = message.get_segment(name)
    if segment is None:
        return ""
    if not dot:
        return segment.source
    return query_segment(segment, tail)


__all__ = [
    "PathTail",
    "parse_tail",
    "query",
    "query_field",
    "query_segment",
    "resolve_atomic",
    "resolve_field",
    "resolve_segment",
]
