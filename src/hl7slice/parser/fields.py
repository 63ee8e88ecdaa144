"""Field view: a single between-the-pipes value and its partitions."""

from __future__ import annotations

from dataclasses import dataclass
from functools import cached_property
from typing import Iterator

from hl7slice.common.errors import MissingRequiredValue
from hl7slice.parser.separators import Separators
from hl7slice.query.selector import query_field


@dataclass(frozen=True)
class Field:
    """A parsed field with its component and subcomponent partitions.

    Components and subcomponents are split eagerly; repeats are split on
    first access and cached. Empty partitions are retained, so ``a^^b``
    has three components.
    """

    source: str
    separators: Separators
    components: tuple[str, ...]
    subcomponents: tuple[tuple[str, ...], ...]

    @classmethod
    def parse(cls, source: str, separators: Separators) -> Field:
        """Split a field value on the component and subcomponent characters."""
        components = tuple(source.split(separators.component))
        subcomponents = tuple(
            tuple(component.split(separators.subcomponent)) for component in components
        )
        return cls(
            source=source,
            separators=separators,
            components=components,
            subcomponents=subcomponents,
        )

    @classmethod
    def parse_optional(cls, source: str | None, separators: Separators) -> Field | None:
        """Parse a possibly absent field; absent and empty both give None."""
        if not source:
            return None
        return cls.parse(source, separators)

    @classmethod
    def parse_mandatory(
        cls, source: str | None, separators: Separators, field_name: str = ""
    ) -> Field:
        """Parse a field that must be present (an empty value is accepted).

        Raises:
            MissingRequiredValue: If ``source`` is None.
        """
        if source is None:
            raise MissingRequiredValue(field_name)
        return cls.parse(source, separators)

    @property
    def value(self) -> str:
        """The original field text."""
        return self.source

    @cached_property
    def repeats(self) -> tuple[str, ...]:
        """The field split on the repeat character."""
        return tuple(self.source.split(self.separators.repeat))

    def component(self, index: int) -> str:
        """Component by 0-based index; "" when out of range."""
        if index < 0 or index >= len(self.components):
            return ""
        return self.components[index]

    def subcomponent(self, component_index: int, index: int) -> str:
        """Subcomponent by 0-based (component, subcomponent) index; "" when out of range."""
        if component_index < 0 or component_index >= len(self.subcomponents):
            return ""
        parts = self.subcomponents[component_index]
        if index < 0 or index >= len(parts):
            return ""
        return parts[index]

    def query(self, path: str) -> str:
        """Select a value with an ``R1.C2.S1`` style path (1-based)."""
        return query_field(self, path)

    def __getitem__(self, index: int | tuple[int, int]) -> str:
        if isinstance(index, tuple):
            return self.subcomponent(*index)
        return self.component(index)

    def __iter__(self) -> Iterator[str]:
        return iter(self.components)

    def __str__(self) -> str:
        return self.source


__all__ = ["Field"]
