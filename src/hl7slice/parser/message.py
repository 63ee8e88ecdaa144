"""HL7 v2.x message parser."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import cached_property
from typing import Iterable, Iterator

from hl7slice.common.config import Hl7SliceConfig
from hl7slice.common.constants import HEADER_SEGMENT_ID
from hl7slice.common.errors import MshHeaderMalformed
from hl7slice.escaping.decoder import EscapeDecoder
from hl7slice.parser.msh import MshHeader
from hl7slice.parser.segments import Segment
from hl7slice.parser.separators import Separators
from hl7slice.query.selector import query

logger = logging.getLogger(__name__)


def normalize_line_endings(source: str, segment_separator: str = "\r") -> str:
    """Rewrite CRLF and LF line endings to the segment separator."""
    return source.replace("\r\n", segment_separator).replace("\n", segment_separator)


@dataclass(frozen=True)
class Message:
    """Parsed HL7 v2.x message.

    Holds the source text, the separators declared by its header and the
    parsed segments. Nothing is mutated after parsing.
    """

    source: str
    separators: Separators
    segments: tuple[Segment, ...]

    @classmethod
    def parse(cls, source: str, config: Hl7SliceConfig | None = None) -> Message:
        """Parse a raw HL7 v2.x message string.

        Args:
            source: Raw message with CR segment separators.
            config: Parser options; defaults are used when omitted.

        Returns:
            Parsed Message.

        Raises:
            MshHeaderMalformed: If the message does not start with a usable
                MSH header.
        """
        if config is None:
            config = Hl7SliceConfig.model_construct()

        separators = Separators.from_header(source)
        if config.normalize_line_endings:
            source = normalize_line_endings(source, separators.segment)

        lines = source.split(separators.segment)
        if len(lines) > 1 and lines[-1] == "" and not config.keep_trailing_segment:
            lines.pop()

        segments = tuple(Segment.parse(line, separators) for line in lines)
        if segments[0].identifier != HEADER_SEGMENT_ID:
            # Only possible when the declared field separator occurs inside "MSH"
            raise MshHeaderMalformed("declared field separator splits the MSH identifier", source)

        logger.debug("Parsed message with %d segments", len(segments))
        return cls(source=source, separators=separators, segments=segments)

    def get_segment(self, identifier: str) -> Segment | None:
        """First segment with the given identifier, or None."""
        for segment in self.segments:
            if segment.identifier == identifier:
                return segment
        return None

    def segments_by_identifier(self, identifier: str) -> list[Segment]:
        """All segments with the given identifier, in message order."""
        return [s for s in self.segments if s.identifier == identifier]

    def generic_segments(self) -> list[Segment]:
        """All segments other than the header."""
        return [s for s in self.segments if not s.is_header]

    @staticmethod
    def segments_as_lists(segments: Iterable[Segment]) -> list[list[str]]:
        """Field source strings of each segment, positionally."""
        return [[field.source for field in segment.fields] for segment in segments]

    def query(self, path: str) -> str:
        """Select a value by dotted path, e.g. ``PID.F5.C1``; "" when absent."""
        return query(self, path)

    def msh(self) -> MshHeader:
        """Typed header record for this message.

        Raises:
            MissingRequiredValue: If a mandatory header field is absent.
        """
        return MshHeader.parse(self.segments[0].source, self.separators)

    @cached_property
    def decoder(self) -> EscapeDecoder:
        """Escape decoder bound to this message's separators."""
        return EscapeDecoder(self.separators)

    @property
    def message_type(self) -> str:
        """MSH-9.1, e.g. ``ORU``."""
        return self.query("MSH.F9.C1")

    @property
    def trigger_event(self) -> str:
        """MSH-9.2, e.g. ``R01``."""
        return self.query("MSH.F9.C2")

    def __getitem__(self, path: str) -> str:
        return self.query(path)

    def __iter__(self) -> Iterator[Segment]:
        return iter(self.segments)

    def __str__(self) -> str:
        return self.source


def parse_message(source: str, config: Hl7SliceConfig | None = None) -> Message:
    """Parse a raw HL7 v2.x message string into a Message."""
    return Message.parse(source, config)


__all__ = ["Message", "normalize_line_endings", "parse_message"]
