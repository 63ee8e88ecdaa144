"""Typed view of the MSH (message header) segment."""

from __future__ import annotations

from dataclasses import dataclass

from hl7slice.common.constants import HEADER_SEGMENT_ID
from hl7slice.common.errors import MshHeaderMalformed
from hl7slice.parser.fields import Field
from hl7slice.parser.separators import Separators


@dataclass(frozen=True)
class MshHeader:
    """The header segment with MSH-1 to MSH-19 named by position.

    MSH-7, 9, 10, 11 and 12 are mandatory: they must be present, but may be
    empty. The remaining fields are None when absent or empty.
    """

    source: str
    msh_1_field_separator: str
    msh_2_encoding_characters: Separators
    msh_3_sending_application: Field | None
    msh_4_sending_facility: Field | None
    msh_5_receiving_application: Field | None
    msh_6_receiving_facility: Field | None
    msh_7_date_time_of_message: Field
    msh_8_security: Field | None
    msh_9_message_type: Field
    msh_10_message_control_id: Field
    msh_11_processing_id: Field
    msh_12_version_id: Field
    msh_13_sequence_number: Field | None
    msh_14_continuation_pointer: Field | None
    msh_15_accept_acknowledgment_type: Field | None
    msh_16_application_acknowledgment_type: Field | None
    msh_17_country_code: Field | None
    msh_18_character_set: Field | None
    msh_19_principal_language_of_message: Field | None

    @classmethod
    def parse(cls, source: str, separators: Separators) -> MshHeader:
        """Build the typed header from the header segment's text.

        Raises:
            MshHeaderMalformed: If ``source`` is not an MSH segment.
            MissingRequiredValue: If a mandatory field is absent.
        """
        values = iter(source.split(separators.field))
        if next(values) != HEADER_SEGMENT_ID:
            raise MshHeaderMalformed("segment is not 'MSH'", source)
        next(values, None)  # MSH-2, already held by separators

        def optional() -> Field | None:
            return Field.parse_optional(next(values, None), separators)

        def mandatory(name: str) -> Field:
            return Field.parse_mandatory(next(values, None), separators, name)

        # Evaluated in positional order
        return cls(
            source=source,
            msh_1_field_separator=separators.field,
            msh_2_encoding_characters=separators,
            msh_3_sending_application=optional(),
            msh_4_sending_facility=optional(),
            msh_5_receiving_application=optional(),
            msh_6_receiving_facility=optional(),
            msh_7_date_time_of_message=mandatory("msh_7_date_time_of_message"),
            msh_8_security=optional(),
            msh_9_message_type=mandatory("msh_9_message_type"),
            msh_10_message_control_id=mandatory("msh_10_message_control_id"),
            msh_11_processing_id=mandatory("msh_11_processing_id"),
            msh_12_version_id=mandatory("msh_12_version_id"),
            msh_13_sequence_number=optional(),
            msh_14_continuation_pointer=optional(),
            msh_15_accept_acknowledgment_type=optional(),
            msh_16_application_acknowledgment_type=optional(),
            msh_17_country_code=optional(),
            msh_18_character_set=optional(),
            msh_19_principal_language_of_message=optional(),
        )

    def __str__(self) -> str:
        return self.source


__all__ = ["MshHeader"]
