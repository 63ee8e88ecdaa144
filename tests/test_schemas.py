"""Tests for hl7slice Pydantic schemas."""

import pytest
from pydantic import ValidationError

from hl7slice.common.schemas import MessageSummary
from hl7slice.parser.message import Message

ORU_R01_MESSAGE = (
    "MSH|^~\\&|LAB|HOSP|RECEIVER|RT|20250101140000||ORU^R01|MSG002|P|2.5\r"
    "PID|||PAT001^^^HOSP^MR||DOE^JOHN\r"
    "OBX|1|NM|2160-0^Creatinine^LN||1.2|mg/dL|0.7-1.3||||F\r"
    "OBX|2|NM|6690-2^WBC^LN||15.5|10*3/uL|4.5-11.0|H|||F\r"
)


def _make_summary(**overrides: object) -> dict:
    """Create a valid summary dict with optional overrides."""
    base: dict = {
        "message_type": "ADT",
        "trigger_event": "A01",
        "field_separator": "|",
        "encoding_characters": "^~\\&",
        "segment_ids": ["MSH", "PID", "PV1"],
    }
    base.update(overrides)
    return base


class TestMessageSummary:
    def test_from_message(self) -> None:
        summary = MessageSummary.from_message(Message.parse(ORU_R01_MESSAGE))
        assert summary.message_type == "ORU"
        assert summary.trigger_event == "R01"
        assert summary.control_id == "MSG002"
        assert summary.version_id == "2.5"
        assert summary.sending_application == "LAB"
        assert summary.sending_facility == "HOSP"
        assert summary.segment_ids == ["MSH", "PID", "OBX", "OBX"]
        assert summary.segment_count == 4

    def test_segment_count_derived(self) -> None:
        summary = MessageSummary(**_make_summary(segment_count=99))
        assert summary.segment_count == 3

    def test_invalid_field_separator(self) -> None:
        with pytest.raises(ValidationError):
            MessageSummary(**_make_summary(field_separator="||"))

    def test_empty_segments_rejected(self) -> None:
        with pytest.raises(ValidationError):
            MessageSummary(**_make_summary(segment_ids=[]))

    def test_json_round_trip(self) -> None:
        summary = MessageSummary(**_make_summary())
        restored = MessageSummary.model_validate_json(summary.model_dump_json())
        assert restored == summary
