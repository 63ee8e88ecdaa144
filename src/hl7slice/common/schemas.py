"""Pydantic v2 schemas for hl7slice output."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field, model_validator

if TYPE_CHECKING:
    from hl7slice.parser.message import Message


class MessageSummary(BaseModel):
    """Header facts and segment layout of a parsed message."""

    message_type: str
    trigger_event: str = ""
    control_id: str = ""
    version_id: str = ""
    sending_application: str = ""
    sending_facility: str = ""
    field_separator: str = Field(min_length=1, max_length=1)
    encoding_characters: str = Field(min_length=4)
    segment_ids: list[str]
    segment_count: int = Field(default=0, ge=1)

    @model_validator(mode="before")
    @classmethod
    def set_segment_count(cls, data: Any) -> Any:
        """Derive segment_count from segment_ids."""
        if isinstance(data, dict):
            segment_ids = data.get("segment_ids")
            if segment_ids is not None:
                data["segment_count"] = len(segment_ids)
        return data

    @classmethod
    def from_message(cls, message: Message) -> MessageSummary:
        """Summarize a parsed message from its header fields."""
        return cls(
            message_type=message.message_type,
            trigger_event=message.trigger_event,
            control_id=message.query("MSH.F10"),
            version_id=message.query("MSH.F12"),
            sending_application=message.query("MSH.F3"),
            sending_facility=message.query("MSH.F4"),
            field_separator=message.separators.field,
            encoding_characters=message.separators.encoding_characters,
            segment_ids=[segment.identifier for segment in message.segments],
        )


__all__ = ["MessageSummary"]
