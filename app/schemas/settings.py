"""Conversation settings schemas for request/response validation."""

from typing import Any

from pydantic import Field, field_validator

from .base import BaseSchema


class SettingsPayload(BaseSchema):
    """Settings supplied with a request; every field is optional.

    Only fields actually present in the request body take part in settings
    resolution, see ``supplied_fields``.
    """

    model: str | None = Field(None, max_length=128, description="Model identifier")
    system_prompt: str | None = Field(None, description="System prompt")
    temperature: float | None = Field(None, ge=0.0, le=1.0, description="Sampling temperature")

    def supplied_fields(self) -> dict[str, Any]:
        """Return the fields that were explicitly sent, keyed by attribute name."""
        return {name: getattr(self, name) for name in self.model_fields_set}


class SettingsUpdate(SettingsPayload):
    """Schema for updating stored settings (all fields optional)."""

    @field_validator("model")
    @classmethod
    def validate_model(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("Model cannot be empty")
        return v


class SettingsResponse(BaseSchema):
    """Stored settings of a conversation."""

    model: str
    system_prompt: str | None = None
    temperature: float | None = None


class SettingsEnvelope(BaseSchema):
    settings: SettingsResponse
