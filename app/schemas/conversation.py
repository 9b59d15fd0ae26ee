"""Conversation schemas for request/response serialization."""

from pydantic import Field

from .base import BaseSchema
from .settings import SettingsPayload


class ConversationCreate(BaseSchema):
    """Schema for creating a new conversation."""

    title: str | None = Field(None, max_length=255, description="Optional conversation title")
    settings: SettingsPayload | None = Field(None, description="Optional initial settings")


class ConversationRename(BaseSchema):
    """Schema for renaming a conversation.

    The title is validated by the controller so that a missing title yields
    the gateway's own 400 error body.
    """

    title: str | None = Field(None, max_length=255, description="New title")


class ConversationSummary(BaseSchema):
    """Conversation as listed by the gateway."""

    id: str
    title: str
    updated_at: str


class ConversationListResponse(BaseSchema):
    conversations: list[ConversationSummary]


class ConversationEnvelope(BaseSchema):
    conversation: ConversationSummary


class RenameResponse(BaseSchema):
    success: bool = True


class DeleteResponse(BaseSchema):
    deleted: bool = True
