"""Message schemas for request/response serialization."""

from enum import Enum

from pydantic import Field

from .base import BaseSchema
from .settings import SettingsPayload
from .status import StatusResponse


class MessageRoleSchema(str, Enum):
    """Message role enumeration."""

    USER = "user"
    ASSISTANT = "assistant"


class SendMessageRequest(BaseSchema):
    """Schema for sending a user message.

    ``content`` stays optional here; emptiness is reported by the service as
    a distinct bad-request outcome.
    """

    content: str | None = Field(None, max_length=100000, description="User message text")
    settings: SettingsPayload | None = Field(None, description="Per-request settings overrides")


class MessageResponse(BaseSchema):
    """One transcript entry."""

    id: str
    role: MessageRoleSchema
    content: str
    created_at: str


class MessageListResponse(BaseSchema):
    messages: list[MessageResponse]


class SendMessageResponse(BaseSchema):
    """User turn, assistant reply and the status after the exchange."""

    message: MessageResponse
    response: MessageResponse
    status: StatusResponse
