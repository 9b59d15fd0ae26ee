"""Conversation-related exceptions."""

from .base import BaseAppException, NotFoundError


class ConversationNotFoundError(NotFoundError):
    """Raised when a conversation id does not exist."""

    def __init__(self, message: str = "Conversation not found"):
        super().__init__(message=message, error_code="CONVERSATION_NOT_FOUND")


class MessageSendError(BaseAppException):
    """Raised when the completion call fails after the user turn was saved."""

    def __init__(self, details: str | None = None):
        super().__init__(
            message="Failed to get response from model",
            status_code=500,
            error_code="MESSAGE_SEND_FAILED",
            details=details,
        )
