"""
Models package initialization.
"""

from .base import Base
from .conversation import Conversation
from .conversation_settings import ConversationSettings
from .message import Message, MessageRole
from .status import STATUS_ROW_ID, Status

__all__ = [
    "Base",
    "Conversation",
    "ConversationSettings",
    "Message",
    "MessageRole",
    "Status",
    "STATUS_ROW_ID",
]
