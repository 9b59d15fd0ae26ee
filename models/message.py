"""
Message model for transcript turns.
"""

import enum

from sqlalchemy import Column, ForeignKey, Index, String, Text

from .base import Base, ISOTimestamp


class MessageRole(str, enum.Enum):
    """Message role enumeration."""

    USER = "user"
    ASSISTANT = "assistant"


class Message(Base):
    """
    Represents one turn of a conversation.

    Messages are written once and never updated; they disappear only through
    the ``ON DELETE CASCADE`` of their conversation.
    """

    __tablename__ = "messages"
    __table_args__ = (Index("idx_messages_conversation_created", "conversation_id", "created_at"),)

    id = Column(String(64), primary_key=True)
    conversation_id = Column(
        String(64), ForeignKey("conversations.id", ondelete="CASCADE"), nullable=False
    )
    role = Column(String(16), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(ISOTimestamp, nullable=False)
