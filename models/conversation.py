"""
Conversation model: a titled container for an ordered message transcript.
"""

from sqlalchemy import Column, String

from .base import Base, ISOTimestamp


class Conversation(Base):
    """
    Represents a conversation with the assistant.

    :ivar id: Opaque identifier, immutable once created.
    :ivar title: Display title.
    :ivar created_at: ISO-8601 creation timestamp.
    :ivar updated_at: ISO-8601 timestamp advanced on every exchange or rename.
    """

    __tablename__ = "conversations"

    id = Column(String(64), primary_key=True)
    title = Column(String(255), nullable=False)
    created_at = Column(ISOTimestamp, nullable=False)
    updated_at = Column(ISOTimestamp, nullable=False)
