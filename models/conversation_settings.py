"""
Per-conversation completion settings.

Each conversation owns at most one settings row (the primary key is the
conversation id), removed together with the conversation.
"""

from sqlalchemy import Column, Float, ForeignKey, String, Text

from .base import Base


class ConversationSettings(Base):
    """
    Represents the stored model settings of a conversation.

    :ivar conversation_id: Owning conversation, also the primary key.
    :ivar model: Model identifier passed to the completion call.
    :ivar system_prompt: Optional system prompt.
    :ivar temperature: Optional sampling temperature.
    """

    __tablename__ = "settings"

    conversation_id = Column(
        String(64),
        ForeignKey("conversations.id", ondelete="CASCADE"),
        primary_key=True,
    )
    model = Column(String(128), nullable=False)
    system_prompt = Column(Text, nullable=True)
    temperature = Column(Float, nullable=True)
