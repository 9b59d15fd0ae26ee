"""Conversation service: listing, creation, renaming and deletion."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app import queries
from app.core.config import settings
from app.domains.settings.service import SettingsService
from app.exceptions.base import ValidationError
from app.exceptions.conversation import ConversationNotFoundError
from app.schemas.conversation import ConversationSummary
from app.shared.identifiers import new_conversation_id, utc_now_iso
from models import Conversation

logger = logging.getLogger(__name__)


class ConversationService:
    """Service class for conversation CRUD."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_conversations(self) -> list[ConversationSummary]:
        """List conversations ordered by most recent activity."""
        conversations = await queries.get_all_conversations(self.db)
        return [ConversationSummary.model_validate(c) for c in conversations]

    async def create_conversation(
        self, title: str | None = None, settings_fields: dict[str, Any] | None = None
    ) -> ConversationSummary:
        """Create a conversation together with its settings row.

        Args:
            title: Optional title, the configured default is used when empty
            settings_fields: Settings explicitly supplied by the caller

        Returns:
            The created conversation
        """
        conversation = await queries.create_conversation(
            self.db,
            new_conversation_id(),
            title or settings.default_conversation_title,
            utc_now_iso(),
        )
        await SettingsService(self.db).create_for_conversation(conversation.id, settings_fields)

        logger.info("Created conversation %s", conversation.id)
        return ConversationSummary.model_validate(conversation)

    async def rename_conversation(self, conversation_id: str, title: str | None) -> None:
        """Rename a conversation.

        Raises:
            ValidationError: If the title is missing or empty
            ConversationNotFoundError: If the conversation does not exist
        """
        if not title:
            raise ValidationError("Title is required")

        await self.get_conversation_or_raise(conversation_id)
        await queries.update_conversation_title(self.db, conversation_id, title)

    async def delete_conversation(self, conversation_id: str) -> None:
        """Delete a conversation and, through the store cascade, its messages and settings."""
        await self.get_conversation_or_raise(conversation_id)
        await queries.delete_conversation(self.db, conversation_id)
        logger.info("Deleted conversation %s", conversation_id)

    async def get_conversation_or_raise(self, conversation_id: str) -> Conversation:
        conversation = await queries.get_conversation_by_id(self.db, conversation_id)
        if conversation is None:
            raise ConversationNotFoundError()
        return conversation
