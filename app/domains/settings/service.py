# app/domains/settings/service.py
"""Settings service for per-conversation completion settings."""

import logging
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app import queries
from app.core.config import settings
from app.domains.settings.resolver import EffectiveSettings, creation_settings, resolve_settings
from app.exceptions.conversation import ConversationNotFoundError
from app.schemas.settings import SettingsResponse

logger = logging.getLogger(__name__)


def default_settings() -> EffectiveSettings:
    """Hard-coded fallbacks, taken from configuration."""
    return EffectiveSettings(
        model=settings.default_model,
        system_prompt=None,
        temperature=settings.default_temperature,
    )


class SettingsService:
    """Service for reading and updating conversation settings."""

    def __init__(self, db: AsyncSession):
        """Initialize service with a database session."""
        self.db = db

    async def create_for_conversation(
        self, conversation_id: str, request_fields: dict[str, Any] | None = None
    ) -> SettingsResponse:
        """Write the settings row of a freshly created conversation."""
        initial = creation_settings(request_fields, default_settings())
        stored = await queries.create_settings(
            self.db,
            conversation_id,
            initial.model,
            initial.system_prompt,
            initial.temperature,
        )
        return SettingsResponse.model_validate(stored)

    async def get_conversation_settings(self, conversation_id: str) -> SettingsResponse:
        """
        Get the stored settings of a conversation.

        Conversations without a settings row report the defaults.

        Raises:
            ConversationNotFoundError: If the conversation does not exist
        """
        await self._ensure_conversation(conversation_id)

        stored = await queries.get_settings_by_conversation_id(self.db, conversation_id)
        if stored is None:
            fallback = default_settings()
            return SettingsResponse(
                model=fallback.model,
                system_prompt=fallback.system_prompt,
                temperature=fallback.temperature,
            )
        return SettingsResponse.model_validate(stored)

    async def update_conversation_settings(
        self, conversation_id: str, request_fields: dict[str, Any]
    ) -> SettingsResponse:
        """
        Merge the supplied fields onto the stored settings.

        Fields that are absent keep their stored value. The row is created if
        it is missing.

        Raises:
            ConversationNotFoundError: If the conversation does not exist
        """
        await self._ensure_conversation(conversation_id)

        stored = await queries.get_settings_by_conversation_id(self.db, conversation_id)
        if stored is None:
            logger.info("Creating missing settings row for %s", conversation_id)
            return await self.create_for_conversation(conversation_id, request_fields)

        merged = resolve_settings(request_fields, stored, default_settings())
        await queries.update_settings(
            self.db,
            conversation_id,
            merged.model,
            merged.system_prompt,
            merged.temperature,
        )
        return SettingsResponse(
            model=merged.model,
            system_prompt=merged.system_prompt,
            temperature=merged.temperature,
        )

    async def _ensure_conversation(self, conversation_id: str) -> None:
        if await queries.get_conversation_by_id(self.db, conversation_id) is None:
            raise ConversationNotFoundError()
