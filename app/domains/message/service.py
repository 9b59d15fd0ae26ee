"""Message service: transcript reads and the send/reply exchange."""

import logging
import time
from typing import Any

from sqlalchemy.ext.asyncio import AsyncSession

from app import queries
from app.core.config import settings
from app.domains.conversation.service import ConversationService
from app.domains.settings.resolver import resolve_settings
from app.domains.settings.service import default_settings
from app.exceptions.ai import AIServiceError
from app.exceptions.base import ValidationError
from app.exceptions.conversation import MessageSendError
from app.schemas.message import MessageResponse, SendMessageResponse
from app.schemas.status import StatusResponse
from app.services.anthropic_client import CompletionClient
from app.shared.identifiers import new_message_id, utc_now_iso
from models import MessageRole

logger = logging.getLogger(__name__)


class MessageService:
    """Service class for conversation messages and the completion exchange."""

    def __init__(self, db: AsyncSession, completion_client: CompletionClient | None = None):
        """Initialize message service.

        Args:
            db: Async database session for data operations.
            completion_client: Client used for the completion call; only
                required for ``send_message``.
        """
        self.db = db
        self.completion_client = completion_client
        self.conversations = ConversationService(db)

    async def list_messages(self, conversation_id: str) -> list[MessageResponse]:
        """Return the transcript of a conversation in chronological order."""
        await self.conversations.get_conversation_or_raise(conversation_id)
        messages = await queries.get_messages_by_conversation_id(self.db, conversation_id)
        return [MessageResponse.model_validate(m) for m in messages]

    async def send_message(
        self,
        conversation_id: str,
        content: str | None,
        settings_fields: dict[str, Any] | None = None,
    ) -> SendMessageResponse:
        """Persist a user turn, ask the model for a reply and persist it.

        The user message is committed before the completion call and is kept
        when the call fails; in that case the status row records the error
        and no assistant message is written.

        Args:
            conversation_id: Target conversation
            content: User text
            settings_fields: Settings explicitly supplied with the request

        Returns:
            SendMessageResponse with both messages and the fresh status

        Raises:
            ValidationError: If the content is missing or blank
            ConversationNotFoundError: If the conversation does not exist
            MessageSendError: If the completion call fails
        """
        # Whitespace-only text is rejected upstream, so it counts as missing
        if not content or not content.strip():
            raise ValidationError("Content is required")

        await self.conversations.get_conversation_or_raise(conversation_id)

        stored = await queries.get_settings_by_conversation_id(self.db, conversation_id)
        effective = resolve_settings(settings_fields, stored, default_settings())

        user_message = await queries.create_message(
            self.db,
            new_message_id(),
            conversation_id,
            MessageRole.USER,
            content,
            utc_now_iso(),
        )

        # Full history every time, including the turn just stored
        transcript = await queries.get_messages_by_conversation_id(self.db, conversation_id)
        history = [{"role": m.role, "content": m.content} for m in transcript]

        started = time.perf_counter()
        try:
            reply_text = await self.completion_client.complete(history, effective)
        except AIServiceError as e:
            logger.error("Completion failed for %s: %s", conversation_id, e.message)
            await queries.update_status(
                self.db, effective.model, settings.default_agent, None, e.message
            )
            raise MessageSendError(details=e.message) from e
        response_ms = int(round((time.perf_counter() - started) * 1000))

        assistant_message = await queries.create_message(
            self.db,
            new_message_id(),
            conversation_id,
            MessageRole.ASSISTANT,
            reply_text,
            utc_now_iso(),
        )

        await queries.update_conversation_timestamp(self.db, conversation_id)
        await queries.update_status(self.db, effective.model, settings.default_agent, response_ms, None)
        status = await queries.get_status(self.db)

        logger.info(
            "Completion for %s with %s took %d ms", conversation_id, effective.model, response_ms
        )

        return SendMessageResponse(
            message=MessageResponse.model_validate(user_message),
            response=MessageResponse.model_validate(assistant_message),
            status=StatusResponse.model_validate(status),
        )
