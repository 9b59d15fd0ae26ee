"""Message API controller with FastAPI endpoints."""

import logging

from fastapi import APIRouter, Body, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_completion_client, get_db
from app.domains.message.service import MessageService
from app.schemas.message import MessageListResponse, SendMessageRequest, SendMessageResponse
from app.services.anthropic_client import CompletionClient

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/conversations", tags=["messages"])


@router.get("/{conversation_id}/messages", response_model=MessageListResponse)
async def list_messages(
    conversation_id: str = Path(..., description="Conversation ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get the transcript of a conversation in chronological order."""
    service = MessageService(db)
    return MessageListResponse(messages=await service.list_messages(conversation_id))


@router.post("/{conversation_id}/messages", response_model=SendMessageResponse)
async def send_message(
    conversation_id: str = Path(..., description="Conversation ID"),
    body: SendMessageRequest | None = Body(None),
    db: AsyncSession = Depends(get_db),
    completion_client: CompletionClient = Depends(get_completion_client),
):
    """Send a user message and get the assistant reply.

    Args:
        conversation_id: Conversation ID
        body: Message content and optional settings overrides
        db: Database session
        completion_client: Client for the completion call

    Returns:
        The stored user message, the assistant reply and the fresh status
    """
    body = body or SendMessageRequest()
    settings_fields = body.settings.supplied_fields() if body.settings else None

    service = MessageService(db, completion_client)
    return await service.send_message(conversation_id, body.content, settings_fields)
