"""Conversation API controller with FastAPI endpoints."""

import logging

from fastapi import APIRouter, Body, Depends, Path, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.conversation.service import ConversationService
from app.schemas.conversation import (
    ConversationCreate,
    ConversationEnvelope,
    ConversationListResponse,
    ConversationRename,
    DeleteResponse,
    RenameResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/conversations", tags=["conversations"])


@router.get("", response_model=ConversationListResponse)
async def list_conversations(db: AsyncSession = Depends(get_db)):
    """List all conversations, most recently updated first."""
    service = ConversationService(db)
    return ConversationListResponse(conversations=await service.list_conversations())


@router.post("", response_model=ConversationEnvelope, status_code=status.HTTP_201_CREATED)
async def create_conversation(
    body: ConversationCreate | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Create a conversation.

    Args:
        body: Optional title and initial settings
        db: Database session

    Returns:
        The created conversation
    """
    body = body or ConversationCreate()
    settings_fields = body.settings.supplied_fields() if body.settings else None

    service = ConversationService(db)
    conversation = await service.create_conversation(title=body.title, settings_fields=settings_fields)
    return ConversationEnvelope(conversation=conversation)


@router.patch("/{conversation_id}", response_model=RenameResponse)
async def rename_conversation(
    conversation_id: str = Path(..., description="Conversation ID"),
    body: ConversationRename | None = Body(None),
    db: AsyncSession = Depends(get_db),
):
    """Rename a conversation.

    Args:
        conversation_id: Conversation ID
        body: New title
        db: Database session

    Returns:
        Success flag
    """
    service = ConversationService(db)
    await service.rename_conversation(conversation_id, body.title if body else None)
    return RenameResponse(success=True)


@router.delete("/{conversation_id}", response_model=DeleteResponse)
async def delete_conversation(
    conversation_id: str = Path(..., description="Conversation ID"),
    db: AsyncSession = Depends(get_db),
):
    """Delete a conversation with its messages and settings."""
    service = ConversationService(db)
    await service.delete_conversation(conversation_id)
    return DeleteResponse(deleted=True)
