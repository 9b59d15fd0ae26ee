"""Settings controller endpoints for per-conversation completion settings."""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_db
from app.domains.settings.service import SettingsService
from app.schemas.settings import SettingsEnvelope, SettingsUpdate

router = APIRouter(prefix="/conversations", tags=["settings"])


@router.get("/{conversation_id}/settings", response_model=SettingsEnvelope)
async def get_settings(
    conversation_id: str = Path(..., description="Conversation ID"),
    db: AsyncSession = Depends(get_db),
):
    """Get the stored settings of a conversation.

    Conversations without a settings row report the defaults.
    """
    settings_service = SettingsService(db)
    stored = await settings_service.get_conversation_settings(conversation_id)
    return SettingsEnvelope(settings=stored)


@router.put("/{conversation_id}/settings", response_model=SettingsEnvelope)
async def update_settings(
    update_data: SettingsUpdate,
    conversation_id: str = Path(..., description="Conversation ID"),
    db: AsyncSession = Depends(get_db),
):
    """Update the settings of a conversation.

    Only provided fields are updated; others keep their stored value.
    """
    settings_service = SettingsService(db)
    updated = await settings_service.update_conversation_settings(
        conversation_id, update_data.supplied_fields()
    )
    return SettingsEnvelope(settings=updated)
