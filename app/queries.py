"""Data-access layer for the gateway store.

Every function takes the session handle explicitly, issues a single
parameterized statement and commits it on its own, so each call is its own
transaction. Store errors are not caught here; they propagate to the
application's top-level error handler.
"""

from collections.abc import Sequence

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from app.shared.identifiers import utc_now_iso
from models import STATUS_ROW_ID, Conversation, ConversationSettings, Message, MessageRole, Status

# --- Conversations ---


async def get_all_conversations(db: AsyncSession) -> Sequence[Conversation]:
    """Return every conversation, most recently updated first."""
    result = await db.execute(select(Conversation).order_by(Conversation.updated_at.desc()))
    return result.scalars().all()


async def get_conversation_by_id(db: AsyncSession, conversation_id: str) -> Conversation | None:
    result = await db.execute(select(Conversation).where(Conversation.id == conversation_id))
    return result.scalar_one_or_none()


async def create_conversation(
    db: AsyncSession, conversation_id: str, title: str, created_at: str
) -> Conversation:
    """Insert a conversation with ``updated_at`` equal to ``created_at``.

    A duplicate id raises ``IntegrityError`` from the store.
    """
    conversation = Conversation(
        id=conversation_id,
        title=title,
        created_at=created_at,
        updated_at=created_at,
    )
    db.add(conversation)
    await db.commit()
    return conversation


async def update_conversation_title(db: AsyncSession, conversation_id: str, title: str) -> None:
    """Rename and touch ``updated_at``. Unknown ids affect zero rows."""
    await db.execute(
        update(Conversation)
        .where(Conversation.id == conversation_id)
        .values(title=title, updated_at=utc_now_iso())
    )
    await db.commit()


async def update_conversation_timestamp(db: AsyncSession, conversation_id: str) -> None:
    await db.execute(
        update(Conversation)
        .where(Conversation.id == conversation_id)
        .values(updated_at=utc_now_iso())
    )
    await db.commit()


async def delete_conversation(db: AsyncSession, conversation_id: str) -> None:
    """Delete a conversation; messages and settings go with it via ON DELETE CASCADE."""
    await db.execute(delete(Conversation).where(Conversation.id == conversation_id))
    await db.commit()


# --- Messages ---


async def get_messages_by_conversation_id(db: AsyncSession, conversation_id: str) -> Sequence[Message]:
    """Return the transcript in chronological (insertion) order."""
    result = await db.execute(
        select(Message)
        .where(Message.conversation_id == conversation_id)
        .order_by(Message.created_at.asc())
    )
    return result.scalars().all()


async def create_message(
    db: AsyncSession,
    message_id: str,
    conversation_id: str,
    role: MessageRole,
    content: str,
    created_at: str,
) -> Message:
    message = Message(
        id=message_id,
        conversation_id=conversation_id,
        role=MessageRole(role).value,
        content=content,
        created_at=created_at,
    )
    db.add(message)
    await db.commit()
    return message


# --- Settings ---


async def get_settings_by_conversation_id(
    db: AsyncSession, conversation_id: str
) -> ConversationSettings | None:
    result = await db.execute(
        select(ConversationSettings).where(ConversationSettings.conversation_id == conversation_id)
    )
    return result.scalar_one_or_none()


async def create_settings(
    db: AsyncSession,
    conversation_id: str,
    model: str,
    system_prompt: str | None,
    temperature: float | None,
) -> ConversationSettings:
    conversation_settings = ConversationSettings(
        conversation_id=conversation_id,
        model=model,
        system_prompt=system_prompt,
        temperature=temperature,
    )
    db.add(conversation_settings)
    await db.commit()
    return conversation_settings


async def update_settings(
    db: AsyncSession,
    conversation_id: str,
    model: str,
    system_prompt: str | None,
    temperature: float | None,
) -> None:
    await db.execute(
        update(ConversationSettings)
        .where(ConversationSettings.conversation_id == conversation_id)
        .values(model=model, system_prompt=system_prompt, temperature=temperature)
    )
    await db.commit()


# --- Status ---


async def get_status(db: AsyncSession) -> Status:
    result = await db.execute(
        select(Status).where(Status.id == STATUS_ROW_ID).execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def update_status(
    db: AsyncSession,
    active_model: str | None,
    active_agent: str,
    last_response_ms: int | None,
    last_error: str | None,
) -> None:
    """Overwrite the singleton status row in place."""
    await db.execute(
        update(Status)
        .where(Status.id == STATUS_ROW_ID)
        .values(
            active_model=active_model,
            active_agent=active_agent,
            last_response_ms=last_response_ms,
            last_error=last_error,
        )
    )
    await db.commit()
