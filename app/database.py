# python
"""Database engine and session utilities.

This module builds the asynchronous engine for the file-backed store,
bootstraps the schema and the singleton status row, and provides the
per-request session dependency.
"""
import logging
import os
from collections.abc import AsyncGenerator
from typing import Any

from fastapi import Request
from sqlalchemy import event, select
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from app.core.config import settings
from models import STATUS_ROW_ID, Base, Status

logger = logging.getLogger(__name__)


def resolve_database_url() -> str:
    """Pick the test database when running under the test suite."""
    if os.getenv("TESTING") == "true":
        db_url = os.getenv("TEST_DATABASE_URL") or settings.test_database_url or settings.database_url
    else:
        db_url = settings.database_url

    db_url = (db_url or "").strip()
    if not db_url:
        raise RuntimeError(
            "DATABASE_URL is not configured. Set it in the environment or .env file "
            "(e.g., DATABASE_URL=sqlite+aiosqlite:///./gateway.db)."
        )
    return db_url


def build_engine(db_url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine with referential integrity enforced.

    SQLite ignores foreign keys unless the pragma is set on every new
    connection, and the conversation cascades depend on it.
    """
    engine = create_async_engine(db_url, echo=echo)

    if engine.dialect.name == "sqlite":

        @event.listens_for(engine.sync_engine, "connect")
        def _enable_foreign_keys(dbapi_connection, _connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys = ON")
            cursor.close()

    return engine


async def init_db(engine: AsyncEngine, default_agent: str) -> None:
    """Create tables if needed and insert the status row on first run."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async with build_session_factory(engine)() as session:
        existing = await session.execute(select(Status.id).where(Status.id == STATUS_ROW_ID))
        if existing.scalar_one_or_none() is None:
            session.add(
                Status(
                    id=STATUS_ROW_ID,
                    active_model=None,
                    active_agent=default_agent,
                    last_response_ms=None,
                    last_error=None,
                )
            )
            await session.commit()
            logger.info("Status row bootstrapped with agent %s", default_agent)

    logger.info("Database initialized successfully")


def build_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(bind=engine, expire_on_commit=False)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, Any]:
    """Yield a session from the store opened by the application lifespan."""
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield session
