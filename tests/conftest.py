# tests/conftest.py
import os

# Set up test environment variables BEFORE any other imports
os.environ.setdefault("TESTING", "true")
os.environ.setdefault("ENVIRONMENT", "testing")
os.environ.setdefault("GATEWAY_TOKEN", "test-gateway-token")
os.environ.setdefault("ANTHROPIC_API_KEY", "")

from collections.abc import Sequence

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from app.core.config import settings
from app.core.dependencies import get_completion_client, get_db
from app.database import build_engine, build_session_factory, init_db
from app.domains.conversation.service import ConversationService
from app.domains.settings.resolver import EffectiveSettings
from app.exceptions.ai import AIServiceError
from app.main import app

TEST_TOKEN = os.environ["GATEWAY_TOKEN"]


class FakeCompletionClient:
    """Stands in for the Anthropic client and records every call."""

    def __init__(self, reply: str = "Hi there! How can I help?"):
        self.reply = reply
        self.error: str | None = None
        self.calls: list[tuple[list[dict[str, str]], EffectiveSettings]] = []

    async def complete(self, messages: Sequence[dict[str, str]], options: EffectiveSettings) -> str:
        self.calls.append(([dict(m) for m in messages], options))
        if self.error is not None:
            raise AIServiceError(self.error)
        return self.reply


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """Create a bootstrapped file-backed database for one test."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    await init_db(engine, settings.default_agent)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_db(test_engine):
    """Create a test database session."""
    session_factory = build_session_factory(test_engine)
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()


@pytest.fixture
def fake_completion_client():
    return FakeCompletionClient()


def _override_dependencies(test_engine, completion_client):
    session_factory = build_session_factory(test_engine)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_completion_client] = lambda: completion_client


@pytest_asyncio.fixture
async def client(test_engine, fake_completion_client):
    """Create a test client without credentials."""
    _override_dependencies(test_engine, fake_completion_client)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def authenticated_client(test_engine, fake_completion_client):
    """Create a test client that sends the shared bearer token."""
    _override_dependencies(test_engine, fake_completion_client)
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
        headers={"Authorization": f"Bearer {TEST_TOKEN}"},
    ) as ac:
        yield ac
    app.dependency_overrides.clear()


# Conversation fixtures
@pytest_asyncio.fixture
async def test_conversation(test_db):
    """Create a conversation with default settings."""
    return await ConversationService(test_db).create_conversation(title="Test")


@pytest_asyncio.fixture
async def tuned_conversation(test_db):
    """Create a conversation with explicit stored settings."""
    return await ConversationService(test_db).create_conversation(
        title="Tuned",
        settings_fields={
            "model": "claude-3-haiku-20240307",
            "system_prompt": "You are terse.",
            "temperature": 0.2,
        },
    )
