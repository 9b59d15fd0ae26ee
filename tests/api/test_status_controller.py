"""
API tests for Status controller.

Covers the shared-token gate and the status snapshot.
"""

import pytest
from fastapi import status
from httpx import AsyncClient

from app.core.security import SharedTokenVerifier, get_token_verifier
from app.main import app


class TestStatusController:
    """Test cases for the Status API endpoint."""

    @pytest.mark.asyncio
    async def test_get_status_initial(self, authenticated_client: AsyncClient):
        """Test the bootstrapped status snapshot."""
        response = await authenticated_client.get("/status")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "activeModel": None,
            "activeAgent": "gateway-default",
            "lastResponseMs": None,
            "lastError": None,
        }

    @pytest.mark.asyncio
    async def test_get_status_without_token(self, client: AsyncClient):
        response = await client.get("/status")

        assert response.status_code == status.HTTP_401_UNAUTHORIZED
        assert response.json() == {"error": "No token provided"}

    @pytest.mark.asyncio
    async def test_get_status_non_bearer_scheme(self, client: AsyncClient):
        """Test that any presented credential is checked against the token."""
        response = await client.get("/status", headers={"Authorization": "Basic xyz"})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {"error": "Invalid token"}

    @pytest.mark.asyncio
    async def test_get_status_scheme_without_credential(self, client: AsyncClient):
        response = await client.get("/status", headers={"Authorization": "Bearer"})

        assert response.status_code == status.HTTP_401_UNAUTHORIZED

    @pytest.mark.asyncio
    async def test_get_status_wrong_token(self, client: AsyncClient):
        response = await client.get("/status", headers={"Authorization": "Bearer wrong"})

        assert response.status_code == status.HTTP_403_FORBIDDEN
        assert response.json() == {"error": "Invalid token"}

    @pytest.mark.asyncio
    async def test_get_status_server_without_token(self, authenticated_client: AsyncClient):
        """Test that an unconfigured server refuses with 500."""
        app.dependency_overrides[get_token_verifier] = lambda: SharedTokenVerifier(None)

        response = await authenticated_client.get("/status")

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": "Server configuration error"}

    @pytest.mark.asyncio
    async def test_status_after_successful_send(
        self, authenticated_client: AsyncClient, test_conversation
    ):
        """Test that a send updates the snapshot."""
        await authenticated_client.post(
            f"/conversations/{test_conversation.id}/messages", json={"content": "Hello"}
        )

        response = await authenticated_client.get("/status")

        data = response.json()
        assert data["activeModel"] == "claude-3-5-sonnet-20241022"
        assert data["lastResponseMs"] >= 0
        assert data["lastError"] is None

    @pytest.mark.asyncio
    async def test_other_routes_need_no_token(self, client: AsyncClient):
        response = await client.get("/conversations")

        assert response.status_code == status.HTTP_200_OK
