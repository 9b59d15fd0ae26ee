"""
Unit tests for the shared-token check.

Covers SharedTokenVerifier and the require_gateway_token dependency.
"""

from unittest.mock import patch

import pytest
from fastapi.security import HTTPAuthorizationCredentials

from app.core.dependencies import presented_token, require_gateway_token
from app.core.security import SharedTokenVerifier, get_token_verifier
from app.exceptions.base import AppPermissionError, AuthenticationError, ServerConfigurationError


def bearer(token: str) -> HTTPAuthorizationCredentials:
    return HTTPAuthorizationCredentials(scheme="Bearer", credentials=token)


class TestSharedTokenVerifier:
    """Test cases for SharedTokenVerifier."""

    def test_matching_token(self):
        verifier = SharedTokenVerifier("s3cret")

        assert verifier.is_configured() is True
        assert verifier.verify("s3cret") is True

    def test_mismatching_token(self):
        verifier = SharedTokenVerifier("s3cret")

        assert verifier.verify("s3cret ") is False
        assert verifier.verify("S3CRET") is False

    @pytest.mark.parametrize("expected", [None, ""])
    def test_unconfigured(self, expected):
        verifier = SharedTokenVerifier(expected)

        assert verifier.is_configured() is False
        assert verifier.verify("anything") is False

    def test_get_token_verifier_uses_settings(self):
        with patch("app.core.security.settings") as mock_settings:
            mock_settings.gateway_token = "from-settings"

            verifier = get_token_verifier()

        assert verifier.verify("from-settings") is True


class TestRequireGatewayToken:
    """Test cases for the require_gateway_token dependency."""

    @pytest.mark.asyncio
    async def test_valid_token(self):
        token = await require_gateway_token(bearer("s3cret"), SharedTokenVerifier("s3cret"), None)

        assert token == "s3cret"

    @pytest.mark.asyncio
    async def test_missing_credentials(self):
        with pytest.raises(AuthenticationError) as exc_info:
            await require_gateway_token(None, SharedTokenVerifier("s3cret"), None)

        assert exc_info.value.status_code == 401

    @pytest.mark.asyncio
    async def test_missing_credentials_checked_before_configuration(self):
        """Test that 401 wins over the unconfigured-server 500."""
        with pytest.raises(AuthenticationError):
            await require_gateway_token(None, SharedTokenVerifier(None), None)

    @pytest.mark.asyncio
    async def test_wrong_token(self):
        with pytest.raises(AppPermissionError) as exc_info:
            await require_gateway_token(bearer("nope"), SharedTokenVerifier("s3cret"), None)

        assert exc_info.value.status_code == 403

    @pytest.mark.asyncio
    async def test_server_without_token(self):
        with pytest.raises(ServerConfigurationError) as exc_info:
            await require_gateway_token(bearer("anything"), SharedTokenVerifier(None), None)

        assert exc_info.value.status_code == 500

    @pytest.mark.asyncio
    async def test_non_bearer_scheme_counts_as_presented(self):
        """Test that a credential under another scheme is checked, not ignored."""
        with pytest.raises(AppPermissionError):
            await require_gateway_token(None, SharedTokenVerifier("s3cret"), "Basic nope")


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, None),
        ("", None),
        ("Bearer", None),
        ("Bearer abc", "abc"),
        ("Basic abc", "abc"),
        ("abc", None),
    ],
)
def test_presented_token(header, expected):
    assert presented_token(header) == expected
