# app/core/dependencies.py
import logging

from fastapi import Depends, Header
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.security import TokenVerifier, get_token_verifier
from app.database import get_db
from app.exceptions.base import AppPermissionError, AuthenticationError, ServerConfigurationError
from app.services.anthropic_client import get_completion_client

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)

__all__ = ["get_completion_client", "get_db", "presented_token", "require_gateway_token", "security"]


def presented_token(authorization: str | None) -> str | None:
    """Return the credential part of an ``Authorization`` header.

    The scheme word is not checked: ``"Basic abc"`` presents ``abc``, which
    is then rejected as an invalid token rather than a missing one.
    """
    if not authorization:
        return None
    parts = authorization.split()
    return parts[1] if len(parts) > 1 else None


async def require_gateway_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    verifier: TokenVerifier = Depends(get_token_verifier),
    authorization: str | None = Header(None, include_in_schema=False),
) -> str:
    """Validate the shared bearer token.

    Returns:
        str: The accepted token

    Raises:
        AuthenticationError: If no token was presented (401)
        AppPermissionError: If the token does not match (403)
        ServerConfigurationError: If the server has no token configured (500)
    """
    token = credentials.credentials if credentials else presented_token(authorization)
    if not token:
        raise AuthenticationError("No token provided")

    if not verifier.is_configured():
        logger.error("GATEWAY_TOKEN not configured")
        raise ServerConfigurationError()

    if not verifier.verify(token):
        logger.warning("Rejected request with invalid gateway token")
        raise AppPermissionError("Invalid token")

    return token
