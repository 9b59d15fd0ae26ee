"""Security related functions."""

import hmac
from typing import Protocol

from app.core.config import settings


class TokenVerifier(Protocol):
    """Checks a presented bearer credential."""

    def is_configured(self) -> bool: ...

    def verify(self, token: str) -> bool: ...


class SharedTokenVerifier:
    """
    Accepts exactly one shared secret.

    The gateway has no user accounts: any caller presenting the configured
    token is trusted. The comparison is exact string equality, evaluated in
    constant time.

    :ivar expected_token: The configured secret, ``None`` when unset.
    :type expected_token: str | None
    """

    def __init__(self, expected_token: str | None = None):
        self.expected_token = expected_token

    def is_configured(self) -> bool:
        return bool(self.expected_token)

    def verify(self, token: str) -> bool:
        if not self.expected_token:
            return False
        return hmac.compare_digest(token.encode("utf-8"), self.expected_token.encode("utf-8"))


def get_token_verifier() -> TokenVerifier:
    """Build the verifier from the current configuration."""
    return SharedTokenVerifier(settings.gateway_token)
