"""Anthropic completion client used by the message endpoint."""

import logging
from collections.abc import Sequence

import anthropic

from app.core.config import settings
from app.domains.settings.resolver import EffectiveSettings
from app.exceptions.ai import AIConfigurationError, AIServiceError

logger = logging.getLogger(__name__)


class CompletionClient:
    """Thin wrapper over ``AsyncAnthropic.messages.create``.

    One call per send, no retries and no timeout of its own: a slow upstream
    keeps the request waiting.
    """

    def __init__(self, api_key: str | None = None, max_tokens: int | None = None):
        self.api_key = api_key if api_key is not None else settings.anthropic_api_key
        self.max_tokens = max_tokens or settings.max_tokens
        self._client: anthropic.AsyncAnthropic | None = None

    def _get_client(self) -> anthropic.AsyncAnthropic:
        if not self.api_key:
            raise AIConfigurationError("Anthropic API key not configured")
        if self._client is None:
            self._client = anthropic.AsyncAnthropic(api_key=self.api_key)
        return self._client

    async def complete(self, messages: Sequence[dict[str, str]], options: EffectiveSettings) -> str:
        """Send the transcript and return the assistant text.

        Args:
            messages: ``{"role", "content"}`` dicts in transcript order.
            options: Resolved model, system prompt and temperature.

        Returns:
            The concatenated text blocks of the reply.

        Raises:
            AIConfigurationError: If no API key is configured.
            AIServiceError: If the upstream call fails.
        """
        client = self._get_client()

        request: dict = {
            "model": options.model,
            "max_tokens": self.max_tokens,
            "temperature": (
                options.temperature if options.temperature is not None else settings.default_temperature
            ),
            "messages": [{"role": m["role"], "content": m["content"]} for m in messages],
        }
        if options.system_prompt:
            request["system"] = options.system_prompt

        try:
            response = await client.messages.create(**request)
        except Exception as e:
            logger.error("Anthropic API call failed: %s", str(e))
            raise AIServiceError(str(e) or "Failed to get response from model") from e

        return "".join(block.text for block in response.content if block.type == "text")


_client: CompletionClient | None = None


def get_completion_client() -> CompletionClient:
    """FastAPI dependency returning the process-wide completion client."""
    global _client
    if _client is None:
        _client = CompletionClient()
    return _client
