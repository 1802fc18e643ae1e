"""Remote completion client.

Hides how a prompt is wrapped for the model, and how remote failures
(network errors, API error statuses, malformed replies) are absorbed.
"""

import logging
from typing import Any

from ..llm import ChatMessage, LLMProvider
from .models import CompletionConfig, CompletionResult

logger = logging.getLogger(__name__)


class CompletionClient:
    """Sends one prompt per call to an LLM provider.

    There are no retries, no backoff and no timeout beyond the transport's.
    ``complete`` never raises for remote problems; callers cannot tell a
    failed call from a reply that happens to be the fallback message.
    """

    def __init__(self, provider: LLMProvider, config: CompletionConfig | None = None) -> None:
        self._provider = provider
        self._config = config or CompletionConfig()

    @property
    def config(self) -> CompletionConfig:
        return self._config

    def build_messages(self, prompt: str) -> list[ChatMessage]:
        """Build the persona + prompt message pair for a request."""
        return [
            ChatMessage(role="system", content=self._config.persona),
            ChatMessage(role="user", content=prompt),
        ]

    async def complete_result(self, prompt: str) -> CompletionResult:
        """Send a prompt and report success or failure without raising.

        Args:
            prompt: The user's prompt text

        Returns:
            CompletionResult with the trimmed reply, or the failure reason
        """
        try:
            response = await self._provider.chat_completion(
                self.build_messages(prompt),
                model=self._config.model,
                temperature=self._config.temperature,
                max_tokens=self._config.max_tokens,
            )
        except Exception as e:
            logger.exception("Completion request failed for prompt %r", prompt[:50])
            return CompletionResult.failure(f"{type(e).__name__}: {e}")

        content = response.content.strip()
        if not content:
            logger.warning("Completion from %s had no content", response.model)
            return CompletionResult.failure("empty completion")

        logger.debug(
            "Completion received from %s (%d chars, usage=%s)",
            response.model, len(content), response.usage
        )
        return CompletionResult.success(content)

    async def complete(self, prompt: str) -> str:
        """Send a prompt and return the reply, or the fallback message on failure."""
        result = await self.complete_result(prompt)
        if result.ok:
            return result.content
        return self._config.fallback_message

    async def close(self) -> None:
        await self._provider.close()

    async def __aenter__(self) -> "CompletionClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        await self._provider.__aexit__(exc_type, exc_val, exc_tb)
