"""Pytest configuration and shared fixtures."""
import asyncio
import os
from typing import Any

import pytest

from genie.completion import CompletionClient, CompletionConfig
from genie.llm import ChatMessage, LLMProvider, LLMResponse
from genie.session import PromptController, RevealAnimator, SessionStore

# Short enough to keep tests fast, long enough to keep timer order distinct
TEST_REVEAL_INTERVAL = 0.001


class FakeProvider(LLMProvider):
    """In-memory provider that replays canned replies or raises."""

    def __init__(
        self,
        replies: list[str] | None = None,
        error: Exception | None = None,
        delay: float = 0.0,
    ) -> None:
        self.replies = list(replies or ["The genie says **hello** there"])
        self.error = error
        self.delay = delay
        self.calls: list[dict[str, Any]] = []
        self.closed = False

    @property
    def model(self) -> str:
        return "fake-genie"

    async def chat_completion(
        self,
        messages: list[ChatMessage],
        model: str | None = None,
        temperature: float = 0.7,
        max_tokens: int | None = None,
        **kwargs: Any
    ) -> LLMResponse:
        self.calls.append({
            "messages": messages,
            "model": model,
            "temperature": temperature,
            "max_tokens": max_tokens,
        })
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.error is not None:
            raise self.error
        content = self.replies.pop(0) if len(self.replies) > 1 else self.replies[0]
        return LLMResponse(content=content, model=model or self.model)

    async def close(self) -> None:
        self.closed = True


class ScriptedCompleter:
    """Completer whose replies are released by the test, one prompt at a time."""

    def __init__(self, replies: dict[str, str]) -> None:
        self.replies = replies
        self.gates: dict[str, asyncio.Event] = {}
        self.seen: list[str] = []

    def hold(self, prompt: str) -> asyncio.Event:
        gate = asyncio.Event()
        self.gates[prompt] = gate
        return gate

    async def complete(self, prompt: str) -> str:
        self.seen.append(prompt)
        gate = self.gates.get(prompt)
        if gate is not None:
            await gate.wait()
        return self.replies[prompt]


@pytest.fixture(scope="session")
def api_keys():
    """Return API keys from environment."""
    return {"openai": os.getenv("OPENAI_API_KEY")}


@pytest.fixture
def fake_provider():
    return FakeProvider()


@pytest.fixture
def fake_client(fake_provider):
    return CompletionClient(fake_provider, CompletionConfig())


@pytest.fixture
def store():
    return SessionStore()


@pytest.fixture
def animator(store):
    return RevealAnimator(store, interval=TEST_REVEAL_INTERVAL)


@pytest.fixture
def controller(store, fake_client, animator):
    return PromptController(store, fake_client, animator)
