"""Unit tests for the completion client."""
import logging

import pytest
from conftest import FakeProvider
from hypothesis import given
from hypothesis import strategies as st

from genie.completion import (
    FALLBACK_MESSAGE,
    GENIE_PERSONA,
    CompletionClient,
    CompletionConfig,
    CompletionResult,
)


class TestCompletionConfig:
    """Tests for CompletionConfig model."""

    def test_defaults(self):
        """Test the static per-deployment defaults."""
        config = CompletionConfig()

        assert config.model == "gpt-4o-mini"
        assert config.max_tokens == 300
        assert config.temperature == 0.8
        assert config.persona == GENIE_PERSONA
        assert config.fallback_message == FALLBACK_MESSAGE

    def test_fallback_message_text(self):
        """Test the user-facing fallback text."""
        assert FALLBACK_MESSAGE.startswith("Oops! Your wish hit a snag. Try rubbing the lamp again!")

    @given(st.floats(min_value=0.0, max_value=2.0))
    def test_temperature_within_bounds(self, temperature: float):
        """Property test: temperature accepts 0.0-2.0."""
        assert CompletionConfig(temperature=temperature).temperature == temperature

    def test_temperature_out_of_range_fails(self):
        """Test that temperature above 2 fails validation."""
        with pytest.raises(ValueError):
            CompletionConfig(temperature=2.5)

    def test_zero_max_tokens_fails(self):
        """Test that a token cap below 1 fails validation."""
        with pytest.raises(ValueError):
            CompletionConfig(max_tokens=0)

    def test_config_is_frozen(self):
        """Test that config cannot change after creation."""
        config = CompletionConfig()
        with pytest.raises(ValueError):
            config.model = "other"  # type: ignore[misc]


class TestCompletionResult:
    """Tests for the internal result type."""

    def test_success(self):
        result = CompletionResult.success("hi")
        assert result.ok is True
        assert result.content == "hi"
        assert result.error is None

    def test_failure(self):
        result = CompletionResult.failure("boom")
        assert result.ok is False
        assert result.content == ""
        assert result.error == "boom"


class TestCompletionClient:
    """Tests for CompletionClient."""

    async def test_request_carries_persona_and_settings(self):
        """Test that each call sends persona, prompt, token cap and temperature."""
        provider = FakeProvider(["hello"])
        config = CompletionConfig(model="gpt-test", max_tokens=42, temperature=0.3, persona="Be brief.")
        client = CompletionClient(provider, config)

        await client.complete("what is up")

        call = provider.calls[0]
        assert [(m.role, m.content) for m in call["messages"]] == [
            ("system", "Be brief."),
            ("user", "what is up"),
        ]
        assert call["model"] == "gpt-test"
        assert call["max_tokens"] == 42
        assert call["temperature"] == 0.3

    async def test_reply_is_trimmed(self):
        """Test that surrounding whitespace is removed from replies."""
        client = CompletionClient(FakeProvider(["  \n Your wish is granted! \n"]))
        assert await client.complete("wish") == "Your wish is granted!"

    async def test_provider_error_returns_fallback(self, caplog):
        """Test that provider exceptions become the fallback string."""
        client = CompletionClient(FakeProvider(error=ConnectionError("no lamp")))

        with caplog.at_level(logging.ERROR, logger="genie.completion.client"):
            reply = await client.complete("wish")

        assert reply == FALLBACK_MESSAGE
        assert "Completion request failed" in caplog.text

    async def test_provider_error_result_names_the_error(self):
        """Test that the internal result keeps the failure reason."""
        client = CompletionClient(FakeProvider(error=RuntimeError("quota exceeded")))

        result = await client.complete_result("wish")

        assert result.ok is False
        assert result.error == "RuntimeError: quota exceeded"

    async def test_empty_reply_is_a_failure(self, caplog):
        """Test that an empty completion counts as malformed."""
        client = CompletionClient(FakeProvider(["   "]))

        with caplog.at_level(logging.WARNING, logger="genie.completion.client"):
            result = await client.complete_result("wish")

        assert result.ok is False
        assert result.error == "empty completion"
        assert await client.complete("wish") == FALLBACK_MESSAGE
        assert "had no content" in caplog.text

    async def test_custom_fallback_message(self):
        """Test that the fallback text comes from config."""
        config = CompletionConfig(fallback_message="The lamp is cold.")
        client = CompletionClient(FakeProvider(error=TimeoutError()), config)
        assert await client.complete("wish") == "The lamp is cold."

    async def test_no_retry_on_failure(self):
        """Test that a failure costs exactly one provider call."""
        provider = FakeProvider(error=ConnectionError())
        client = CompletionClient(provider)
        await client.complete("wish")
        assert len(provider.calls) == 1

    async def test_context_manager_closes_provider(self):
        """Test that leaving the client context closes the provider."""
        provider = FakeProvider()
        async with CompletionClient(provider) as client:
            await client.complete("wish")
        assert provider.closed is True

    async def test_close(self):
        provider = FakeProvider()
        await CompletionClient(provider).close()
        assert provider.closed is True

    @pytest.mark.integration
    async def test_real_completion(self, api_keys):
        """Test a real OpenAI call (requires OPENAI_API_KEY)."""
        if not api_keys["openai"]:
            pytest.skip("Requires OpenAI API key")

        from genie.llm import create_llm_provider

        provider = create_llm_provider("openai", api_key=api_keys["openai"])
        async with CompletionClient(provider) as client:
            result = await client.complete_result("Say hello in three words.")

        assert result.ok is True
        assert result.content
