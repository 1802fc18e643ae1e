"""Tests for the command line interface."""
import pytest
import typer
from conftest import FakeProvider
from rich.console import Console
from typer.testing import CliRunner

from genie.cli import app as cli_app
from genie.cli.providers import get_completion_client, get_completion_config
from genie.completion import FALLBACK_MESSAGE, CompletionClient

runner = CliRunner()

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPENAI_BASE_URL",
    "GENIE_MODEL",
    "GENIE_MAX_TOKENS",
    "GENIE_TEMPERATURE",
    "GENIE_PERSONA",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestProviders:
    """Tests for environment-based configuration."""

    def test_config_defaults(self):
        config = get_completion_config(Console(quiet=True))
        assert config.model == "gpt-4o-mini"
        assert config.max_tokens == 300

    def test_config_from_environment(self, monkeypatch):
        """Test that GENIE_* variables override defaults."""
        monkeypatch.setenv("GENIE_MODEL", "gpt-lamp")
        monkeypatch.setenv("GENIE_MAX_TOKENS", "120")
        monkeypatch.setenv("GENIE_TEMPERATURE", "0.2")

        config = get_completion_config(Console(quiet=True))

        assert config.model == "gpt-lamp"
        assert config.max_tokens == 120
        assert config.temperature == 0.2

    def test_invalid_setting_exits(self, monkeypatch):
        """Test that an out-of-range setting stops the CLI."""
        monkeypatch.setenv("GENIE_TEMPERATURE", "9")
        with pytest.raises(typer.Exit):
            get_completion_config(Console(quiet=True))

    def test_missing_api_key_exits(self):
        with pytest.raises(typer.Exit):
            get_completion_client(Console(quiet=True))

    def test_client_from_environment(self, monkeypatch):
        monkeypatch.setenv("OPENAI_API_KEY", "fake-key")
        monkeypatch.setenv("GENIE_MODEL", "gpt-lamp")

        client = get_completion_client(Console(quiet=True))

        assert isinstance(client, CompletionClient)
        assert client.config.model == "gpt-lamp"


class TestAskCommand:
    """Tests for `genie ask`."""

    def test_ask_prints_reply(self, monkeypatch):
        """Test a one-shot prompt without animation."""
        provider = FakeProvider(["Your **wish** is granted"])
        monkeypatch.setattr(
            cli_app, "get_completion_client", lambda console=None: CompletionClient(provider)
        )

        result = runner.invoke(cli_app.app, ["ask", "a wish please", "--no-animate"])

        assert result.exit_code == 0, result.output
        assert "a wish please" in result.output
        assert "Your wish is granted" in result.output
        assert provider.closed is True

    def test_ask_prints_fallback_on_failure(self, monkeypatch):
        """Test that a failing service still prints the fallback."""
        provider = FakeProvider(error=ConnectionError("down"))
        monkeypatch.setattr(
            cli_app, "get_completion_client", lambda console=None: CompletionClient(provider)
        )

        result = runner.invoke(cli_app.app, ["ask", "hello", "--no-animate"])

        assert result.exit_code == 0, result.output
        assert "Oops! Your wish hit a snag." in result.output
        assert FALLBACK_MESSAGE.startswith("Oops!")

    def test_ask_without_api_key(self):
        """Test that a missing key exits with an error."""
        result = runner.invoke(cli_app.app, ["ask", "hello"])
        assert result.exit_code == 1
        assert "OPENAI_API_KEY not set" in result.output

    def test_bad_log_level(self):
        result = runner.invoke(cli_app.app, ["ask", "hello", "--log-level", "loud"])
        assert result.exit_code == 2


class TestAskOnce:
    """Tests for the animated one-shot helper."""

    async def test_animated_reveal_returns_full_reply(self):
        client = CompletionClient(FakeProvider(["one two three"]))
        out = Console(record=True, width=80)

        revealed = await cli_app.ask_once(client, "count", animate=True, out=out)

        assert revealed == "one two three "
        assert "one two three" in out.export_text()
