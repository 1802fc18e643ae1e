"""Provider factory functions for CLI.

Centralizes creation of the completion client from environment variables.
Hides configuration details from command implementations.
"""

import os

import typer
from pydantic import ValidationError
from rich.console import Console

from ..completion import CompletionClient, CompletionConfig
from ..llm import create_llm_provider

# Default console for output
_console = Console()


def get_completion_config(console: Console | None = None) -> CompletionConfig:
    """Build the static request settings from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Validated completion config

    Raises:
        SystemExit: If a numeric setting is malformed or out of range

    Environment variables:
        GENIE_MODEL: Chat model (default: gpt-4o-mini)
        GENIE_MAX_TOKENS: Token cap per reply (default: 300)
        GENIE_TEMPERATURE: Sampling temperature (default: 0.8)
        GENIE_PERSONA: System persona override (default: the genie persona)
    """
    con = console or _console
    settings: dict[str, str] = {}
    for key, env_var in (
        ("model", "GENIE_MODEL"),
        ("max_tokens", "GENIE_MAX_TOKENS"),
        ("temperature", "GENIE_TEMPERATURE"),
        ("persona", "GENIE_PERSONA"),
    ):
        value = os.getenv(env_var)
        if value:
            settings[key] = value

    try:
        return CompletionConfig(**settings)
    except ValidationError as e:
        for error in e.errors():
            field = ".".join(str(part) for part in error["loc"])
            con.print(f"[red]Error: invalid {field}: {error['msg']}[/red]")
        raise typer.Exit(code=1)


def get_completion_client(console: Console | None = None) -> CompletionClient:
    """Create the completion client from environment variables.

    Args:
        console: Optional Rich console for output

    Returns:
        Completion client backed by the OpenAI provider

    Raises:
        SystemExit: If OPENAI_API_KEY is not set or a setting is invalid

    Environment variables:
        OPENAI_API_KEY: OpenAI API key (required)
        OPENAI_BASE_URL: OpenAI-compatible endpoint (default: SDK default)
    """
    con = console or _console
    api_key = os.getenv("OPENAI_API_KEY")
    if not api_key:
        con.print("[red]Error: OPENAI_API_KEY not set in environment[/red]")
        raise typer.Exit(code=1)

    config = get_completion_config(con)
    provider = create_llm_provider(
        "openai",
        api_key=api_key,
        model=config.model,
        base_url=os.getenv("OPENAI_BASE_URL") or None,
    )
    return CompletionClient(provider, config)
