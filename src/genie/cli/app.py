"""Main CLI application using Typer."""
import asyncio
import logging

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.live import Live
from rich.logging import RichHandler
from rich.markup import escape

from ..completion import CompletionClient
from ..session import REVEAL_INTERVAL_SECONDS, PromptController, RevealAnimator, SessionStore
from ..ui.formatting import render_response
from .providers import get_completion_client

# Load environment variables
load_dotenv()

# Create Typer app
app = typer.Typer(
    name="genie",
    help="GenieAI: ask the genie anything, in your terminal",
    no_args_is_help=True,
    add_completion=True,
)

# Console for rich output
console = Console()

LOG_LEVELS = ("debug", "info", "warning", "error")


def _check_log_level(value: str | None) -> str | None:
    if value is not None and value.lower() not in LOG_LEVELS:
        raise typer.BadParameter(f"must be one of: {', '.join(LOG_LEVELS)}")
    return value.lower() if value else value


def configure_logging(level: str) -> None:
    """Send genie log records to stderr through Rich."""
    handler = RichHandler(console=Console(stderr=True), show_path=False)
    genie_logger = logging.getLogger("genie")
    for existing in [h for h in genie_logger.handlers if isinstance(h, RichHandler)]:
        genie_logger.removeHandler(existing)
    genie_logger.addHandler(handler)
    genie_logger.setLevel(level.upper())


@app.command()
def chat(
    log_level: str | None = typer.Option(
        None,
        "--log-level",
        "-l",
        callback=_check_log_level,
        help="Show the log panel at this level (debug, info, warning, error)"
    ),
):
    """Open the interactive GenieAI terminal UI."""
    from ..ui import run_textual_tui

    client = get_completion_client(console)
    try:
        asyncio.run(run_textual_tui(client, log_level=log_level))
    except KeyboardInterrupt:
        pass


async def ask_once(
    client: CompletionClient,
    prompt: str,
    animate: bool = True,
    out: Console = console,
) -> str:
    """Run one submission cycle and print the revealed reply.

    Returns:
        The fully revealed reply markup
    """
    store = SessionStore()
    interval = REVEAL_INTERVAL_SECONDS if animate else 0
    controller = PromptController(store, client, RevealAnimator(store, interval))
    store.set_input(prompt)

    out.print(f"[bold cyan]You:[/] {escape(prompt)}", highlight=False)
    with out.status("[dim]Rubbing the lamp...[/dim]"):
        reveal = await controller.submit()

    if animate:
        with Live(render_response(""), console=out, auto_refresh=False) as live:
            def _on_change(field_name: str, changed: SessionStore) -> None:
                if field_name == "displayed_response":
                    live.update(render_response(changed.displayed_response), refresh=True)

            unsubscribe = store.subscribe(_on_change)
            try:
                await reveal
            finally:
                unsubscribe()
    else:
        await reveal
        out.print(render_response(store.displayed_response))

    return store.displayed_response


@app.command()
def ask(
    prompt: str = typer.Argument(..., help="Prompt to send"),
    animate: bool = typer.Option(
        True,
        "--animate/--no-animate",
        help="Reveal the reply word by word"
    ),
    log_level: str = typer.Option(
        "warning",
        "--log-level",
        "-l",
        callback=_check_log_level,
        help="Log level for stderr output (debug, info, warning, error)"
    ),
):
    """Send a single prompt and print the genie's reply."""
    configure_logging(log_level)
    client = get_completion_client(console)

    async def _ask():
        async with client:
            await ask_once(client, prompt, animate=animate)

    asyncio.run(_ask())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
