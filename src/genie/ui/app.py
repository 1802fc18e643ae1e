"""Main Textual TUI application.

Owns the session store, wires widgets to store transitions and runs each
submission as a background worker so the UI stays responsive.
"""

import logging
from typing import Any

from textual import work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Vertical
from textual.widgets import Footer, Header

from ..completion import CompletionClient
from ..session import REVEAL_INTERVAL_SECONDS, PromptController, RevealAnimator, SessionStore
from .config import APP_NAME, DEFAULT_LOG_LEVEL, LogLevel
from .formatting import to_plain_text
from .log_handler import DebugPanelHandler
from .styles import APP_CSS
from .themes import GENIE_LAMP
from .widgets import DebugPanel, MainPanel, Sidebar

logger = logging.getLogger(__name__)

_RESULT_FIELDS = {"is_loading", "is_result_visible", "active_prompt"}


class GenieApp(App):
    """Textual TUI for GenieAI chat."""

    CSS = APP_CSS
    TITLE = APP_NAME

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+n", "new_chat", "New Chat"),
        Binding("ctrl+b", "toggle_sidebar", "Sidebar"),
        Binding("ctrl+l", "toggle_debug", "Log"),
        Binding("ctrl+r", "copy_last_response", "Copy Response"),
    ]

    def __init__(
        self,
        client: CompletionClient,
        log_level: str | None = None,
        reveal_interval: float = REVEAL_INTERVAL_SECONDS,
        store: SessionStore | None = None,
    ) -> None:
        super().__init__()
        self._client = client
        self._log_level = log_level
        self._store = store or SessionStore()
        self._controller = PromptController(
            self._store, client, RevealAnimator(self._store, reveal_interval)
        )
        self._unsubscribe: Any = None
        self._log_handler: DebugPanelHandler | None = None

    @property
    def store(self) -> SessionStore:
        return self._store

    @property
    def controller(self) -> PromptController:
        return self._controller

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield Sidebar(id="sidebar")
        with Vertical(id="main-column"):
            yield MainPanel(id="main")
            yield DebugPanel(id="debug-panel")
        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        self.register_theme(GENIE_LAMP)
        self.theme = "genie-lamp"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        level = LogLevel.from_string(self._log_level or DEFAULT_LOG_LEVEL)
        log_panel.log_level = level
        self._install_log_handler(log_panel, level)
        if self._log_level is not None:
            log_panel.show()
            logger.info("Log panel enabled with level: %s", self._log_level.upper())

        self.sub_title = self._client.config.model
        self._unsubscribe = self._store.subscribe(self._on_state_changed)
        self._refresh_all()
        self.query_one("#main", MainPanel).focus_input()

    def on_unmount(self) -> None:
        """Detach from the store and the logging tree."""
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
        if self._log_handler is not None:
            logging.getLogger("genie").removeHandler(self._log_handler)
            self._log_handler = None

    def _install_log_handler(self, panel: DebugPanel, level: int) -> None:
        genie_logger = logging.getLogger("genie")
        self._log_handler = DebugPanelHandler(panel, app=self, level=level)
        genie_logger.addHandler(self._log_handler)
        genie_logger.setLevel(level)

    def _refresh_all(self) -> None:
        sidebar = self.query_one("#sidebar", Sidebar)
        main = self.query_one("#main", MainPanel)
        sidebar.show_history(self._store.history)
        main.show_prompt_text(self._store.input)
        main.show_result(
            self._store.is_result_visible, self._store.is_loading, self._store.active_prompt
        )
        main.show_response(self._store.displayed_response)

    def _on_state_changed(self, field_name: str, store: SessionStore) -> None:
        main = self.query_one("#main", MainPanel)
        if field_name == "history":
            self.query_one("#sidebar", Sidebar).show_history(store.history)
        elif field_name == "input":
            main.show_prompt_text(store.input)
        elif field_name == "displayed_response":
            main.show_response(store.displayed_response)
        elif field_name in _RESULT_FIELDS:
            main.show_result(store.is_result_visible, store.is_loading, store.active_prompt)

    def on_main_panel_prompt_changed(self, event: MainPanel.PromptChanged) -> None:
        if event.value != self._store.input:
            self._store.set_input(event.value)

    def on_main_panel_prompt_submitted(self, event: MainPanel.PromptSubmitted) -> None:
        if not self._store.input:
            return
        self._run_submission()

    def on_sidebar_prompt_selected(self, event: Sidebar.PromptSelected) -> None:
        self._run_submission(event.prompt)

    def on_sidebar_new_chat_requested(self, event: Sidebar.NewChatRequested) -> None:
        self.action_new_chat()

    @work(group="submissions")
    async def _run_submission(self, prompt_override: str | None = None) -> None:
        """Run one submission cycle as a background async worker.

        Workers are not exclusive: a newer submission leaves the older one
        running, and the animator's generation check keeps its words out.
        """
        reveal = await self._controller.submit(prompt_override)
        await reveal
        logger.info("Reply revealed for %r", self._store.active_prompt[:50])

    def action_new_chat(self) -> None:
        """Return to the greeting screen."""
        self._controller.new_session()

    def action_toggle_sidebar(self) -> None:
        self.query_one("#sidebar", Sidebar).toggle()

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_response(self) -> None:
        """Copy the revealed reply to the clipboard."""
        response = to_plain_text(self._store.displayed_response)
        if response:
            self.copy_to_clipboard(response)
            self.notify("Response copied")
        else:
            self.notify("No response to copy", severity="warning")


async def run_textual_tui(
    client: CompletionClient,
    log_level: str | None = None,
    reveal_interval: float = REVEAL_INTERVAL_SECONDS,
) -> None:
    """Run the Textual TUI.

    Args:
        client: Completion client used for every prompt
        log_level: Log level for panel (debug/info/warning/error), None to hide
        reveal_interval: Seconds between revealed words
    """
    app = GenieApp(client=client, log_level=log_level, reveal_interval=reveal_interval)
    async with client:
        await app.run_async()
