"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Sidebar expansion and the recent-prompt list
- Greeting, result and input layout of the main panel
- Log rendering and level filtering

Widgets never touch the session store. They post messages; the app turns
those into store transitions and pushes state back with the ``show_*``
methods.
"""

from datetime import datetime

from rich.markup import escape
from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import Click
from textual.message import Message
from textual.widgets import Button, Input, Label, LoadingIndicator, RichLog, Static

from .config import (
    APP_NAME,
    BOTTOM_INFO,
    GREETING,
    GREETING_SUBTITLE,
    INPUT_PLACEHOLDER,
    LOG_TIMESTAMP_FORMAT,
    RECENT_PROMPT_PREVIEW,
    SUGGESTION_CARDS,
    LogLevel,
)
from .formatting import preview_prompt, render_response


class RecentPromptButton(Button):
    """One history entry in the sidebar."""

    def __init__(self, prompt: str, **kwargs) -> None:
        super().__init__(
            Text(f"💬 {preview_prompt(prompt, RECENT_PROMPT_PREVIEW)}"),
            classes="recent-entry",
            **kwargs
        )
        self.prompt = prompt


class Sidebar(Vertical):
    """Menu toggle, New Chat button, recent prompts and the bottom menu."""

    class PromptSelected(Message):
        """Sent when a history entry is picked for replay."""

        def __init__(self, prompt: str) -> None:
            super().__init__()
            self.prompt = prompt

    class NewChatRequested(Message):
        """Sent when the New Chat button is pressed."""

    _BOTTOM_ITEMS = [("❓", "Help"), ("🕘", "Activity"), ("⚙", "Settings")]

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._history: list[str] = []

    @property
    def extended(self) -> bool:
        return self.has_class("-extended")

    def compose(self) -> ComposeResult:
        yield Button("☰", id="menu-btn")
        yield Button("+", id="new-chat-btn")
        with VerticalScroll(id="recent"):
            yield Label("Recent", id="recent-title")
        with Vertical(id="sidebar-bottom"):
            for icon, _ in self._BOTTOM_ITEMS:
                yield Static(icon, classes="bottom-item")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        event.stop()
        if isinstance(event.button, RecentPromptButton):
            self.post_message(self.PromptSelected(event.button.prompt))
        elif event.button.id == "menu-btn":
            self.toggle()
        elif event.button.id == "new-chat-btn":
            self.post_message(self.NewChatRequested())

    def toggle(self) -> bool:
        """Expand or collapse. Returns the new state."""
        self.toggle_class("-extended")
        self._update_labels()
        return self.extended

    def _update_labels(self) -> None:
        self.query_one("#new-chat-btn", Button).label = "+ New Chat" if self.extended else "+"
        for item, (icon, text) in zip(self.query(".bottom-item").results(Static), self._BOTTOM_ITEMS, strict=False):
            item.update(f"{icon} {text}" if self.extended else icon)

    def show_history(self, history: tuple[str, ...] | list[str]) -> None:
        """Rebuild the recent list from the session history."""
        self._history = list(history)
        recent = self.query_one("#recent", VerticalScroll)
        recent.query(RecentPromptButton).remove()
        recent.mount_all(RecentPromptButton(prompt) for prompt in self._history)

    @property
    def history(self) -> list[str]:
        return list(self._history)


class MainPanel(Vertical):
    """Greeting or result area, the prompt box and the disclaimer."""

    class PromptChanged(Message):
        """Sent whenever the prompt box text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class PromptSubmitted(Message):
        """Sent when the user asks to send the current prompt."""

    def compose(self) -> ComposeResult:
        yield Static(APP_NAME, id="nav")
        with VerticalScroll(id="main-container"):
            with Vertical(id="greet"):
                yield Static(GREETING, id="greet-title")
                yield Static(GREETING_SUBTITLE, id="greet-subtitle")
                with Horizontal(id="cards"):
                    for text, icon in SUGGESTION_CARDS:
                        yield Static(f"{text}\n\n{icon}", classes="card")
            with Vertical(id="result"):
                yield Static("", id="result-title")
                yield LoadingIndicator(id="loader")
                yield Static("", id="result-data")
        with Horizontal(id="search-box"):
            yield Input(placeholder=INPUT_PLACEHOLDER, id="prompt-input")
            yield Button("Send ➤", id="send-btn", variant="success")
        yield Static(BOTTOM_INFO, id="bottom-info")

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.set_class(bool(event.value), "-has-input")
        self.post_message(self.PromptChanged(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        if event.value:
            self.post_message(self.PromptSubmitted())

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self.post_message(self.PromptSubmitted())

    def show_prompt_text(self, value: str) -> None:
        """Mirror the session input into the prompt box."""
        prompt_input = self.query_one("#prompt-input", Input)
        if prompt_input.value != value:
            prompt_input.value = value
        self.set_class(bool(value), "-has-input")

    def show_result(self, visible: bool, loading: bool, active_prompt: str) -> None:
        """Switch between greeting, loader and result views."""
        self.set_class(visible, "-showing-result")
        self.set_class(loading, "-loading")
        self.query_one("#result-title", Static).update(Text(f"🙂 {active_prompt}"))

    def show_response(self, markup: str) -> None:
        self.query_one("#result-data", Static).update(render_response(markup))

    def focus_input(self) -> None:
        self.query_one("#prompt-input", Input).focus()


class DebugPanel(RichLog):
    """Log panel for real-time tracing with level filtering.

    Shows timestamped log messages from all components.
    Supports standard log levels: DEBUG < INFO < WARNING < ERROR.
    Hidden by default, shown with --log-level flag or toggled with Ctrl+L.
    """

    BORDER_TITLE = "Log"
    BORDER_SUBTITLE = "Trace log"

    _LEVEL_COLORS = {
        LogLevel.DEBUG: "dim white",
        LogLevel.INFO: "cyan",
        LogLevel.WARNING: "yellow",
        LogLevel.ERROR: "red",
    }

    _COMPONENT_COLORS = {
        "TUI": "cyan",
        "CORE": "green",
        "LLM": "magenta",
    }

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(
            *args,
            markup=True,
            highlight=False,
            auto_scroll=True,
            wrap=True,
            **kwargs
        )
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        """Current log level threshold."""
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        if self.display:
            self.border_subtitle = f"Level: {LogLevel.name(self._log_level)}"
        else:
            self.border_subtitle = "Hidden"

    def on_mount(self) -> None:
        """Hide by default."""
        self.display = False

    def add_entry(
        self,
        component: str,
        message: str,
        level: int = LogLevel.DEBUG
    ) -> None:
        """Add a log entry if it meets the current level threshold.

        Args:
            component: Component name (TUI, CORE, LLM)
            message: Log message
            level: Log level (LogLevel.DEBUG, INFO, WARNING, ERROR)
        """
        if level < self._log_level:
            return

        timestamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_color = self._LEVEL_COLORS.get(level, "white")
        comp_color = self._COMPONENT_COLORS.get(component, "white")

        self.write(
            f"[dim]{timestamp}[/] "
            f"[{level_color}]{LogLevel.name(level):<5}[/] "
            f"[{comp_color}]\\[{component}][/] {escape(message)}"
        )

    def show(self) -> None:
        self.display = True
        self._update_subtitle()

    def hide(self) -> None:
        self.display = False
        self.border_subtitle = "Hidden"

    def toggle(self) -> bool:
        """Toggle visibility. Returns new state."""
        if self.display:
            self.hide()
            return False
        self.show()
        return True

    def get_plain_text(self) -> str:
        """Get plain text content of the log for copying."""
        return "\n".join(line.text for line in self.lines)

    def on_click(self, event: Click) -> None:
        """Copy log content to clipboard when clicked."""
        event.stop()
        text = self.get_plain_text()
        if not text.strip():
            self.app.notify("Log is empty", timeout=2)
            return
        self.app.copy_to_clipboard(text)
        self.app.notify("Log copied", timeout=2)
