"""Routes ``logging`` records into the TUI log panel.

Hides how log records reach the screen. Records emitted from worker threads
are handed to the app thread before touching the widget.
"""

import logging
import threading
from typing import TYPE_CHECKING

from .config import LogLevel

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import DebugPanel

# Logger name prefix -> panel component tag
_COMPONENTS = {
    "genie.completion": "LLM",
    "genie.llm": "LLM",
    "genie.session": "CORE",
}


def component_for(logger_name: str) -> str:
    """Map a logger name to the component tag shown in the panel."""
    for prefix, component in _COMPONENTS.items():
        if logger_name.startswith(prefix):
            return component
    return "TUI"


class DebugPanelHandler(logging.Handler):
    """Logging handler that writes into a DebugPanel."""

    def __init__(self, panel: "DebugPanel", app: "App | None" = None, level: int = logging.NOTSET) -> None:
        super().__init__(level)
        self.panel = panel
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info and record.exc_info[1] is not None:
                message = f"{message} ({record.exc_info[1]!r})"
            args = (component_for(record.name), message, LogLevel.from_record_level(record.levelno))
            if self.app is not None and self.app._thread_id != threading.get_ident():
                self.app.call_from_thread(self.panel.add_entry, *args)
            else:
                self.panel.add_entry(*args)
        except Exception:
            self.handleError(record)
