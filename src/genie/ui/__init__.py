"""Terminal UI module for GenieAI.

Provides a Textual-based TUI over the session store.

Module structure (each module hides a design decision):
- config.py: display text and constants
- formatting.py: reply markup to terminal styles
- widgets.py: sidebar, main panel and log panel
- log_handler.py: logging records into the log panel
- styles.py: CSS layout
- themes.py: color palette
- app.py: application orchestration (user interaction flow)
"""

from .app import GenieApp, run_textual_tui
from .config import LogLevel
from .formatting import render_response, to_plain_text
from .log_handler import DebugPanelHandler
from .widgets import DebugPanel, MainPanel, Sidebar

__all__ = [
    "DebugPanel",
    "DebugPanelHandler",
    "GenieApp",
    "LogLevel",
    "MainPanel",
    "Sidebar",
    "render_response",
    "run_textual_tui",
    "to_plain_text",
]
