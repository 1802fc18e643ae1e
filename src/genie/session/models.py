"""Data models for the chat session.

Hides the internal representation of session state.
"""

from dataclasses import dataclass, field


@dataclass
class SessionState:
    """Everything the UI needs to draw one session."""

    input: str = ""
    history: list[str] = field(default_factory=list)  # submission order, no dedup
    active_prompt: str = ""
    is_loading: bool = False
    is_result_visible: bool = False
    displayed_response: str = ""
