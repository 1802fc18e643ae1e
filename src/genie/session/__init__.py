"""Session module for GenieAI.

Module structure (each module hides a design decision):
- models.py: the session state record
- store.py: single source of truth and change notification
- formatter.py: reply markup and word fragments
- animator.py: staggered reveal timing
- controller.py: the submit/replay state machine
"""

from .animator import REVEAL_INTERVAL_SECONDS, RevealAnimator
from .controller import PromptController
from .formatter import apply_emphasis, build_fragments, format_response, split_fragments
from .models import SessionState
from .store import SessionStore, StateListener

__all__ = [
    "REVEAL_INTERVAL_SECONDS",
    "PromptController",
    "RevealAnimator",
    "SessionState",
    "SessionStore",
    "StateListener",
    "apply_emphasis",
    "build_fragments",
    "format_response",
    "split_fragments",
]
