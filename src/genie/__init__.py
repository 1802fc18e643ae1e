"""GenieAI: a terminal chat client that grants wishes, one revealed word at a time.

Each subpackage hides one design decision:
- llm: which hosted model API answers prompts
- completion: how a prompt becomes a reply that never fails loudly
- session: session state, response formatting and the reveal animation
- ui: how the session is drawn in the terminal
- cli: how the application is configured and launched
"""

__version__ = "0.1.0"

from .completion import CompletionClient, CompletionConfig, CompletionResult
from .session import (
    PromptController,
    RevealAnimator,
    SessionState,
    SessionStore,
    build_fragments,
    format_response,
)

__all__ = [
    "CompletionClient",
    "CompletionConfig",
    "CompletionResult",
    "PromptController",
    "RevealAnimator",
    "SessionState",
    "SessionStore",
    "build_fragments",
    "format_response",
]
