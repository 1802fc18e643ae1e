"""Remote completion module for GenieAI.

Turns a prompt into a reply string. Remote failures never escape: they are
logged and replaced with a fixed, friendly fallback message.
"""

from .client import CompletionClient
from .models import FALLBACK_MESSAGE, GENIE_PERSONA, CompletionConfig, CompletionResult

__all__ = [
    "FALLBACK_MESSAGE",
    "GENIE_PERSONA",
    "CompletionClient",
    "CompletionConfig",
    "CompletionResult",
]
