"""Text formatting utilities for the TUI.

Hides how reply markup (``<b>``, ``</b>``, ``<br/>``) is shown in a terminal.
Everything else in the reply is treated as plain text, so brackets that look
like Rich markup are printed literally.
"""

import re

from rich.text import Text

from ..session.formatter import BOLD_CLOSE, BOLD_OPEN, LINE_BREAK

_MARKUP_PATTERN = re.compile(
    "(" + "|".join(re.escape(tag) for tag in (BOLD_OPEN, BOLD_CLOSE, LINE_BREAK)) + ")"
)


def render_response(markup: str) -> Text:
    """Render reply markup as a styled Rich Text.

    A partially revealed reply may hold an opening ``<b>`` without its
    closing tag; the rest of the text is then bold until it arrives.
    """
    result = Text(overflow="fold")
    bold = False
    for part in _MARKUP_PATTERN.split(markup):
        if part == BOLD_OPEN:
            bold = True
        elif part == BOLD_CLOSE:
            bold = False
        elif part == LINE_BREAK:
            result.append("\n")
        elif part:
            result.append(part, style="bold" if bold else "")
    return result


def to_plain_text(markup: str) -> str:
    """Strip reply markup, keeping line breaks. Used for clipboard copies."""
    return render_response(markup).plain.rstrip()


def preview_prompt(prompt: str, length: int) -> str:
    """Shorten a prompt for the sidebar list."""
    return f"{prompt[:length]}..."
