"""Reply formatting.

Hides the markup used for emphasis and line breaks, and how a reply is cut
into the word fragments the animator reveals.

Models mark emphasis with ``**double asterisks**`` and bullets with single
ones. Emphasis becomes ``<b>...</b>``; every leftover ``*`` becomes a line
break marker.
"""

EMPHASIS_DELIMITER = "**"
LINE_BREAK_DELIMITER = "*"

BOLD_OPEN = "<b>"
BOLD_CLOSE = "</b>"
LINE_BREAK = "<br/>"


def apply_emphasis(raw: str) -> str:
    """Wrap every odd-indexed ``**`` segment in bold markup.

    An unpaired trailing ``**`` still bolds the text after it:
    ``"x**y"`` becomes ``"x<b>y</b>"``.
    """
    segments = raw.split(EMPHASIS_DELIMITER)
    return "".join(
        f"{BOLD_OPEN}{segment}{BOLD_CLOSE}" if index % 2 == 1 else segment
        for index, segment in enumerate(segments)
    )


def format_response(raw: str) -> str:
    """Apply emphasis, then turn remaining single asterisks into line breaks."""
    return apply_emphasis(raw).replace(LINE_BREAK_DELIMITER, LINE_BREAK)


def split_fragments(formatted: str) -> list[str]:
    """Split on single spaces; each fragment keeps a trailing space."""
    return [word + " " for word in formatted.split(" ")]


def build_fragments(raw: str) -> list[str]:
    """Format a raw reply and cut it into reveal fragments."""
    return split_fragments(format_response(raw))
