"""UI configuration constants.

Centralizes magic numbers and display text for the UI module.
"""


class LogLevel:
    """Log level constants with numeric values for comparison.

    Values match the standard ``logging`` levels, so records can be filtered
    against them directly. Lower numeric value = more verbose.
    """

    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40

    _names = {
        DEBUG: "DEBUG",
        INFO: "INFO",
        WARNING: "WARNING",
        ERROR: "ERROR",
    }

    _from_string = {
        "debug": DEBUG,
        "info": INFO,
        "warning": WARNING,
        "error": ERROR,
    }

    @classmethod
    def name(cls, level: int) -> str:
        """Get the name for a log level."""
        return cls._names.get(level, "UNKNOWN")

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Convert string to log level. Returns DEBUG if invalid."""
        return cls._from_string.get(level_str.lower(), cls.DEBUG)

    @classmethod
    def from_record_level(cls, levelno: int) -> int:
        """Clamp a ``logging`` record level onto the four panel levels."""
        if levelno >= cls.ERROR:
            return cls.ERROR
        if levelno >= cls.WARNING:
            return cls.WARNING
        if levelno >= cls.INFO:
            return cls.INFO
        return cls.DEBUG


# Sidebar configuration
RECENT_PROMPT_PREVIEW = 18  # Characters shown per history entry

# Main panel text
APP_NAME = "GenieAI"
GREETING = "Greetings!"
GREETING_SUBTITLE = "How can I help you today?"
INPUT_PLACEHOLDER = "Enter a prompt here"
BOTTOM_INFO = (
    "GenieAI may display inaccurate info, including about people, "
    "so double-check its responses."
)

# Suggestion cards shown on the greeting screen: (text, icon)
SUGGESTION_CARDS = [
    ("Suggest beautiful places to see on an upcoming road trip", "🧭"),
    ("Summarize this concept: urban planning", "💡"),
    ("Brainstorm team bonding activities for our work retreat", "💬"),
    ("Improve the readability of the following code", "⌨"),
]

# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
DEFAULT_LOG_LEVEL = "info"
