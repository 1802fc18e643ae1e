"""Data models for the completion client.

Static configuration and the internal success/failure result type.
"""

from pydantic import BaseModel, ConfigDict, Field

GENIE_PERSONA = (
    "You are a genie who is energetic, humorous, charismatic, and expressive. "
    "You respond to user questions quickly in a fast-paced, witty, and engaging tone. "
    "You also provide informative and useful answers, but always in a fun and genie-like way."
)

FALLBACK_MESSAGE = "Oops! Your wish hit a snag. Try rubbing the lamp again! 🧞‍♂️"


class CompletionConfig(BaseModel):
    """Per-deployment request settings.

    None of these vary per call; the whole session shares one config.
    """

    model_config = ConfigDict(frozen=True)

    persona: str = Field(default=GENIE_PERSONA, description="System instruction sent with every prompt")
    model: str = Field(default="gpt-4o-mini", description="Chat model name")
    max_tokens: int = Field(default=300, ge=1, description="Token cap for each reply")
    temperature: float = Field(default=0.8, ge=0.0, le=2.0, description="Sampling temperature")
    fallback_message: str = Field(
        default=FALLBACK_MESSAGE,
        description="Text shown in place of a reply when the remote call fails"
    )


class CompletionResult(BaseModel):
    """Outcome of one remote call."""

    model_config = ConfigDict(frozen=True)

    ok: bool
    content: str = ""
    error: str | None = None

    @classmethod
    def success(cls, content: str) -> "CompletionResult":
        return cls(ok=True, content=content)

    @classmethod
    def failure(cls, error: str) -> "CompletionResult":
        return cls(ok=False, error=error)
