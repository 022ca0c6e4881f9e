from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

TIMESTAMP_FORMAT = "%I:%M:%S %p"


def current_timestamp() -> str:
    """Return the local wall-clock time as a display string."""
    return datetime.now().strftime(TIMESTAMP_FORMAT)


class Sender(str, Enum):
    """Author of a transcript message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single transcript entry.

    Attributes:
        sender: Who wrote the message (user or bot).
        text: The message text. Markdown for bot messages.
        timestamp: Display time captured when the message was created.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str
    timestamp: str = Field(default_factory=current_timestamp)


class ModelOption(BaseModel):
    """A selectable Gemini model and its temperature ceiling."""

    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    max_temperature: float = Field(gt=0.0)


class ChatRequest(BaseModel):
    """Request payload for the chat endpoint.

    Attributes:
        message: User's prompt.
        model: Model identifier. Falls back to the configured default.
        temperature: Sampling temperature. Clamped to the model maximum.
    """

    message: str = Field(..., min_length=1)
    model: str | None = None
    temperature: float | None = Field(None, ge=0.0)

    @field_validator("message", mode="before")
    @classmethod
    def strip_message(cls, v: str) -> str:
        """Strip whitespace from message before validation."""
        if isinstance(v, str):
            return v.strip()
        return v


class ChatResponse(BaseModel):
    """Generated answer along with the parameters actually used."""

    response: str
    model: str
    temperature: float
    timestamp: str
