"""Agent configuration with environment variable loading.

Pydantic-based configuration for the Gemini generation service.
A missing API key is allowed at start-up; requests fail at call time instead.
"""

import os

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.chat.catalog import DEFAULT_MODEL, DEFAULT_TEMPERATURE, is_supported

# Load environment variables from .env file
load_dotenv()


class AgentConfig(BaseModel):
    """Configuration for the Gemini generation service.

    Attributes:
        api_key: Google AI API key. Empty when not configured.
        default_model: Model selected when a chat starts.
        default_temperature: Temperature selected when a chat starts.
    """

    # Env-derived defaults go through the same validation as explicit values
    model_config = ConfigDict(validate_default=True)

    api_key: str = Field(
        default_factory=lambda: os.getenv("GOOGLE_API_KEY") or os.getenv("GEMINI_API_KEY", ""),
        description="API key for the Gemini API",
    )
    default_model: str = Field(
        default_factory=lambda: os.getenv("CHAT_MODEL", DEFAULT_MODEL),
        description="Model selected for new chats",
    )
    default_temperature: float = Field(
        default_factory=lambda: float(os.getenv("CHAT_TEMPERATURE", str(DEFAULT_TEMPERATURE))),
        ge=0.0,
        le=2.0,
        description="Sampling temperature selected for new chats",
    )

    @field_validator("api_key")
    @classmethod
    def strip_api_key(cls, v: str) -> str:
        """Strip surrounding whitespace; a blank key becomes empty."""
        return (v or "").strip()

    @field_validator("default_model")
    @classmethod
    def validate_default_model(cls, v: str) -> str:
        """Validate that the default model is one the UI can select."""
        if not is_supported(v):
            raise ValueError(f"CHAT_MODEL '{v}' is not a supported model")
        return v

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key)


def get_agent_config() -> AgentConfig:
    """Create agent configuration from environment.

    Returns:
        Configured AgentConfig instance.

    Raises:
        ValueError: If CHAT_MODEL or CHAT_TEMPERATURE is invalid.
    """
    return AgentConfig()
