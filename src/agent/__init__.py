"""Agno agent logic for Gemini generation.

Turns a prompt, model identifier and temperature into one complete response.

Responsibilities:
    - Configuration loading (API key, default model and temperature)
    - Per-request Agno agent creation with the Gemini model
    - Credential and empty-response checks

Maintains clean separation from the UI and HTTP layers.
"""

from src.agent.chat_agent import (
    AgentService,
    GenerationError,
    MissingCredentialsError,
    get_agent_service,
)
from src.agent.config import AgentConfig, get_agent_config

__all__ = [
    "AgentConfig",
    "AgentService",
    "GenerationError",
    "MissingCredentialsError",
    "get_agent_config",
    "get_agent_service",
]
