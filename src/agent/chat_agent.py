"""Agno-backed Gemini generation service.

Core module for turning a prompt into a single complete response.

Design notes:

1. **Stateless calls** - The chat page keeps its own transcript, so each request
   sends only the current prompt. No Agno storage is attached and the agent
   never sees earlier turns.

2. **Agent per request** - Model identifier and temperature are chosen per send
   action, so a lightweight Agent is built for every call instead of mutating a
   shared one while another request may still be in flight.

3. **Singleton service** - Configuration is read once; the UI and the JSON API
   share the same service instance.

4. **Errors propagate** - The service raises; the caller (dispatcher or route)
   decides how failures are shown.
"""

import logging

from agno.agent import Agent
from agno.models.google import Gemini

from src.agent.config import AgentConfig, get_agent_config

logger = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when the Gemini API returns no usable text."""

    pass


class MissingCredentialsError(GenerationError):
    """Raised when no API key is configured."""

    pass


class AgentService:
    """Service wrapping Agno's Agent around the Gemini model.

    Provides:
    - One non-streaming generation per call
    - Per-call model identifier and temperature
    - Credential check before any network traffic
    - Uniform GenerationError for empty or failed runs
    """

    def __init__(self, config: AgentConfig | None = None) -> None:
        """Initialize the agent service.

        Args:
            config: Optional agent configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_agent_config()
        if not self._config.has_api_key:
            logger.warning(
                "No GOOGLE_API_KEY configured; chat requests will fail until one is set"
            )

    @property
    def config(self) -> AgentConfig:
        return self._config

    def _create_agent(self, model_id: str, temperature: float) -> Agent:
        """Create an Agno agent for a single request.

        Args:
            model_id: Gemini model identifier.
            temperature: Sampling temperature, already clamped by the caller.

        Returns:
            Agent configured with a Gemini model and markdown output.
        """
        model = Gemini(
            id=model_id,
            api_key=self._config.api_key,
            temperature=temperature,
        )
        return Agent(model=model, markdown=True)

    async def generate(self, prompt: str, model_id: str, temperature: float) -> str:
        """Generate a complete response for a prompt.

        Args:
            prompt: The user's prompt.
            model_id: Gemini model identifier.
            temperature: Sampling temperature.

        Returns:
            The response text.

        Raises:
            MissingCredentialsError: If no API key is configured.
            GenerationError: If the run failed or produced no text.
        """
        if not self._config.has_api_key:
            raise MissingCredentialsError(
                "API key required. Set GOOGLE_API_KEY or GEMINI_API_KEY in .env"
            )

        agent = self._create_agent(model_id, temperature)
        response = await agent.arun(prompt)

        status = getattr(response, "status", None)
        if str(getattr(status, "value", status)).lower() == "error":
            raise GenerationError(f"Gemini run failed: {response.content}")

        text = response.content if isinstance(response.content, str) else ""
        if not text.strip():
            raise GenerationError(f"Empty response from {model_id}")

        logger.info(f"Generated {len(text)} characters with {model_id} (t={temperature})")
        return text


# Module-level singleton instance
_agent_service: AgentService | None = None


def get_agent_service() -> AgentService:
    """Get or create the global agent service.

    Returns:
        The AgentService instance.
    """
    global _agent_service
    if _agent_service is None:
        _agent_service = AgentService()
    return _agent_service
