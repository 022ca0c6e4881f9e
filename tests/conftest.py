"""Pytest fixtures and shared test configuration.

Fixtures:
    - agent_config: AgentConfig with a dummy API key
    - chat_state: Fresh ChatState on the default model
    - async_client: HTTPX client for API testing
    - reset_agent_service: Clears the agent service singleton around each test
"""

from collections.abc import AsyncGenerator, Iterator

import pytest
from httpx import ASGITransport, AsyncClient

import src.agent.chat_agent as chat_agent_module
from src.agent.config import AgentConfig
from src.api import app
from src.chat.state import ChatState


@pytest.fixture(autouse=True)
def reset_agent_service() -> Iterator[None]:
    """Ensure no test leaks a cached AgentService into another."""
    chat_agent_module._agent_service = None
    yield
    chat_agent_module._agent_service = None


@pytest.fixture
def agent_config() -> AgentConfig:
    """Return a config that never depends on the host environment."""
    return AgentConfig(
        api_key="test-google-key",
        default_model="gemini-1.5-pro",
        default_temperature=0.7,
    )


@pytest.fixture
def chat_state() -> ChatState:
    """Return a chat state on gemini-1.5-pro at temperature 0.7."""
    return ChatState(model_id="gemini-1.5-pro", temperature=0.7)


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
