"""FastAPI application factory and configuration.

Main application entry point with lifespan management, middleware,
and router registration. The NiceGUI chat page is mounted onto this app.
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.agent.chat_agent import get_agent_service
from src.api.routes import router as chat_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Build the Gemini service before the first page load.

    Invalid CHAT_MODEL or CHAT_TEMPERATURE values fail here instead of on the
    first visit to the chat page.
    """
    config = get_agent_service().config
    logger.info(
        f"Gemini Chat ready: model={config.default_model} "
        f"temperature={config.default_temperature} api_key_set={config.has_api_key}"
    )
    yield
    logger.info("Gemini Chat stopped")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="Gemini Chat API",
        description=(
            "Chat interface for Google's Gemini models. Sends one prompt per "
            "request with a selectable model and temperature and returns the "
            "complete markdown response."
        ),
        version="0.1.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        """Check service health status."""
        return {"status": "healthy", "service": "gemini-chat"}

    return application


app = create_app()
