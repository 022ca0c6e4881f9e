"""FastAPI application hosting the chat page and JSON endpoints.

Endpoints:
    - GET /health: Service health status
    - GET /chat/models: Selectable models and temperature ceilings
    - POST /chat: One complete generation for a prompt
"""

from src.api.app import app, create_app

__all__ = ["app", "create_app"]
