"""Pydantic models for transcript entries and API payloads.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Immutable transcript entry (user or bot)
    - ModelOption: Selectable Gemini model with its temperature ceiling
    - ChatRequest: Incoming prompt with model and temperature
    - ChatResponse: Generated answer with the parameters used
"""

from src.models.schemas import (
    ChatRequest,
    ChatResponse,
    Message,
    ModelOption,
    Sender,
    current_timestamp,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "Message",
    "ModelOption",
    "Sender",
    "current_timestamp",
]
