"""Chat state and request dispatch, independent of the UI toolkit."""

from src.chat.catalog import (
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    SUPPORTED_MODELS,
    clamp_temperature,
    get_model_option,
    max_temperature_for,
)
from src.chat.dispatcher import RequestDispatcher
from src.chat.state import GENERIC_ERROR_MESSAGE, ChatState

__all__ = [
    "DEFAULT_MODEL",
    "DEFAULT_TEMPERATURE",
    "GENERIC_ERROR_MESSAGE",
    "SUPPORTED_MODELS",
    "ChatState",
    "RequestDispatcher",
    "clamp_temperature",
    "get_model_option",
    "max_temperature_for",
]
