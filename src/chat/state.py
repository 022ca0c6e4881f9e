"""Per-page chat state: prompt, transcript, model, temperature and last error."""

import logging

from src.chat.catalog import (
    DEFAULT_MODEL,
    DEFAULT_TEMPERATURE,
    clamp_temperature,
    get_model_option,
    max_temperature_for,
)
from src.models.schemas import Message, Sender

logger = logging.getLogger(__name__)

GENERIC_ERROR_MESSAGE = "Failed to fetch data from the API. Please try again later."


class ChatState:
    """Manages chat state for one page visit.

    The transcript is append-only. Temperature always stays within
    ``[0, max_temperature_for(model_id)]``.
    """

    def __init__(
        self,
        model_id: str = DEFAULT_MODEL,
        temperature: float = DEFAULT_TEMPERATURE,
    ) -> None:
        get_model_option(model_id)
        self.prompt: str = ""
        self.messages: list[Message] = []
        self.model_id: str = model_id
        self.temperature: float = clamp_temperature(temperature, model_id)
        self.error: str | None = None
        self.pending: int = 0

    @property
    def max_temperature(self) -> float:
        return max_temperature_for(self.model_id)

    @property
    def show_welcome(self) -> bool:
        """True when the transcript pane should show the welcome text."""
        return not self.messages and not self.error

    @property
    def welcome_title(self) -> str:
        return f"Welcome to the {self.model_id} Chat!"

    def set_temperature(self, value: float | str | None) -> float:
        """Store a user-typed temperature, clamped to the current model.

        Empty or non-numeric input leaves the stored value unchanged.

        Returns:
            The stored temperature.
        """
        if value is None or value == "":
            return self.temperature
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.debug(f"Ignoring non-numeric temperature input: {value!r}")
            return self.temperature
        self.temperature = clamp_temperature(number, self.model_id)
        return self.temperature

    def set_model(self, model_id: str) -> None:
        """Select a model and re-clamp the temperature to its maximum.

        Raises:
            ValueError: If the model is not supported.
        """
        get_model_option(model_id)
        self.model_id = model_id
        self.temperature = clamp_temperature(self.temperature, model_id)

    def add_message(self, sender: Sender, text: str) -> Message:
        message = Message(sender=sender, text=text)
        self.messages.append(message)
        return message
