"""Request dispatch: one generation call per send action.

The user message is appended before the call. On success a bot message is
appended and the error is cleared; on any failure the error banner is set and
the transcript is left as it is. Overlapping sends are not sequenced, so bot
messages land in the order their calls resolve.
"""

import logging
from collections.abc import Awaitable, Callable

from src.chat.state import GENERIC_ERROR_MESSAGE, ChatState
from src.models.schemas import Message, Sender

logger = logging.getLogger(__name__)

Generate = Callable[[str, str, float], Awaitable[str]]


class RequestDispatcher:
    """Sends prompts through a generate callable and records the outcome."""

    def __init__(self, generate: Generate) -> None:
        """Initialize the dispatcher.

        Args:
            generate: Coroutine function taking (prompt, model_id, temperature)
                and returning the complete response text.
        """
        self._generate = generate

    async def send(
        self,
        state: ChatState,
        on_update: Callable[[], None] | None = None,
    ) -> Message | None:
        """Submit the current prompt.

        Blank prompts are ignored. Model and temperature are read now, so
        changing the controls while a request is in flight does not affect it.

        Args:
            state: The chat state to read from and append to.
            on_update: Called after the user message is appended and again
                once the call has resolved.

        Returns:
            The bot message, or None if nothing was sent or the call failed.
        """
        prompt = state.prompt.strip()
        if not prompt:
            return None

        model_id, temperature = state.model_id, state.temperature
        state.add_message(Sender.USER, prompt)
        state.prompt = ""
        # Counted as in flight before the first refresh so the indicator shows
        state.pending += 1
        try:
            if on_update:
                on_update()
            message = await self.dispatch(state, prompt, model_id, temperature)
        finally:
            state.pending -= 1

        if on_update:
            on_update()
        return message

    async def dispatch(
        self,
        state: ChatState,
        prompt: str,
        model_id: str,
        temperature: float,
    ) -> Message | None:
        """Perform one generation call and record its result on the state."""
        try:
            text = await self._generate(prompt, model_id, temperature)
        except Exception:
            logger.exception(f"Error fetching data from {model_id}")
            state.error = GENERIC_ERROR_MESSAGE
            return None

        message = state.add_message(Sender.BOT, text)
        state.error = None
        return message
