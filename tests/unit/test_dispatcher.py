"""Unit tests for RequestDispatcher.

A fake generate coroutine stands in for the Gemini call.
"""

import asyncio

import pytest_check as check

from src.chat.dispatcher import RequestDispatcher
from src.chat.state import GENERIC_ERROR_MESSAGE, ChatState
from src.models.schemas import Sender


class RecordingGenerate:
    """Fake generate callable that records calls and returns canned text."""

    def __init__(self, reply: str = "Hi there", error: Exception | None = None) -> None:
        self.reply = reply
        self.error = error
        self.calls: list[tuple[str, str, float]] = []

    async def __call__(self, prompt: str, model_id: str, temperature: float) -> str:
        self.calls.append((prompt, model_id, temperature))
        if self.error:
            raise self.error
        return self.reply


def _transcript(state: ChatState) -> list[tuple[Sender, str]]:
    return [(m.sender, m.text) for m in state.messages]


class TestSendSuccess:
    """Tests for successful sends."""

    async def test_hello_scenario(self, chat_state: ChatState) -> None:
        """'Hello' answered with 'Hi there' yields a two-entry transcript."""
        dispatcher = RequestDispatcher(RecordingGenerate("Hi there"))
        chat_state.prompt = "Hello"

        await dispatcher.send(chat_state)

        check.equal(
            _transcript(chat_state),
            [(Sender.USER, "Hello"), (Sender.BOT, "Hi there")],
        )
        check.is_none(chat_state.error)

    async def test_success_clears_previous_error(self, chat_state: ChatState) -> None:
        chat_state.error = GENERIC_ERROR_MESSAGE
        chat_state.prompt = "retry"

        await RequestDispatcher(RecordingGenerate()).send(chat_state)

        assert chat_state.error is None

    async def test_prompt_is_cleared_and_stripped(self, chat_state: ChatState) -> None:
        generate = RecordingGenerate()
        chat_state.prompt = "  Hello  \n"

        await RequestDispatcher(generate).send(chat_state)

        check.equal(chat_state.prompt, "")
        check.equal(generate.calls[0][0], "Hello")
        check.equal(chat_state.messages[0].text, "Hello")

    async def test_current_model_and_temperature_are_sent(self, chat_state: ChatState) -> None:
        generate = RecordingGenerate()
        chat_state.set_model("gemini-1.5-flash")
        chat_state.set_temperature(0.3)
        chat_state.prompt = "Hello"

        await RequestDispatcher(generate).send(chat_state)

        assert generate.calls == [("Hello", "gemini-1.5-flash", 0.3)]

    async def test_returns_bot_message(self, chat_state: ChatState) -> None:
        chat_state.prompt = "Hello"

        message = await RequestDispatcher(RecordingGenerate("Hi")).send(chat_state)

        assert message is chat_state.messages[-1]
        assert message.sender == Sender.BOT

    async def test_on_update_called_before_and_after(self, chat_state: ChatState) -> None:
        snapshots: list[int] = []
        chat_state.prompt = "Hello"

        await RequestDispatcher(RecordingGenerate()).send(
            chat_state, on_update=lambda: snapshots.append(len(chat_state.messages))
        )

        assert snapshots == [1, 2]

    async def test_request_counted_as_pending_during_first_update(
        self, chat_state: ChatState
    ) -> None:
        """The refresh after the user turn sees the request in flight."""
        pending_seen: list[int] = []
        chat_state.prompt = "Hello"

        await RequestDispatcher(RecordingGenerate()).send(
            chat_state, on_update=lambda: pending_seen.append(chat_state.pending)
        )

        check.equal(pending_seen, [1, 0])
        check.equal(chat_state.pending, 0)

    async def test_pending_released_after_failure(self, chat_state: ChatState) -> None:
        pending_seen: list[int] = []
        chat_state.prompt = "Hello"

        await RequestDispatcher(RecordingGenerate(error=RuntimeError("down"))).send(
            chat_state, on_update=lambda: pending_seen.append(chat_state.pending)
        )

        assert pending_seen == [1, 0]


class TestSendFailure:
    """Tests for failing sends."""

    async def test_failure_keeps_user_message_and_sets_error(
        self, chat_state: ChatState
    ) -> None:
        """A raising generate leaves only the user turn and shows the banner."""
        dispatcher = RequestDispatcher(RecordingGenerate(error=RuntimeError("403")))
        chat_state.prompt = "Hello"

        result = await dispatcher.send(chat_state)

        check.is_none(result)
        check.equal(_transcript(chat_state), [(Sender.USER, "Hello")])
        check.equal(chat_state.error, GENERIC_ERROR_MESSAGE)
        check.equal(chat_state.pending, 0)

    async def test_error_is_replaced_on_next_failure(self, chat_state: ChatState) -> None:
        chat_state.error = "something older"
        chat_state.prompt = "Hello"

        await RequestDispatcher(RecordingGenerate(error=ValueError("bad"))).send(chat_state)

        assert chat_state.error == GENERIC_ERROR_MESSAGE

    async def test_state_usable_after_failure(self, chat_state: ChatState) -> None:
        generate = RecordingGenerate(error=ConnectionError("offline"))
        dispatcher = RequestDispatcher(generate)
        chat_state.prompt = "first"
        await dispatcher.send(chat_state)

        generate.error = None
        chat_state.prompt = "second"
        await dispatcher.send(chat_state)

        check.equal(
            _transcript(chat_state),
            [(Sender.USER, "first"), (Sender.USER, "second"), (Sender.BOT, "Hi there")],
        )
        check.is_none(chat_state.error)


class TestSendEdgeCases:
    """Tests for blank prompts and overlapping sends."""

    async def test_blank_prompt_is_not_sent(self, chat_state: ChatState) -> None:
        generate = RecordingGenerate()
        chat_state.prompt = "   "

        result = await RequestDispatcher(generate).send(chat_state)

        check.is_none(result)
        check.equal(chat_state.messages, [])
        check.equal(generate.calls, [])

    async def test_one_call_per_send(self, chat_state: ChatState) -> None:
        generate = RecordingGenerate()
        dispatcher = RequestDispatcher(generate)

        for prompt in ["a", "b", "c"]:
            chat_state.prompt = prompt
            await dispatcher.send(chat_state)

        assert [call[0] for call in generate.calls] == ["a", "b", "c"]

    async def test_overlapping_sends_append_in_resolution_order(
        self, chat_state: ChatState
    ) -> None:
        """User turns keep send order; bot turns follow whichever call resolves first."""
        release_first = asyncio.Event()

        async def generate(prompt: str, model_id: str, temperature: float) -> str:
            if prompt == "slow":
                await release_first.wait()
            return f"re: {prompt}"

        dispatcher = RequestDispatcher(generate)

        chat_state.prompt = "slow"
        slow = asyncio.create_task(dispatcher.send(chat_state))
        await asyncio.sleep(0)
        check.equal(chat_state.pending, 1)

        chat_state.prompt = "fast"
        await dispatcher.send(chat_state)
        release_first.set()
        await slow

        check.equal(
            _transcript(chat_state),
            [
                (Sender.USER, "slow"),
                (Sender.USER, "fast"),
                (Sender.BOT, "re: fast"),
                (Sender.BOT, "re: slow"),
            ],
        )
        check.equal(chat_state.pending, 0)

    async def test_model_change_does_not_affect_in_flight_request(
        self, chat_state: ChatState
    ) -> None:
        release = asyncio.Event()
        calls: list[tuple[str, str, float]] = []

        async def generate(prompt: str, model_id: str, temperature: float) -> str:
            await release.wait()
            calls.append((prompt, model_id, temperature))
            return "done"

        chat_state.prompt = "Hello"
        chat_state.set_temperature(1.5)

        task = asyncio.create_task(RequestDispatcher(generate).send(chat_state))
        await asyncio.sleep(0)
        chat_state.set_model("gemini-1.5-flash")
        release.set()
        await task

        check.equal(calls, [("Hello", "gemini-1.5-pro", 1.5)])
        check.equal(chat_state.temperature, 1.0)
