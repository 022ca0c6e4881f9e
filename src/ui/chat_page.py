"""NiceGUI chat interface with model and temperature controls."""

from nicegui import events, ui

from src.agent.chat_agent import get_agent_service
from src.chat.catalog import model_labels
from src.chat.dispatcher import RequestDispatcher
from src.chat.state import ChatState
from src.models.schemas import Message, Sender
from src.ui.formatting import markdown_to_html, plain_text_to_html

CUSTOM_CSS = """
<link href="https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600&display=swap"
      rel="stylesheet">
<style>
    * { font-family: 'Inter', sans-serif; }

    body { background: linear-gradient(90deg, #99f6e4 0%, #14b8a6 100%); min-height: 100vh; }

    .app-container {
        background: white;
        border: 4px solid #60a5fa;
        border-radius: 12px;
        box-shadow: 0 2px 8px rgba(0, 0, 0, 0.1);
    }

    .transcript { border: 2px solid #60a5fa; background: #e5e7eb; }

    .message-user { background: #bfdbfe; border: 2px solid #60a5fa; }
    .message-bot { background: #d1d5db; border: 2px solid #60a5fa; }

    .typing-dot {
        width: 8px; height: 8px;
        background: #60a5fa;
        border-radius: 50%;
        animation: bounce 1.4s infinite ease-in-out;
    }
    .typing-dot:nth-child(2) { animation-delay: 0.2s; }
    .typing-dot:nth-child(3) { animation-delay: 0.4s; }

    @keyframes bounce {
        0%, 60%, 100% { transform: translateY(0); }
        30% { transform: translateY(-6px); }
    }

    /* Markdown styling */
    .message-bot table { border-collapse: collapse; margin: 0.5rem 0; }
    .message-bot th, .message-bot td { border: 1px solid #9ca3af; padding: 0.25rem 0.5rem; }
    .message-bot pre {
        background: #1f2937; color: #f3f4f6;
        border-radius: 8px; padding: 0.75rem; margin: 0.5rem 0; overflow-x: auto;
    }
    .message-bot code { font-family: 'Menlo', 'Monaco', monospace; font-size: 0.8rem; }
    .message-bot ul { list-style: disc inside; margin: 0.5rem 0; }
    .message-bot ol { list-style: decimal inside; margin: 0.5rem 0; }
    .message-bot a { color: #2563eb; text-decoration: underline; }
</style>
"""


def sync_temperature_input(number: ui.number, state: ChatState) -> None:
    """Match the temperature input's ceiling and value to the selected model."""
    # Typed setter; Number.sanitize() compares max against the float value
    number.max = state.max_temperature
    number.value = state.temperature


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)
    service = get_agent_service()
    state = ChatState(
        model_id=service.config.default_model,
        temperature=service.config.default_temperature,
    )
    dispatcher = RequestDispatcher(service.generate)

    messages_container: ui.column
    scroll_area: ui.scroll_area
    temperature_input: ui.number
    input_field: ui.textarea

    def render_message(msg: Message) -> None:
        is_user = msg.sender == Sender.USER
        align = "self-end" if is_user else "self-start"
        bubble = "message-user" if is_user else "message-bot"

        with ui.column().classes(f"max-w-[80%] gap-1 p-2 rounded {bubble} {align}"):
            # Render markdown for the bot, plain text for the user
            if is_user:
                content = plain_text_to_html(msg.text)
            else:
                content = markdown_to_html(msg.text)
            ui.html(content, sanitize=False).classes("text-sm leading-relaxed")
            ui.label(msg.timestamp).classes("text-xs text-gray-600")

    def render_pending_indicator() -> None:
        with ui.row().classes("self-start items-center gap-2 px-2"):
            with ui.row().classes("gap-1"):
                for _ in range(3):
                    ui.element("div").classes("typing-dot")
            ui.label("Waiting for response").classes("text-sm text-gray-500 italic")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            if state.error:
                ui.label(state.error).classes("w-full text-center text-red-500 font-bold mb-4")
            if state.show_welcome:
                with ui.column().classes("w-full items-center gap-1 text-gray-800"):
                    ui.label(state.welcome_title).classes("text-lg font-bold")
                    ui.label("Type a message to start the conversation.")
            else:
                for msg in state.messages:
                    render_message(msg)
            if state.pending:
                render_pending_indicator()
        scroll_area.scroll_to(percent=1.0)

    def on_model_change(e: events.ValueChangeEventArguments) -> None:
        state.set_model(e.value)
        sync_temperature_input(temperature_input, state)
        refresh_messages()

    def on_temperature_change(e: events.ValueChangeEventArguments) -> None:
        stored = state.set_temperature(e.value)
        if e.value is not None and e.value != stored:
            temperature_input.value = stored

    async def send_message() -> None:
        state.prompt = input_field.value or ""
        input_field.value = ""
        await dispatcher.send(state, on_update=refresh_messages)

    # === UI Layout ===
    with (
        ui.element("div").classes("w-full min-h-screen p-4 flex flex-col items-center gap-4"),
        ui.column().classes("w-full max-w-4xl p-4 app-container"),
    ):
        # Header and controls
        with ui.row().classes("w-full items-center justify-between"):
            with ui.row().classes("items-center gap-3"):
                ui.icon("auto_awesome").classes("text-blue-400 text-4xl")
                ui.label().bind_text_from(state, "model_id").classes(
                    "text-3xl font-bold text-blue-400"
                )
            with ui.column().classes("gap-2 w-full md:w-64"):
                ui.select(
                    model_labels(),
                    value=state.model_id,
                    label="Select Model Type",
                    on_change=on_model_change,
                ).classes("w-full")
                temperature_input = ui.number(
                    label="Set Temperature",
                    value=state.temperature,
                    min=0,
                    max=state.max_temperature,
                    step=0.1,
                    format="%.1f",
                    on_change=on_temperature_change,
                ).classes("w-full")

        # Transcript
        with ui.scroll_area().classes("w-full h-96 md:h-[512px] transcript") as scroll_area:
            messages_container = ui.column().classes("w-full gap-2 p-2")
            refresh_messages()

        # Input
        with ui.row().classes("w-full gap-2 items-end no-wrap"):
            input_field = (
                ui.textarea(placeholder="Enter your prompt")
                .props("autogrow outlined dense")
                .classes("flex-grow")
                .on("keydown.enter.prevent", send_message)
            )
            ui.button("Send", on_click=send_message).props("unelevated color=primary")

    with ui.element("div").classes("bg-white text-blue-600 py-2 px-4 rounded-lg mx-auto"):
        ui.label("This site uses the Google Gemini API")
