"""NiceGUI chat page streaming replies from the relay."""

import os
from datetime import date

from nicegui import app, ui

from relaychat.client.conversation import ConversationLog
from relaychat.client.relay_client import RelayClient
from relaychat.client.session import ChatSession
from relaychat.models.schemas import Message, Sender

CUSTOM_CSS = """
<style>
    body { background: #ffffff; }

    .message-card {
        border: 1px solid #e5e7eb;
        border-radius: 8px;
        box-shadow: 0 1px 2px rgba(0, 0, 0, 0.05);
    }

    .message-text { white-space: pre-wrap; }

    .chat-btn { background: #3b82f6 !important; }
</style>
"""

SENDER_LABELS = {
    Sender.BOT: "Large Language Model",
    Sender.USER: "You",
}


@ui.page("/")
def chat_page() -> None:
    """Main chat page."""
    ui.add_head_html(CUSTOM_CSS)

    messages_container: ui.column

    def render_message(msg: Message) -> None:
        with ui.column().classes("w-full message-card px-4 py-2 gap-1"):
            ui.label(SENDER_LABELS[msg.sender]).classes("font-semibold text-gray-800 text-sm")
            ui.label(msg.text).classes("message-text text-sm text-gray-600")

    def refresh_messages() -> None:
        messages_container.clear()
        with messages_container:
            for msg in session.log.messages:
                render_message(msg)

    # One session per browser; the log lives in NiceGUI's per-user storage.
    session = ChatSession(
        log=ConversationLog.restore(app.storage.user),
        relay=RelayClient(),
        on_change=refresh_messages,
    )

    async def send_message() -> None:
        await session.send(session.draft)

    # === UI Layout ===
    with ui.column().classes("w-full max-w-3xl mx-auto h-screen px-10 pt-10 pb-6"):
        ui.label("This is the beginning of your chat history with the LLM").classes(
            "w-full text-center text-gray-500 font-semibold"
        )
        ui.label(date.today().strftime("%m/%d/%Y")).classes(
            "w-full text-center font-medium text-sm text-gray-400 pb-2"
        )

        with ui.scroll_area().classes("flex-grow w-full"):
            messages_container = ui.column().classes("w-full py-6 px-4 gap-4")
            refresh_messages()

        with ui.column().classes("w-full px-4 pt-2 gap-1"):
            (
                ui.label()
                .classes("w-full text-red-500 text-xs text-center font-medium")
                .bind_text_from(session, "error", lambda e: e or "")
                .bind_visibility_from(session, "error", backward=bool)
            )

            with ui.column().classes("w-full message-card gap-0"):
                (
                    ui.input(placeholder="Type your message...")
                    .props("borderless dense")
                    .classes("w-full px-3")
                    .bind_value(session, "draft")
                    .bind_enabled_from(session, "input_enabled")
                    .on("keydown.enter", send_message)
                )
                with ui.row().classes("w-full justify-between items-center px-3 pt-1 pb-2"):
                    ui.button("New Chat", icon="add", on_click=session.new_chat).props(
                        "rounded unelevated no-caps"
                    ).classes("chat-btn text-white")
                    with (
                        ui.button(on_click=send_message)
                        .props("rounded unelevated no-caps")
                        .classes("chat-btn text-white")
                        .bind_enabled_from(session, "input_enabled")
                    ):
                        ui.spinner(size="sm", color="white").bind_visibility_from(
                            session, "is_busy"
                        )
                        ui.label().bind_text_from(
                            session, "is_busy", lambda busy: "Sending" if busy else "Send"
                        )


def main() -> None:
    ui.run(
        title="LLM Chat",
        port=8080,
        reload=False,
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", "llm-chat-secret"),
    )


if __name__ == "__main__":
    main()
