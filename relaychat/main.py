"""Start the chat relay and the chat page.

RUN_MODE=integrated (default) serves both from one uvicorn server on
HOST/PORT. RUN_MODE=separate runs the relay on HOST/PORT and the NiceGUI
page on 8080 in a child process; the page finds the relay through
API_BASE_URL or, when unset, the same HOST/PORT.
"""

import logging
import os
import subprocess
import sys

from dotenv import load_dotenv

# Load environment variables before any other imports that might need them
load_dotenv()

logger = logging.getLogger(__name__)

STORAGE_SECRET_DEFAULT = "llm-chat-secret"


def configure_logging() -> None:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )


def _serve_relay(app) -> None:
    import uvicorn

    uvicorn.run(
        app,
        host=os.getenv("HOST", "0.0.0.0"),
        port=int(os.getenv("PORT", "8000")),
        log_level=os.getenv("LOG_LEVEL", "info").lower(),
    )


def run_integrated() -> None:
    """Mount the chat page on the relay app and serve both."""
    from nicegui import ui

    from relaychat.api.app import create_app
    from relaychat.client.relay_client import default_base_url
    from relaychat.ui.chat_page import chat_page  # noqa: F401 - Registers the page

    app = create_app()
    ui.run_with(
        app,
        title="LLM Chat",
        storage_secret=os.getenv("NICEGUI_STORAGE_SECRET", STORAGE_SECRET_DEFAULT),
    )

    logger.info(f"Chat page will call the relay at {default_base_url()}")
    _serve_relay(app)


def run_separate() -> None:
    """Serve the relay here and the chat page from a child process."""
    from relaychat.api.app import app

    page_proc = subprocess.Popen(
        [sys.executable, "-c", "from relaychat.ui.chat_page import main; main()"]
    )
    logger.info(f"Chat page starting on http://localhost:8080 (pid {page_proc.pid})")

    try:
        _serve_relay(app)
    finally:
        page_proc.terminate()
        page_proc.wait()


def main() -> None:
    """Console entry point; RUN_MODE selects integrated or separate."""
    configure_logging()
    mode = os.getenv("RUN_MODE", "integrated").lower()
    logger.info(f"Starting LLM chat in {mode} mode")

    if mode == "separate":
        run_separate()
    else:
        run_integrated()


if __name__ == "__main__":
    main()
