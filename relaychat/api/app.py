"""FastAPI application for the chat relay."""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from relaychat import __version__
from relaychat.api.chat import router as chat_router
from relaychat.relay.config import check_relay_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None]:
    """Validate the relay configuration once the server starts.

    A missing API key does not stop startup; it is reported here and every
    chat request answers with the 500 error payload until it is fixed.
    """
    app.state.relay_configured = check_relay_config()
    yield
    logger.info("Relay stopped")


def create_app() -> FastAPI:
    """Build the relay app: /api/chat, /health and permissive CORS.

    Returns:
        Configured FastAPI application instance.
    """
    application = FastAPI(
        title="LLM Chat Relay",
        description="Relays one user message to an LLM and streams the reply as plain text.",
        version=__version__,
        lifespan=lifespan,
    )

    # The chat page may be served from another origin in separate mode.
    application.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    application.include_router(chat_router)

    @application.get("/health")
    async def health_check() -> dict[str, str]:
        return {"status": "healthy", "service": "llm-chat-relay"}

    return application


app = create_app()
