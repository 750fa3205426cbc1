"""FastAPI endpoints for the chat relay.

Endpoints:
    - GET /health: Service health status
    - POST /api/chat: Streamed plain-text reply for one user message
"""

from relaychat.api.app import app, create_app

__all__ = ["app", "create_app"]
