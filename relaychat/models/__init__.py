"""Pydantic models for the relay wire format and the client log.

Provides type safety, validation, and automatic OpenAPI documentation.

Models:
    - Message: Individual message in the conversation log
    - ChatRequest: Incoming chat request payload
    - ErrorResponse: Structured pre-stream error payload
"""

from relaychat.models.schemas import (
    RELAY_ERROR_MESSAGE,
    STREAM_ERROR_SENTINEL,
    ChatRequest,
    ErrorResponse,
    Message,
    Sender,
)

__all__ = [
    "RELAY_ERROR_MESSAGE",
    "STREAM_ERROR_SENTINEL",
    "ChatRequest",
    "ErrorResponse",
    "Message",
    "Sender",
]
