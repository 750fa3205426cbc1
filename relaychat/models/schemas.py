from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

RELAY_ERROR_MESSAGE = "Failed to retrieve a response from the LLM. Please try again later."

# Appended to an already committed plain-text stream when the provider fails.
STREAM_ERROR_SENTINEL = "\n[ERROR]: Something went wrong. Please try again later."


class Sender(str, Enum):
    """Author of a chat message."""

    USER = "user"
    BOT = "bot"


class Message(BaseModel):
    """A single entry in the conversation log.

    Attributes:
        sender: Who wrote the message.
        text: The message text. Grows while a bot reply streams.
    """

    model_config = ConfigDict(frozen=True)

    sender: Sender
    text: str


class ChatRequest(BaseModel):
    """Request payload for the chat relay endpoint.

    The message is forwarded as-is; a missing message is relayed as an
    empty string.

    Attributes:
        message: The user's latest message.
    """

    message: str = Field(default="", description="The user's message")


class ErrorResponse(BaseModel):
    """JSON body returned when the relay fails before streaming starts."""

    error: str
