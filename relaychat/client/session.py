"""Send/receive state machine for one chat client.

A session moves ``IDLE -> SENDING -> STREAMING* -> IDLE``. A failed turn
ends in ``IDLE`` with ``error`` set; the user's message is kept.
"""

import logging
from collections.abc import AsyncIterator, Callable
from enum import Enum
from typing import Protocol

import httpx

from relaychat.client.conversation import ConversationLog
from relaychat.client.relay_client import RelayRequestError
from relaychat.models.schemas import STREAM_ERROR_SENTINEL, Message, Sender

logger = logging.getLogger(__name__)

SEND_ERROR_MESSAGE = (
    "An error occurred while communicating with the server. Please try again."
)


class ChatStatus(str, Enum):
    """Where the session is in a chat turn."""

    IDLE = "idle"
    SENDING = "sending"
    STREAMING = "streaming"


class ReplySource(Protocol):
    """Anything that streams reply text for a message, e.g. RelayClient."""

    def stream_reply(self, message: str) -> AsyncIterator[str]: ...


class ChatSession:
    """Owns the conversation log and drives one chat turn at a time.

    Attributes:
        log: The conversation log.
        status: Current state of the turn.
        error: User-visible error from the last turn, if it failed.
        draft: Text currently in the input field.
    """

    def __init__(
        self,
        log: ConversationLog,
        relay: ReplySource,
        on_change: Callable[[], None] | None = None,
    ) -> None:
        self.log = log
        self.status = ChatStatus.IDLE
        self.error: str | None = None
        self.draft: str = ""
        self._relay = relay
        self._on_change = on_change

    @property
    def is_busy(self) -> bool:
        return self.status != ChatStatus.IDLE

    @property
    def input_enabled(self) -> bool:
        return not self.is_busy

    def _changed(self) -> None:
        if self._on_change is not None:
            self._on_change()

    async def send(self, text: str) -> bool:
        """Run one chat turn for ``text``.

        Args:
            text: The message to send.

        Returns:
            False if the message was blank or another turn is in flight,
            True once the turn has finished (successfully or not).
        """
        if not text.strip() or self.is_busy:
            return False

        # Set before the first await so overlapping calls see the turn.
        self.status = ChatStatus.SENDING
        self.error = None
        self.log.append(Message(sender=Sender.USER, text=text))
        self._changed()

        reply = ""
        try:
            async for fragment in self._relay.stream_reply(text):
                if not fragment:
                    continue
                reply += fragment
                self.status = ChatStatus.STREAMING
                self.log.merge_bot_reply(reply)
                self._changed()
        except RelayRequestError as e:
            logger.error(f"Relay rejected message: {e}")
            self.error = SEND_ERROR_MESSAGE
        except httpx.HTTPError as e:
            logger.error(f"Error during streaming: {e}")
            self.error = SEND_ERROR_MESSAGE
        else:
            self.log.merge_bot_reply(reply)
            if reply.endswith(STREAM_ERROR_SENTINEL):
                logger.warning("Reply ended with the relay error sentinel")
                self.error = SEND_ERROR_MESSAGE
            else:
                logger.debug(f"Complete bot response: {len(reply)} chars")
        finally:
            self.status = ChatStatus.IDLE
            self.draft = ""
            self._changed()

        return True

    def new_chat(self) -> None:
        """Clear the conversation and persist the empty log."""
        self.log.clear()
        self._changed()
