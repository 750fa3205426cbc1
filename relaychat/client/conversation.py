"""Conversation log with an explicit merge reducer and store persistence."""

import logging
from collections.abc import MutableMapping
from typing import Any

from pydantic import TypeAdapter, ValidationError

from relaychat.models.schemas import Message, Sender

logger = logging.getLogger(__name__)

STORAGE_KEY = "chat_messages"

_messages_adapter = TypeAdapter(list[Message])


def merge_bot_reply(
    messages: tuple[Message, ...],
    reply_text: str,
) -> tuple[Message, ...]:
    """Merge the cumulative bot reply into a log snapshot.

    If the last message is a bot message its text is replaced with
    ``reply_text``; otherwise a new bot message is appended.

    Args:
        messages: Current log snapshot.
        reply_text: All reply text decoded so far for this turn.

    Returns:
        A new snapshot. The input is never modified.
    """
    if messages and messages[-1].sender == Sender.BOT:
        return (*messages[:-1], messages[-1].model_copy(update={"text": reply_text}))
    return (*messages, Message(sender=Sender.BOT, text=reply_text))


class ConversationLog:
    """Ordered message log persisted to a key-value store.

    The whole log is written back under ``STORAGE_KEY`` as a JSON array
    after every mutation.
    """

    def __init__(
        self,
        store: MutableMapping[str, Any],
        messages: tuple[Message, ...] = (),
    ) -> None:
        self._store = store
        self._messages = messages

    @classmethod
    def restore(cls, store: MutableMapping[str, Any]) -> "ConversationLog":
        """Load the log saved in ``store``, or start empty.

        Args:
            store: Key-value store holding the serialized log.

        Returns:
            ConversationLog bound to ``store``.
        """
        saved = store.get(STORAGE_KEY)
        if not saved or saved == "[]":
            return cls(store)

        try:
            messages = tuple(_messages_adapter.validate_json(saved))
        except ValidationError as e:
            logger.warning(f"Discarding unreadable saved conversation: {e}")
            return cls(store)

        logger.debug(f"Restored {len(messages)} messages")
        return cls(store, messages)

    @property
    def messages(self) -> tuple[Message, ...]:
        return self._messages

    def __len__(self) -> int:
        return len(self._messages)

    def append(self, message: Message) -> None:
        self._replace((*self._messages, message))

    def merge_bot_reply(self, reply_text: str) -> None:
        self._replace(merge_bot_reply(self._messages, reply_text))

    def clear(self) -> None:
        self._replace(())

    def _replace(self, messages: tuple[Message, ...]) -> None:
        self._messages = messages
        self.persist()

    def persist(self) -> None:
        """Overwrite the stored log with the current snapshot."""
        self._store[STORAGE_KEY] = _messages_adapter.dump_json(list(self._messages)).decode()
