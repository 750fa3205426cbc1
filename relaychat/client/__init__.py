"""Chat client logic, independent of the UI toolkit.

Responsibilities:
    - Conversation log with persistence to a key-value store
    - Reducer merging the streamed bot reply into the last message
    - Streaming HTTP client for the relay endpoint
    - Send/receive state machine with a single-flight guard
"""

from relaychat.client.conversation import STORAGE_KEY, ConversationLog, merge_bot_reply
from relaychat.client.relay_client import RelayClient, RelayRequestError
from relaychat.client.session import SEND_ERROR_MESSAGE, ChatSession, ChatStatus

__all__ = [
    "SEND_ERROR_MESSAGE",
    "STORAGE_KEY",
    "ChatSession",
    "ChatStatus",
    "ConversationLog",
    "RelayClient",
    "RelayRequestError",
    "merge_bot_reply",
]
