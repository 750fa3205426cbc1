"""LLM relay logic.

Opens a streaming completion for one user message and hands back the reply
fragments. Keeps no conversation state between calls.
"""

from relaychat.relay.config import RelayConfig, get_relay_config
from relaychat.relay.service import RelayError, RelayService, get_relay_service

__all__ = [
    "RelayConfig",
    "RelayError",
    "RelayService",
    "get_relay_config",
    "get_relay_service",
]
