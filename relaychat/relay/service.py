"""Agno-backed completion relay with streaming support.

Forwards a single user message to the LLM provider and yields reply
fragments in arrival order.

Notes on the Agno setup:

1. **No storage** - the Agent is built without a db, so no history is kept
   and every call sees only the system instruction and the one user message.

2. **One Agent per call** - a fresh Agent is created for each relayed message
   so concurrent requests never share run state. The model client is built
   once and reused.

3. **No retries** - ``max_retries=0`` on the model client; a provider failure
   ends the turn and the caller decides what to report.

4. **Event filtering** - Agno emits content, lifecycle and error events on the
   same stream. Only content events become fragments; an error event is
   raised as ``RelayError``.
"""

import logging
from collections.abc import AsyncGenerator

from agno.agent import Agent
from agno.models.openai import OpenAIChat

from relaychat.relay.config import RelayConfig, get_relay_config

logger = logging.getLogger(__name__)

_CONTENT_EVENT = "RunContent"
_ERROR_EVENT = "RunError"


class RelayError(Exception):
    """Raised when the LLM provider reports a failure on the stream."""

    pass


class RelayService:
    """Stateless relay between the HTTP endpoint and the LLM provider."""

    def __init__(self, config: RelayConfig | None = None) -> None:
        """Initialize the relay service.

        Args:
            config: Optional relay configuration.
                    Loads from environment if not provided.
        """
        self._config = config or get_relay_config()
        self._model = self._create_model()

    def _create_model(self) -> OpenAIChat:
        return OpenAIChat(
            id=self._config.model_name,
            api_key=self._config.api_key,
            base_url=self._config.base_url,
            temperature=self._config.temperature,
            max_tokens=self._config.max_tokens,
            max_retries=0,
        )

    def _create_agent(self) -> Agent:
        """Create a single-use Agent for one relayed message.

        Returns:
            Agent with the fixed system instruction and no history.
        """
        return Agent(
            model=self._model,
            system_message=self._config.system_prompt,
            add_history_to_context=False,
            markdown=False,
        )

    async def stream_reply(self, message: str) -> AsyncGenerator[str]:
        """Stream reply fragments for a single user message.

        Args:
            message: The user's message, forwarded unchanged.

        Yields:
            Reply text fragments as they arrive.

        Raises:
            RelayError: If the provider reports an error event.
        """
        logger.info(f"Relaying message ({len(message)} chars) to {self._config.model_name}")
        agent = self._create_agent()

        async for event in agent.arun(message, stream=True):
            kind = getattr(event, "event", None)
            if kind == _ERROR_EVENT:
                raise RelayError(getattr(event, "content", None) or "Provider stream failed")
            if kind == _CONTENT_EVENT and event.content:
                yield event.content


# Module-level singleton instance
_relay_service: RelayService | None = None


def get_relay_service() -> RelayService:
    """Get or create the global relay service.

    Returns:
        The RelayService instance.

    Raises:
        ValueError: If the configuration is invalid (e.g. no API key).
    """
    global _relay_service
    if _relay_service is None:
        _relay_service = RelayService()
    return _relay_service
