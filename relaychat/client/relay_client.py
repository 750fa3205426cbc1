"""HTTP client for the chat relay endpoint."""

import logging
import os
from collections.abc import AsyncGenerator

import httpx

logger = logging.getLogger(__name__)

CHAT_PATH = "/api/chat"

_WILDCARD_HOSTS = {"", "0.0.0.0", "::"}


def default_base_url() -> str:
    """Resolve the relay URL the chat page should call.

    ``API_BASE_URL`` wins when set; otherwise the relay is assumed to run
    on this machine at ``HOST``/``PORT``.
    """
    if url := os.getenv("API_BASE_URL"):
        return url
    host = os.getenv("HOST", "localhost")
    if host in _WILDCARD_HOSTS:
        host = "localhost"
    return f"http://{host}:{os.getenv('PORT', '8000')}"


class RelayRequestError(Exception):
    """Raised when the relay answers with a non-OK status.

    Attributes:
        status_code: HTTP status returned by the relay.
        detail: The relay's ``error`` text, if the body carried one.
    """

    def __init__(self, status_code: int, detail: str | None = None) -> None:
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"HTTP {status_code}: {detail or 'no detail'}")


class RelayClient:
    """Posts a message to the relay and yields the decoded reply text."""

    def __init__(
        self,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize the relay client.

        Args:
            base_url: Relay base URL (default_base_url() if not given).
            transport: Optional httpx transport (used by tests).
        """
        self._base_url = base_url or default_base_url()
        self._transport = transport

    async def stream_reply(self, message: str) -> AsyncGenerator[str]:
        """Send one message and stream back the reply text.

        Bytes are decoded incrementally as UTF-8, so a multi-byte character
        split across chunks is yielded whole once its last byte arrives.

        Args:
            message: The user's message.

        Yields:
            Decoded text fragments in arrival order.

        Raises:
            RelayRequestError: If the relay answers with a non-OK status.
            httpx.HTTPError: On transport failures.
        """
        # No timeout: the reply is streamed for as long as the relay keeps
        # the connection open.
        async with httpx.AsyncClient(
            base_url=self._base_url,
            timeout=None,
            transport=self._transport,
            default_encoding="utf-8",
        ) as client:
            async with client.stream(
                "POST",
                CHAT_PATH,
                json={"message": message},
            ) as response:
                if response.is_error:
                    await response.aread()
                    detail = _error_detail(response)
                    logger.warning(f"Relay answered {response.status_code}: {detail}")
                    raise RelayRequestError(response.status_code, detail)

                async for text in response.aiter_text():
                    yield text


def _error_detail(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return response.text or None
    if isinstance(body, dict):
        return body.get("error")
    return None
