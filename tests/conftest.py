"""Pytest fixtures and shared test configuration.

Fixtures:
    - memory_store: Plain dict standing in for the browser key-value store
    - async_client: HTTPX client for API testing
    - fake_relay_service: Patches the relay service with scripted fragments
"""

from collections.abc import AsyncGenerator, Callable, Iterator
from unittest.mock import patch

import pytest
from httpx import ASGITransport, AsyncClient

from relaychat.api import app


class ScriptedRelayService:
    """Relay service double yielding fixed fragments, optionally failing.

    Attributes:
        fragments: Fragments to yield in order.
        fail_after: Raise after this many fragments (None = never).
        messages: Messages received, in call order.
    """

    def __init__(self, fragments: list[str], fail_after: int | None = None) -> None:
        self.fragments = fragments
        self.fail_after = fail_after
        self.messages: list[str] = []

    async def stream_reply(self, message: str) -> AsyncGenerator[str]:
        self.messages.append(message)
        for i, fragment in enumerate(self.fragments):
            if self.fail_after is not None and i >= self.fail_after:
                raise RuntimeError("provider exploded")
            yield fragment
        if self.fail_after is not None and self.fail_after >= len(self.fragments):
            raise RuntimeError("provider exploded")


@pytest.fixture
def memory_store() -> dict:
    """Return an empty in-memory key-value store."""
    return {}


@pytest.fixture
async def async_client() -> AsyncGenerator[AsyncClient]:
    """Create async HTTP client for API testing.

    Yields:
        Configured AsyncClient for making test requests.
    """
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
def fake_relay_service() -> Iterator[Callable[..., ScriptedRelayService]]:
    """Patch the endpoint's relay service with a scripted double.

    Yields:
        Factory taking the fragments (and ``fail_after``) to script.
    """
    patchers = []

    def install(fragments: list[str], fail_after: int | None = None) -> ScriptedRelayService:
        service = ScriptedRelayService(fragments, fail_after)
        patcher = patch("relaychat.api.chat.get_relay_service", return_value=service)
        patcher.start()
        patchers.append(patcher)
        return service

    yield install

    for patcher in patchers:
        patcher.stop()
