"""Chat relay endpoint.

Streams the LLM reply back as a plain-text body. The first fragment is
pulled before the response is committed so that an early failure can still
be reported with a status code and a JSON payload.
"""

import logging
from collections.abc import AsyncGenerator

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response, StreamingResponse

from relaychat.models.schemas import (
    RELAY_ERROR_MESSAGE,
    STREAM_ERROR_SENTINEL,
    ChatRequest,
    ErrorResponse,
)
from relaychat.relay.service import get_relay_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["chat"])


async def _forward_fragments(
    first: str,
    fragments: AsyncGenerator[str],
) -> AsyncGenerator[str]:
    """Forward fragments as they arrive, ending with the sentinel on failure.

    The provider stream is closed when forwarding stops, including when the
    client disconnects mid-reply.

    Args:
        first: The fragment already pulled by the route ("" if none).
        fragments: The remaining provider fragments.

    Yields:
        Raw text fragments for the response body.
    """
    try:
        if first:
            yield first
        async for fragment in fragments:
            yield fragment
    except Exception as e:
        # Status and headers are already sent; only in-band signalling is left.
        logger.error(f"Error streaming response: {e}")
        yield STREAM_ERROR_SENTINEL
    finally:
        await fragments.aclose()


@router.post(
    "/chat",
    response_class=StreamingResponse,
    responses={
        200: {"content": {"text/plain": {}}, "description": "Raw streamed reply"},
        500: {"model": ErrorResponse, "description": "Failure before streaming"},
    },
)
async def relay_chat(request: ChatRequest) -> Response:
    """Relay one user message to the LLM and stream the reply.

    Args:
        request: The chat request carrying the user's message.

    Returns:
        A text/plain streaming response, or a 500 JSON error if the provider
        fails before producing the first fragment.
    """
    try:
        fragments = get_relay_service().stream_reply(request.message)
        first = await anext(fragments, "")
    except Exception as e:
        logger.error(f"Error starting response stream: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content=ErrorResponse(error=RELAY_ERROR_MESSAGE).model_dump(),
        )

    return StreamingResponse(
        _forward_fragments(first, fragments),
        media_type="text/plain",
    )
