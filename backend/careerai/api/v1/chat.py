"""Mentor chat API router.

This module provides:
- GET /messages: The mentor chat log
- POST /messages: Send a message; the reply is streamed back as SSE

Event Types:
- chat_token: One reply fragment, in arrival order
- chat_done: Final model message text (the apology when the turn failed)
"""

from collections.abc import AsyncIterator

from fastapi import APIRouter, Request
from fastapi.responses import StreamingResponse

from careerai.api.deps import Shell, screen_errors
from careerai.controllers.mentor_chat import MentorChatController
from careerai.core.config import settings
from careerai.core.errors import ConflictError
from careerai.core.rate_limiting import limiter
from careerai.core.responses import DataResponse
from careerai.schemas.chat import (
    ChatDoneEvent,
    ChatMessageRequest,
    ChatRole,
    ChatTokenEvent,
)
from careerai.schemas.views import ChatLogView

router = APIRouter()


async def event_generator(
    controller: MentorChatController, content: str
) -> AsyncIterator[str]:
    """Stream one mentor turn as SSE events.

    Args:
        controller: Mounted mentor chat controller.
        content: User message (already stripped and non-empty).

    Yields:
        SSE-formatted chat_token events, then a single chat_done event.
    """
    async for fragment in controller.stream_reply(content):
        yield ChatTokenEvent(text=fragment).to_sse()

    last = controller.last_message
    text = last.text if last is not None and last.role is ChatRole.MODEL else ""
    yield ChatDoneEvent(text=text, error=controller.last_turn_failed).to_sse()


@router.get("/messages")
async def get_chat_messages(shell: Shell) -> DataResponse[ChatLogView]:
    with screen_errors():
        controller = shell.require(MentorChatController)
    return DataResponse(
        data=ChatLogView(
            messages=list(controller.messages), is_loading=controller.is_loading
        )
    )


@router.post("/messages")
@limiter.limit(settings.rate_limit_llm)
async def send_chat_message(
    request: Request,  # noqa: ARG001
    body: ChatMessageRequest,
    shell: Shell,
) -> StreamingResponse:
    """Send a message to the mentor and stream the reply.

    Security: Rate limited to prevent LLM cost abuse.

    Raises:
        InvalidStateError: If the mentor chat screen is not active.
        ConflictError: If the previous reply is still streaming.

    Returns:
        StreamingResponse with text/event-stream content type.
    """
    with screen_errors():
        controller = shell.require(MentorChatController)
    if controller.is_loading:
        raise ConflictError(
            code="REQUEST_IN_PROGRESS", message="A reply is still streaming"
        )

    return StreamingResponse(
        event_generator(controller, body.content),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
        },
    )
