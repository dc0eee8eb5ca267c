"""Chat schemas: message log entries, request bodies and SSE events.

Event Types:
- chat_token: Streaming LLM output fragment
- chat_done: Message complete marker carrying the final text
"""

from enum import Enum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

# =============================================================================
# Message Log
# =============================================================================


class ChatRole(str, Enum):
    """Author of a chat message."""

    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """One entry in a chat log.

    Attributes:
        role: Who wrote the message.
        text: Message text.
    """

    model_config = ConfigDict(frozen=True)

    role: ChatRole
    text: str


# =============================================================================
# Request Schemas
# =============================================================================


class ChatMessageRequest(BaseModel):
    """Request body for sending a chat or interview message.

    Attributes:
        content: The user's message text.
    """

    content: str = Field(..., description="User message content")

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: str) -> str:
        """Strip whitespace from content."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("content")
    @classmethod
    def content_not_empty(cls, v: str) -> str:
        """Validate content is not empty after stripping."""
        if not v:
            msg = "Content cannot be empty"
            raise ValueError(msg)
        return v


# =============================================================================
# SSE Event Schemas
# =============================================================================


class SSEEvent(BaseModel):
    """Base class for all SSE events.

    All events have a type field and can serialize to SSE format.
    """

    type: str

    def to_sse(self) -> str:
        """Serialize event to SSE wire format.

        Returns:
            String in format: "data: {json}\\n\\n"
        """
        return f"data: {self.model_dump_json()}\n\n"


class ChatTokenEvent(SSEEvent):
    """Streaming LLM fragment event; the client appends text to the message.

    Attributes:
        type: Always "chat_token".
        text: The fragment to append.
    """

    type: Literal["chat_token"] = "chat_token"
    text: str = Field(..., description="Fragment to append to message")


class ChatDoneEvent(SSEEvent):
    """Message complete event.

    Attributes:
        type: Always "chat_done".
        text: Final text of the model message.
        error: True when the turn failed and text is the apology message.
    """

    type: Literal["chat_done"] = "chat_done"
    text: str = Field(..., description="Final model message text")
    error: bool = Field(default=False, description="Whether the turn failed")
