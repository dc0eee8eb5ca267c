"""Mentor chat screen: streaming replies accumulated into the message log.

While a reply streams, the log ends with exactly one model message that is
rewritten after every fragment. A failed turn is reported in the log as a
single apology message and the session stays usable.
"""

from collections.abc import AsyncIterator

import structlog

from careerai.agents.chat_session import ChatSession, create_mentor_chat
from careerai.controllers.base import ChatBusyError, ScreenController
from careerai.providers import ProviderError
from careerai.providers.llm.base import LLMProvider
from careerai.schemas.chat import ChatMessage, ChatRole

logger = structlog.get_logger()

CHAT_ERROR_MESSAGE = "Sorry, I encountered an error. Please try again."


class MentorChatController(ScreenController):
    """Open-ended mentor conversation; a fresh session per mount."""

    screen_name = "mentor_chat"

    def __init__(self, provider: LLMProvider) -> None:
        super().__init__()
        self.provider = provider
        self.session: ChatSession | None = None
        self.messages: list[ChatMessage] = []
        self.is_loading = False
        self.last_turn_failed = False

    def mount(self) -> None:
        super().mount()
        self.session = create_mentor_chat(self.provider)

    def unmount(self) -> None:
        super().unmount()
        self.session = None

    async def stream_reply(self, text: str) -> AsyncIterator[str]:
        """Send a message and stream the reply into the log.

        Blank input is ignored (nothing is yielded).

        Args:
            text: User message.

        Yields:
            Reply fragments as they arrive.

        Raises:
            ChatBusyError: If a reply is already streaming.
            ScreenStateError: If the screen is not mounted.
        """
        if not text.strip():
            return
        if self.is_loading:
            raise ChatBusyError("A reply is still streaming")

        token = self._begin()
        session = self.session
        assert session is not None

        self.messages.append(ChatMessage(role=ChatRole.USER, text=text))
        self.messages.append(ChatMessage(role=ChatRole.MODEL, text=""))
        reply_index = len(self.messages) - 1
        self.is_loading = True
        self.last_turn_failed = False
        accumulated = ""
        settled = False

        try:
            async for fragment in session.send_stream(text):
                if not self._is_current(token):
                    self._discard("mentor_chat_stream")
                    return
                accumulated += fragment
                self.messages[reply_index] = ChatMessage(
                    role=ChatRole.MODEL, text=accumulated
                )
                yield fragment
            settled = True
        except ProviderError as e:
            logger.error(
                "mentor_chat_turn_failed",
                error=str(e),
                error_type=type(e).__name__,
                fragments_received=bool(accumulated),
            )
            if self._is_current(token):
                self.last_turn_failed = True
                apology = ChatMessage(role=ChatRole.MODEL, text=CHAT_ERROR_MESSAGE)
                if accumulated:
                    self.messages.append(apology)
                else:
                    self.messages[reply_index] = apology
            settled = True
        finally:
            if self._is_current(token):
                self.is_loading = False
                # Abandoned before any fragment: drop the empty placeholder
                if not settled and not accumulated:
                    del self.messages[reply_index]

    @property
    def last_message(self) -> ChatMessage | None:
        return self.messages[-1] if self.messages else None
