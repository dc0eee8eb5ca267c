"""Multi-turn chat sessions with a fixed persona.

A ChatSession keeps the conversation history for one persona and replays
it to the provider on every turn. Two send modes:

- send(): blocking, returns the complete reply
- send_stream(): yields reply fragments in arrival order

A turn is only recorded in the history once it has completed, so a failed
turn leaves the session exactly as it was and the next send works
normally. The session does not serialize concurrent sends; the owning
controller allows one outstanding send at a time.
"""

from collections.abc import AsyncIterator

import structlog

from careerai.prompts.career import (
    MENTOR_SYSTEM_INSTRUCTION,
    build_interviewer_instruction,
)
from careerai.providers.llm.base import LLMMessage, LLMProvider, TaskType

logger = structlog.get_logger()


class ChatSession:
    """Stateful conversation scoped to one persona.

    Attributes:
        provider: LLM provider used for every turn.
        task: Task type for model routing and logging.
    """

    def __init__(
        self,
        provider: LLMProvider,
        system_instruction: str,
        task: TaskType,
    ) -> None:
        self.provider = provider
        self.task = task
        self._system_instruction = system_instruction
        self._history: list[LLMMessage] = []

    @property
    def system_instruction(self) -> str:
        """Persona instruction fixed at creation."""
        return self._system_instruction

    @property
    def history(self) -> list[LLMMessage]:
        """Completed turns, oldest first (copy)."""
        return list(self._history)

    def _build_messages(self, text: str) -> list[LLMMessage]:
        return [
            LLMMessage(role="system", content=self._system_instruction),
            *self._history,
            LLMMessage(role="user", content=text),
        ]

    def _record_turn(self, text: str, reply: str) -> None:
        self._history.append(LLMMessage(role="user", content=text))
        self._history.append(LLMMessage(role="assistant", content=reply))

    async def send(self, text: str) -> str:
        """Send one user utterance and wait for the full reply.

        Args:
            text: User message.

        Returns:
            Complete reply text.

        Raises:
            ProviderError: If the turn fails; history is unchanged.
        """
        response = await self.provider.complete(
            messages=self._build_messages(text),
            task=self.task,
        )
        reply = response.content or ""
        self._record_turn(text, reply)
        return reply

    async def send_stream(self, text: str) -> AsyncIterator[str]:
        """Send one user utterance and stream the reply.

        Args:
            text: User message.

        Yields:
            Reply fragments in arrival order.

        Raises:
            ProviderError: If the turn fails at any point; history is
                unchanged even if some fragments were already yielded.
        """
        fragments: list[str] = []
        async for fragment in self.provider.stream(
            messages=self._build_messages(text),
            task=self.task,
        ):
            fragments.append(fragment)
            yield fragment

        self._record_turn(text, "".join(fragments))
        logger.debug(
            "chat_stream_turn_recorded",
            task=self.task.value,
            fragments=len(fragments),
            turns=len(self._history) // 2,
        )


def create_mentor_chat(provider: LLMProvider) -> ChatSession:
    """Create a session with the career mentor persona."""
    return ChatSession(
        provider=provider,
        system_instruction=MENTOR_SYSTEM_INSTRUCTION,
        task=TaskType.MENTOR_CHAT,
    )


def create_interview_chat(provider: LLMProvider, target_role: str) -> ChatSession:
    """Create a session with the interviewer persona for a target role."""
    return ChatSession(
        provider=provider,
        system_instruction=build_interviewer_instruction(target_role),
        task=TaskType.MOCK_INTERVIEW,
    )
