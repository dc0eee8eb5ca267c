"""Conversational agents.

Modules:
    chat_session: Persona-scoped multi-turn chat sessions (mentor, interviewer)
"""

from careerai.agents.chat_session import (
    ChatSession,
    create_interview_chat,
    create_mentor_chat,
)

__all__ = [
    "ChatSession",
    "create_interview_chat",
    "create_mentor_chat",
]
