"""Pydantic domain models and request/response schemas."""

from careerai.schemas.career import CareerSuggestion
from careerai.schemas.chat import (
    ChatDoneEvent,
    ChatMessage,
    ChatMessageRequest,
    ChatRole,
    ChatTokenEvent,
    SSEEvent,
)
from careerai.schemas.profile import DEFAULT_PROFILE, Profile, Skill
from careerai.schemas.roadmap import (
    Milestone,
    MilestoneStatus,
    MilestoneType,
    Roadmap,
)

__all__ = [
    # Career
    "CareerSuggestion",
    # Chat/SSE
    "ChatDoneEvent",
    "ChatMessage",
    "ChatMessageRequest",
    "ChatRole",
    "ChatTokenEvent",
    "SSEEvent",
    # Profile
    "DEFAULT_PROFILE",
    "Profile",
    "Skill",
    # Roadmap
    "Milestone",
    "MilestoneStatus",
    "MilestoneType",
    "Roadmap",
]
