"""Request bodies and screen views for the v1 API.

Views are read-only snapshots of a controller's state taken after the
request's work is done. Model-authored text that the UI shows as rich
text carries an extra ``html`` field rendered by the simple Markdown
renderer.
"""

from pydantic import BaseModel, Field, field_validator

from careerai.controllers.app_shell import Screen
from careerai.schemas.career import CareerSuggestion
from careerai.schemas.chat import ChatMessage, ChatRole
from careerai.schemas.profile import Profile, Skill
from careerai.schemas.roadmap import Milestone


def _strip(v: str) -> str:
    return v.strip() if isinstance(v, str) else v


def _not_blank(v: str, field: str) -> str:
    if not v:
        msg = f"{field} cannot be empty"
        raise ValueError(msg)
    return v


# =============================================================================
# Onboarding
# =============================================================================


class OnboardingFormView(BaseModel):
    """Draft profile as currently edited."""

    name: str
    education: str
    major: str
    interests: list[str]
    target_roles: list[str]
    skills: list[Skill]


class FormUpdate(BaseModel):
    """Partial update of the basic-info fields.

    ``interests`` and ``target_roles`` take the raw comma-separated text
    typed by the student.
    """

    name: str | None = None
    education: str | None = None
    major: str | None = None
    interests: str | None = None
    target_roles: str | None = None


class SkillCreate(BaseModel):
    name: str = Field(..., max_length=100)


class SkillUpdate(BaseModel):
    """Rename a skill and/or change its proficiency."""

    name: str | None = Field(default=None, max_length=100)
    proficiency: int | None = None


# =============================================================================
# Shell
# =============================================================================


class ShellState(BaseModel):
    """Which screen is active and the shared state behind it."""

    current_screen: Screen
    profile: Profile | None
    target_role: str
    has_roadmap: bool


class NavigateRequest(BaseModel):
    screen: Screen


# =============================================================================
# Dashboard
# =============================================================================


class DashboardView(BaseModel):
    """Dashboard snapshot.

    Attributes:
        profile: Submitted profile.
        suggestions: Career suggestions (empty when none parsed).
        is_loading: Whether suggestions are being fetched.
        error: User-facing error text, if the fetch failed.
        readiness_score: Blended readiness score (0-100).
        roadmap_progress: Completion percentage of the cached roadmap.
    """

    profile: Profile
    suggestions: list[CareerSuggestion]
    is_loading: bool
    error: str | None
    readiness_score: int
    roadmap_progress: float


# =============================================================================
# Roadmap
# =============================================================================


class RoadmapRequest(BaseModel):
    """Select a target role and open its roadmap."""

    target_role: str = Field(..., max_length=200)

    @field_validator("target_role", mode="before")
    @classmethod
    def strip_role(cls, v: str) -> str:
        return _strip(v)

    @field_validator("target_role")
    @classmethod
    def role_not_empty(cls, v: str) -> str:
        return _not_blank(v, "Target role")


class RoadmapView(BaseModel):
    target_role: str
    milestones: list[Milestone]
    completed_count: int
    progress_percentage: float
    is_loading: bool
    error: str | None


# =============================================================================
# Chat, resume and interview
# =============================================================================


class ChatLogView(BaseModel):
    messages: list[ChatMessage]
    is_loading: bool


class RenderedMessage(BaseModel):
    """Chat message with its Markdown rendering."""

    role: ChatRole
    text: str
    html: str


class InterviewView(BaseModel):
    target_role: str
    messages: list[RenderedMessage]
    is_loading: bool


class ResumeFeedbackRequest(BaseModel):
    """Pasted resume text."""

    resume_text: str = Field(..., max_length=50_000)

    @field_validator("resume_text")
    @classmethod
    def text_not_blank(cls, v: str) -> str:
        _not_blank(v.strip(), "Resume text")
        return v


class ResumeFeedbackView(BaseModel):
    feedback: str
    html: str
