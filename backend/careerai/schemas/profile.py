"""Student profile schemas.

A Profile is built by the onboarding form and is immutable once
submitted. Skill proficiency is always clamped to 0-100.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

MIN_PROFICIENCY = 0
MAX_PROFICIENCY = 100
DEFAULT_PROFICIENCY = 50


def clamp_proficiency(value: int | float) -> int:
    """Clamp a proficiency value into [0, 100].

    Args:
        value: Raw proficiency (floats are rounded first).

    Returns:
        Integer proficiency within bounds.
    """
    return max(MIN_PROFICIENCY, min(MAX_PROFICIENCY, round(value)))


class Skill(BaseModel):
    """A self-assessed skill.

    Attributes:
        name: Skill name (e.g., "Python").
        proficiency: Self-rated proficiency, 0-100 inclusive.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1)
    proficiency: int = DEFAULT_PROFICIENCY

    @field_validator("name", mode="before")
    @classmethod
    def strip_name(cls, v: str) -> str:
        """Strip whitespace from the skill name."""
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("proficiency", mode="before")
    @classmethod
    def round_float(cls, v: int | float) -> int:
        """Round fractional proficiency to the nearest integer."""
        if isinstance(v, float):
            return round(v)
        return v

    @field_validator("proficiency")
    @classmethod
    def clamp(cls, v: int) -> int:
        """Clamp proficiency instead of rejecting out-of-range values.

        Runs after coercion, so numeric strings are clamped too.
        """
        return clamp_proficiency(v)


class Profile(BaseModel):
    """The student's self-reported background and skills.

    Attributes:
        name: Student name.
        education: Degree or programme (e.g., "B.Sc. Computer Science").
        major: Field of study.
        interests: Free-form interest areas.
        target_roles: Roles the student is aiming for, in preference order.
        skills: Ordered skills; names are unique case-insensitively.
    """

    model_config = ConfigDict(frozen=True)

    name: str
    education: str = ""
    major: str = ""
    interests: list[str] = Field(default_factory=list)
    target_roles: list[str] = Field(default_factory=list)
    skills: list[Skill] = Field(default_factory=list)

    @field_validator("name", "education", "major", mode="before")
    @classmethod
    def strip_text(cls, v: str) -> str:
        """Strip whitespace from the basic-info fields."""
        if isinstance(v, str):
            return v.strip()
        return v

    @model_validator(mode="after")
    def check_unique_skill_names(self) -> "Profile":
        """Reject profiles that list the same skill twice."""
        seen: set[str] = set()
        for skill in self.skills:
            key = skill.name.casefold()
            if key in seen:
                msg = f"Duplicate skill name: {skill.name}"
                raise ValueError(msg)
            seen.add(key)
        return self


# Preset draft shown by the onboarding form on first load.
DEFAULT_PROFILE = Profile(
    name="Aisha Sharma",
    education="B.Sc. Computer Science",
    major="Computer Science",
    interests=["Data Science", "Machine Learning"],
    target_roles=["Data Analyst", "Machine Learning Engineer"],
    skills=[
        Skill(name="Python", proficiency=60),
        Skill(name="Statistics", proficiency=40),
        Skill(name="SQL", proficiency=50),
        Skill(name="React", proficiency=30),
    ],
)
