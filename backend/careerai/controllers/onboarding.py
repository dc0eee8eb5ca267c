"""Onboarding form state.

Holds the draft profile while the student edits it. Edits go through a
small set of explicit setters; there is no generic "write field by name"
operation. submit() validates the draft into an immutable Profile.
"""

from careerai.controllers.base import ScreenController
from careerai.schemas.profile import (
    DEFAULT_PROFICIENCY,
    DEFAULT_PROFILE,
    Profile,
    Skill,
)


class DuplicateSkillError(ValueError):
    """A skill with the same name (case-insensitive) already exists."""


def split_list_input(raw: str) -> list[str]:
    """Split comma-separated input into trimmed, non-empty items.

    Example:
        "Data Science, , ML " -> ["Data Science", "ML"]
    """
    return [item.strip() for item in raw.split(",") if item.strip()]


REQUIRED_FIELDS = ("name", "education", "major")


def check_required_fields(profile: Profile) -> Profile:
    """Reject a profile whose name, education or major is blank.

    Raises:
        ValueError: Naming every blank required field.
    """
    missing = [field for field in REQUIRED_FIELDS if not getattr(profile, field)]
    if missing:
        raise ValueError(f"Required fields are empty: {', '.join(missing)}")
    return profile


class OnboardingForm(ScreenController):
    """Draft profile editor."""

    screen_name = "onboarding"

    def __init__(self, initial: Profile = DEFAULT_PROFILE) -> None:
        super().__init__()
        self.name = initial.name
        self.education = initial.education
        self.major = initial.major
        self.interests = list(initial.interests)
        self.target_roles = list(initial.target_roles)
        self.skills: list[Skill] = list(initial.skills)

    # -- basic info ---------------------------------------------------------

    def set_name(self, value: str) -> None:
        self.name = value

    def set_education(self, value: str) -> None:
        self.education = value

    def set_major(self, value: str) -> None:
        self.major = value

    def set_interests(self, raw: str) -> None:
        """Replace interests from comma-separated input."""
        self.interests = split_list_input(raw)

    def set_target_roles(self, raw: str) -> None:
        """Replace target roles from comma-separated input."""
        self.target_roles = split_list_input(raw)

    # -- skills -------------------------------------------------------------

    def _has_skill(self, name: str, ignore_index: int | None = None) -> bool:
        key = name.strip().casefold()
        return any(
            s.name.casefold() == key
            for i, s in enumerate(self.skills)
            if i != ignore_index
        )

    def add_skill(self, name: str) -> bool:
        """Append a skill at the default proficiency.

        Blank names and duplicates (case-insensitive) are ignored.

        Returns:
            True if the skill was added.
        """
        if not name.strip() or self._has_skill(name):
            return False
        self.skills.append(Skill(name=name, proficiency=DEFAULT_PROFICIENCY))
        return True

    def remove_skill(self, index: int) -> None:
        """Remove the skill at ``index``.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        del self.skills[index]

    def set_skill_name(self, index: int, name: str) -> None:
        """Rename the skill at ``index``.

        Raises:
            IndexError: If index is out of range.
            ValueError: If the name is blank.
            DuplicateSkillError: If another skill already has that name.
        """
        self._check_index(index)
        if not name.strip():
            raise ValueError("Skill name cannot be empty")
        if self._has_skill(name, ignore_index=index):
            raise DuplicateSkillError(f"Duplicate skill name: {name.strip()}")
        current = self.skills[index]
        self.skills[index] = Skill(name=name, proficiency=current.proficiency)

    def set_skill_proficiency(self, index: int, value: int) -> None:
        """Set proficiency of the skill at ``index``, clamped to 0-100.

        Raises:
            IndexError: If index is out of range.
        """
        self._check_index(index)
        current = self.skills[index]
        self.skills[index] = Skill(name=current.name, proficiency=value)

    def _check_index(self, index: int) -> None:
        if index < 0 or index >= len(self.skills):
            raise IndexError(f"Skill index {index} out of range")

    # -- submission ---------------------------------------------------------

    def draft(self) -> Profile:
        """Current draft as a Profile (validated)."""
        return Profile(
            name=self.name,
            education=self.education,
            major=self.major,
            interests=list(self.interests),
            target_roles=list(self.target_roles),
            skills=list(self.skills),
        )

    def submit(self) -> Profile:
        """Validate and return the finished profile.

        Raises:
            ValueError: If a required field is blank or skills collide.
        """
        return check_required_fields(self.draft())
