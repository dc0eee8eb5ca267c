"""Onboarding API router.

Endpoints for editing the draft profile and submitting it. All of them
require the onboarding screen to be active; once a profile has been
submitted they return 422 INVALID_STATE_TRANSITION.
"""

from fastapi import APIRouter

from careerai.api.deps import Shell, screen_errors
from careerai.api.v1.shell import shell_state
from careerai.controllers.onboarding import OnboardingForm
from careerai.core.responses import DataResponse
from careerai.schemas.profile import DEFAULT_PROFILE, Profile
from careerai.schemas.views import (
    FormUpdate,
    OnboardingFormView,
    ShellState,
    SkillCreate,
    SkillUpdate,
)

router = APIRouter()


def _form_view(form: OnboardingForm) -> OnboardingFormView:
    return OnboardingFormView(
        name=form.name,
        education=form.education,
        major=form.major,
        interests=list(form.interests),
        target_roles=list(form.target_roles),
        skills=list(form.skills),
    )


@router.get("/defaults")
async def get_default_profile() -> DataResponse[Profile]:
    """Preset draft shown on first load."""
    return DataResponse(data=DEFAULT_PROFILE)


@router.get("/form")
async def get_form(shell: Shell) -> DataResponse[OnboardingFormView]:
    with screen_errors():
        form = shell.require(OnboardingForm)
    return DataResponse(data=_form_view(form))


@router.patch("/form")
async def update_form(
    body: FormUpdate, shell: Shell
) -> DataResponse[OnboardingFormView]:
    """Update basic-info fields.

    Omitted fields are left unchanged. ``interests`` and ``target_roles``
    are comma-separated text; empty items are dropped.
    """
    with screen_errors():
        form = shell.require(OnboardingForm)
    if body.name is not None:
        form.set_name(body.name)
    if body.education is not None:
        form.set_education(body.education)
    if body.major is not None:
        form.set_major(body.major)
    if body.interests is not None:
        form.set_interests(body.interests)
    if body.target_roles is not None:
        form.set_target_roles(body.target_roles)
    return DataResponse(data=_form_view(form))


@router.post("/form/skills")
async def add_skill(
    body: SkillCreate, shell: Shell
) -> DataResponse[OnboardingFormView]:
    """Add a skill at the default proficiency.

    Blank names and case-insensitive duplicates are ignored; the response
    is the unchanged draft in that case.
    """
    with screen_errors():
        form = shell.require(OnboardingForm)
    form.add_skill(body.name)
    return DataResponse(data=_form_view(form))


@router.patch("/form/skills/{index}")
async def update_skill(
    index: int, body: SkillUpdate, shell: Shell
) -> DataResponse[OnboardingFormView]:
    """Rename a skill and/or set its proficiency (clamped to 0-100).

    Raises:
        NotFoundError: If index is out of range.
        ConflictError: If the new name duplicates another skill.
        ValidationError: If the new name is blank.
    """
    with screen_errors("Skill"):
        form = shell.require(OnboardingForm)
        if body.name is not None:
            form.set_skill_name(index, body.name)
        if body.proficiency is not None:
            form.set_skill_proficiency(index, body.proficiency)
    return DataResponse(data=_form_view(form))


@router.delete("/form/skills/{index}")
async def remove_skill(index: int, shell: Shell) -> DataResponse[OnboardingFormView]:
    with screen_errors("Skill"):
        form = shell.require(OnboardingForm)
        form.remove_skill(index)
    return DataResponse(data=_form_view(form))


@router.post("/submit")
async def submit_draft(shell: Shell) -> DataResponse[ShellState]:
    """Submit the edited draft and open the dashboard."""
    with screen_errors():
        shell.submit_profile()
    return DataResponse(data=shell_state(shell))


@router.post("/profile")
async def submit_profile(body: Profile, shell: Shell) -> DataResponse[ShellState]:
    """Submit a complete profile and open the dashboard."""
    with screen_errors():
        shell.submit_profile(body)
    return DataResponse(data=shell_state(shell))
