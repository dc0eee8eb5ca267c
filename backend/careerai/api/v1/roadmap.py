"""Roadmap API router.

POST /roadmap selects a target role, opens the roadmap screen and
generates a roadmap unless one for that role is cached. Generation
failures are reported in the view's ``error`` field, not as HTTP errors.
"""

from fastapi import APIRouter, Request

from careerai.api.deps import Shell, screen_errors
from careerai.controllers.roadmap import RoadmapController
from careerai.core.config import settings
from careerai.core.rate_limiting import limiter
from careerai.core.responses import DataResponse
from careerai.schemas.views import RoadmapRequest, RoadmapView

router = APIRouter()


def _roadmap_view(controller: RoadmapController) -> RoadmapView:
    roadmap = controller.roadmap
    return RoadmapView(
        target_role=controller.target_role,
        milestones=list(roadmap.milestones) if roadmap else [],
        completed_count=roadmap.completed_count if roadmap else 0,
        progress_percentage=roadmap.progress_percentage if roadmap else 0.0,
        is_loading=controller.is_loading,
        error=controller.error,
    )


@router.post("")
@limiter.limit(settings.rate_limit_llm)
async def request_roadmap(
    request: Request,  # noqa: ARG001
    body: RoadmapRequest,
    shell: Shell,
) -> DataResponse[RoadmapView]:
    """Open the roadmap for a target role.

    Security: Rate limited to prevent LLM cost abuse.

    Raises:
        InvalidStateError: If onboarding has not been completed.
    """
    with screen_errors():
        controller = shell.navigate_to_roadmap(body.target_role)
    await controller.load()
    return DataResponse(data=_roadmap_view(controller))


@router.get("")
async def get_roadmap(shell: Shell) -> DataResponse[RoadmapView]:
    with screen_errors():
        controller = shell.require(RoadmapController)
    return DataResponse(data=_roadmap_view(controller))


@router.post("/milestones/{index}/toggle")
async def toggle_milestone(index: int, shell: Shell) -> DataResponse[RoadmapView]:
    """Flip a milestone between todo and done.

    Raises:
        NotFoundError: If no roadmap is loaded or index is out of range.
    """
    with screen_errors("Milestone"):
        controller = shell.require(RoadmapController)
        controller.toggle(index)
    return DataResponse(data=_roadmap_view(controller))
