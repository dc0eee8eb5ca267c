"""Dashboard API router.

GET /dashboard fetches career suggestions the first time it is read after
the dashboard is mounted; later reads return the stored result.
"""

from fastapi import APIRouter

from careerai.api.deps import Shell, screen_errors
from careerai.controllers.dashboard import DashboardController
from careerai.core.responses import DataResponse
from careerai.schemas.views import DashboardView

router = APIRouter()


def _dashboard_view(dashboard: DashboardController) -> DashboardView:
    return DashboardView(
        profile=dashboard.profile,
        suggestions=list(dashboard.suggestions),
        is_loading=dashboard.is_loading,
        error=dashboard.error,
        readiness_score=dashboard.readiness_score,
        roadmap_progress=dashboard.roadmap_progress,
    )


@router.get("")
async def get_dashboard(shell: Shell) -> DataResponse[DashboardView]:
    """Dashboard with suggestions, readiness score and roadmap progress.

    A failed fetch is reported in ``error`` and ``suggestions`` is empty.
    """
    with screen_errors():
        dashboard = shell.require(DashboardController)
    await dashboard.ensure_loaded()
    return DataResponse(data=_dashboard_view(dashboard))
