"""Shell API router: current screen and navigation."""

from fastapi import APIRouter

from careerai.api.deps import Shell, screen_errors
from careerai.controllers.app_shell import AppShell
from careerai.core.responses import DataResponse
from careerai.schemas.views import NavigateRequest, ShellState

router = APIRouter()


def shell_state(shell: AppShell) -> ShellState:
    return ShellState(
        current_screen=shell.current_screen,
        profile=shell.profile,
        target_role=shell.target_role,
        has_roadmap=shell.roadmap is not None,
    )


@router.get("")
async def get_shell(shell: Shell) -> DataResponse[ShellState]:
    return DataResponse(data=shell_state(shell))


@router.post("/navigate")
async def navigate(body: NavigateRequest, shell: Shell) -> DataResponse[ShellState]:
    """Switch to another screen.

    The roadmap screen is opened with ``POST /roadmap`` when a target role
    is chosen; here it is only reachable again once a role exists.

    Raises:
        InvalidStateError: If the screen is not available yet (or any more).
    """
    with screen_errors():
        shell.navigate(body.screen)
    return DataResponse(data=shell_state(shell))
