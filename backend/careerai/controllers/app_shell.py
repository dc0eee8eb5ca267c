"""App Shell: active screen and cross-screen state.

The shell is the only holder of state shared between screens: the
submitted profile, the selected target role and the cached roadmap. Each
is replaced by a single assignment. Switching screens unmounts the
current controller and mounts a new one, so per-screen state (including
chat sessions) lives exactly as long as the screen is shown.
"""

from enum import Enum
from typing import TypeVar

import structlog

from careerai.controllers.base import ScreenController, ScreenStateError
from careerai.controllers.dashboard import DashboardController
from careerai.controllers.mentor_chat import MentorChatController
from careerai.controllers.onboarding import OnboardingForm, check_required_fields
from careerai.controllers.resume import ResumeController
from careerai.controllers.roadmap import RoadmapController
from careerai.providers.llm.base import LLMProvider
from careerai.schemas.profile import DEFAULT_PROFILE, Profile
from careerai.schemas.roadmap import Roadmap

logger = structlog.get_logger()

C = TypeVar("C", bound=ScreenController)


class Screen(str, Enum):
    """Top-level screens."""

    ONBOARDING = "onboarding"
    DASHBOARD = "dashboard"
    ROADMAP = "roadmap"
    MENTOR_CHAT = "mentor_chat"
    RESUME = "resume"


class AppShell:
    """Navigation and canonical application state.

    Attributes:
        provider: LLM provider handed to every controller.
        current_screen: Screen currently displayed.
        profile: Submitted profile (None until onboarding completes).
        target_role: Role selected for the roadmap ("" until chosen).
        roadmap: Cached roadmap (at most one per session).
        controller: Controller of the current screen.
    """

    def __init__(
        self, provider: LLMProvider, initial_draft: Profile = DEFAULT_PROFILE
    ) -> None:
        self.provider = provider
        self.profile: Profile | None = None
        self.target_role = ""
        self.roadmap: Roadmap | None = None
        self.current_screen = Screen.ONBOARDING
        self.controller: ScreenController = OnboardingForm(initial_draft)
        self.controller.mount()

    # -- state replacement ----------------------------------------------------

    def set_roadmap(self, roadmap: Roadmap) -> None:
        self.roadmap = roadmap

    def get_roadmap(self) -> Roadmap | None:
        return self.roadmap

    @property
    def interview_target_role(self) -> str:
        """Role used by the resume screen's mock interview."""
        if self.target_role:
            return self.target_role
        if self.profile and self.profile.target_roles:
            return self.profile.target_roles[0]
        return ""

    # -- navigation -------------------------------------------------------------

    def submit_profile(self, profile: Profile | None = None) -> Profile:
        """Finish onboarding and open the dashboard.

        Args:
            profile: Complete profile; when omitted the onboarding form's
                draft is submitted.

        Raises:
            ScreenStateError: If onboarding was already completed.
            ValueError: If name, education or major is blank.
        """
        if self.current_screen is not Screen.ONBOARDING:
            raise ScreenStateError("Profile has already been submitted")
        if profile is None:
            profile = self.require(OnboardingForm).submit()
        else:
            check_required_fields(profile)
        self.profile = profile
        logger.info(
            "profile_submitted",
            skill_count=len(profile.skills),
            target_roles=profile.target_roles,
        )
        self._show(Screen.DASHBOARD)
        return profile

    def navigate_to_roadmap(self, target_role: str) -> RoadmapController:
        """Select a target role and open its roadmap.

        Re-selecting the current role while on the roadmap screen keeps the
        mounted controller.

        Raises:
            ScreenStateError: If onboarding is incomplete or role is blank.
        """
        role = target_role.strip()
        if not role:
            raise ScreenStateError("Target role cannot be empty")
        self._require_profile()
        if self.current_screen is Screen.ROADMAP and role == self.target_role:
            return self.require(RoadmapController)
        self.target_role = role
        self._show(Screen.ROADMAP, force=True)
        return self.require(RoadmapController)

    def navigate(self, screen: Screen) -> ScreenController:
        """Switch to another screen.

        Navigating to the current screen is a no-op.

        Raises:
            ScreenStateError: If the screen is unavailable: anything but
                onboarding before a profile exists, onboarding after it,
                or the roadmap before a target role is chosen.
        """
        if screen is self.current_screen:
            return self.controller
        if screen is Screen.ONBOARDING:
            raise ScreenStateError("Profile editing is not available after submission")
        self._require_profile()
        if screen is Screen.ROADMAP and not self.target_role:
            raise ScreenStateError("Choose a target role before opening the roadmap")
        self._show(screen)
        return self.controller

    def require(self, controller_type: type[C]) -> C:
        """Return the current controller if it has the expected type.

        Raises:
            ScreenStateError: If another screen is active.
        """
        if not isinstance(self.controller, controller_type):
            raise ScreenStateError(
                f"{controller_type.screen_name} screen is not active "
                f"(current: {self.current_screen.value})"
            )
        return self.controller

    def _require_profile(self) -> Profile:
        if self.profile is None:
            raise ScreenStateError("Complete onboarding first")
        return self.profile

    def _show(self, screen: Screen, force: bool = False) -> None:
        if screen is self.current_screen and not force:
            return
        previous = self.current_screen
        self.controller.unmount()
        self.current_screen = screen
        self.controller = self._build_controller(screen)
        self.controller.mount()
        logger.info("screen_changed", previous=previous.value, current=screen.value)

    def _build_controller(self, screen: Screen) -> ScreenController:
        profile = self._require_profile()
        if screen is Screen.DASHBOARD:
            return DashboardController(profile, self.roadmap, self.provider)
        if screen is Screen.ROADMAP:
            return RoadmapController(
                profile,
                self.target_role,
                get_roadmap=self.get_roadmap,
                set_roadmap=self.set_roadmap,
                provider=self.provider,
            )
        if screen is Screen.MENTOR_CHAT:
            return MentorChatController(self.provider)
        if screen is Screen.RESUME:
            return ResumeController(self.provider, self.interview_target_role)
        raise ScreenStateError(f"Cannot open {screen.value}")
