"""Dashboard screen: career suggestions fetched once per mount."""

import structlog

from careerai.controllers.base import ScreenController
from careerai.providers.llm.base import LLMProvider
from careerai.schemas.career import CareerSuggestion
from careerai.schemas.profile import Profile
from careerai.schemas.roadmap import Roadmap
from careerai.services.career_suggestions import generate_career_suggestions
from careerai.services.readiness import calculate_readiness_score

logger = structlog.get_logger()

SUGGESTIONS_ERROR_MESSAGE = (
    "Failed to fetch career suggestions. Please try again later."
)


class DashboardController(ScreenController):
    """Suggestions, readiness score and skill overview for one profile."""

    screen_name = "dashboard"

    def __init__(
        self,
        profile: Profile,
        roadmap: Roadmap | None,
        provider: LLMProvider,
    ) -> None:
        super().__init__()
        self.profile = profile
        self.roadmap = roadmap
        self.provider = provider
        self.suggestions: list[CareerSuggestion] = []
        self.is_loading = False
        self.error: str | None = None
        self.loaded = False

    @property
    def readiness_score(self) -> int:
        return calculate_readiness_score(self.profile, self.roadmap)

    @property
    def roadmap_progress(self) -> float:
        return self.roadmap.progress_percentage if self.roadmap else 0.0

    async def ensure_loaded(self) -> None:
        """Fetch suggestions unless already fetched or fetching."""
        if self.loaded or self.is_loading:
            return
        await self.load()

    async def load(self) -> None:
        """Fetch career suggestions for the profile."""
        token = self._begin()
        self.is_loading = True
        self.error = None
        try:
            suggestions = await generate_career_suggestions(
                self.profile, provider=self.provider
            )
        except Exception:
            logger.exception("dashboard_suggestions_failed")
            if self._is_current(token):
                self.error = SUGGESTIONS_ERROR_MESSAGE
        else:
            if self._is_current(token):
                self.suggestions = suggestions
            else:
                self._discard("career_suggestions")
        finally:
            if self._is_current(token):
                self.is_loading = False
                self.loaded = True
