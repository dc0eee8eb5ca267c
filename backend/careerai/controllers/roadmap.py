"""Roadmap screen: fetch, cache reuse and milestone toggling.

The roadmap itself lives in the App Shell so it survives navigation. This
controller reads it through ``get_roadmap`` and replaces it through
``set_roadmap``. A cached roadmap is reused while its target role matches
the requested one; otherwise a new one is generated and replaces it
wholesale, old statuses included.
"""

from collections.abc import Callable

from careerai.controllers.base import ScreenController
from careerai.providers.llm.base import LLMProvider
from careerai.schemas.profile import Profile
from careerai.schemas.roadmap import Roadmap
from careerai.services.roadmap_generation import (
    RoadmapGenerationError,
    generate_learning_roadmap,
)

ROADMAP_ERROR_MESSAGE = "Failed to generate your learning roadmap. Please try again."


class RoadmapController(ScreenController):
    """Roadmap for the shell's current target role."""

    screen_name = "roadmap"

    def __init__(
        self,
        profile: Profile,
        target_role: str,
        get_roadmap: Callable[[], Roadmap | None],
        set_roadmap: Callable[[Roadmap], None],
        provider: LLMProvider,
    ) -> None:
        super().__init__()
        self.profile = profile
        self.target_role = target_role
        self._get_roadmap = get_roadmap
        self._set_roadmap = set_roadmap
        self.provider = provider
        self.is_loading = False
        self.error: str | None = None

    @property
    def roadmap(self) -> Roadmap | None:
        """The cached roadmap, if it belongs to this target role."""
        cached = self._get_roadmap()
        if cached is None or cached.target_role != self.target_role:
            return None
        return cached

    def needs_generation(self) -> bool:
        return self.roadmap is None

    async def load(self) -> None:
        """Generate a roadmap unless a matching one is cached.

        Failures set ``error`` rather than raising.
        """
        if not self.needs_generation() or self.is_loading:
            return

        token = self._begin()
        self.is_loading = True
        self.error = None
        try:
            milestones = await generate_learning_roadmap(
                self.profile, self.target_role, provider=self.provider
            )
        except RoadmapGenerationError:
            if self._is_current(token):
                self.error = ROADMAP_ERROR_MESSAGE
            else:
                self._discard("roadmap_generation")
        else:
            if self._is_current(token):
                self._set_roadmap(
                    Roadmap(target_role=self.target_role, milestones=milestones)
                )
            else:
                self._discard("roadmap_generation")
        finally:
            if self._is_current(token):
                self.is_loading = False

    def toggle(self, index: int) -> Roadmap:
        """Toggle a milestone between TODO and DONE.

        Returns:
            The replacement roadmap now held by the shell.

        Raises:
            LookupError: If no roadmap is loaded for this target role.
            IndexError: If index is out of range.
        """
        current = self.roadmap
        if current is None:
            raise LookupError(f"No roadmap loaded for {self.target_role}")
        updated = current.toggle_milestone(index)
        self._set_roadmap(updated)
        return updated
