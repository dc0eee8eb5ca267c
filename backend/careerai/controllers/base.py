"""Screen controller lifecycle.

Each screen's state lives in a controller that the App Shell mounts when
the screen becomes active and unmounts when the user navigates away.
Provider calls are not cancelled on unmount. Instead every async
operation captures the controller's generation when it starts and checks
it again when the result arrives: a result for an unmounted (or
remounted) controller is discarded.
"""

import structlog

logger = structlog.get_logger()


class ScreenStateError(Exception):
    """Operation not allowed in the current screen state."""


class ChatBusyError(Exception):
    """A send was attempted while the previous one is still in flight."""


class ScreenController:
    """Base class for per-screen state machines.

    Attributes:
        screen_name: Name used in log events.
    """

    screen_name = "screen"

    def __init__(self) -> None:
        self._mounted = False
        self._generation = 0

    @property
    def mounted(self) -> bool:
        """Whether the screen is currently displayed."""
        return self._mounted

    def mount(self) -> None:
        """Activate the controller."""
        self._mounted = True
        self._generation += 1
        logger.debug("screen_mounted", screen=self.screen_name)

    def unmount(self) -> None:
        """Deactivate the controller; in-flight results will be discarded."""
        self._mounted = False
        self._generation += 1
        logger.debug("screen_unmounted", screen=self.screen_name)

    def _begin(self) -> int:
        """Capture a token for an async operation starting now."""
        if not self._mounted:
            raise ScreenStateError(f"{self.screen_name} screen is not mounted")
        return self._generation

    def _is_current(self, token: int) -> bool:
        """Whether a result for ``token`` may still be applied."""
        return self._mounted and token == self._generation

    def _discard(self, operation: str) -> None:
        logger.info(
            "stale_response_discarded",
            screen=self.screen_name,
            operation=operation,
        )
