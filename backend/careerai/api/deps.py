"""Shared dependencies for API endpoints.

The application is single-user and keeps everything in memory, so one
AppShell instance per process holds all state. Endpoints receive it via
dependency injection; tests swap it with ``reset_app_shell()``.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from typing import Annotated

from fastapi import Depends

from careerai.controllers.app_shell import AppShell
from careerai.controllers.base import ChatBusyError, ScreenStateError
from careerai.controllers.onboarding import DuplicateSkillError
from careerai.core.errors import (
    ConflictError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from careerai.providers import factory

_app_shell: AppShell | None = None


def get_app_shell() -> AppShell:
    """Get the process-wide AppShell, creating it on first use.

    Returns:
        AppShell wired to the configured LLM provider.
    """
    global _app_shell
    if _app_shell is None:
        _app_shell = AppShell(factory.get_llm_provider())
    return _app_shell


def reset_app_shell() -> None:
    """Drop the AppShell so the next request starts a fresh session."""
    global _app_shell
    _app_shell = None


Shell = Annotated[AppShell, Depends(get_app_shell)]


@contextmanager
def screen_errors(resource: str = "Item") -> Iterator[None]:
    """Translate controller exceptions into API errors.

    Args:
        resource: Name used in 404 messages (e.g., "Milestone").

    Raises:
        InvalidStateError: Wrong screen or missing prerequisite.
        ConflictError: A previous request is still in flight.
        NotFoundError: Index out of range or nothing loaded.
        ValidationError: Rejected field value.
    """
    try:
        yield
    except ScreenStateError as e:
        raise InvalidStateError(str(e)) from e
    except ChatBusyError as e:
        raise ConflictError(code="REQUEST_IN_PROGRESS", message=str(e)) from e
    except LookupError as e:
        raise NotFoundError(resource) from e
    except DuplicateSkillError as e:
        raise ConflictError(code="DUPLICATE_SKILL", message=str(e)) from e
    except ValueError as e:
        raise ValidationError(str(e)) from e
