"""Structured logging setup.

Configures structlog on top of the standard library so that module-level
``structlog.get_logger()`` calls and plain ``logging`` records share the
same level and output. Console rendering in development, JSON lines when
``LOG_JSON`` is enabled.

Usage:
    logger = structlog.get_logger()
    logger.info("roadmap_generation_start", target_role=role)
"""

import logging
import sys

import structlog
from structlog.types import EventDict, WrappedLogger

from careerai.core.config import Settings

_SENSITIVE_FIELDS = frozenset({"api_key", "token", "secret", "credential"})


def mask_credentials(
    _logger: WrappedLogger, _method_name: str, event_dict: EventDict
) -> EventDict:
    """Processor that masks credential-like fields in log events.

    Args:
        _logger: Logger instance (unused).
        _method_name: Logging method name (unused).
        event_dict: Event dictionary to process.

    Returns:
        Event dictionary with sensitive values replaced by "***MASKED***".
    """
    for key in list(event_dict.keys()):
        key_lower = key.lower()
        if any(
            key_lower == field or key_lower.endswith(f"_{field}")
            for field in _SENSITIVE_FIELDS
        ):
            event_dict[key] = "***MASKED***"
    return event_dict


def configure_logging(settings: Settings) -> None:
    """Configure stdlib logging and structlog processors.

    Safe to call more than once; the last call wins.

    Args:
        settings: Application settings providing log_level and log_json.
    """
    level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        format="%(message)s",
        level=level,
        stream=sys.stdout,
        force=True,
    )

    renderer: structlog.types.Processor
    if settings.log_json:
        renderer = structlog.processors.JSONRenderer()
    else:
        renderer = structlog.dev.ConsoleRenderer()

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            mask_credentials,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=False,
    )
