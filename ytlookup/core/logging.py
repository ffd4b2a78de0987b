"""Structured logging configuration using structlog.

Logs are rendered as JSON in production and as a colored console stream
everywhere else. Every event carries the app name and environment, and
the YouTube API key is masked wherever it appears in an event value.
"""

import logging
import sys
from typing import Any

import structlog
from structlog.types import EventDict, Processor

from ytlookup.core.config import get_config

REDACTED = "***"

# httpx logs one INFO line per request, which floods the gateway's own events
_NOISY_LOGGERS = ("httpx", "httpcore")


def add_app_context(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add application context to log events.

    Args:
        logger: Logger instance
        method_name: Name of the logging method
        event_dict: Event dictionary

    Returns:
        Updated event dictionary with app context
    """
    config = get_config()
    event_dict["app"] = config.app_name
    event_dict["env"] = config.app_env
    return event_dict


def redact_api_key(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Mask the configured API key in string values.

    Upstream error bodies and transport errors can echo request details
    back, so string values are scrubbed before rendering.
    """
    api_key = get_config().youtube_api_key
    for key, value in event_dict.items():
        if isinstance(value, str) and api_key in value:
            event_dict[key] = value.replace(api_key, REDACTED)
    return event_dict


def setup_logging() -> None:
    """Configure structlog over the standard library logging module.

    Example:
        >>> setup_logging()
        >>> logger = get_logger(__name__)
        >>> logger.info("Starting YouTube lookup gateway", port=3000)
    """
    config = get_config()

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stdout,
        level=getattr(logging, config.log_level),
    )
    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        add_app_context,
        redact_api_key,
    ]

    if config.is_production:
        processors.extend([structlog.processors.dict_tracebacks, structlog.processors.JSONRenderer()])
    else:
        processors.extend(
            [structlog.processors.format_exc_info, structlog.dev.ConsoleRenderer(colors=True)]
        )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Get a logger instance.

    Args:
        name: Logger name, usually ``__name__``

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)
