"""Structured logging for the client.

Loggers render JSON events through the standard ``logging`` module under the
``fluxpoint`` namespace. Nothing is configured on import: the host application
decides where the records go. ``configure_logging`` attaches a stderr handler
for scripts that have no logging setup of their own.
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from fluxpoint.core.config import get_settings


ROOT_LOGGER_NAME = "fluxpoint"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())

_CONFIGURED = False


def _add_default_context(
    logger: Any,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    del logger, method_name
    event_dict.setdefault("component", "fluxpoint")
    return event_dict


def configure_logging() -> None:
    """Send ``fluxpoint`` records to stderr at the configured ``LOG_LEVEL``."""

    global _CONFIGURED
    if _CONFIGURED:
        return

    settings = get_settings()
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter("%(message)s"))

    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.addHandler(handler)
    root.setLevel(getattr(logging, settings.log_level.upper(), logging.INFO))

    _CONFIGURED = True


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    return structlog.wrap_logger(
        logging.getLogger(name or ROOT_LOGGER_NAME),
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.contextvars.merge_contextvars,
            _add_default_context,
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
    )
