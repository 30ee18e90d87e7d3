"""Structured logging setup via structlog.

Modules obtain loggers with ``structlog.get_logger(__name__)`` and log
events as snake_case event names with keyword context. This module
configures the processor chain once at startup.

Example:
    >>> configure_logging(log_level="DEBUG", json_output=False)
    >>> log = structlog.get_logger(__name__)
    >>> log.info("chart_loaded", chart="mayastor", version="2.4.0")
"""

from __future__ import annotations

import logging
from typing import Any

import structlog

from mayastor_upgrade.config import get_settings

_LOG_LEVELS: dict[str, int] = {
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}


def configure_logging(
    log_level: str | None = None,
    json_output: bool | None = None,
) -> None:
    """Configure structlog for the upgrade job.

    Arguments left as None are taken from UpgradeSettings
    (``UPGRADE_LOG_LEVEL``, ``UPGRADE_JSON_LOGS``).

    Args:
        log_level: The minimum log level to emit (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        json_output: If True, output logs as JSON. If False, use console format.

    Raises:
        ValueError: If log_level is not a known level name.
    """
    if log_level is None or json_output is None:
        settings = get_settings()
        log_level = settings.log_level if log_level is None else log_level
        json_output = settings.json_logs if json_output is None else json_output

    level = _LOG_LEVELS.get(log_level.upper())
    if level is None:
        msg = f"Invalid log level: {log_level!r}. Expected one of {sorted(_LOG_LEVELS)}"
        raise ValueError(msg)

    renderer: Any = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso", utc=True),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        cache_logger_on_first_use=False,
    )


__all__ = [
    "configure_logging",
]
