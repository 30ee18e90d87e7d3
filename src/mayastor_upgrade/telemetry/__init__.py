"""Logging for the upgrade job.

Modules:
    logging: structlog configuration
"""

from __future__ import annotations

from mayastor_upgrade.telemetry.logging import configure_logging

__all__: list[str] = [
    "configure_logging",
]
