"""Runtime settings for the upgrade job.

Settings are read from environment variables with the ``UPGRADE_`` prefix.

Environment Variables:
    UPGRADE_CHART_DIR: Helm chart directory holding Chart.yaml and values.yaml
    UPGRADE_LOG_LEVEL: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    UPGRADE_JSON_LOGS: Emit JSON logs (true) or console-formatted logs (false)

Example:
    >>> settings = get_settings()
    >>> settings.chart_file
    PosixPath('chart/Chart.yaml')
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

CHART_FILE_NAME = "Chart.yaml"
VALUES_FILE_NAME = "values.yaml"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class UpgradeSettings(BaseSettings):
    """Settings for the upgrade job, loaded from the environment."""

    model_config = SettingsConfigDict(
        env_prefix="UPGRADE_",
        extra="ignore",
        frozen=True,
    )

    chart_dir: Path = Field(
        default=Path("chart"),
        description="Helm chart directory",
    )
    log_level: LogLevel = Field(
        default="INFO",
        description="Minimum log level",
    )
    json_logs: bool = Field(
        default=True,
        description="Emit JSON logs instead of console output",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> object:
        """Accept level names in any case, as configure_logging does."""
        return v.upper() if isinstance(v, str) else v

    @property
    def chart_file(self) -> Path:
        """Path of the chart's Chart.yaml."""
        return self.chart_dir / CHART_FILE_NAME

    @property
    def values_file(self) -> Path:
        """Path of the umbrella chart's values.yaml."""
        return self.chart_dir / VALUES_FILE_NAME


def get_settings() -> UpgradeSettings:
    """Load settings from the environment.

    Returns:
        Validated UpgradeSettings instance.

    Raises:
        pydantic.ValidationError: If an environment variable has an invalid value.
    """
    return UpgradeSettings()


__all__: list[str] = [
    "CHART_FILE_NAME",
    "VALUES_FILE_NAME",
    "LogLevel",
    "UpgradeSettings",
    "get_settings",
]
