"""Unit tests for upgrade job settings."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from mayastor_upgrade.config import UpgradeSettings, get_settings


class TestUpgradeSettings:
    """Tests for UpgradeSettings."""

    def test_defaults(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test default settings with no environment overrides."""
        for name in ("UPGRADE_CHART_DIR", "UPGRADE_LOG_LEVEL", "UPGRADE_JSON_LOGS"):
            monkeypatch.delenv(name, raising=False)
        settings = get_settings()
        assert settings.chart_dir == Path("chart")
        assert settings.log_level == "INFO"
        assert settings.json_logs is True

    def test_environment_overrides(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that UPGRADE_ environment variables are read."""
        monkeypatch.setenv("UPGRADE_CHART_DIR", "/k8s/chart")
        monkeypatch.setenv("UPGRADE_LOG_LEVEL", "DEBUG")
        monkeypatch.setenv("UPGRADE_JSON_LOGS", "false")
        settings = get_settings()
        assert settings.chart_dir == Path("/k8s/chart")
        assert settings.log_level == "DEBUG"
        assert settings.json_logs is False

    def test_chart_file_paths(self) -> None:
        """Test derived chart file paths."""
        settings = UpgradeSettings(chart_dir=Path("/k8s/chart"))
        assert settings.chart_file == Path("/k8s/chart/Chart.yaml")
        assert settings.values_file == Path("/k8s/chart/values.yaml")

    def test_lowercase_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that level names are accepted in any case."""
        monkeypatch.setenv("UPGRADE_LOG_LEVEL", "info")
        assert get_settings().log_level == "INFO"

    def test_invalid_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that an unknown log level is rejected."""
        monkeypatch.setenv("UPGRADE_LOG_LEVEL", "VERBOSE")
        with pytest.raises(ValidationError):
            get_settings()
