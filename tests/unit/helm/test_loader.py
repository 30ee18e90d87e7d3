"""Unit tests for the Helm chart file loader."""

from __future__ import annotations

from pathlib import Path

import pytest
import structlog

from mayastor_upgrade.errors import ChartFileError, SchemaError
from mayastor_upgrade.helm.loader import (
    HelmChart,
    load_chart,
    load_chart_metadata,
    load_umbrella_values,
    load_yaml,
)
from mayastor_upgrade.helm.version import SemanticVersion


class TestLoadYaml:
    """Tests for load_yaml()."""

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test that a missing file raises ChartFileError."""
        path = tmp_path / "Chart.yaml"
        with pytest.raises(ChartFileError, match="not found") as exc_info:
            load_yaml(path)
        assert exc_info.value.path == str(path)

    def test_invalid_yaml(self, tmp_path: Path) -> None:
        """Test that a YAML syntax error raises ChartFileError."""
        path = tmp_path / "values.yaml"
        path.write_text("mayastor:\n  image: [unclosed\n")
        with pytest.raises(ChartFileError, match="Invalid YAML"):
            load_yaml(path)

    def test_empty_file(self, tmp_path: Path) -> None:
        """Test that an empty file loads as an empty mapping."""
        path = tmp_path / "values.yaml"
        path.write_text("")
        assert load_yaml(path) == {}


class TestLoadDocuments:
    """Tests for load_chart_metadata() and load_umbrella_values()."""

    def test_load_chart_metadata(self, chart_dir: Path) -> None:
        """Test loading Chart.yaml."""
        metadata = load_chart_metadata(chart_dir / "Chart.yaml")
        assert metadata.name == "mayastor"
        assert metadata.version == SemanticVersion.parse("2.4.0")

    def test_load_umbrella_values(self, chart_dir: Path) -> None:
        """Test loading values.yaml."""
        values = load_umbrella_values(chart_dir / "values.yaml")
        assert values.image_tag() == "v2.4.0"
        assert values.core_thin_volume_commitment() == "150%"

    def test_schema_error_reports_path(self, tmp_path: Path) -> None:
        """Test that SchemaError names the file that failed to decode."""
        path = tmp_path / "Chart.yaml"
        path.write_text("name: mayastor\nversion: not-a-version\n")
        with pytest.raises(SchemaError) as exc_info:
            load_chart_metadata(path)
        assert exc_info.value.source == str(path)

    def test_non_mapping_root(self, tmp_path: Path) -> None:
        """Test that a list at the document root fails to decode."""
        path = tmp_path / "values.yaml"
        path.write_text("- mayastor\n")
        with pytest.raises(SchemaError):
            load_umbrella_values(path)


class TestLoadChart:
    """Tests for load_chart()."""

    def test_load_chart(self, chart_dir: Path) -> None:
        """Test loading both documents from a chart directory."""
        chart = load_chart(chart_dir)
        assert isinstance(chart, HelmChart)
        assert chart.path == chart_dir
        assert chart.metadata.name == "mayastor"
        assert chart.values.io_engine_log_level() == "info"
        assert chart.values.core_capacity_is_absent() is False

    def test_load_chart_logs(self, chart_dir: Path) -> None:
        """Test that a successful load is logged."""
        with structlog.testing.capture_logs() as captured_logs:
            load_chart(chart_dir)

        loaded = [entry for entry in captured_logs if entry["event"] == "chart_loaded"]
        assert len(loaded) == 1
        assert loaded[0]["chart"] == "mayastor"
        assert loaded[0]["version"] == "2.4.0"
        assert loaded[0]["thin_provisioning"] is True

    def test_load_chart_from_settings(
        self, chart_dir: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Test that the chart directory defaults to UPGRADE_CHART_DIR."""
        monkeypatch.setenv("UPGRADE_CHART_DIR", str(chart_dir))
        chart = load_chart()
        assert chart.path == chart_dir
        assert chart.metadata.version == SemanticVersion.parse("2.4.0")

    def test_missing_values_file(self, chart_dir: Path) -> None:
        """Test that a chart directory without values.yaml fails."""
        (chart_dir / "values.yaml").unlink()
        with pytest.raises(ChartFileError, match="values.yaml"):
            load_chart(chart_dir)
