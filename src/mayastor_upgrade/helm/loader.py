"""YAML loader for Helm chart files.

This module reads the two files the upgrade job needs from a chart
directory and decodes them into the schemas in ``mayastor_upgrade.helm.schemas``:

- Chart.yaml → ChartMetadata
- values.yaml → UmbrellaChartValues

The loader handles file reading and YAML parsing; decoding and schema
errors are delegated to ``ChartDocument.decode``.

Example:
    >>> chart = load_chart(Path("/chart"))
    >>> chart.metadata.version
    SemanticVersion(major=2, minor=4, patch=0, prerelease=(), build=())
    >>> chart.values.io_engine_log_level()
    'info'
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import structlog
import yaml
from pydantic import BaseModel, ConfigDict, Field

from mayastor_upgrade.config import CHART_FILE_NAME, VALUES_FILE_NAME, get_settings
from mayastor_upgrade.errors import ChartFileError
from mayastor_upgrade.helm.schemas import ChartMetadata, UmbrellaChartValues

logger = structlog.get_logger(__name__)


class HelmChart(BaseModel):
    """Metadata and values of a chart directory.

    Attributes:
        path: Chart directory the files were read from
        metadata: Decoded Chart.yaml
        values: Decoded values.yaml
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    path: Path = Field(..., description="Chart directory")
    metadata: ChartMetadata = Field(..., description="Chart name and version")
    values: UmbrellaChartValues = Field(..., description="Umbrella chart values")


def load_yaml(path: Path) -> Any:
    """Load and parse a YAML file.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML content; an empty file yields an empty dictionary.

    Raises:
        ChartFileError: If the file does not exist or is not valid YAML.
    """
    if not path.is_file():
        raise ChartFileError(f"Chart file not found: {path}", path=str(path))

    try:
        content = path.read_text(encoding="utf-8")
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ChartFileError(
            f"Invalid YAML syntax in {path.name}: {e}",
            path=str(path),
        ) from e

    logger.debug("chart_file_loaded", path=str(path))
    return {} if data is None else data


def load_chart_metadata(path: Path) -> ChartMetadata:
    """Load and decode a Chart.yaml file.

    Args:
        path: Path to Chart.yaml.

    Returns:
        Decoded ChartMetadata.

    Raises:
        ChartFileError: If the file is missing or not valid YAML.
        SchemaError: If the name is missing or the version is not SemVer.
    """
    return ChartMetadata.decode(load_yaml(path), source=str(path))


def load_umbrella_values(path: Path) -> UmbrellaChartValues:
    """Load and decode the umbrella chart's values.yaml file.

    Args:
        path: Path to values.yaml.

    Returns:
        Decoded UmbrellaChartValues.

    Raises:
        ChartFileError: If the file is missing or not valid YAML.
        SchemaError: If a required value is missing or has the wrong type.
    """
    return UmbrellaChartValues.decode(load_yaml(path), source=str(path))


def load_chart(chart_dir: Path | None = None) -> HelmChart:
    """Load Chart.yaml and values.yaml from a chart directory.

    Args:
        chart_dir: Helm chart directory. Defaults to the configured
            ``UPGRADE_CHART_DIR`` (see UpgradeSettings).

    Returns:
        HelmChart holding both decoded documents.

    Raises:
        ChartFileError: If either file is missing or not valid YAML.
        SchemaError: If either document does not match its schema.
    """
    if chart_dir is None:
        chart_dir = get_settings().chart_dir

    metadata = load_chart_metadata(chart_dir / CHART_FILE_NAME)
    values = load_umbrella_values(chart_dir / VALUES_FILE_NAME)

    logger.info(
        "chart_loaded",
        chart=metadata.name,
        version=str(metadata.version),
        image_tag=values.image_tag(),
        thin_provisioning=not values.core_capacity_is_absent(),
    )
    return HelmChart(path=chart_dir, metadata=metadata, values=values)


__all__: list[str] = [
    "CHART_FILE_NAME",
    "VALUES_FILE_NAME",
    "HelmChart",
    "load_chart",
    "load_chart_metadata",
    "load_umbrella_values",
    "load_yaml",
]
