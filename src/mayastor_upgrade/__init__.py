"""mayastor-upgrade: Helm chart configuration for the mayastor upgrade job.

Reads the chart metadata and umbrella chart values that the upgrade job
consults before upgrading a running mayastor deployment.

Example:
    >>> from mayastor_upgrade import load_chart
    >>> chart = load_chart(Path("/chart"))
    >>> chart.values.image_tag()
    'v2.4.0'
"""

from __future__ import annotations

from mayastor_upgrade.config import UpgradeSettings, get_settings
from mayastor_upgrade.errors import (
    ChartFileError,
    SchemaError,
    ThinProvisioningOptionsAbsent,
    UpgradeError,
)
from mayastor_upgrade.helm import (
    ChartMetadata,
    HelmChart,
    SemanticVersion,
    UmbrellaChartValues,
    load_chart,
)
from mayastor_upgrade.telemetry.logging import configure_logging

__version__ = "0.1.0"

__all__: list[str] = [
    "__version__",
    # Configuration
    "UpgradeSettings",
    "configure_logging",
    "get_settings",
    # Errors
    "ChartFileError",
    "SchemaError",
    "ThinProvisioningOptionsAbsent",
    "UpgradeError",
    # Helm
    "ChartMetadata",
    "HelmChart",
    "SemanticVersion",
    "UmbrellaChartValues",
    "load_chart",
]
