"""Helm chart configuration for the mayastor upgrade job.

This package provides a typed, read-only view over the mayastor Helm
chart: the chart's Chart.yaml metadata and the umbrella chart's
values.yaml, including the optional thin-provisioning capacity settings
of the core agent group.

Modules:
    schemas: Pydantic models for Chart.yaml and values.yaml
    version: Semantic version parsing and ordering
    loader: Reading chart files from a chart directory

Example:
    >>> from mayastor_upgrade.helm import load_chart, ThinProvisioningOptionsAbsent
    >>> chart = load_chart(Path("/chart"))
    >>> try:
    ...     commitment = chart.values.core_thin_pool_commitment()
    ... except ThinProvisioningOptionsAbsent:
    ...     commitment = None
"""

from __future__ import annotations

from mayastor_upgrade.errors import SchemaError, ThinProvisioningOptionsAbsent
from mayastor_upgrade.helm.loader import (
    CHART_FILE_NAME,
    VALUES_FILE_NAME,
    HelmChart,
    load_chart,
    load_chart_metadata,
    load_umbrella_values,
)
from mayastor_upgrade.helm.schemas import (
    CORE_CHART_NAME,
    AgentGroupSettings,
    CapacitySettings,
    ChartMetadata,
    CoreChartValues,
    EngineSettings,
    ImageSettings,
    ThinProvisioningSettings,
    UmbrellaChartValues,
)
from mayastor_upgrade.helm.version import SemanticVersion

__all__: list[str] = [
    # Schemas
    "CORE_CHART_NAME",
    "AgentGroupSettings",
    "CapacitySettings",
    "ChartMetadata",
    "CoreChartValues",
    "EngineSettings",
    "ImageSettings",
    "SemanticVersion",
    "ThinProvisioningSettings",
    "UmbrellaChartValues",
    # Errors
    "SchemaError",
    "ThinProvisioningOptionsAbsent",
    # Loader
    "CHART_FILE_NAME",
    "VALUES_FILE_NAME",
    "HelmChart",
    "load_chart",
    "load_chart_metadata",
    "load_umbrella_values",
]
