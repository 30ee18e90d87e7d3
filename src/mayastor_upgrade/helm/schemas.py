"""Pydantic schemas for the mayastor Helm chart configuration.

This module defines a read-only view over two Helm chart documents:

- Chart.yaml → ChartMetadata (chart name and version)
- values.yaml of the umbrella chart → UmbrellaChartValues

The umbrella chart embeds the values of its dependency chart (the "core"
chart) under a key named after the core chart's product, ``mayastor``.
Callers only use the forwarding accessors on UmbrellaChartValues; nested
models are internal to the decode.

Models:
    ChartMetadata: Chart name and semantic version
    ImageSettings: Container image tag
    EngineSettings: io-engine DaemonSet log level
    ThinProvisioningSettings: Thin-provisioning commitment thresholds
    CapacitySettings: Capacity configuration wrapping the thin thresholds
    AgentGroupSettings: The "core" agent group with optional capacity
    CoreChartValues: Values of the core (dependency) chart
    UmbrellaChartValues: Values of the umbrella chart

Two unrelated things are called "core" in these documents: the dependency
chart (CoreChartValues, key ``mayastor``) and the agent group under
``agents.core`` (AgentGroupSettings). They are kept as separate types.

Example:
    >>> values = UmbrellaChartValues.decode(
    ...     {
    ...         "mayastor": {
    ...             "image": {"tag": "v2.4.0"},
    ...             "ioEngine": {"logLevel": "info"},
    ...             "agents": {"core": {}},
    ...         }
    ...     }
    ... )
    >>> values.image_tag()
    'v2.4.0'
    >>> values.core_capacity_is_absent()
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import AliasChoices, AliasPath, BaseModel, ConfigDict, Field, ValidationError
from pydantic.alias_generators import to_camel
from typing_extensions import Self

from mayastor_upgrade.errors import SchemaError, ThinProvisioningOptionsAbsent
from mayastor_upgrade.helm.version import SemanticVersion

CORE_CHART_NAME = "mayastor"
"""Key under which the umbrella chart's values.yaml embeds the core chart values."""


class ChartDocument(BaseModel):
    """Base class for models decoded from Helm chart documents.

    Models are frozen once decoded. Keys the schema does not name are
    ignored, since values files carry far more settings than are read here.
    Fields are matched only by their document key (alias), never by the
    Python field name.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    @classmethod
    def decode(cls, document: Mapping[str, Any], *, source: str | None = None) -> Self:
        """Decode a loaded document into this model.

        Args:
            document: Parsed YAML/JSON document.
            source: Where the document came from, for error context.

        Returns:
            The decoded, immutable model.

        Raises:
            SchemaError: If the document does not match the schema.
        """
        try:
            return cls.model_validate(document)
        except ValidationError as e:
            raise SchemaError.from_validation_error(e, model=cls.__name__, source=source) from e


class ChartMetadata(ChartDocument):
    """Name and version declared in a chart's Chart.yaml.

    Attributes:
        name: Chart name
        version: Chart version, parsed as a semantic version

    Example:
        >>> chart = ChartMetadata.decode({"name": "mayastor", "version": "2.4.0"})
        >>> chart.version >= SemanticVersion.parse("2.0.0")
        True
    """

    name: str = Field(..., min_length=1, description="Chart name")
    version: SemanticVersion = Field(..., description="Chart version (SemVer 2.0.0)")


class ImageSettings(ChartDocument):
    """The ``image`` object: details for pulling container images.

    Attributes:
        tag: Container image tag used across the chart release
    """

    tag: str = Field(..., description="Container image tag")


class EngineSettings(ChartDocument):
    """The ``ioEngine`` object: configuration for the io-engine DaemonSet.

    Attributes:
        log_level: Tracing log level of the io-engine pods (document key ``logLevel``)
    """

    model_config = ConfigDict(alias_generator=to_camel)

    log_level: str = Field(..., description="io-engine tracing log level")


class ThinProvisioningSettings(ChartDocument):
    """The ``capacity.thin`` object: thin-provisioning commitment thresholds.

    Values are opaque threshold strings such as "250%"; they are returned
    exactly as written.
    """

    model_config = ConfigDict(alias_generator=to_camel)

    pool_commitment: str = Field(..., description="Pool commitment limit")
    volume_commitment: str = Field(..., description="Volume commitment limit")
    volume_commitment_initial: str = Field(
        ..., description="Commitment limit for a volume's initial replica"
    )


class CapacitySettings(ChartDocument):
    """The ``capacity`` object of an agent group."""

    thin: ThinProvisioningSettings = Field(..., description="Thin-provisioning thresholds")

    def thin_pool_commitment(self) -> str:
        return self.thin.pool_commitment

    def thin_volume_commitment(self) -> str:
        return self.thin.volume_commitment

    def thin_volume_commitment_initial(self) -> str:
        return self.thin.volume_commitment_initial


class AgentGroupSettings(ChartDocument):
    """The ``agents.core`` object: settings for the core agent group.

    The ``capacity`` subtree is optional. Its presence means thin
    provisioning is enabled for the release; when it is absent every
    thin-provisioning accessor raises ThinProvisioningOptionsAbsent.

    Attributes:
        capacity: Capacity settings, or None if not configured
    """

    capacity: CapacitySettings | None = Field(
        default=None,
        description="Capacity settings (absent when thin provisioning is not configured)",
    )

    def capacity_is_absent(self) -> bool:
        """True if the document had no ``capacity`` subtree."""
        return self.capacity is None

    def _require_capacity(self) -> CapacitySettings:
        if self.capacity is None:
            raise ThinProvisioningOptionsAbsent
        return self.capacity

    def thin_pool_commitment(self) -> str:
        """Pool commitment threshold.

        Raises:
            ThinProvisioningOptionsAbsent: If capacity settings are absent.
        """
        return self._require_capacity().thin_pool_commitment()

    def thin_volume_commitment(self) -> str:
        """Volume commitment threshold.

        Raises:
            ThinProvisioningOptionsAbsent: If capacity settings are absent.
        """
        return self._require_capacity().thin_volume_commitment()

    def thin_volume_commitment_initial(self) -> str:
        """Initial volume commitment threshold.

        Raises:
            ThinProvisioningOptionsAbsent: If capacity settings are absent.
        """
        return self._require_capacity().thin_volume_commitment_initial()


class CoreChartValues(ChartDocument):
    """Values of the core chart, the umbrella chart's dependency.

    Attributes:
        image: Container image settings
        engine: io-engine DaemonSet settings (key ``ioEngine`` or ``io_engine``)
        agent_group: The core agent group, read from ``agents.core``
    """

    image: ImageSettings = Field(..., description="Container image settings")
    engine: EngineSettings = Field(
        ...,
        validation_alias=AliasChoices("ioEngine", "io_engine"),
        description="io-engine DaemonSet settings",
    )
    agent_group: AgentGroupSettings = Field(
        ...,
        validation_alias=AliasPath("agents", "core"),
        description="Core agent group settings",
    )

    def image_tag(self) -> str:
        """Container image tag of the core chart."""
        return self.image.tag

    def io_engine_log_level(self) -> str:
        """Log level of the io-engine DaemonSet pods."""
        return self.engine.log_level

    def core_capacity_is_absent(self) -> bool:
        return self.agent_group.capacity_is_absent()

    def core_thin_pool_commitment(self) -> str:
        return self.agent_group.thin_pool_commitment()

    def core_thin_volume_commitment(self) -> str:
        return self.agent_group.thin_volume_commitment()

    def core_thin_volume_commitment_initial(self) -> str:
        return self.agent_group.thin_volume_commitment_initial()


class UmbrellaChartValues(ChartDocument):
    """Values of the umbrella chart.

    The umbrella chart embeds the core chart's values in an object named
    after the core chart (``mayastor``). All accessors forward to that
    object.

    Attributes:
        core: Core chart values, read from the ``mayastor`` key
    """

    core: CoreChartValues = Field(
        ...,
        alias=CORE_CHART_NAME,
        description="Core chart values",
    )

    def image_tag(self) -> str:
        """Container image tag of the umbrella chart."""
        return self.core.image_tag()

    def io_engine_log_level(self) -> str:
        """Log level of the io-engine DaemonSet pods."""
        return self.core.io_engine_log_level()

    def core_capacity_is_absent(self) -> bool:
        """True if the core agent group has no capacity settings."""
        return self.core.core_capacity_is_absent()

    def core_thin_pool_commitment(self) -> str:
        """Thin-provisioning pool commitment of the core agent group.

        Raises:
            ThinProvisioningOptionsAbsent: If capacity settings are absent.
        """
        return self.core.core_thin_pool_commitment()

    def core_thin_volume_commitment(self) -> str:
        """Thin-provisioning volume commitment of the core agent group.

        Raises:
            ThinProvisioningOptionsAbsent: If capacity settings are absent.
        """
        return self.core.core_thin_volume_commitment()

    def core_thin_volume_commitment_initial(self) -> str:
        """Thin-provisioning initial volume commitment of the core agent group.

        Raises:
            ThinProvisioningOptionsAbsent: If capacity settings are absent.
        """
        return self.core.core_thin_volume_commitment_initial()


__all__: list[str] = [
    "CORE_CHART_NAME",
    "AgentGroupSettings",
    "CapacitySettings",
    "ChartDocument",
    "ChartMetadata",
    "CoreChartValues",
    "EngineSettings",
    "ImageSettings",
    "ThinProvisioningSettings",
    "UmbrellaChartValues",
]
