"""Exception types for mayastor-upgrade.

This module defines the exception hierarchy raised while reading Helm chart
configuration. All exceptions inherit from UpgradeError to enable catch-all
error handling by the upgrade job.

Exception Hierarchy:
    UpgradeError (base)
    ├── SchemaError - Document does not match the expected schema
    ├── ThinProvisioningOptionsAbsent - Optional capacity settings not present
    └── ChartFileError - Chart file missing or not valid YAML

Example:
    >>> from mayastor_upgrade.errors import SchemaError, ThinProvisioningOptionsAbsent
    >>> try:
    ...     commitment = values.core_thin_pool_commitment()
    ... except ThinProvisioningOptionsAbsent:
    ...     commitment = None  # thin provisioning not enabled for this release
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError


class UpgradeError(Exception):
    """Base exception for all mayastor-upgrade errors.

    Attributes:
        message: Human-readable error description.
        details: Optional dictionary with additional error context.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize UpgradeError.

        Args:
            message: Human-readable error description.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        """Return string representation of the error."""
        if self.details:
            details_str = ", ".join(f"{k}={v}" for k, v in self.details.items())
            return f"{self.message} ({details_str})"
        return self.message


class SchemaError(UpgradeError):
    """A document did not match the schema it was decoded into.

    Raised for missing required fields, values of the wrong type and
    unparsable version strings. Decoding is all-or-nothing: when this is
    raised no model instance exists.

    Attributes:
        model: Name of the model that failed to decode.
        source: Where the document came from (file path), if known.
        errors: One entry per field error, each with "field" and "message".

    Example:
        >>> try:
        ...     UmbrellaChartValues.decode({"mayastor": {}})
        ... except SchemaError as e:
        ...     e.errors[0]["field"]
        'mayastor.image'
    """

    def __init__(
        self,
        message: str,
        *,
        model: str | None = None,
        source: str | None = None,
        errors: list[dict[str, str]] | None = None,
    ) -> None:
        """Initialize SchemaError.

        Args:
            message: Human-readable error description.
            model: Name of the model that failed to decode.
            source: Where the document came from.
            errors: Field-level errors.
        """
        details: dict[str, Any] = {}
        if model:
            details["model"] = model
        if source:
            details["source"] = source
        super().__init__(message, details)
        self.model = model
        self.source = source
        self.errors = errors or []

    @classmethod
    def from_validation_error(
        cls,
        exc: ValidationError,
        *,
        model: str,
        source: str | None = None,
    ) -> SchemaError:
        """Build a SchemaError from a pydantic ValidationError.

        Args:
            exc: The validation error raised by pydantic.
            model: Name of the model being decoded.
            source: Where the document came from.

        Returns:
            SchemaError whose message names the first failing field.
        """
        errors = [
            {
                "field": ".".join(str(loc) for loc in err.get("loc", ())),
                "message": str(err.get("msg", "")),
            }
            for err in exc.errors()
        ]
        if errors:
            first = errors[0]
            location = f"{first['field']}: " if first["field"] else ""
            message = f"Invalid {model}: {location}{first['message']}"
        else:
            message = f"Invalid {model}"
        return cls(message, model=model, source=source, errors=errors)


class ThinProvisioningOptionsAbsent(UpgradeError):
    """The core agent has no thin-provisioning capacity settings.

    This is an expected configuration state (the feature is not enabled for
    the release), not a malformed document, so it is not a SchemaError.
    """

    def __init__(self, message: str | None = None) -> None:
        """Initialize ThinProvisioningOptionsAbsent.

        Args:
            message: Optional override for the default message.
        """
        super().__init__(
            message
            or "Thin-provisioning options are absent from the core agent capacity settings"
        )


class ChartFileError(UpgradeError):
    """A chart file could not be read or is not valid YAML.

    Attributes:
        path: Path of the offending file.
    """

    def __init__(self, message: str, path: str, details: dict[str, Any] | None = None) -> None:
        """Initialize ChartFileError.

        Args:
            message: Human-readable error description.
            path: Path of the offending file.
            details: Additional error context.
        """
        _details = dict(details or {})
        _details["path"] = path
        super().__init__(message, _details)
        self.path = path


__all__ = [
    "ChartFileError",
    "SchemaError",
    "ThinProvisioningOptionsAbsent",
    "UpgradeError",
]
