"""Semantic version model for Helm chart versions.

Helm requires chart versions to be SemVer 2.0.0 strings. This module
provides SemanticVersion, a frozen Pydantic model that parses such strings
and orders them by SemVer precedence, so the upgrade job can compare the
installed chart against the one it is about to apply.

Version Format:
    MAJOR.MINOR.PATCH[-PRERELEASE][+BUILD]

Ordering Rules:
    - MAJOR, MINOR and PATCH compare numerically
    - A pre-release version has lower precedence than the release
    - Pre-release identifiers compare left to right; numeric identifiers
      compare numerically and sort before alphanumeric ones
    - Build metadata does not affect precedence; it only breaks ties

Example:
    >>> from mayastor_upgrade.helm.version import SemanticVersion
    >>> SemanticVersion.parse("2.4.0-rc.1") < SemanticVersion.parse("2.4.0")
    True
    >>> str(SemanticVersion.parse("2.4.0+build.7"))
    '2.4.0+build.7'
"""

from __future__ import annotations

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing_extensions import Self

SEMVER_PATTERN = (
    r"(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-((?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*)"
    r"(?:\.(?:0|[1-9]\d*|\d*[a-zA-Z-][0-9a-zA-Z-]*))*))?"
    r"(?:\+([0-9a-zA-Z-]+(?:\.[0-9a-zA-Z-]+)*))?"
)
"""SemVer 2.0.0 grammar (matched against the whole string)."""

_SEMVER_RE = re.compile(SEMVER_PATTERN, re.ASCII)

# Sort key element for one dot-separated identifier
_IdentifierKey = tuple[int, int, str]


def _parse_components(text: str) -> dict[str, Any]:
    """Split a version string into SemanticVersion field values.

    Args:
        text: Version string such as "2.4.0-rc.1+build.7".

    Returns:
        Dictionary of field values for SemanticVersion.

    Raises:
        ValueError: If text is not a valid SemVer 2.0.0 string.
    """
    match = _SEMVER_RE.fullmatch(text)
    if match is None:
        msg = f"Invalid semantic version: {text!r}. Expected MAJOR.MINOR.PATCH format."
        raise ValueError(msg)

    major, minor, patch, prerelease, build = match.groups()
    return {
        "major": int(major),
        "minor": int(minor),
        "patch": int(patch),
        "prerelease": tuple(prerelease.split(".")) if prerelease else (),
        "build": tuple(build.split(".")) if build else (),
    }


def _identifier_key(identifiers: tuple[str, ...]) -> tuple[_IdentifierKey, ...]:
    # Numeric identifiers sort before alphanumeric ones
    return tuple(
        (0, int(ident), "") if ident.isdigit() else (1, 0, ident) for ident in identifiers
    )


class SemanticVersion(BaseModel):
    """A parsed SemVer 2.0.0 version.

    Instances can be built from a version string anywhere Pydantic
    validates a SemanticVersion field, so ``ChartMetadata(version="1.2.3")``
    works as expected. Only strings are accepted: a mapping of field values
    is rejected, so every instance has passed the SemVer grammar.

    Attributes:
        major: Major version number.
        minor: Minor version number.
        patch: Patch version number.
        prerelease: Dot-separated pre-release identifiers (empty for releases).
        build: Dot-separated build metadata identifiers.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    major: int = Field(..., ge=0, description="Major version")
    minor: int = Field(..., ge=0, description="Minor version")
    patch: int = Field(..., ge=0, description="Patch version")
    prerelease: tuple[str, ...] = Field(default=(), description="Pre-release identifiers")
    build: tuple[str, ...] = Field(default=(), description="Build metadata identifiers")

    @model_validator(mode="before")
    @classmethod
    def parse_version_string(cls, data: Any) -> dict[str, Any]:
        """Only accept a version string (or an already parsed version)."""
        if isinstance(data, SemanticVersion):
            data = str(data)
        if not isinstance(data, str):
            msg = f"Semantic version must be a string, got {type(data).__name__}"
            raise ValueError(msg)
        return _parse_components(data)

    @classmethod
    def parse(cls, text: str) -> Self:
        """Parse a version string.

        Args:
            text: SemVer 2.0.0 version string.

        Returns:
            The parsed version.

        Raises:
            ValueError: If text is not a valid semantic version (raised as
                pydantic.ValidationError, a ValueError subclass).
        """
        return cls.model_validate(text)

    @property
    def is_prerelease(self) -> bool:
        """True if the version carries pre-release identifiers."""
        return bool(self.prerelease)

    def _precedence_key(self) -> tuple[Any, ...]:
        # A release (no pre-release identifiers) outranks any pre-release
        return (
            self.major,
            self.minor,
            self.patch,
            0 if self.prerelease else 1,
            _identifier_key(self.prerelease),
        )

    def _sort_key(self) -> tuple[Any, ...]:
        return (*self._precedence_key(), _identifier_key(self.build))

    def precedence_equals(self, other: SemanticVersion) -> bool:
        """Compare by SemVer precedence, ignoring build metadata.

        Args:
            other: Version to compare against.

        Returns:
            True if both versions have the same precedence.
        """
        return self._precedence_key() == other._precedence_key()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._sort_key() <= other._sort_key()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._sort_key() > other._sort_key()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SemanticVersion):
            return NotImplemented
        return self._sort_key() >= other._sort_key()

    def __str__(self) -> str:
        text = f"{self.major}.{self.minor}.{self.patch}"
        if self.prerelease:
            text += "-" + ".".join(self.prerelease)
        if self.build:
            text += "+" + ".".join(self.build)
        return text


__all__: list[str] = [
    "SEMVER_PATTERN",
    "SemanticVersion",
]
