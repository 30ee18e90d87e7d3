"""Shared pytest fixtures for mayastor-upgrade tests.

Documents are built as plain dictionaries, the shape a YAML loader
produces, so schema tests run without touching the filesystem. For
tests that exercise file loading, see the ``chart_dir`` fixture.

NOTE: Do NOT add __init__.py to test directories - pytest uses importlib mode
which can cause namespace collisions with __init__.py files.
"""

from __future__ import annotations

import copy
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest
import structlog
import yaml


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults after each test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def chart_document() -> dict[str, Any]:
    """Chart.yaml content of the umbrella chart."""
    return {
        "apiVersion": "v2",
        "name": "mayastor",
        "description": "Mayastor Helm chart for Kubernetes",
        "type": "application",
        "version": "2.4.0",
        "appVersion": "2.4.0",
    }


@pytest.fixture
def values_document() -> dict[str, Any]:
    """values.yaml content without thin-provisioning capacity settings."""
    return {
        "mayastor": {
            "image": {
                "registry": "docker.io",
                "repo": "openebs",
                "tag": "v2.4.0",
                "pullPolicy": "IfNotPresent",
            },
            "ioEngine": {
                "logLevel": "info",
                "coreList": [],
            },
            "agents": {
                "core": {
                    "logLevel": "info",
                    "rebuild": {"maxConcurrent": 3},
                },
                "ha": {"enabled": True},
            },
        },
        "localpv-provisioner": {"enabled": True},
    }


@pytest.fixture
def values_document_with_capacity(values_document: dict[str, Any]) -> dict[str, Any]:
    """values.yaml content with thin-provisioning capacity settings."""
    document = copy.deepcopy(values_document)
    document["mayastor"]["agents"]["core"]["capacity"] = {
        "thin": {
            "poolCommitment": "80%",
            "volumeCommitment": "150%",
            "volumeCommitmentInitial": "40%",
        }
    }
    return document


@pytest.fixture
def chart_dir(
    tmp_path: Path,
    chart_document: dict[str, Any],
    values_document_with_capacity: dict[str, Any],
) -> Path:
    """A chart directory holding Chart.yaml and values.yaml."""
    (tmp_path / "Chart.yaml").write_text(yaml.safe_dump(chart_document))
    (tmp_path / "values.yaml").write_text(yaml.safe_dump(values_document_with_capacity))
    return tmp_path
