"""Shared test fixtures for trident-autoclass."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from trident_autoclass.core import StorageClassResolver, VolumeConfigBuilder
from trident_autoclass.models import Backend
from trident_autoclass.registry import InMemoryOrchestrator


# ---------------------------------------------------------------------------
# Backend fixtures
# ---------------------------------------------------------------------------


@pytest.fixture()
def backends() -> list[Backend]:
    return [
        Backend(name="B1", storage={"pool1": {"media": "ssd"}, "pool2": {}}),
        Backend(name="B2", storage={"pool3": {"media": "hdd"}, "pool1": {}}),
    ]


@pytest.fixture()
def backends_file(tmp_path: Path, backends: list[Backend]) -> Path:
    """The ``backends`` fixture written out as JSON."""
    f = tmp_path / "backends.json"
    f.write_text(
        json.dumps([b.model_dump(mode="json") for b in backends]), encoding="utf-8"
    )
    return f


# ---------------------------------------------------------------------------
# Core objects
# ---------------------------------------------------------------------------


@pytest.fixture()
def orchestrator(backends: list[Backend]) -> InMemoryOrchestrator:
    return InMemoryOrchestrator(backends)


@pytest.fixture()
def resolver(orchestrator: InMemoryOrchestrator) -> StorageClassResolver:
    return StorageClassResolver(orchestrator, prefix="trident-auto-")


@pytest.fixture()
def builder() -> VolumeConfigBuilder:
    return VolumeConfigBuilder(default_size="1g")


# ---------------------------------------------------------------------------
# Option sets
# ---------------------------------------------------------------------------


@pytest.fixture()
def example_options() -> dict[str, str]:
    return {"aggregate|pool": "pool1", "minIOPS": "int:500", "bogus": "!!"}
