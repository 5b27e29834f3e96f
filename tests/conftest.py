"""Shared fixtures and helpers for tests."""

import json
from pathlib import Path

import pytest

from getres_lens.config import Settings
from getres_lens.core.context import LensContext
from getres_lens.core.store import ResourceStore
from getres_lens.db import InMemoryResourceSource
from getres_lens.host.sinks import RecordingSink
from getres_lens.models import Resource

_REPO_ROOT = Path(__file__).parent.parent


# ---------------------------------------------------------------------------
# Auto-marker: tag tests as "unit" or "integration" based on directory
# ---------------------------------------------------------------------------


def pytest_collection_modifyitems(items: list[pytest.Item]) -> None:
    for item in items:
        test_path = Path(str(item.fspath))
        rel = test_path.relative_to(_REPO_ROOT / "tests")
        parts = rel.parts
        if parts and parts[0] == "integration":
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


# ---------------------------------------------------------------------------
# Shared unit-test fixtures
# ---------------------------------------------------------------------------

SAMPLE_RECORDS = [
    {"id": 1, "pid": None, "name": "Shop", "code": ".shop { display: block; }"},
    {"id": 2, "pid": 1, "name": "Banner", "code": ".banner { height: 120px; }"},
    {"id": 3, "pid": 2, "name": "Logo", "code": ".logo { width: 48px; }"},
    {"id": 4, "pid": 1, "name": "Footer", "code": ""},
    {"id": 5, "pid": 99, "name": "Orphan", "code": ".orphan {}"},
]


@pytest.fixture
def sample_resources() -> list[Resource]:
    return [Resource(**record) for record in SAMPLE_RECORDS]


@pytest.fixture
def memory_source(sample_resources: list[Resource]) -> InMemoryResourceSource:
    return InMemoryResourceSource(sample_resources)


@pytest.fixture
def store(memory_source: InMemoryResourceSource, sample_resources: list[Resource]) -> ResourceStore:
    """A store already holding the sample snapshot."""
    resource_store = ResourceStore(memory_source)
    resource_store.replace(sample_resources)
    return resource_store


@pytest.fixture
def sink() -> RecordingSink:
    return RecordingSink()


@pytest.fixture
def lens(memory_source: InMemoryResourceSource, sink: RecordingSink, sample_resources: list[Resource]) -> LensContext:
    context = LensContext(memory_source, sink, Settings(source="memory"))
    context.store.replace(sample_resources)
    return context


@pytest.fixture
def resources_json(tmp_path: Path) -> Path:
    path = tmp_path / "resources.json"
    path.write_text(json.dumps(SAMPLE_RECORDS), encoding="utf-8")
    return path
