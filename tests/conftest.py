"""
Pytest fixtures and configuration for the test suite.

Strategy:
- Real filesystem under tmp_path (no mocked I/O)
- Deterministic id and clock suppliers so assertions can name exact values
- Every store is isolated: a fresh StoragePaths per test
"""

import itertools
import sys
from pathlib import Path

import pytest

# Add project root to path so tests can import the architector package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from architector.persistence.document_store import DocumentStore  # noqa: E402
from architector.persistence.storage_paths import StoragePaths  # noqa: E402
from architector.services.architecture_svc import ArchitectureService  # noqa: E402


class SequentialIds:
    """Id supplier returning id-1, id-2, ..."""

    def __init__(self) -> None:
        self._counter = itertools.count(1)

    def __call__(self) -> str:
        return f"id-{next(self._counter)}"


class TickingClock:
    """Clock supplier that advances one second per call."""

    def __init__(self) -> None:
        self._counter = itertools.count(0)

    def __call__(self) -> str:
        tick = next(self._counter)
        return f"2024-01-01T00:{tick // 60:02d}:{tick % 60:02d}.000Z"


@pytest.fixture
def ids() -> SequentialIds:
    return SequentialIds()


@pytest.fixture
def clock() -> TickingClock:
    return TickingClock()


@pytest.fixture
def storage_paths(tmp_path: Path) -> StoragePaths:
    """Path resolver rooted in an isolated temp directory."""
    return StoragePaths(tmp_path / "store")


@pytest.fixture
def store(storage_paths: StoragePaths) -> DocumentStore:
    return DocumentStore(storage_paths)


@pytest.fixture
def service(store: DocumentStore, ids: SequentialIds, clock: TickingClock) -> ArchitectureService:
    """ArchitectureService with deterministic ids and timestamps."""
    return ArchitectureService(store, id_factory=ids, clock=clock)
