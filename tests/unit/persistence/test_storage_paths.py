"""Unit tests for StoragePaths (on-disk layout)."""

from pathlib import Path

import pytest

from architector.persistence.storage_paths import StoragePaths


class TestStoragePaths:
    """Tests for deterministic path resolution."""

    @pytest.fixture
    def paths(self) -> StoragePaths:
        return StoragePaths(Path("/data"))

    @pytest.mark.unit
    def test_layout(self, paths: StoragePaths) -> None:
        assert paths.project_dir("p1") == Path("/data/p1")
        assert paths.architecture_file("p1") == Path("/data/p1/architecture.json")
        assert paths.module_file("p1", "m1") == Path("/data/p1/modules/m1.json")
        assert paths.script_file("p1", "s1") == Path("/data/p1/scripts/s1.json")

    @pytest.mark.unit
    def test_document_path_by_kind(self, paths: StoragePaths) -> None:
        assert paths.document_path("p1", "architecture") == paths.architecture_file("p1")
        assert paths.document_path("p1", "module", "m1") == paths.module_file("p1", "m1")
        assert paths.document_path("p1", "script", "s1") == paths.script_file("p1", "s1")

    @pytest.mark.unit
    def test_directory_for_kind(self, paths: StoragePaths) -> None:
        assert paths.directory_for("p1", "architecture") == Path("/data/p1")
        assert paths.directory_for("p1", "module") == Path("/data/p1/modules")
        assert paths.directory_for("p1", "script") == Path("/data/p1/scripts")

    @pytest.mark.unit
    def test_entity_id_required_for_modules(self, paths: StoragePaths) -> None:
        with pytest.raises(ValueError, match="entity_id"):
            paths.document_path("p1", "module")

    @pytest.mark.unit
    def test_base_dir_expands_user(self) -> None:
        paths = StoragePaths(Path("~/.mcp-architector"))
        assert paths.base_dir == Path.home() / ".mcp-architector"

    @pytest.mark.unit
    def test_is_immutable(self, paths: StoragePaths) -> None:
        with pytest.raises(AttributeError):
            paths.base_dir = Path("/elsewhere")  # type: ignore[misc]
