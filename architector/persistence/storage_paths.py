"""
Path resolution for the on-disk document layout.

Layout (must stay stable for compatibility with existing stores):

    <base>/<project_id>/architecture.json
    <base>/<project_id>/modules/<module_id>.json
    <base>/<project_id>/scripts/<script_id>.json

Rules:
- Pure: no I/O. Directory creation belongs to DocumentStore.
- project_id must already be normalized.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Literal

EntityKind = Literal["architecture", "module", "script"]

ARCHITECTURE_FILENAME = "architecture.json"
MODULES_DIRNAME = "modules"
SCRIPTS_DIRNAME = "scripts"
DOCUMENT_SUFFIX = ".json"

_KIND_DIRS: dict[str, str] = {
    "module": MODULES_DIRNAME,
    "script": SCRIPTS_DIRNAME,
}


@dataclass(frozen=True)
class StoragePaths:
    """
    Deterministic mapping from (project id, entity kind, entity id) to paths.

    The base directory is fixed at construction. Build a separate instance
    to point at a different root (e.g. a tmp dir in tests).

    Examples:
        >>> paths = StoragePaths(Path("/data"))
        >>> paths.document_path("p1", "module", "abc")
        PosixPath('/data/p1/modules/abc.json')
    """

    base_dir: Path

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_dir", Path(self.base_dir).expanduser())

    def project_dir(self, project_id: str) -> Path:
        return self.base_dir / project_id

    def architecture_file(self, project_id: str) -> Path:
        return self.project_dir(project_id) / ARCHITECTURE_FILENAME

    def modules_dir(self, project_id: str) -> Path:
        return self.project_dir(project_id) / MODULES_DIRNAME

    def module_file(self, project_id: str, module_id: str) -> Path:
        return self.modules_dir(project_id) / f"{module_id}{DOCUMENT_SUFFIX}"

    def scripts_dir(self, project_id: str) -> Path:
        return self.project_dir(project_id) / SCRIPTS_DIRNAME

    def script_file(self, project_id: str, script_id: str) -> Path:
        return self.scripts_dir(project_id) / f"{script_id}{DOCUMENT_SUFFIX}"

    def directory_for(self, project_id: str, kind: EntityKind) -> Path:
        """Directory holding documents of the given kind."""
        if kind == "architecture":
            return self.project_dir(project_id)
        return self.project_dir(project_id) / _KIND_DIRS[kind]

    def document_path(self, project_id: str, kind: EntityKind, entity_id: str | None = None) -> Path:
        """
        Path of a single document.

        Args:
            project_id: Normalized project identifier
            kind: "architecture", "module" or "script"
            entity_id: Module or script id (ignored for "architecture")

        Raises:
            ValueError: If entity_id is missing for module/script kinds
        """
        if kind == "architecture":
            return self.architecture_file(project_id)
        if not entity_id:
            raise ValueError(f"entity_id is required for kind '{kind}'")
        return self.directory_for(project_id, kind) / f"{entity_id}{DOCUMENT_SUFFIX}"
