"""
Async JSON document store.

Each document is one pretty-printed JSON file at a path resolved by
StoragePaths. Every filesystem call runs in the default executor, so callers
suspend only at file-system operations and concurrent calls may interleave
at those points. There is no locking.

Error policy:
- A missing file is a value ("missing" / None / empty list), never an error.
- Any other failure (permissions, disk full, undecodable bytes, malformed
  JSON, schema mismatch) raises StorageIOError and is not retried.
"""

from __future__ import annotations

import asyncio
import contextlib
import functools
import json
import logging
import os
import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any, TypeVar

from pydantic import ValidationError

from architector.helpers.dto.architecture_dto import ProjectArchitecture
from architector.helpers.dto.base_dto import DocumentModel
from architector.helpers.dto.module_dto import ModuleDetails
from architector.helpers.dto.script_dto import ScriptDocumentation
from architector.helpers.dto.storage_dto import DocumentReadResult
from architector.helpers.exceptions import StorageIOError
from architector.persistence.storage_paths import DOCUMENT_SUFFIX, StoragePaths

logger = logging.getLogger(__name__)

T = TypeVar("T")
M = TypeVar("M", bound=DocumentModel)


# ----------------------------------------------------------------------
#  Blocking primitives (run in the executor)
# ----------------------------------------------------------------------
def _mkdir(directory: Path) -> None:
    try:
        directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise StorageIOError(f"Failed to create directory {directory}: {e}", str(directory)) from e


def _read_json(path: Path) -> dict[str, Any] | None:
    try:
        content = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError) as e:
        raise StorageIOError(f"Failed to read {path}: {e}", str(path)) from e

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise StorageIOError(f"Malformed JSON in {path}: {e}", str(path)) from e

    if not isinstance(data, dict):
        raise StorageIOError(f"Expected a JSON object in {path}, got {type(data).__name__}", str(path))
    return data


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


# Mode a plain open() would give; NamedTemporaryFile creates files as 0600
_FILE_MODE = 0o666 & ~_current_umask()


def _write_json(path: Path, document: dict[str, Any]) -> None:
    try:
        data = json.dumps(document, indent=2, ensure_ascii=False).encode("utf-8")
    except UnicodeEncodeError as e:
        raise StorageIOError(f"Cannot encode document for {path}: {e}", str(path)) from e

    tmp_name: str | None = None
    try:
        # Write to a sibling temp file, then swap it in, so readers never see a truncated file
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=path.parent,
            prefix=f".{path.stem}.",
            suffix=".tmp",
            delete=False,
        ) as f:
            tmp_name = f.name
            f.write(data)
        os.chmod(tmp_name, _FILE_MODE)
        os.replace(tmp_name, path)
        tmp_name = None
    except OSError as e:
        raise StorageIOError(f"Failed to write {path}: {e}", str(path)) from e
    finally:
        if tmp_name is not None:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)


def _list_json(directory: Path) -> list[str]:
    try:
        names = os.listdir(directory)
    except FileNotFoundError:
        return []
    except OSError as e:
        raise StorageIOError(f"Failed to list {directory}: {e}", str(directory)) from e
    return [name.removesuffix(DOCUMENT_SUFFIX) for name in names if name.endswith(DOCUMENT_SUFFIX)]


def _unlink(path: Path) -> None:
    try:
        path.unlink()
    except FileNotFoundError:
        return
    except OSError as e:
        raise StorageIOError(f"Failed to delete {path}: {e}", str(path)) from e


class DocumentStore:
    """
    Generic read/write/list/delete of JSON documents, plus typed helpers
    for architecture, module and script documents.

    Args:
        paths: Path resolver carrying the fixed base directory
    """

    def __init__(self, paths: StoragePaths) -> None:
        self.paths = paths

    async def _run(self, func: Callable[..., T], *args: Any) -> T:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, functools.partial(func, *args))

    # ------------------------------------------------------------------
    #  Generic document operations
    # ------------------------------------------------------------------
    async def ensure_directory(self, directory: Path) -> None:
        """Create a directory (and parents); no-op if it already exists."""
        await self._run(_mkdir, directory)

    async def ensure_project_layout(self, project_id: str, *, include_scripts: bool = False) -> None:
        """
        Idempotently create the project root and its modules/ directory.

        Args:
            project_id: Normalized project identifier
            include_scripts: Also create scripts/ (done on first script write)
        """
        await self.ensure_directory(self.paths.project_dir(project_id))
        await self.ensure_directory(self.paths.modules_dir(project_id))
        if include_scripts:
            await self.ensure_directory(self.paths.scripts_dir(project_id))

    async def read(self, path: Path) -> DocumentReadResult:
        """
        Read and parse one JSON document.

        Returns:
            DocumentReadResult with status "found" or "missing"

        Raises:
            StorageIOError: On any failure other than a missing file
        """
        try:
            document = await self._run(_read_json, path)
        except StorageIOError:
            logger.error(f"[DocumentStore] Read failed: {path}")
            raise
        if document is None:
            return DocumentReadResult(status="missing")
        return DocumentReadResult(status="found", document=document)

    async def write(self, path: Path, document: dict[str, Any]) -> None:
        """
        Ensure the owning directory exists, then replace the file with
        ``document`` serialized as 2-space indented JSON.

        Raises:
            StorageIOError: If the directory or file cannot be written
        """
        await self.ensure_directory(path.parent)
        try:
            await self._run(_write_json, path, document)
        except StorageIOError:
            logger.error(f"[DocumentStore] Write failed: {path}")
            raise
        logger.debug(f"[DocumentStore] Wrote {path}")

    async def list_documents(self, directory: Path) -> list[str]:
        """
        List document ids (file names without .json) in a directory.

        Order follows the directory listing and is not defined. A missing
        directory yields an empty list.
        """
        return await self._run(_list_json, directory)

    async def delete(self, path: Path) -> None:
        """Remove a document; silently succeeds if it is already gone."""
        await self._run(_unlink, path)
        logger.debug(f"[DocumentStore] Deleted {path}")

    # ------------------------------------------------------------------
    #  Typed helpers
    # ------------------------------------------------------------------
    async def _read_model(self, model: type[M], path: Path) -> M | None:
        result = await self.read(path)
        if not result.found:
            return None
        try:
            return model.model_validate(result.document)
        except ValidationError as e:
            raise StorageIOError(f"Document {path} does not match {model.__name__}: {e}", str(path)) from e

    async def read_architecture(self, project_id: str) -> ProjectArchitecture | None:
        return await self._read_model(ProjectArchitecture, self.paths.architecture_file(project_id))

    async def write_architecture(self, project_id: str, architecture: ProjectArchitecture) -> None:
        await self.ensure_project_layout(project_id)
        await self.write(self.paths.architecture_file(project_id), architecture.to_document())

    async def read_module(self, project_id: str, module_id: str) -> ModuleDetails | None:
        return await self._read_model(ModuleDetails, self.paths.module_file(project_id, module_id))

    async def write_module(self, project_id: str, details: ModuleDetails) -> None:
        await self.ensure_project_layout(project_id)
        await self.write(self.paths.module_file(project_id, details.module_id), details.to_document())

    async def delete_module(self, project_id: str, module_id: str) -> None:
        await self.delete(self.paths.module_file(project_id, module_id))

    async def list_module_ids(self, project_id: str) -> list[str]:
        return await self.list_documents(self.paths.modules_dir(project_id))

    async def read_script(self, project_id: str, script_id: str) -> ScriptDocumentation | None:
        return await self._read_model(ScriptDocumentation, self.paths.script_file(project_id, script_id))

    async def write_script(self, project_id: str, script: ScriptDocumentation) -> None:
        await self.ensure_project_layout(project_id, include_scripts=True)
        await self.write(self.paths.script_file(project_id, script.script_id), script.to_document())

    async def list_script_ids(self, project_id: str) -> list[str]:
        return await self.list_documents(self.paths.scripts_dir(project_id))
