"""Architecture service - project architecture, module and script documents.

Owns the one consistency rule of the store: the architecture document's
module-summary list is the index of which modules exist, and each summary id
joins to a separately stored module-details document.

KNOWN RACE: upsert_module and delete_module_by_name touch two files
(architecture.json and modules/<id>.json) as sequential awaits with no lock.
A failure between the two steps, or a concurrent call for the same project
interleaving at an await, can leave the summary list and the details
documents out of sync (e.g. two concurrent upserts both read the same
architecture and the later write drops the other's summary). The store is
meant for a single local user at a time; readers tolerate a summary without
details ("undetailed").
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable, Mapping
from typing import Any

from architector.helpers.dto.architecture_dto import (
    DataFlowEntry,
    ModuleSpec,
    ModuleSummary,
    ProjectArchitecture,
)
from architector.helpers.dto.module_dto import (
    DeleteModuleResult,
    ModuleDetails,
    ModuleDetailsInput,
    ModuleLookupResult,
    UpsertModuleResult,
)
from architector.helpers.dto.script_dto import ScriptDocumentation, ScriptInput
from architector.helpers.exceptions import StorageIOError
from architector.helpers.time_helper import new_id, now_iso
from architector.persistence.document_store import DocumentStore

logger = logging.getLogger(__name__)


class ArchitectureService:
    """Service for architecture, module and script documents of a project.

    All methods take an already-normalized project id. Absence is reported as
    None or a status value; only StorageIOError propagates.
    """

    def __init__(
        self,
        store: DocumentStore,
        id_factory: Callable[[], str] = new_id,
        clock: Callable[[], str] = now_iso,
    ) -> None:
        """Initialize architecture service.

        Args:
            store: Document store bound to the storage root
            id_factory: Supplier of new unique module/script ids
            clock: Supplier of ISO-8601 timestamps
        """
        self.store = store
        self._new_id = id_factory
        self._now = clock

    # ------------------------------------------------------------------
    #  Architecture
    # ------------------------------------------------------------------
    async def set_architecture(
        self,
        project_id: str,
        description: str,
        modules: list[ModuleSpec],
        data_flow: Mapping[str, DataFlowEntry | dict[str, Any]] | None = None,
    ) -> ProjectArchitecture:
        """Create or replace the project architecture.

        Module ids (and createdAt) are kept for names already present in the
        stored architecture so existing module-details documents stay joined.
        Details of modules dropped from the list are left on disk.

        Args:
            project_id: Normalized project id
            description: Overall project description
            modules: Module entries in display order
            data_flow: Optional module name -> data flow edges

        Returns:
            The architecture as written
        """
        try:
            existing = await self.store.read_architecture(project_id)
        except StorageIOError as e:
            # Overwriting is how an unreadable architecture gets repaired
            logger.warning(f"[ArchitectureService] Replacing unreadable architecture for {project_id}: {e}")
            existing = None
        now = self._now()

        summaries: list[ModuleSummary] = []
        used_ids: set[str] = set()
        for spec in modules:
            previous = existing.find_module(spec.name, skip_ids=used_ids) if existing else None
            if previous is not None:
                module_id, created_at = previous.id, previous.created_at
            else:
                module_id, created_at = self._new_id(), now
            used_ids.add(module_id)
            summaries.append(
                ModuleSummary(
                    id=module_id,
                    name=spec.name,
                    description=spec.description,
                    inputs=spec.inputs,
                    outputs=spec.outputs,
                    created_at=created_at,
                    updated_at=now,
                )
            )

        flow = None
        if data_flow is not None:
            flow = {name: DataFlowEntry.model_validate(entry) for name, entry in data_flow.items()}

        architecture = ProjectArchitecture(
            project_id=project_id,
            description=description,
            modules=summaries,
            data_flow=flow,
            created_at=existing.created_at if existing else now,
            updated_at=now,
        )
        await self.store.write_architecture(project_id, architecture)
        logger.info(f"[ArchitectureService] Architecture saved for {project_id} ({len(summaries)} modules)")
        return architecture

    async def get_architecture(self, project_id: str) -> ProjectArchitecture | None:
        return await self.store.read_architecture(project_id)

    # ------------------------------------------------------------------
    #  Modules
    # ------------------------------------------------------------------
    async def upsert_module(self, project_id: str, details: ModuleDetailsInput) -> UpsertModuleResult:
        """Create or update a module's details and keep the summary list in sync.

        Steps (not atomic, see module docstring):
        1. Read the architecture.
        2. If it exists: reuse the id of the first summary with this name and
           refresh its description/updatedAt (inputs/outputs on the summary are
           left alone), or append a new summary with a fresh id. Write it back.
        3. Always write the full module-details document under the module id,
           even when no architecture exists (the details are then orphaned).

        Returns:
            UpsertModuleResult with the module id
        """
        architecture = await self.store.read_architecture(project_id)
        now = self._now()
        created_at = now

        if architecture is not None:
            summary = architecture.find_module(details.name)
            if summary is not None:
                module_id = summary.id
                created = False
                summary.description = details.description
                summary.updated_at = now
                created_at = summary.created_at
            else:
                module_id = self._new_id()
                created = True
                architecture.modules.append(
                    ModuleSummary(
                        id=module_id,
                        name=details.name,
                        description=details.description,
                        created_at=now,
                        updated_at=now,
                    )
                )
                logger.info(f"[ArchitectureService] New module '{details.name}' -> {module_id}")
            architecture.updated_at = now
            await self.store.write_architecture(project_id, architecture)
        else:
            module_id = self._new_id()
            created = True
            logger.warning(
                f"[ArchitectureService] No architecture for {project_id}; "
                f"module '{details.name}' stored without a summary"
            )

        module_details = ModuleDetails(
            module_id=module_id,
            name=details.name,
            description=details.description,
            inputs=details.inputs,
            outputs=details.outputs,
            dependencies=list(details.dependencies),
            files=list(details.files),
            usage_examples=list(details.usage_examples),
            notes=details.notes,
            created_at=created_at,
            updated_at=now,
        )
        await self.store.write_module(project_id, module_details)

        return UpsertModuleResult(
            module_id=module_id,
            created=created,
            architecture_updated=architecture is not None,
        )

    async def find_module(self, project_id: str, name: str) -> ModuleLookupResult:
        """Resolve a module by name to its summary and details."""
        architecture = await self.store.read_architecture(project_id)
        if architecture is None:
            return ModuleLookupResult(status="architecture_not_found")

        summary = architecture.find_module(name)
        if summary is None:
            return ModuleLookupResult(status="module_not_found")

        details = await self.store.read_module(project_id, summary.id)
        if details is None:
            return ModuleLookupResult(status="undetailed", summary=summary)
        return ModuleLookupResult(status="found", summary=summary, details=details)

    async def find_module_by_name(self, project_id: str, name: str) -> ModuleSummary | None:
        architecture = await self.store.read_architecture(project_id)
        if architecture is None:
            return None
        return architecture.find_module(name)

    async def get_module_by_name(self, project_id: str, name: str) -> ModuleDetails | None:
        lookup = await self.find_module(project_id, name)
        return lookup.details

    async def get_module_by_id(self, project_id: str, module_id: str) -> ModuleDetails | None:
        return await self.store.read_module(project_id, module_id)

    async def list_modules(self, project_id: str) -> list[str]:
        """Ids of the module-details documents on disk (unordered)."""
        return await self.store.list_module_ids(project_id)

    async def list_module_summaries(self, project_id: str) -> list[ModuleSummary]:
        """The architecture's module list, or [] when there is no architecture."""
        architecture = await self.store.read_architecture(project_id)
        if architecture is None:
            return []
        return list(architecture.modules)

    async def delete_module_by_name(self, project_id: str, name: str) -> DeleteModuleResult:
        """Delete a module's details document and its summary entry.

        The architecture is not written at all when the module is unknown.
        The details file is removed before the architecture is rewritten.
        """
        architecture = await self.store.read_architecture(project_id)
        if architecture is None:
            return DeleteModuleResult(status="architecture_not_found")

        summary = architecture.find_module(name)
        if summary is None:
            return DeleteModuleResult(status="module_not_found")

        await self.store.delete_module(project_id, summary.id)

        architecture.modules = [m for m in architecture.modules if m.id != summary.id]
        architecture.updated_at = self._now()
        await self.store.write_architecture(project_id, architecture)

        logger.info(f"[ArchitectureService] Deleted module '{name}' ({summary.id}) from {project_id}")
        return DeleteModuleResult(status="deleted", module_id=summary.id)

    # ------------------------------------------------------------------
    #  Scripts
    # ------------------------------------------------------------------
    async def set_script(self, project_id: str, script: ScriptInput) -> ScriptDocumentation:
        """Store script documentation under a new id (no update-by-name)."""
        now = self._now()
        document = ScriptDocumentation(
            script_id=self._new_id(),
            script_name=script.script_name,
            description=script.description,
            usage=script.usage,
            examples=list(script.examples),
            parameters=dict(script.parameters),
            notes=script.notes,
            created_at=now,
            updated_at=now,
        )
        await self.store.write_script(project_id, document)
        return document

    async def get_script_by_name(self, project_id: str, script_name: str) -> ScriptDocumentation | None:
        """First script whose name matches, in directory listing order."""
        for script_id in await self.store.list_script_ids(project_id):
            script = await self.store.read_script(project_id, script_id)
            if script is not None and script.script_name == script_name:
                return script
        return None

    async def list_script_ids(self, project_id: str) -> list[str]:
        return await self.store.list_script_ids(project_id)

    async def list_scripts(self, project_id: str) -> list[ScriptDocumentation]:
        """All readable script documents; ids that vanish mid-listing are skipped."""
        script_ids = await self.store.list_script_ids(project_id)
        scripts = await asyncio.gather(*(self.store.read_script(project_id, sid) for sid in script_ids))
        return [s for s in scripts if s is not None]
