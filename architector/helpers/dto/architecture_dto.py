"""
DTOs for the per-project architecture document.

The architecture document is the authoritative index of which modules exist.
Each ModuleSummary.id joins to a separately stored ModuleDetails document.
"""

from __future__ import annotations

from collections.abc import Collection

from pydantic import BaseModel, Field

from .base_dto import DocumentModel


class DataFlowEntry(DocumentModel):
    """Data flow edges for a single module, keyed by module name in the architecture."""

    depends_on: list[str] | None = None
    provides_to: list[str] | None = None
    data_transformation: str | None = None


class ModuleSummary(DocumentModel):
    """Lightweight module record embedded in ProjectArchitecture.modules."""

    id: str
    name: str
    description: str
    inputs: str | None = None
    outputs: str | None = None
    created_at: str
    updated_at: str


class ProjectArchitecture(DocumentModel):
    """Root record for one project: description, module list and data flow."""

    project_id: str
    description: str
    modules: list[ModuleSummary] = Field(default_factory=list)
    data_flow: dict[str, DataFlowEntry] | None = None
    created_at: str
    updated_at: str

    def find_module(self, name: str, skip_ids: Collection[str] = ()) -> ModuleSummary | None:
        """Return the first summary whose name matches, in list order, ignoring ids in skip_ids."""
        for module in self.modules:
            if module.name == name and module.id not in skip_ids:
                return module
        return None


class ModuleSpec(BaseModel):
    """Caller-supplied module entry for set_architecture (no id, no timestamps)."""

    name: str = Field(description="Module name")
    description: str = Field(description="Brief description of the module")
    inputs: str | None = Field(default=None, description="What this module requires to work")
    outputs: str | None = Field(default=None, description="What this module produces or generates")
