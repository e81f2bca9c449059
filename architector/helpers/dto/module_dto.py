"""
DTOs for module detail documents and module operation results.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from pydantic import BaseModel, Field

from .architecture_dto import ModuleSummary
from .base_dto import DocumentModel


class UsageExample(DocumentModel):
    """Usage example value object embedded in ModuleDetails."""

    title: str
    description: str | None = None
    command: str | None = None
    input: str | None = None
    output: str | None = None
    notes: str | None = None


class ModuleDetails(DocumentModel):
    """Long form of a ModuleSummary, stored at modules/<module_id>.json."""

    module_id: str
    name: str
    description: str
    inputs: str
    outputs: str
    dependencies: list[str] | None = None
    files: list[str] | None = None
    usage_examples: list[UsageExample] | None = None
    notes: str | None = None
    created_at: str
    updated_at: str


class ModuleDetailsInput(BaseModel):
    """Caller-supplied module details for upsert_module."""

    name: str = Field(description="Module name")
    description: str = Field(description="Detailed description of the module")
    inputs: str = Field(description="What the module accepts as input")
    outputs: str = Field(description="What the module produces as output")
    dependencies: list[str] = Field(default_factory=list, description="List of module dependencies")
    files: list[str] = Field(default_factory=list, description="List of files belonging to this module")
    usage_examples: list[UsageExample] = Field(
        default_factory=list, description="Usage examples for this module"
    )
    notes: str = Field(default="", description="Additional notes or comments")


@dataclass
class UpsertModuleResult:
    """Result from ArchitectureService.upsert_module."""

    module_id: str
    created: bool  # True when a new id was minted
    architecture_updated: bool  # False when no architecture existed (details are orphaned)


@dataclass
class ModuleLookupResult:
    """Result from ArchitectureService.find_module.

    Status values:
    - "found": summary and details both present
    - "undetailed": summary present, details document missing
    - "module_not_found": architecture exists but has no module with that name
    - "architecture_not_found": no architecture document for the project
    """

    status: Literal["found", "undetailed", "module_not_found", "architecture_not_found"]
    summary: ModuleSummary | None = None
    details: ModuleDetails | None = None


@dataclass
class DeleteModuleResult:
    """Result from ArchitectureService.delete_module_by_name."""

    status: Literal["deleted", "module_not_found", "architecture_not_found"]
    module_id: str | None = None

    @property
    def deleted(self) -> bool:
        return self.status == "deleted"
