"""
DTO package.
"""

from .architecture_dto import DataFlowEntry, ModuleSpec, ModuleSummary, ProjectArchitecture
from .base_dto import DocumentModel
from .module_dto import (
    DeleteModuleResult,
    ModuleDetails,
    ModuleDetailsInput,
    ModuleLookupResult,
    UpsertModuleResult,
    UsageExample,
)
from .script_dto import ScriptDocumentation, ScriptInput
from .storage_dto import DocumentReadResult

__all__ = [
    "DataFlowEntry",
    "DeleteModuleResult",
    "DocumentModel",
    "DocumentReadResult",
    "ModuleDetails",
    "ModuleDetailsInput",
    "ModuleLookupResult",
    "ModuleSpec",
    "ModuleSummary",
    "ProjectArchitecture",
    "ScriptDocumentation",
    "ScriptInput",
    "UpsertModuleResult",
    "UsageExample",
]
