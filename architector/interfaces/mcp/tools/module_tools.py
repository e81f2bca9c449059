"""Module tools: set-module-details, get-module-details, list-modules, delete-module."""

from __future__ import annotations

from typing import Any

from architector.helpers.dto.module_dto import ModuleDetailsInput, UsageExample
from architector.interfaces.mcp.tools.common import resolve_project_id, tool_errors
from architector.services.architecture_svc import ArchitectureService


@tool_errors
async def set_module_details_impl(
    service: ArchitectureService,
    name: str,
    description: str,
    inputs: str,
    outputs: str,
    dependencies: list[str] | None = None,
    files: list[str] | None = None,
    usage_examples: list[dict[str, Any]] | None = None,
    notes: str | None = None,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    """Create or update detailed information about a module."""
    pid = resolve_project_id(project_id, default_project_id)
    details = ModuleDetailsInput(
        name=name,
        description=description,
        inputs=inputs,
        outputs=outputs,
        dependencies=dependencies or [],
        files=files or [],
        usage_examples=[UsageExample.model_validate(e) for e in usage_examples or []],
        notes=notes or "",
    )
    result = await service.upsert_module(pid, details)
    return {
        "moduleId": result.module_id,
        "message": f"Module '{name}' saved successfully",
    }


@tool_errors
async def get_module_details_impl(
    service: ArchitectureService,
    module_name: str,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    """Retrieve detailed information about a module by name."""
    pid = resolve_project_id(project_id, default_project_id)
    lookup = await service.find_module(pid, module_name)

    if lookup.status == "architecture_not_found":
        return {"module": None, "message": f"No architecture found for project: {pid}"}
    if lookup.status == "module_not_found":
        return {"module": None, "message": f"Module '{module_name}' not found"}
    if lookup.status == "undetailed" and lookup.summary is not None:
        return {
            "module": {**lookup.summary.to_document(), "details": None},
            "message": f"No details found for module: {module_name}",
        }
    assert lookup.details is not None
    return {"module": lookup.details.to_document()}


@tool_errors
async def list_modules_impl(
    service: ArchitectureService,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    """List the module summaries of the project architecture."""
    pid = resolve_project_id(project_id, default_project_id)
    if await service.get_architecture(pid) is None:
        return {"modules": [], "message": f"No architecture found for project: {pid}"}
    summaries = await service.list_module_summaries(pid)
    return {"modules": [s.to_document() for s in summaries]}


@tool_errors
async def delete_module_impl(
    service: ArchitectureService,
    module_name: str,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    """Delete a module from the project architecture."""
    pid = resolve_project_id(project_id, default_project_id)
    result = await service.delete_module_by_name(pid, module_name)
    if result.status == "architecture_not_found":
        return {"deleted": False, "message": f"Architecture not found for project: {pid}"}
    if result.status == "module_not_found":
        return {"deleted": False, "message": f"Module '{module_name}' not found"}
    return {"deleted": True, "message": f"Module '{module_name}' deleted successfully"}
