"""Project architecture tools: set-project-architecture, get-project-architecture."""

from __future__ import annotations

from typing import Any

from architector.helpers.dto.architecture_dto import DataFlowEntry, ModuleSpec
from architector.interfaces.mcp.tools.common import resolve_project_id, tool_errors
from architector.services.architecture_svc import ArchitectureService


@tool_errors
async def set_project_architecture_impl(
    service: ArchitectureService,
    description: str,
    modules: list[dict[str, Any]],
    data_flow: dict[str, dict[str, Any]] | None = None,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    """Create or update the overall architecture for a project."""
    pid = resolve_project_id(project_id, default_project_id)
    specs = [ModuleSpec.model_validate(m) for m in modules]
    flow = (
        {name: DataFlowEntry.model_validate(entry) for name, entry in data_flow.items()}
        if data_flow is not None
        else None
    )
    await service.set_architecture(pid, description, specs, flow)
    return {
        "projectId": pid,
        "message": f"Architecture updated with {len(specs)} modules",
    }


@tool_errors
async def get_project_architecture_impl(
    service: ArchitectureService,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    """Retrieve the overall architecture of the project."""
    pid = resolve_project_id(project_id, default_project_id)
    architecture = await service.get_architecture(pid)
    if architecture is None:
        return {"architecture": None, "message": f"No architecture found for project: {pid}"}
    return {"architecture": architecture.to_document()}
