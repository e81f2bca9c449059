"""Script documentation tools: set-script-documentation, get-script-documentation, list-scripts."""

from __future__ import annotations

from typing import Any

from architector.helpers.dto.script_dto import ScriptInput
from architector.interfaces.mcp.tools.common import resolve_project_id, tool_errors
from architector.services.architecture_svc import ArchitectureService


@tool_errors
async def set_script_documentation_impl(
    service: ArchitectureService,
    script_name: str,
    description: str,
    usage: str,
    examples: list[str],
    parameters: dict[str, str],
    notes: str | None = None,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    """Store documentation for a script or command (always a new document)."""
    pid = resolve_project_id(project_id, default_project_id)
    script = await service.set_script(
        pid,
        ScriptInput(
            script_name=script_name,
            description=description,
            usage=usage,
            examples=examples,
            parameters=parameters,
            notes=notes or "",
        ),
    )
    return {
        "scriptId": script.script_id,
        "message": f"Script '{script_name}' saved successfully",
    }


@tool_errors
async def get_script_documentation_impl(
    service: ArchitectureService,
    script_name: str,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    pid = resolve_project_id(project_id, default_project_id)
    script = await service.get_script_by_name(pid, script_name)
    if script is None:
        return {"script": None, "message": f"Script '{script_name}' not found"}
    return {"script": script.to_document()}


@tool_errors
async def list_scripts_impl(
    service: ArchitectureService,
    *,
    project_id: str | None = None,
    default_project_id: str,
) -> dict[str, Any]:
    pid = resolve_project_id(project_id, default_project_id)
    scripts = await service.list_scripts(pid)
    return {"scripts": [s.to_document() for s in scripts]}
