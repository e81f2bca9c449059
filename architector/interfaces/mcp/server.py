#!/usr/bin/env python3
"""Architector MCP Server.

Exposes the project architecture document store to AI agents via MCP.
All tools read and write JSON documents under the configured base directory
(default ``~/.mcp-architector``).

Architecture tools:
- set-project-architecture: Create or update the overall architecture
- get-project-architecture: Read the architecture document

Module tools:
- set-module-details: Create or update a module's detail document (keeps the summary list in sync)
- get-module-details: Read a module's details by name
- list-modules: List the module summaries of the architecture
- delete-module: Delete a module's details and summary

Script tools:
- set-script-documentation: Store documentation for a script or command
- get-script-documentation: Read script documentation by name
- list-scripts: List all documented scripts

Resources:
- arch://{project_id}
- module://{project_id}/{module_id}

Usage:
    python -m architector
"""

import json
import logging
from typing import Annotated, Any

from mcp.server.fastmcp import FastMCP

from architector.helpers.logging_helper import configure_logging
from architector.helpers.project_id_helper import normalize_project_id
from architector.interfaces.mcp.tools.architecture_tools import (
    get_project_architecture_impl,
    set_project_architecture_impl,
)
from architector.interfaces.mcp.tools.module_tools import (
    delete_module_impl,
    get_module_details_impl,
    list_modules_impl,
    set_module_details_impl,
)
from architector.interfaces.mcp.tools.script_tools import (
    get_script_documentation_impl,
    list_scripts_impl,
    set_script_documentation_impl,
)
from architector.persistence.document_store import DocumentStore
from architector.services.architecture_svc import ArchitectureService
from architector.services.config_svc import ConfigService

logger = logging.getLogger(__name__)

ProjectIdArg = Annotated[str | None, "Project ID (defaults to MCP_PROJECT_ID or 'default-project')"]


def build_service(config: ConfigService) -> ArchitectureService:
    """Wire the service to a DocumentStore rooted at the configured base directory."""
    return ArchitectureService(DocumentStore(config.storage_paths()))


def build_server(config: ConfigService | None = None) -> FastMCP:
    """Create the FastMCP server with all tools and resources registered.

    Args:
        config: Configuration source (defaults to env/YAML-backed ConfigService)
    """
    config = config or ConfigService()
    service = build_service(config)
    default_project_id = normalize_project_id(config.default_project_id())
    if config.get("project_id"):
        logger.info(f"Initialized with project ID from env: {default_project_id}")

    mcp = FastMCP(
        name="architector",
        instructions=(
            "Stores project architecture, per-module details and script documentation "
            "as JSON documents keyed by project id. Call set-project-architecture first, "
            "then set-module-details for each module."
        ),
    )

    # ──────────────────────────────────────────────────────────────────
    # Architecture
    # ──────────────────────────────────────────────────────────────────

    @mcp.tool(name="set-project-architecture", title="Set Project Architecture")
    async def set_project_architecture(
        description: Annotated[str, "Overall project description"],
        modules: Annotated[
            list[dict[str, Any]],
            "List of modules: {name, description, inputs?, outputs?}",
        ],
        data_flow: Annotated[
            dict[str, dict[str, Any]] | None,
            "Module name -> {dependsOn?, providesTo?, dataTransformation?}",
        ] = None,
        project_id: ProjectIdArg = None,
    ) -> dict:
        """Creates or updates the overall architecture for a project."""
        return await set_project_architecture_impl(
            service,
            description,
            modules,
            data_flow,
            project_id=project_id,
            default_project_id=default_project_id,
        )

    @mcp.tool(name="get-project-architecture", title="Get Project Architecture")
    async def get_project_architecture(project_id: ProjectIdArg = None) -> dict:
        """Retrieves the overall architecture of the project."""
        return await get_project_architecture_impl(
            service, project_id=project_id, default_project_id=default_project_id
        )

    # ──────────────────────────────────────────────────────────────────
    # Modules
    # ──────────────────────────────────────────────────────────────────

    @mcp.tool(name="set-module-details", title="Set Module Details")
    async def set_module_details(
        name: Annotated[str, "Module name"],
        description: Annotated[str, "Detailed description of the module"],
        inputs: Annotated[str, "What the module accepts as input"],
        outputs: Annotated[str, "What the module produces as output"],
        dependencies: Annotated[list[str] | None, "List of module dependencies"] = None,
        files: Annotated[list[str] | None, "List of files belonging to this module"] = None,
        usage_examples: Annotated[
            list[dict[str, Any]] | None,
            "Usage examples: {title, description?, command?, input?, output?, notes?}",
        ] = None,
        notes: Annotated[str | None, "Additional notes or comments"] = None,
        project_id: ProjectIdArg = None,
    ) -> dict:
        """Creates or updates detailed information about a module."""
        return await set_module_details_impl(
            service,
            name,
            description,
            inputs,
            outputs,
            dependencies,
            files,
            usage_examples,
            notes,
            project_id=project_id,
            default_project_id=default_project_id,
        )

    @mcp.tool(name="get-module-details", title="Get Module Details")
    async def get_module_details(
        module_name: Annotated[str, "Name of the module to retrieve"],
        project_id: ProjectIdArg = None,
    ) -> dict:
        """Retrieves detailed information about a specific module."""
        return await get_module_details_impl(
            service, module_name, project_id=project_id, default_project_id=default_project_id
        )

    @mcp.tool(name="list-modules", title="List All Modules")
    async def list_modules(project_id: ProjectIdArg = None) -> dict:
        """Lists all modules in the project architecture."""
        return await list_modules_impl(
            service, project_id=project_id, default_project_id=default_project_id
        )

    @mcp.tool(name="delete-module", title="Delete Module")
    async def delete_module(
        module_name: Annotated[str, "Name of the module to delete"],
        project_id: ProjectIdArg = None,
    ) -> dict:
        """Deletes a module from the project architecture."""
        return await delete_module_impl(
            service, module_name, project_id=project_id, default_project_id=default_project_id
        )

    # ──────────────────────────────────────────────────────────────────
    # Scripts
    # ──────────────────────────────────────────────────────────────────

    @mcp.tool(name="set-script-documentation", title="Set Script Documentation")
    async def set_script_documentation(
        script_name: Annotated[str, "Name of the script"],
        description: Annotated[str, "Description of what the script does"],
        usage: Annotated[str, "Usage command or syntax"],
        examples: Annotated[list[str], "Usage examples"],
        parameters: Annotated[dict[str, str], "Parameters and their descriptions"],
        notes: Annotated[str | None, "Additional notes"] = None,
        project_id: ProjectIdArg = None,
    ) -> dict:
        """Creates documentation for a script or command."""
        return await set_script_documentation_impl(
            service,
            script_name,
            description,
            usage,
            examples,
            parameters,
            notes,
            project_id=project_id,
            default_project_id=default_project_id,
        )

    @mcp.tool(name="get-script-documentation", title="Get Script Documentation")
    async def get_script_documentation(
        script_name: Annotated[str, "Name of the script to retrieve"],
        project_id: ProjectIdArg = None,
    ) -> dict:
        """Retrieves documentation for a specific script."""
        return await get_script_documentation_impl(
            service, script_name, project_id=project_id, default_project_id=default_project_id
        )

    @mcp.tool(name="list-scripts", title="List All Scripts")
    async def list_scripts(project_id: ProjectIdArg = None) -> dict:
        """Lists all documented scripts in the project."""
        return await list_scripts_impl(
            service, project_id=project_id, default_project_id=default_project_id
        )

    # ──────────────────────────────────────────────────────────────────
    # Resources
    # ──────────────────────────────────────────────────────────────────

    @mcp.resource("arch://{project_id}", name="architecture", title="Project Architecture")
    async def architecture_resource(project_id: str) -> str:
        """Provides access to project architecture."""
        architecture = await service.get_architecture(normalize_project_id(project_id))
        if architecture is None:
            return f"No architecture found for project: {project_id}"
        return json.dumps(architecture.to_document(), indent=2, ensure_ascii=False)

    @mcp.resource("module://{project_id}/{module_id}", name="module", title="Module Details")
    async def module_resource(project_id: str, module_id: str) -> str:
        """Provides access to module details."""
        details = await service.get_module_by_id(normalize_project_id(project_id), module_id)
        if details is None:
            return f"No details found for module: {module_id}"
        return json.dumps(details.to_document(), indent=2, ensure_ascii=False)

    return mcp


def main() -> None:
    """Run the MCP server on stdio."""
    config = ConfigService()
    configure_logging(config.get("log_level", "WARNING"))
    mcp = build_server(config)
    logger.info("Architector MCP server starting on stdin/stdout")
    mcp.run()


# ──────────────────────────────────────────────────────────────────────
# Main Entry Point
# ──────────────────────────────────────────────────────────────────────


if __name__ == "__main__":
    main()
