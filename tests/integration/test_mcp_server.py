"""Integration tests for the FastMCP server wiring (tools and resources registered in-process)."""

import json
from pathlib import Path

import pytest

from architector.interfaces.mcp.server import build_server
from architector.services.config_svc import ConfigService

EXPECTED_TOOLS = {
    "set-project-architecture",
    "get-project-architecture",
    "set-module-details",
    "get-module-details",
    "list-modules",
    "delete-module",
    "set-script-documentation",
    "get-script-documentation",
    "list-scripts",
}


@pytest.fixture
def config(tmp_path: Path) -> ConfigService:
    return ConfigService(overrides={"base_dir": str(tmp_path / "store")}, environ={"MCP_PROJECT_ID": "/work/app"})


@pytest.mark.integration
@pytest.mark.asyncio
async def test_registers_all_tools(config: ConfigService) -> None:
    mcp = build_server(config)

    tools = await mcp.list_tools()

    assert {tool.name for tool in tools} == EXPECTED_TOOLS


@pytest.mark.integration
@pytest.mark.asyncio
async def test_tools_describe_project_id_as_optional(config: ConfigService) -> None:
    mcp = build_server(config)

    for tool in await mcp.list_tools():
        assert "project_id" in tool.inputSchema["properties"]
        assert "project_id" not in tool.inputSchema.get("required", [])


@pytest.mark.integration
@pytest.mark.asyncio
async def test_registers_resource_templates(config: ConfigService) -> None:
    mcp = build_server(config)

    templates = await mcp.list_resource_templates()

    assert {t.uriTemplate for t in templates} == {"arch://{project_id}", "module://{project_id}/{module_id}"}


@pytest.mark.integration
@pytest.mark.asyncio
async def test_architecture_resource_reads_stored_document(config: ConfigService, tmp_path: Path) -> None:
    project_dir = tmp_path / "store" / "_work_app"
    project_dir.mkdir(parents=True)
    (project_dir / "architecture.json").write_text(
        json.dumps(
            {
                "projectId": "_work_app",
                "description": "Shop",
                "modules": [],
                "createdAt": "2024-01-01T00:00:00.000Z",
                "updatedAt": "2024-01-01T00:00:00.000Z",
            }
        ),
        encoding="utf-8",
    )
    mcp = build_server(config)

    contents = list(await mcp.read_resource("arch://_work_app"))

    assert json.loads(contents[0].content)["description"] == "Shop"


@pytest.mark.integration
@pytest.mark.asyncio
async def test_module_resource_for_missing_module(config: ConfigService) -> None:
    mcp = build_server(config)

    contents = list(await mcp.read_resource("module://_work_app/nope"))

    assert contents[0].content == "No details found for module: nope"
