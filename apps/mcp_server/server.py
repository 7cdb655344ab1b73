"""
MCP server for the GitHub Actions tools.

Uses the official `mcp` Python SDK low-level server. Handles tools/list
and tools/call; every tool comes from the ``ToolRegistry``.
"""

import json
from typing import Any

import httpx
from mcp.server import Server
from mcp.server.stdio import stdio_server
from mcp.types import TextContent, Tool
from pydantic import ValidationError

from apps.mcp_server.errors import ToolInvocationError, format_adapter_error
from gha_config.settings import Settings
from gha_obs.logging import get_logger
from gha_tools import __version__
from gha_tools.adapters.github_actions import (
    GitHubActionsClient,
    GitHubAdapterError,
    register_github_actions_tools,
)
from gha_tools.registry import ToolRegistry

SERVER_NAME = "github-actions-mcp-server"

logger = get_logger(__name__)


def build_registry(client: GitHubActionsClient) -> ToolRegistry:
    registry = ToolRegistry()
    register_github_actions_tools(registry, client)
    return registry


def describe_tools(registry: ToolRegistry) -> list[Tool]:
    """Tool listing: name, description and JSON schema of each input model."""
    return [
        Tool(
            name=tool.name,
            description=tool.description,
            inputSchema=tool.input_model.model_json_schema(),
        )
        for tool in registry.list_tools()
    ]


def _describe_validation_error(error: ValidationError) -> str:
    issues = [
        {
            "loc": list(issue["loc"]),
            "msg": issue["msg"],
            "type": issue["type"],
        }
        for issue in error.errors()
    ]
    return json.dumps(issues)


async def invoke_tool(
    registry: ToolRegistry,
    name: str,
    arguments: dict[str, Any] | None,
    ctx: dict[str, Any] | None = None,
) -> str:
    """Run a tool and serialise its result as JSON text.

    Raises:
        ToolInvocationError: Any failure, already formatted for the host
    """
    # The MCP SDK passes {} for missing arguments; None only comes from direct callers.
    if arguments is None:
        raise ToolInvocationError("Arguments are required")

    tool = registry.get(name)
    if tool is None:
        raise ToolInvocationError(f"Unknown tool: {name}")

    logger.info("tool_invoked", tool=name)

    try:
        result = await tool.execute(ctx or {}, arguments)
    except ValidationError as e:
        raise ToolInvocationError(f"Invalid input: {_describe_validation_error(e)}") from e
    except GitHubAdapterError as e:
        logger.info("tool_failed", tool=name, error=type(e).__name__)
        raise ToolInvocationError(format_adapter_error(e)) from e
    except Exception as e:
        logger.exception("tool_crashed", tool=name)
        raise ToolInvocationError(f"Unexpected error: {e}") from e

    return json.dumps(result, indent=2)


def create_mcp_server(registry: ToolRegistry) -> Server:
    """Create and configure the MCP server with all tool handlers."""
    server = Server(SERVER_NAME, version=__version__)

    @server.list_tools()
    async def list_tools() -> list[Tool]:
        return describe_tools(registry)

    # Tool input models validate arguments and report every violated field
    @server.call_tool(validate_input=False)
    async def call_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
        text = await invoke_tool(registry, name, arguments)
        return [TextContent(type="text", text=text)]

    return server


async def run_server(settings: Settings) -> None:
    """Run the MCP server on stdio until the host disconnects."""
    if not settings.GITHUB_PERSONAL_ACCESS_TOKEN:
        logger.warning("github_token_missing", hint="set GITHUB_PERSONAL_ACCESS_TOKEN")

    client = GitHubActionsClient.from_settings(settings, http_client=httpx.AsyncClient())
    async with client:
        server = create_mcp_server(build_registry(client))
        logger.info("server_started", server=SERVER_NAME, version=__version__, transport="stdio")
        async with stdio_server() as (read_stream, write_stream):
            await server.run(read_stream, write_stream, server.create_initialization_options())
