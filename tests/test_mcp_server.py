"""MCP server tests: tool listing, invocation and error formatting."""

import json
from datetime import datetime, timezone

import httpx
import pytest
from mcp.types import Tool

from apps.mcp_server.errors import (
    ToolInvocationError,
    format_adapter_error,
    format_github_error,
)
from apps.mcp_server.server import (
    build_registry,
    create_mcp_server,
    describe_tools,
    invoke_tool,
)
from gha_tools.adapters.github_actions.exceptions import (
    GitHubAPIError,
    GitHubInputError,
    GitHubResponseShapeError,
)


@pytest.fixture
def no_content_registry(make_client):
    """Registry backed by a transport that answers 204 to everything."""
    client, requests = make_client(lambda request: httpx.Response(204))
    return build_registry(client), requests


def test_describe_tools():
    registry = build_registry(None)
    tools = describe_tools(registry)

    assert all(isinstance(tool, Tool) for tool in tools)
    assert len(tools) == 9

    trigger = next(tool for tool in tools if tool.name == "trigger_workflow")
    assert trigger.description == "Trigger a workflow run"
    assert set(trigger.inputSchema["properties"]) == {"owner", "repo", "workflowId", "ref", "inputs"}
    assert set(trigger.inputSchema["required"]) == {"owner", "repo", "workflowId", "ref"}


def test_create_mcp_server():
    server = create_mcp_server(build_registry(None))

    assert server.name == "github-actions-mcp-server"


def test_server_exposes_low_level_tool_decorators():
    """Test the installed mcp release provides the 1.x list_tools/call_tool API."""
    from mcp.server import Server

    assert callable(getattr(Server, "list_tools", None))
    assert callable(getattr(Server, "call_tool", None))
    assert "inputSchema" in Tool.model_fields


@pytest.mark.asyncio
async def test_trigger_workflow_end_to_end(no_content_registry):
    registry, requests = no_content_registry

    text = await invoke_tool(
        registry,
        "trigger_workflow",
        {"owner": "octo", "repo": "demo", "workflowId": "ci.yml", "ref": "main"},
    )

    assert json.loads(text) == {"success": True, "message": "Workflow ci.yml triggered on main"}
    assert len(requests) == 1
    assert requests[0].method == "POST"
    assert str(requests[0].url) == "https://api.github.com/repos/octo/demo/actions/workflows/ci.yml/dispatches"
    assert json.loads(requests[0].content) == {"ref": "main"}


@pytest.mark.asyncio
async def test_invalid_owner_end_to_end(no_content_registry):
    registry, requests = no_content_registry

    with pytest.raises(ToolInvocationError, match="^Invalid input: Owner name") as exc:
        await invoke_tool(
            registry, "get_workflow_run_jobs", {"owner": "Not Valid", "repo": "demo", "runId": 1}
        )

    assert "Traceback" not in str(exc.value)
    assert requests == []


@pytest.mark.asyncio
async def test_missing_arguments(no_content_registry):
    registry, _ = no_content_registry

    with pytest.raises(ToolInvocationError, match="Arguments are required"):
        await invoke_tool(registry, "list_workflows", None)


@pytest.mark.asyncio
async def test_unknown_tool(no_content_registry):
    registry, _ = no_content_registry

    with pytest.raises(ToolInvocationError, match="Unknown tool: delete_repo"):
        await invoke_tool(registry, "delete_repo", {})


@pytest.mark.asyncio
async def test_schema_violations_enumerated(no_content_registry):
    registry, requests = no_content_registry

    with pytest.raises(ToolInvocationError) as exc:
        await invoke_tool(registry, "get_workflow_run", {"repo": "demo", "runId": "abc"})

    message = str(exc.value)
    assert message.startswith("Invalid input: ")
    issues = json.loads(message.removeprefix("Invalid input: "))
    assert {tuple(issue["loc"]) for issue in issues} == {("owner",), ("runId",)}
    assert requests == []


@pytest.mark.asyncio
async def test_upstream_error_formatted(make_client):
    client, _ = make_client(
        lambda request: httpx.Response(403, json={"message": "Resource not accessible by integration"})
    )
    registry = build_registry(client)

    with pytest.raises(ToolInvocationError) as exc:
        await invoke_tool(registry, "rerun_workflow", {"owner": "octo", "repo": "demo", "runId": 5})

    assert str(exc.value) == "Permission Denied: Resource not accessible by integration"


class TestFormatGitHubError:
    """Tests for kind-specific error messages."""

    def test_validation_includes_details(self):
        body = {"message": "Unexpected inputs provided", "errors": ["env"]}
        message = format_github_error(GitHubAPIError.from_response(422, body))

        assert message.startswith("Validation Error: Unexpected inputs provided\nDetails: ")
        assert json.loads(message.split("Details: ", 1)[1]) == body

    def test_rate_limit_includes_reset(self):
        error = GitHubAPIError.rate_limited(
            "API rate limit exceeded", datetime(2030, 1, 1, tzinfo=timezone.utc)
        )

        assert format_github_error(error) == (
            "Rate Limit Exceeded: API rate limit exceeded\nResets at: 2030-01-01T00:00:00+00:00"
        )

    def test_timeout_includes_setting(self):
        assert format_github_error(GitHubAPIError.timeout(30000)) == (
            "Timeout: Request timeout after 30000ms\nTimeout setting: 30000ms"
        )

    def test_network_includes_code(self):
        assert format_github_error(GitHubAPIError.network("ENOTFOUND")) == (
            "Network Error: Unable to connect to GitHub API\nError code: ENOTFOUND"
        )

    @pytest.mark.parametrize(
        "status, expected",
        [
            (401, "Authentication Failed: Bad credentials"),
            (404, "Not Found: Resource not found: Bad credentials"),
            (409, "Conflict: Bad credentials"),
            (500, "GitHub API Error: Bad credentials"),
        ],
    )
    def test_simple_prefixes(self, status, expected):
        error = GitHubAPIError.from_response(status, {"message": "Bad credentials"})

        assert format_github_error(error) == expected

    def test_local_errors(self):
        assert format_adapter_error(GitHubInputError("Ref cannot be empty")) == (
            "Invalid input: Ref cannot be empty"
        )
        assert format_adapter_error(GitHubResponseShapeError("missing id")).startswith(
            "Unexpected GitHub response: "
        )
