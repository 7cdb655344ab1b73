"""GitHub Actions adapter.

Provides tools for interacting with GitHub Actions:
- List and inspect workflows and their usage
- List and inspect workflow runs and jobs
- Trigger, cancel and re-run workflows

Usage:
    from gha_tools.adapters.github_actions import (
        GitHubActionsClient,
        register_github_actions_tools,
    )
    from gha_tools.registry import ToolRegistry

    registry = ToolRegistry()
    register_github_actions_tools(registry, GitHubActionsClient(token="ghp_..."))
"""

from .client import GitHubActionsClient, build_url
from .exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
    GitHubInputError,
    GitHubResponseShapeError,
)
from .quota import RequestQuota
from .schemas import (
    ActionAck,
    Job,
    JobList,
    Workflow,
    WorkflowList,
    WorkflowRun,
    WorkflowRunList,
    WorkflowUsage,
)
from .tools import (
    CancelWorkflowRunTool,
    GetWorkflowRunJobsTool,
    GetWorkflowRunTool,
    GetWorkflowTool,
    GetWorkflowUsageTool,
    ListWorkflowRunsTool,
    ListWorkflowsTool,
    RerunWorkflowTool,
    TriggerWorkflowTool,
)
from .validation import validate_owner_name, validate_repository_name

__all__ = [
    # Client
    "GitHubActionsClient",
    "RequestQuota",
    "build_url",
    # Validation
    "validate_owner_name",
    "validate_repository_name",
    # Exceptions
    "ErrorKind",
    "GitHubAdapterError",
    "GitHubAPIError",
    "GitHubInputError",
    "GitHubResponseShapeError",
    # Schemas
    "ActionAck",
    "Job",
    "JobList",
    "Workflow",
    "WorkflowList",
    "WorkflowRun",
    "WorkflowRunList",
    "WorkflowUsage",
    # Tools
    "ListWorkflowsTool",
    "GetWorkflowTool",
    "GetWorkflowUsageTool",
    "ListWorkflowRunsTool",
    "GetWorkflowRunTool",
    "GetWorkflowRunJobsTool",
    "TriggerWorkflowTool",
    "CancelWorkflowRunTool",
    "RerunWorkflowTool",
]


def register_github_actions_tools(registry, client: GitHubActionsClient) -> None:
    """Register all GitHub Actions tools with the tool registry.

    Every tool shares ``client``, and with it one request quota.

    Args:
        registry: ToolRegistry instance
        client: GitHubActionsClient used by every tool
    """
    registry.register(ListWorkflowsTool(client))
    registry.register(GetWorkflowTool(client))
    registry.register(GetWorkflowUsageTool(client))
    registry.register(ListWorkflowRunsTool(client))
    registry.register(GetWorkflowRunTool(client))
    registry.register(GetWorkflowRunJobsTool(client))
    registry.register(TriggerWorkflowTool(client))
    registry.register(CancelWorkflowRunTool(client))
    registry.register(RerunWorkflowTool(client))
