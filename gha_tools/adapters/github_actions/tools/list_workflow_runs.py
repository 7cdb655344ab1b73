"""GitHub Actions List Workflow Runs Tool.

List runs for a whole repository or for a single workflow.
"""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import ListWorkflowRunsInput


class ListWorkflowRunsTool:
    """Tool for listing workflow runs.

    Capabilities:
    - Filter by workflow, actor, branch, event, status and creation date
    - Exclude pull request data
    - Paginate

    Use Cases:
    - "Show failed runs on main"
    - "What did @octocat run yesterday?"
    - "List the last 5 runs of ci.yml"
    """

    name = "list_workflow_runs"
    description = "List all workflow runs for a repository or a specific workflow"
    input_model = ListWorkflowRunsInput

    metadata = ToolMetadata(
        requires_approval=False,
        idempotent=True,
        capabilities=["github.actions.read"],
        risk_level="low",
    )

    def __init__(self, client: GitHubActionsClient):
        """Initialize ListWorkflowRunsTool.

        Args:
            client: Shared GitHub Actions client
        """
        self.client = client

    async def execute(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> dict[str, Any]:
        """Execute list workflow runs.

        Args:
            ctx: Execution context
            input_data: Tool input matching ListWorkflowRunsInput schema

        Returns:
            Run list as returned by GitHub
        """
        input_obj = ListWorkflowRunsInput.model_validate(input_data)

        try:
            runs = await self.client.list_workflow_runs(
                owner=input_obj.owner,
                repo=input_obj.repo,
                workflow_id=input_obj.workflow_id,
                actor=input_obj.actor,
                branch=input_obj.branch,
                event=input_obj.event,
                status=input_obj.status,
                created=input_obj.created,
                exclude_pull_requests=input_obj.exclude_pull_requests,
                check_suite_id=input_obj.check_suite_id,
                page=input_obj.page,
                per_page=input_obj.per_page,
            )
            return runs.model_dump(mode="json")

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error listing workflow runs: {str(e)}", 500
            ) from e
