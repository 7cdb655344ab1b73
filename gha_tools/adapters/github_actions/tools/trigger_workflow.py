"""GitHub Actions Trigger Workflow Tool.

Dispatch a workflow_dispatch event for a workflow.
"""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import TriggerWorkflowInput


class TriggerWorkflowTool:
    """Tool for triggering workflow runs.

    Capabilities:
    - Run a workflow on a branch, tag or SHA
    - Pass workflow_dispatch inputs

    Use Cases:
    - "Run the deploy workflow on main"
    - "Trigger release.yml with version=1.2.0"
    """

    name = "trigger_workflow"
    description = "Trigger a workflow run"
    input_model = TriggerWorkflowInput

    metadata = ToolMetadata(
        requires_approval=True,  # Starts real CI/CD work
        idempotent=False,  # Each dispatch starts a new run
        capabilities=["github.actions.write"],
        risk_level="medium",
    )

    def __init__(self, client: GitHubActionsClient):
        """Initialize TriggerWorkflowTool.

        Args:
            client: Shared GitHub Actions client
        """
        self.client = client

    async def execute(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> dict[str, Any]:
        """Execute trigger workflow.

        Args:
            ctx: Execution context
            input_data: Tool input matching TriggerWorkflowInput schema

        Returns:
            {"success": True, "message": "Workflow <id> triggered on <ref>"}

        Raises:
            GitHubAdapterError: Invalid input or API errors
        """
        input_obj = TriggerWorkflowInput.model_validate(input_data)

        try:
            ack = await self.client.trigger_workflow(
                owner=input_obj.owner,
                repo=input_obj.repo,
                workflow_id=input_obj.workflow_id,
                ref=input_obj.ref,
                inputs=input_obj.inputs,
            )
            return ack.model_dump()

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error triggering workflow: {str(e)}", 500
            ) from e
