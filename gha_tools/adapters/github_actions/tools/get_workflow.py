"""GitHub Actions Get Workflow Tool."""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import GetWorkflowInput


class GetWorkflowTool:
    """Tool for fetching one workflow by ID or file name."""

    name = "get_workflow"
    description = "Get details of a specific workflow"
    input_model = GetWorkflowInput

    metadata = ToolMetadata(
        requires_approval=False,
        idempotent=True,
        capabilities=["github.actions.read"],
        risk_level="low",
    )

    def __init__(self, client: GitHubActionsClient):
        self.client = client

    async def execute(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> dict[str, Any]:
        input_obj = GetWorkflowInput.model_validate(input_data)

        try:
            workflow = await self.client.get_workflow(
                owner=input_obj.owner,
                repo=input_obj.repo,
                workflow_id=input_obj.workflow_id,
            )
            return workflow.model_dump(mode="json")

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error getting workflow: {str(e)}", 500
            ) from e
