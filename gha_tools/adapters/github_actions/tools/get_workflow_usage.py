"""GitHub Actions Get Workflow Usage Tool.

Billable minutes per runner platform for the current billing cycle.
"""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import GetWorkflowInput


class GetWorkflowUsageTool:
    """Tool for reading workflow usage statistics.

    Use Cases:
    - "How many Ubuntu minutes did ci.yml use this month?"
    """

    name = "get_workflow_usage"
    description = "Get usage statistics of a workflow"
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
            usage = await self.client.get_workflow_usage(
                owner=input_obj.owner,
                repo=input_obj.repo,
                workflow_id=input_obj.workflow_id,
            )
            return usage.model_dump(mode="json", exclude_none=True)

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error getting workflow usage: {str(e)}", 500
            ) from e
