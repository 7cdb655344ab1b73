"""GitHub Actions Get Workflow Run Tool."""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import RunInput


class GetWorkflowRunTool:
    """Tool for fetching a single workflow run."""

    name = "get_workflow_run"
    description = "Get details of a specific workflow run"
    input_model = RunInput

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
        input_obj = RunInput.model_validate(input_data)

        try:
            run = await self.client.get_workflow_run(
                owner=input_obj.owner,
                repo=input_obj.repo,
                run_id=input_obj.run_id,
            )
            return run.model_dump(mode="json")

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error getting workflow run: {str(e)}", 500
            ) from e
