"""GitHub Actions Re-run Workflow Tool."""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import RunInput


class RerunWorkflowTool:
    """Tool for re-running every job of a workflow run."""

    name = "rerun_workflow"
    description = "Re-run a workflow run"
    input_model = RunInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=False,  # Each re-run is a new attempt
        capabilities=["github.actions.write"],
        risk_level="medium",
    )

    def __init__(self, client: GitHubActionsClient):
        self.client = client

    async def execute(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> dict[str, Any]:
        input_obj = RunInput.model_validate(input_data)

        try:
            ack = await self.client.rerun_workflow_run(
                owner=input_obj.owner,
                repo=input_obj.repo,
                run_id=input_obj.run_id,
            )
            return ack.model_dump()

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error re-running workflow: {str(e)}", 500
            ) from e
