"""GitHub Actions Cancel Workflow Run Tool."""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import RunInput


class CancelWorkflowRunTool:
    """Tool for cancelling an in-progress workflow run.

    GitHub answers 409 when the run has already finished.
    """

    name = "cancel_workflow_run"
    description = "Cancel a workflow run"
    input_model = RunInput

    metadata = ToolMetadata(
        requires_approval=True,
        idempotent=True,
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
            ack = await self.client.cancel_workflow_run(
                owner=input_obj.owner,
                repo=input_obj.repo,
                run_id=input_obj.run_id,
            )
            return ack.model_dump()

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error cancelling workflow run: {str(e)}", 500
            ) from e
