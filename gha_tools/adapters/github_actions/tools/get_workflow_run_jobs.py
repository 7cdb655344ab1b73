"""GitHub Actions Get Workflow Run Jobs Tool."""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import GetWorkflowRunJobsInput


class GetWorkflowRunJobsTool:
    """Tool for listing the jobs (and their steps) of a workflow run.

    Use Cases:
    - "Which step failed in run 123?"
    - "Show jobs for every attempt of run 123" (filter=all)
    """

    name = "get_workflow_run_jobs"
    description = "Get jobs for a specific workflow run"
    input_model = GetWorkflowRunJobsInput

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
        input_obj = GetWorkflowRunJobsInput.model_validate(input_data)

        try:
            jobs = await self.client.get_workflow_run_jobs(
                owner=input_obj.owner,
                repo=input_obj.repo,
                run_id=input_obj.run_id,
                filter=input_obj.filter,
                page=input_obj.page,
                per_page=input_obj.per_page,
            )
            return jobs.model_dump(mode="json")

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error getting workflow run jobs: {str(e)}", 500
            ) from e
