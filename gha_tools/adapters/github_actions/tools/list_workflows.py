"""GitHub Actions List Workflows Tool.

List the workflows declared in a repository.
"""

from typing import Any

from gha_tools.base import ToolMetadata
from gha_tools.adapters.github_actions.client import GitHubActionsClient
from gha_tools.adapters.github_actions.exceptions import (
    ErrorKind,
    GitHubAdapterError,
    GitHubAPIError,
)
from gha_tools.adapters.github_actions.schemas import ListWorkflowsInput


class ListWorkflowsTool:
    """Tool for listing GitHub Actions workflows.

    Capabilities:
    - List workflows with their IDs, paths and state
    - Paginate through large workflow sets

    Use Cases:
    - "Which workflows does octo/demo have?"
    - "Find the ID of the release workflow"
    """

    name = "list_workflows"
    description = "List workflows in a GitHub repository"
    input_model = ListWorkflowsInput

    metadata = ToolMetadata(
        requires_approval=False,
        idempotent=True,
        capabilities=["github.actions.read"],
        risk_level="low",
    )

    def __init__(self, client: GitHubActionsClient):
        """Initialize ListWorkflowsTool.

        Args:
            client: Shared GitHub Actions client
        """
        self.client = client

    async def execute(
        self, ctx: dict[str, Any], input_data: dict[str, Any]
    ) -> dict[str, Any]:
        """Execute list workflows.

        Args:
            ctx: Execution context
            input_data: Tool input matching ListWorkflowsInput schema

        Returns:
            Workflow list as returned by GitHub

        Raises:
            pydantic.ValidationError: Input does not match the schema
            GitHubAdapterError: Invalid owner/repo or API errors
        """
        # Validate input
        input_obj = ListWorkflowsInput.model_validate(input_data)

        try:
            workflows = await self.client.list_workflows(
                owner=input_obj.owner,
                repo=input_obj.repo,
                page=input_obj.page,
                per_page=input_obj.per_page,
            )
            return workflows.model_dump(mode="json")

        except GitHubAdapterError:
            raise
        except Exception as e:
            raise GitHubAPIError(
                ErrorKind.GENERIC, f"Unexpected error listing workflows: {str(e)}", 500
            ) from e
