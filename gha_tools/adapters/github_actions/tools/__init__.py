"""GitHub Actions tools package.

Exports all GitHub Actions tools for easy importing.
"""

from .list_workflows import ListWorkflowsTool
from .get_workflow import GetWorkflowTool
from .get_workflow_usage import GetWorkflowUsageTool
from .list_workflow_runs import ListWorkflowRunsTool
from .get_workflow_run import GetWorkflowRunTool
from .get_workflow_run_jobs import GetWorkflowRunJobsTool
from .trigger_workflow import TriggerWorkflowTool
from .cancel_workflow_run import CancelWorkflowRunTool
from .rerun_workflow import RerunWorkflowTool

__all__ = [
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
