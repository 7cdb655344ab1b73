"""Tool Adapters.

Available adapters:
- github_actions: GitHub Actions workflows, runs and jobs
"""

__all__ = ["github_actions"]
