"""
GitHub Actions MCP Configuration Package.

Provides Pydantic Settings loaded from environment variables.
"""

from gha_config.settings import Settings

__all__ = ["Settings"]
