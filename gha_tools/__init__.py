"""GitHub Actions Tool System.

Tool interface & registry shared by the MCP server.
"""

from gha_tools.base import Tool, ToolMetadata
from gha_tools.registry import ToolRegistry

__version__ = "0.1.0"

__all__ = ["Tool", "ToolMetadata", "ToolRegistry", "__version__"]
