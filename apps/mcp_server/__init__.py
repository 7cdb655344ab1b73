"""GitHub Actions MCP server (stdio)."""
