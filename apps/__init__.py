"""
GitHub Actions MCP Applications Package.

Contains:
- mcp_server: MCP stdio server exposing the GitHub Actions tools
"""
