"""
GitHub Actions MCP server entry point.

    GITHUB_PERSONAL_ACCESS_TOKEN=ghp_... github-actions-mcp
"""

import asyncio
import sys

from pydantic import ValidationError

from apps.mcp_server.server import run_server
from gha_config.settings import Settings
from gha_obs.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    try:
        settings = Settings()
    except ValidationError as e:
        # Logging is not configured yet and stdout belongs to the MCP stream
        print(f"Invalid configuration: {e}", file=sys.stderr)
        sys.exit(1)

    setup_logging(settings)

    try:
        asyncio.run(run_server(settings))
    except KeyboardInterrupt:
        pass
    except Exception:
        logger.exception("fatal_error")
        sys.exit(1)


if __name__ == "__main__":
    main()
