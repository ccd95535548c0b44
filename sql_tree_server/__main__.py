"""
Command line entry point.

Runs the MCP server on stdio by default, or the HTTP application (REST API plus
MCP over SSE) when the configured transport is ``sse``.
"""

import asyncio
import sys

from sql_tree_server.config import settings
from sql_tree_server.utils.logging import setup_logging, get_logger

logger = get_logger(__name__)


def main() -> None:
    """Start the server on the configured transport."""
    setup_logging(settings.log_level)

    if settings.transport == "stdio":
        from sql_tree_server.mcp.server import run_stdio
        logger.info("Starting MCP server on stdio")
        asyncio.run(run_stdio())
    elif settings.transport == "sse":
        import uvicorn
        from sql_tree_server.main import app
        logger.info(f"Starting HTTP server on {settings.host}:{settings.port}")
        uvicorn.run(app, host=settings.host, port=settings.port)
    else:
        logger.error(f"Unknown transport '{settings.transport}', expected 'stdio' or 'sse'")
        sys.exit(2)


if __name__ == "__main__":
    main()
