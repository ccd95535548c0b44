"""MCP server creation and transport handlers.

Provides two transport options:
- **stdio**: standard input/output for local tool use.
- **SSE**: Server-Sent Events mounted on the HTTP application.

Usage::

    # stdio (default):
    python -m sql_tree_server

    # SSE, served together with the HTTP API:
    TRANSPORT=sse python -m sql_tree_server
"""

from __future__ import annotations

from typing import Any

from mcp.server import Server
from mcp.shared.exceptions import McpError
from mcp.types import (
    INTERNAL_ERROR,
    INVALID_PARAMS,
    CallToolRequest,
    CallToolResult,
    ErrorData,
    ServerResult,
    TextContent,
    Tool,
)
from starlette.requests import Request
from starlette.responses import Response

from sql_tree_server import __version__
from sql_tree_server.exceptions import InvalidSQLError, TreeRenderError
from sql_tree_server.mcp.tools import TOOL_DEFINITIONS, TOOL_DISPATCH
from sql_tree_server.utils.logging import get_logger, log_error_with_context

logger = get_logger(__name__)

SERVER_NAME = "sql-tree"

INSTRUCTIONS = (
    "This server provides tools to parse SQL statements into a tree structure "
    "using tree-sitter-sql. Use the 'parse_sql' tool to strictly parse SQL "
    "statements, or 'parse_sql_with_error_recovery' to parse and return the "
    "tree including ERROR nodes for error recovery."
)


def _invalid_params(message: str) -> McpError:
    return McpError(ErrorData(code=INVALID_PARAMS, message=message))


async def dispatch_tool(name: str, arguments: dict[str, Any] | None) -> list[TextContent]:
    """Run a tool by name and wrap its output as MCP text content.

    Raises
    ------
    McpError
        ``INVALID_PARAMS`` for an unknown tool, a missing or non-string
        ``sql`` argument, or SQL rejected by strict parsing.
    TreeRenderError
        If the tree cannot be rendered; never converted to ``INVALID_PARAMS``.
    """
    handler = TOOL_DISPATCH.get(name)
    if handler is None:
        raise _invalid_params(f"Unknown tool: {name}")

    sql = (arguments or {}).get("sql")
    if not isinstance(sql, str):
        raise _invalid_params("Missing required string parameter 'sql'")

    try:
        text = await handler(sql)
    except InvalidSQLError as exc:
        raise _invalid_params(str(exc)) from exc
    except TreeRenderError as exc:
        log_error_with_context(logger, f"Tool '{name}' failed to render tree", exc, tool=name)
        raise

    return [TextContent(type="text", text=text)]


def create_server() -> Server:
    """Create and configure the MCP server with the parse tools.

    Returns
    -------
    mcp.server.Server
        A configured MCP server ready to run on any transport.
    """
    server = Server(SERVER_NAME, version=__version__, instructions=INSTRUCTIONS)

    @server.list_tools()  # type: ignore[untyped-decorator]
    async def list_tools() -> list[Tool]:
        """Return the list of available tools."""
        return [
            Tool(
                name=defn["name"],
                description=defn["description"],
                inputSchema=defn["inputSchema"],
            )
            for defn in TOOL_DEFINITIONS
        ]

    async def call_tool(req: CallToolRequest) -> ServerResult:
        """Dispatch a tool call; failures go back as JSON-RPC errors."""
        try:
            content = await dispatch_tool(req.params.name, req.params.arguments)
        except TreeRenderError as exc:
            raise McpError(
                ErrorData(code=INTERNAL_ERROR, message=f"Failed to render tree: {exc}")
            ) from exc
        return ServerResult(CallToolResult(content=content, isError=False))

    # Registered without the call_tool() decorator, which would turn McpError
    # into an ordinary isError result instead of a JSON-RPC error.
    server.request_handlers[CallToolRequest] = call_tool

    return server


async def run_stdio() -> None:
    """Run the MCP server on stdio transport.

    The server reads JSON-RPC messages from stdin and writes responses
    to stdout, so logging must stay on stderr.
    """
    from mcp.server.stdio import stdio_server

    server = create_server()

    async with stdio_server() as (read_stream, write_stream):
        await server.run(
            read_stream,
            write_stream,
            server.create_initialization_options(),
        )


def mount_sse(app: Any, server: Server | None = None) -> None:
    """Expose the MCP server over SSE on an existing Starlette/FastAPI app.

    Adds ``GET /sse`` for the event stream and ``POST /messages/`` for
    client messages.
    """
    from mcp.server.sse import SseServerTransport

    mcp_server = server or create_server()
    sse_transport = SseServerTransport("/messages/")

    async def handle_sse(request: Request) -> Response:
        async with sse_transport.connect_sse(request.scope, request.receive, request._send) as streams:
            await mcp_server.run(
                streams[0],
                streams[1],
                mcp_server.create_initialization_options(),
            )
        return Response()

    app.add_route("/sse", handle_sse, methods=["GET"])
    app.mount("/messages/", app=sse_transport.handle_post_message)
