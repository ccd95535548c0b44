"""MCP tool implementations.

Each tool is a plain async function that:
1. Accepts the ``sql`` text to parse.
2. Delegates to the shared :class:`ParseService`.
3. Returns the rendered syntax tree as text.

The ``TOOL_DEFINITIONS`` list at the bottom provides JSON Schema
descriptions for tool registration with the MCP server.  These
schemas are consumed by :mod:`sql_tree_server.mcp.server`.

Tool list:
- ``parse_sql``                      Strict parse, fails on any error node.
- ``parse_sql_with_error_recovery``  Tolerant parse, ERROR nodes inline.
"""

from __future__ import annotations

from typing import Any

from sql_tree_server.services.parse_service import get_parse_service


async def parse_sql(sql: str) -> str:
    """Parse SQL and return the rendered tree.

    Raises :class:`~sql_tree_server.exceptions.InvalidSQLError` when the
    tree contains an ERROR or MISSING node anywhere.
    """
    return get_parse_service().parse_sql(sql)


async def parse_sql_with_error_recovery(sql: str) -> str:
    """Parse SQL and return the rendered tree, including ERROR nodes."""
    return get_parse_service().parse_sql_with_error_recovery(sql)


# ---------------------------------------------------------------------------
# Tool definitions (JSON Schema for MCP registration)
# ---------------------------------------------------------------------------

_SQL_PARAMETER_SCHEMA: dict[str, Any] = {
    "type": "object",
    "properties": {
        "sql": {
            "type": "string",
            "description": "sql text to parse",
        },
    },
    "required": ["sql"],
}

TOOL_DEFINITIONS: list[dict[str, Any]] = [
    {
        "name": "parse_sql",
        "description": "Parse sql",
        "inputSchema": _SQL_PARAMETER_SCHEMA,
    },
    {
        "name": "parse_sql_with_error_recovery",
        "description": "Parse sql with error recovery (including ERROR node)",
        "inputSchema": _SQL_PARAMETER_SCHEMA,
    },
]

TOOL_DISPATCH: dict[str, Any] = {
    "parse_sql": parse_sql,
    "parse_sql_with_error_recovery": parse_sql_with_error_recovery,
}
