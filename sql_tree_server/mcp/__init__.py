"""MCP (Model Context Protocol) server.

Exposes SQL parsing as two MCP tools, ``parse_sql`` and
``parse_sql_with_error_recovery``, that AI assistants can discover
and invoke.

Start the server::

    python -m sql_tree_server               # stdio transport
    TRANSPORT=sse python -m sql_tree_server # SSE transport over HTTP
"""
