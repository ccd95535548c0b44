"""
Service modules for the SQL parse tree service.
"""

from sql_tree_server.services.parse_service import ParseService, get_parse_service
from sql_tree_server.services.tree_gate import is_clean
from sql_tree_server.services.tree_renderer import render

__all__ = ["ParseService", "get_parse_service", "is_clean", "render"]
