"""
Utility modules for the SQL parse tree service.
"""

from sql_tree_server.utils.logging import (
    get_logger,
    setup_logging,
    LogContext,
    log_parse_event,
    log_error_with_context,
)
from sql_tree_server.utils.metrics import ParseMetrics

__all__ = [
    "get_logger",
    "setup_logging",
    "LogContext",
    "log_parse_event",
    "log_error_with_context",
    "ParseMetrics",
]
