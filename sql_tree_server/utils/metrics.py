"""
Per-request parse metrics.

Tracks, for a single parse call:
- Parse + render duration
- Node and error node counts
- Whether strict mode rejected the tree

A collector is created per call and never shared between requests.
"""

import time
from typing import Any, Dict, Optional

from sql_tree_server.utils.logging import get_logger, log_parse_event

logger = get_logger(__name__)


class ParseMetrics:
    """
    Collects metrics for one parse request.
    """

    def __init__(self, mode: str, grammar: str):
        """
        Initialize metrics collector.

        Args:
            mode: Parse mode ('strict' or 'tolerant')
            grammar: Grammar name
        """
        self.mode = mode
        self.grammar = grammar

        self._start: Optional[float] = None
        self.duration_ms: Optional[float] = None

        self.node_count: int = 0
        self.error_node_count: int = 0
        self.rejected: bool = False

    def start(self) -> None:
        """Mark parse start."""
        self._start = time.perf_counter()

    def record_tree(self, node_count: int, error_node_count: int) -> None:
        """
        Record tree size.

        Args:
            node_count: Number of nodes in the tree
            error_node_count: Number of error nodes in the tree
        """
        self.node_count = node_count
        self.error_node_count = error_node_count

    def complete(self, rejected: bool = False) -> None:
        """
        Mark parse completion and log the parse event.

        Args:
            rejected: Whether strict mode rejected the tree
        """
        self.rejected = rejected
        if self._start is not None:
            self.duration_ms = (time.perf_counter() - self._start) * 1000

        log_parse_event(
            logger,
            mode=self.mode,
            grammar=self.grammar,
            node_count=self.node_count,
            error_node_count=self.error_node_count,
            duration_ms=self.duration_ms,
            rejected=self.rejected,
        )

    def get_metrics_summary(self) -> Dict[str, Any]:
        """
        Get summary of collected metrics.

        Returns:
            Dictionary of metrics
        """
        return {
            "mode": self.mode,
            "grammar": self.grammar,
            "duration_ms": round(self.duration_ms, 2) if self.duration_ms is not None else None,
            "node_count": self.node_count,
            "error_node_count": self.error_node_count,
            "rejected": self.rejected,
        }
