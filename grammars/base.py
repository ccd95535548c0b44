"""
Base interface for grammar plugins.

This module defines the abstract base class that all grammar plugins must implement,
plus the structural protocols the rest of the service relies on when walking a
parse tree. Nothing here assumes a particular dialect's node-kind vocabulary.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, Iterator, Protocol, Sequence, Tuple


class SyntaxNode(Protocol):
    """A node of a parse tree produced by a grammar engine."""

    @property
    def type(self) -> str: ...

    @property
    def children(self) -> Sequence["SyntaxNode"]: ...

    @property
    def start_point(self) -> Tuple[int, int]: ...

    @property
    def end_point(self) -> Tuple[int, int]: ...

    @property
    def start_byte(self) -> int: ...

    @property
    def end_byte(self) -> int: ...

    @property
    def is_error(self) -> bool: ...

    @property
    def is_missing(self) -> bool: ...

    @property
    def has_error(self) -> bool: ...


class SyntaxTree(Protocol):
    """An immutable parse tree for one input text."""

    @property
    def root_node(self) -> SyntaxNode: ...


def is_error_node(node: SyntaxNode) -> bool:
    """
    Return True if the grammar flagged the node as a recovery artifact.

    ERROR and MISSING nodes count, and so does a node whose error lives only in
    hidden descendants: it reports has_error while none of its visible children do.
    """
    if node.is_error or node.is_missing:
        return True
    return bool(node.has_error) and not any(child.has_error for child in node.children)


def iter_nodes(root: SyntaxNode) -> Iterator[Tuple[SyntaxNode, int]]:
    """
    Yield (node, depth) pairs in depth-first pre-order, children in source order.

    Uses an explicit stack so deeply nested trees do not hit the recursion limit.
    """
    stack = [(root, 0)]
    while stack:
        node, depth = stack.pop()
        yield node, depth
        children = node.children
        for child in reversed(children):
            stack.append((child, depth + 1))


class GrammarPlugin(ABC):
    """Base interface for grammar plugins."""

    @property
    @abstractmethod
    def grammar_name(self) -> str:
        """Return the grammar name (e.g., 'sql')."""
        pass

    @property
    @abstractmethod
    def config(self) -> Dict[str, Any]:
        """Return the grammar configuration loaded from config.yaml."""
        pass

    @abstractmethod
    def parse(self, text: str) -> SyntaxTree:
        """
        Parse text into a syntax tree.

        Implementations never raise for malformed input: failures are
        represented inside the returned tree as error nodes.

        Args:
            text: Source text to parse (may be empty)

        Returns:
            SyntaxTree whose root spans the parsed input
        """
        pass
