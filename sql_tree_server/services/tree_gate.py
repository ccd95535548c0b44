"""
Strict-mode acceptance checks for syntax trees.
"""

from typing import NamedTuple, Optional

from grammars.base import SyntaxTree, is_error_node, iter_nodes


class TreeStats(NamedTuple):
    """Node counts gathered in one walk over a tree."""

    node_count: int
    error_node_count: int


def inspect_tree(tree: SyntaxTree) -> TreeStats:
    """Count all nodes and error nodes in a single pre-order pass."""
    node_count = 0
    error_node_count = 0
    for node, _ in iter_nodes(tree.root_node):
        node_count += 1
        if is_error_node(node):
            error_node_count += 1
    return TreeStats(node_count, error_node_count)


def is_clean(tree: SyntaxTree, stats: Optional[TreeStats] = None) -> bool:
    """
    Return True if the tree holds no recovery artifact at any depth.

    The root's has_error flag covers errors tree-sitter keeps in hidden nodes;
    the scan covers every visible ERROR and MISSING node. Pass stats from
    inspect_tree to skip the second walk.
    """
    if tree.root_node.has_error:
        return False
    if stats is None:
        stats = inspect_tree(tree)
    return stats.error_node_count == 0


def count_nodes(tree: SyntaxTree) -> int:
    """Return the number of nodes in the tree."""
    return inspect_tree(tree).node_count


def count_error_nodes(tree: SyntaxTree) -> int:
    """Return the number of error nodes in the tree."""
    return inspect_tree(tree).error_node_count
