"""
Textual rendering of syntax trees.

One line per node in depth-first pre-order:

    <indent><kind>[ "<leaf text>"] [(row, column)-(row, column)]

The indent is two ``-`` per depth level. Only nodes without children carry the
quoted source text. Points use tree-sitter's native convention: zero-based rows
and byte columns, with an exclusive end. This layout is part of the public
output and must stay byte-for-byte stable.
"""

from typing import Tuple

from grammars.base import SyntaxNode, SyntaxTree, iter_nodes
from sql_tree_server.exceptions import TreeRenderError

INDENT_CHAR = "-"
INDENT_UNIT = 2


def format_point(point: Tuple[int, int]) -> str:
    """Format a (row, column) point as ``(row, column)``."""
    row, column = point
    return f"({row}, {column})"


def node_text(node: SyntaxNode, source: bytes) -> str:
    """
    Slice a node's text out of the UTF-8 encoded source.

    Raises:
        TreeRenderError: If the byte range is out of bounds or splits a code point
    """
    start, end = node.start_byte, node.end_byte
    if not 0 <= start <= end <= len(source):
        raise TreeRenderError(
            f"Span {start}..{end} of '{node.type}' node is outside "
            f"the {len(source)} byte source"
        )

    try:
        return source[start:end].decode("utf-8")
    except UnicodeDecodeError as e:
        raise TreeRenderError(
            f"Span {start}..{end} of '{node.type}' node does not fall on "
            f"UTF-8 character boundaries"
        ) from e


def render_node(root: SyntaxNode, source: str) -> str:
    """
    Render the subtree rooted at ``root``.

    Args:
        root: Node to start from, rendered at depth 0
        source: Text the tree was parsed from

    Returns:
        Rendered tree, one newline-terminated line per node
    """
    encoded = source.encode("utf-8")
    lines = []

    for node, depth in iter_nodes(root):
        line = INDENT_CHAR * (depth * INDENT_UNIT) + node.type
        if len(node.children) == 0:
            line += f' "{node_text(node, encoded)}"'
        line += f" [{format_point(node.start_point)}-{format_point(node.end_point)}]\n"
        lines.append(line)

    return "".join(lines)


def render(tree: SyntaxTree, source: str) -> str:
    """
    Render a whole syntax tree.

    Args:
        tree: Parsed tree
        source: Text the tree was parsed from

    Returns:
        Rendered tree text
    """
    return render_node(tree.root_node, source)
