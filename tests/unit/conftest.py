"""
Shared fixtures: hand-built syntax trees shaped like tree-sitter output.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import pytest


@dataclass(frozen=True)
class FakeNode:
    """Minimal stand-in for a tree-sitter node."""

    type: str
    start_byte: int
    end_byte: int
    start_point: Tuple[int, int]
    end_point: Tuple[int, int]
    children: Tuple["FakeNode", ...] = ()
    is_error: bool = False
    is_missing: bool = False
    has_error: bool = False


@dataclass(frozen=True)
class FakeTree:
    """Minimal stand-in for a tree-sitter tree."""

    root_node: FakeNode


def make_node(
    kind: str,
    source: str,
    start: int,
    end: int,
    *children: FakeNode,
    is_error: bool = False,
    is_missing: bool = False,
    has_error: bool = False,
    points: Optional[Tuple[Tuple[int, int], Tuple[int, int]]] = None,
) -> FakeNode:
    """
    Build a node from character offsets into a single-line source.

    has_error propagates up from children like tree-sitter's own flag. Setting it
    on a node with no error children models an error held in a hidden node.
    """
    start_byte = len(source[:start].encode("utf-8"))
    end_byte = len(source[:end].encode("utf-8"))
    if points is None:
        points = ((0, start_byte), (0, end_byte))
    return FakeNode(
        type=kind,
        start_byte=start_byte,
        end_byte=end_byte,
        start_point=points[0],
        end_point=points[1],
        children=tuple(children),
        is_error=is_error,
        is_missing=is_missing,
        has_error=has_error or is_error or is_missing or any(c.has_error for c in children),
    )


@pytest.fixture
def node():
    """Factory for fake nodes."""
    return make_node


@pytest.fixture
def tree():
    """Wraps a root node as a tree."""
    return FakeTree


@pytest.fixture
def select_one_tree():
    """Clean tree for ``SELECT 1``."""
    src = "SELECT 1"
    return FakeTree(
        make_node(
            "program", src, 0, 8,
            make_node(
                "statement", src, 0, 8,
                make_node(
                    "select", src, 0, 8,
                    make_node("keyword_select", src, 0, 6),
                    make_node(
                        "select_expression", src, 7, 8,
                        make_node("term", src, 7, 8, make_node("literal", src, 7, 8)),
                    ),
                ),
            ),
        )
    )


@pytest.fixture
def incomplete_select_tree():
    """Tree for ``SELECT`` with the keyword wrapped in an ERROR node."""
    src = "SELECT"
    return FakeTree(
        make_node(
            "program", src, 0, 6,
            make_node("ERROR", src, 0, 6, make_node("keyword_select", src, 0, 6), is_error=True),
        )
    )


@pytest.fixture
def missing_node_tree():
    """Tree for ``SELECT a FROM`` where recovery inserted a zero-width identifier."""
    src = "SELECT a FROM"
    return FakeTree(
        make_node(
            "program", src, 0, 13,
            make_node(
                "statement", src, 0, 13,
                make_node(
                    "select", src, 0, 8,
                    make_node("keyword_select", src, 0, 6),
                    make_node("select_expression", src, 7, 8, make_node("identifier", src, 7, 8)),
                ),
                make_node(
                    "from", src, 9, 13,
                    make_node("keyword_from", src, 9, 13),
                    make_node("identifier", src, 13, 13, is_missing=True),
                ),
            ),
        )
    )


@pytest.fixture
def empty_tree():
    """Tree for the empty string: a bare root."""
    return FakeTree(make_node("program", "", 0, 0))


@pytest.fixture
def hidden_error_tree():
    """Tree for ``SELECT 1 +`` where the error sits in a node hidden from children."""
    src = "SELECT 1 +"
    return FakeTree(
        make_node(
            "program", src, 0, 10,
            make_node(
                "statement", src, 0, 10,
                make_node(
                    "select", src, 0, 10,
                    make_node("keyword_select", src, 0, 6),
                    make_node(
                        "select_expression", src, 7, 10,
                        make_node("term", src, 7, 10, has_error=True),
                    ),
                ),
            ),
        )
    )
