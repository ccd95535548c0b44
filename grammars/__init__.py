"""
Grammar plugin architecture for parsing.

This package provides the grammar plugin system used to turn source text into
syntax trees, including the base plugin interface and the grammar manager.
"""

from grammars.base import GrammarPlugin, SyntaxNode, SyntaxTree, is_error_node, iter_nodes
from grammars.manager import GrammarManager
from grammars.tree_sitter_grammar import TreeSitterGrammar

__all__ = [
    'GrammarPlugin',
    'GrammarManager',
    'SyntaxNode',
    'SyntaxTree',
    'TreeSitterGrammar',
    'is_error_node',
    'iter_nodes',
]
