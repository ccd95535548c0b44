"""
Tree-sitter backed grammar plugin.

The parse table itself comes from a compiled tree-sitter grammar binding
(e.g. the ``tree-sitter-sql`` distribution), named by ``language_module`` in the
grammar's config.yaml. This plugin only wires that table into a parser.
"""

import importlib
import logging
from typing import Any, Dict, Optional

import tree_sitter

from grammars.base import GrammarPlugin

logger = logging.getLogger(__name__)

REQUIRED_CONFIG_FIELDS = ['name', 'version', 'language_module']


def validate_grammar_config(config: Dict[str, Any], source: str = "grammar config") -> None:
    """
    Check that a grammar configuration names everything a grammar needs.

    Args:
        config: Parsed config.yaml contents
        source: Where the config came from, used in the error message

    Raises:
        ValueError: If a required field is missing
    """
    for field in REQUIRED_CONFIG_FIELDS:
        if field not in config:
            raise ValueError(f"Missing required field '{field}' in {source}")


class TreeSitterGrammar(GrammarPlugin):
    """Grammar plugin using a tree-sitter language binding."""

    def __init__(self, config: Dict[str, Any]):
        """
        Initialize the grammar.

        Args:
            config: Grammar configuration, as loaded from its config.yaml

        Raises:
            ValueError: If a required config field is missing
            ImportError: If the grammar binding is not installed
        """
        validate_grammar_config(config)
        self._config = config

        module_name = self._config['language_module']
        try:
            binding = importlib.import_module(module_name)
        except ImportError as e:
            raise ImportError(
                f"Grammar binding '{module_name}' is not installed. "
                f"Install it with: pip install {module_name.replace('_', '-')}"
            ) from e

        # The Language is immutable and safe to share; parsers are not.
        self._language = tree_sitter.Language(binding.language())

        logger.info(
            f"Grammar '{self.grammar_name}' v{self._config.get('version')} "
            f"initialized from {module_name}"
        )

    @property
    def grammar_name(self) -> str:
        """Return the grammar name."""
        return self._config['name']

    @property
    def config(self) -> Dict[str, Any]:
        """Return the grammar configuration."""
        return self._config

    @property
    def description(self) -> Optional[str]:
        """Return the human-readable grammar description, if configured."""
        return self._config.get('description')

    def parse(self, text: str) -> tree_sitter.Tree:
        """
        Parse text using a fresh tree-sitter parser.

        The text must be encodable as UTF-8. Callers reject text with lone
        surrogates before it gets here; every encodable text yields a tree.

        Args:
            text: Source text to parse

        Returns:
            tree_sitter.Tree, possibly containing ERROR or MISSING nodes
        """
        parser = tree_sitter.Parser(self._language)
        tree = parser.parse(text.encode("utf-8"))

        logger.debug(
            f"Parsed {len(text)} characters with grammar '{self.grammar_name}'",
            extra={"grammar": self.grammar_name},
        )
        return tree
