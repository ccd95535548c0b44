"""
Parse service: grammar, strict gate and renderer wired together.

Two modes are offered:
- strict: any error node anywhere in the tree rejects the request
- tolerant: the tree is always rendered, error nodes included

Every call works on its own tree and parser; nothing is shared between requests
except the immutable grammar.
"""

from typing import Optional

from grammars.base import GrammarPlugin
from grammars.manager import GrammarManager
from sql_tree_server.config import settings
from sql_tree_server.exceptions import GrammarNotFoundError, InvalidSQLError, UnencodableSQLError
from sql_tree_server.services.tree_gate import inspect_tree, is_clean
from sql_tree_server.services.tree_renderer import render
from sql_tree_server.utils.logging import get_logger
from sql_tree_server.utils.metrics import ParseMetrics

logger = get_logger(__name__)

STRICT = "strict"
TOLERANT = "tolerant"


class ParseService:
    """Parses text with one grammar and renders the resulting tree."""

    def __init__(self, grammar: GrammarPlugin):
        """
        Initialize the parse service.

        Args:
            grammar: Grammar used for every parse
        """
        self._grammar = grammar

    @property
    def grammar_name(self) -> str:
        """Return the name of the grammar in use."""
        return self._grammar.grammar_name

    def _parse(self, sql: str, metrics: ParseMetrics):
        """Parse text the grammar can read; lone surrogates are rejected up front."""
        try:
            sql.encode("utf-8")
        except UnicodeEncodeError:
            metrics.complete(rejected=True)
            raise UnencodableSQLError() from None
        return self._grammar.parse(sql)

    def parse_sql(self, sql: str) -> str:
        """
        Parse strictly and render the tree.

        Args:
            sql: SQL text to parse

        Returns:
            Rendered syntax tree

        Raises:
            InvalidSQLError: If the tree contains any error node, or the text
                cannot be encoded as UTF-8
        """
        metrics = ParseMetrics(STRICT, self.grammar_name)
        metrics.start()

        tree = self._parse(sql, metrics)
        stats = inspect_tree(tree)
        metrics.record_tree(stats.node_count, stats.error_node_count)

        if not is_clean(tree, stats):
            metrics.complete(rejected=True)
            raise InvalidSQLError()

        result = render(tree, sql)
        metrics.complete()
        return result

    def parse_sql_with_error_recovery(self, sql: str) -> str:
        """
        Parse tolerantly and render the tree, error nodes included.

        Args:
            sql: SQL text to parse

        Returns:
            Rendered syntax tree

        Raises:
            UnencodableSQLError: If the text cannot be encoded as UTF-8
        """
        metrics = ParseMetrics(TOLERANT, self.grammar_name)
        metrics.start()

        tree = self._parse(sql, metrics)
        stats = inspect_tree(tree)
        metrics.record_tree(stats.node_count, stats.error_node_count)

        result = render(tree, sql)
        metrics.complete()
        return result


_parse_service: Optional[ParseService] = None


def create_parse_service(grammar_name: Optional[str] = None) -> ParseService:
    """
    Build a parse service for a registered grammar.

    Args:
        grammar_name: Grammar to use, the configured one if not given

    Returns:
        ParseService instance

    Raises:
        GrammarNotFoundError: If no grammar is registered under the name
    """
    name = grammar_name or settings.grammar

    manager = GrammarManager()
    if settings.grammars_dir is not None:
        manager.initialize_grammars(settings.grammars_dir)
    else:
        manager.initialize_grammars()

    grammar = manager.get_grammar(name)
    if grammar is None:
        raise GrammarNotFoundError(
            f"Grammar '{name}' is not available; "
            f"registered grammars: {manager.list_grammars()}"
        )

    logger.info(f"Parse service ready with grammar '{name}'", extra={"grammar": name})
    return ParseService(grammar)


def get_parse_service() -> ParseService:
    """
    Get or create the global parse service instance.

    Returns:
        ParseService instance
    """
    global _parse_service
    if _parse_service is None:
        _parse_service = create_parse_service()
    return _parse_service
