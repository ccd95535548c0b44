"""
Unit tests for the strict and tolerant parse modes.
"""

import logging
from typing import Any, Dict

import pytest

from grammars.base import GrammarPlugin
from sql_tree_server.exceptions import (
    INVALID_SQL_MESSAGE,
    UNENCODABLE_SQL_MESSAGE,
    InvalidSQLError,
    UnencodableSQLError,
)
from sql_tree_server.services.parse_service import ParseService


class MockGrammar(GrammarPlugin):
    """Grammar returning canned trees keyed by input text."""

    def __init__(self, trees: Dict[str, Any]):
        self._trees = trees
        self.calls = []

    @property
    def grammar_name(self) -> str:
        return "mock_sql"

    @property
    def config(self) -> Dict[str, Any]:
        return {"name": "mock_sql", "version": "1.0.0", "language_module": "mock"}

    def parse(self, text: str):
        self.calls.append(text)
        return self._trees[text]


@pytest.fixture
def service(select_one_tree, incomplete_select_tree, missing_node_tree, hidden_error_tree, empty_tree):
    """Parse service over the fixture trees."""
    grammar = MockGrammar({
        "SELECT 1": select_one_tree,
        "SELECT": incomplete_select_tree,
        "SELECT a FROM": missing_node_tree,
        "SELECT 1 +": hidden_error_tree,
        "": empty_tree,
    })
    return ParseService(grammar)


def test_grammar_name(service):
    """Service reports its grammar."""
    assert service.grammar_name == "mock_sql"


def test_strict_parse_clean_sql(service):
    """Strict mode renders clean trees."""
    output = service.parse_sql("SELECT 1")

    assert output.startswith("program [(0, 0)-(0, 8)]\n")
    assert len(output.splitlines()) == 7


def test_strict_and_tolerant_agree_on_clean_sql(service):
    """When strict parsing succeeds both modes return identical text."""
    strict = service.parse_sql("SELECT 1")
    tolerant = service.parse_sql_with_error_recovery("SELECT 1")

    assert strict == tolerant
    assert "ERROR" not in tolerant


def test_strict_rejects_error_nodes(service):
    """Strict mode rejects a tree with an ERROR node below the root."""
    with pytest.raises(InvalidSQLError) as exc_info:
        service.parse_sql("SELECT")

    assert str(exc_info.value) == INVALID_SQL_MESSAGE


def test_strict_rejects_missing_nodes(service):
    """Strict mode rejects a tree with a MISSING node."""
    with pytest.raises(InvalidSQLError):
        service.parse_sql("SELECT a FROM")


def test_tolerant_renders_error_nodes(service):
    """Tolerant mode never raises and shows ERROR nodes inline."""
    output = service.parse_sql_with_error_recovery("SELECT")

    assert "--ERROR [(0, 0)-(0, 6)]\n" in output
    assert "----keyword_select \"SELECT\" [(0, 0)-(0, 6)]\n" in output


def test_tolerant_renders_missing_nodes(service):
    """Tolerant mode shows MISSING nodes as empty leaves."""
    output = service.parse_sql_with_error_recovery("SELECT a FROM")

    assert "identifier \"\" [(0, 13)-(0, 13)]" in output


def test_empty_input_both_modes(service):
    """Empty input yields a bare root in both modes."""
    expected = "program \"\" [(0, 0)-(0, 0)]\n"

    assert service.parse_sql("") == expected
    assert service.parse_sql_with_error_recovery("") == expected


def test_each_call_parses_again(service):
    """Trees are never cached across calls."""
    service.parse_sql("SELECT 1")
    service.parse_sql("SELECT 1")

    assert service._grammar.calls == ["SELECT 1", "SELECT 1"]


def test_rejection_is_logged(service, caplog):
    """Strict rejections emit a parse event."""
    with caplog.at_level(logging.INFO):
        with pytest.raises(InvalidSQLError):
            service.parse_sql("SELECT")

    records = [r for r in caplog.records if r.getMessage().startswith("Parse rejected")]
    assert len(records) == 1
    assert records[0].mode == "strict"
    assert records[0].error_node_count == 1


def test_strict_rejects_hidden_errors(service):
    """Strict mode rejects trees whose only error sits in a hidden node."""
    with pytest.raises(InvalidSQLError) as exc_info:
        service.parse_sql("SELECT 1 +")

    assert str(exc_info.value) == INVALID_SQL_MESSAGE


def test_tolerant_renders_hidden_errors(service):
    """Tolerant mode still renders a tree with a hidden error."""
    output = service.parse_sql_with_error_recovery("SELECT 1 +")

    assert "--------term \"1 +\" [(0, 7)-(0, 10)]\n" in output


@pytest.mark.parametrize("method", ["parse_sql", "parse_sql_with_error_recovery"])
def test_lone_surrogate_rejected_before_parsing(service, method):
    """Text UTF-8 cannot encode is rejected in both modes without parsing."""
    with pytest.raises(UnencodableSQLError) as exc_info:
        getattr(service, method)("SELECT '\ud800'")

    assert isinstance(exc_info.value, InvalidSQLError)
    assert str(exc_info.value) == UNENCODABLE_SQL_MESSAGE
    assert service._grammar.calls == []


def test_parse_event_counts_hidden_errors(service, caplog):
    """The error node count in the parse event includes hidden errors."""
    with caplog.at_level(logging.INFO):
        service.parse_sql_with_error_recovery("SELECT 1 +")

    records = [r for r in caplog.records if r.getMessage().startswith("Parse completed")]
    assert len(records) == 1
    assert records[0].node_count == 6
    assert records[0].error_node_count == 1
