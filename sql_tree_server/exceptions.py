"""
Exceptions raised by the parse service.
"""

INVALID_SQL_MESSAGE = "Failed to parse sql"
UNENCODABLE_SQL_MESSAGE = "sql text is not valid UTF-8"


class InvalidSQLError(ValueError):
    """Strict parsing found one or more error nodes in the tree."""

    def __init__(self, message: str = INVALID_SQL_MESSAGE):
        super().__init__(message)


class UnencodableSQLError(InvalidSQLError):
    """The text holds code points (lone surrogates) that UTF-8 cannot encode."""

    def __init__(self, message: str = UNENCODABLE_SQL_MESSAGE):
        super().__init__(message)


class TreeRenderError(RuntimeError):
    """A node span could not be sliced from the source text."""


class GrammarNotFoundError(LookupError):
    """The configured grammar is not registered."""
