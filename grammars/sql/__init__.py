"""
SQL grammar backed by tree-sitter-sql.

The grammar is described by config.yaml in this directory and registered by
GrammarManager.initialize_grammars().
"""
