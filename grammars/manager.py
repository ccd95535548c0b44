"""
Grammar Manager for parser grammar plugins.

This module manages grammar registration, discovery, and lookup by name.
"""

import logging
from pathlib import Path
from typing import Dict, List, Optional
import yaml

from grammars.base import GrammarPlugin
from grammars.tree_sitter_grammar import TreeSitterGrammar, validate_grammar_config

logger = logging.getLogger(__name__)

GRAMMARS_DIR = Path(__file__).parent


class GrammarManager:
    """Manages grammar plugin registration and selection."""

    def __init__(self):
        """Initialize the grammar manager."""
        self._grammars: Dict[str, GrammarPlugin] = {}
        self._config_cache: Dict[str, Dict] = {}

    def register_grammar(self, grammar: GrammarPlugin) -> None:
        """
        Register a grammar plugin.

        Args:
            grammar: GrammarPlugin instance to register
        """
        name = grammar.grammar_name

        if name in self._grammars:
            logger.warning(f"Grammar '{name}' already registered, overwriting")

        self._grammars[name] = grammar
        logger.info(f"Registered grammar '{name}'")

    def get_grammar(self, name: str) -> Optional[GrammarPlugin]:
        """
        Get grammar by name.

        Args:
            name: Name of the grammar

        Returns:
            GrammarPlugin instance if found, None otherwise
        """
        grammar = self._grammars.get(name)
        if grammar is None:
            logger.debug(f"No grammar registered under '{name}'")
        return grammar

    def list_grammars(self) -> List[str]:
        """
        List all registered grammars.

        Returns:
            List of grammar names
        """
        return list(self._grammars.keys())

    def load_grammar_config(self, grammar_dir: Path) -> Dict:
        """
        Load grammar configuration from YAML file.

        Args:
            grammar_dir: Directory containing the grammar's config.yaml

        Returns:
            Dictionary containing grammar configuration

        Raises:
            FileNotFoundError: If config.yaml is not found
            ValueError: If a required field is missing
            yaml.YAMLError: If config.yaml is malformed
        """
        config_path = grammar_dir / "config.yaml"

        cache_key = str(config_path)
        if cache_key in self._config_cache:
            return self._config_cache[cache_key]

        if not config_path.exists():
            raise FileNotFoundError(f"Grammar configuration not found: {config_path}")

        try:
            with open(config_path, 'r') as f:
                config = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.error(f"Failed to parse grammar configuration {config_path}: {e}")
            raise

        validate_grammar_config(config, str(config_path))

        self._config_cache[cache_key] = config

        logger.info(f"Loaded grammar configuration from {config_path}")
        return config

    def initialize_grammars(self, grammars_dir: Path = GRAMMARS_DIR) -> None:
        """
        Discover and register all grammars under a directory.

        Every subdirectory holding a valid config.yaml is instantiated as a
        TreeSitterGrammar. Grammars whose binding cannot be loaded are
        skipped with an error log.

        Args:
            grammars_dir: Path to the grammars directory
        """
        if not grammars_dir.exists():
            logger.warning(f"Grammars directory not found: {grammars_dir}")
            return

        logger.info(f"Initializing grammars from {grammars_dir}")

        for grammar_dir in sorted(grammars_dir.iterdir()):
            if not grammar_dir.is_dir():
                continue

            config_path = grammar_dir / "config.yaml"
            if not config_path.exists():
                logger.debug(f"Skipping {grammar_dir.name}: no config.yaml found")
                continue

            try:
                config = self.load_grammar_config(grammar_dir)
                logger.info(
                    f"Found grammar configuration: {config['name']} v{config['version']}"
                )
                self.register_grammar(TreeSitterGrammar(config))
            except (ImportError, ValueError, yaml.YAMLError) as e:
                logger.error(f"Failed to load grammar from {grammar_dir}: {e}")
                continue

    def unregister_grammar(self, name: str) -> bool:
        """
        Unregister a grammar.

        Args:
            name: Name of the grammar to unregister

        Returns:
            True if grammar was unregistered, False if not found
        """
        if name not in self._grammars:
            return False

        del self._grammars[name]

        logger.info(f"Unregistered grammar '{name}'")
        return True

    def get_statistics(self) -> Dict[str, object]:
        """
        Get grammar manager statistics.

        Returns:
            Dictionary with statistics
        """
        return {
            "total_grammars": len(self._grammars),
            "grammars": list(self._grammars.keys()),
        }
