"""
Grammar provisioning for tree-sitter based symbol extraction.

Grammars are shipped as Python wheels (``tree_sitter_javascript``,
``tree_sitter_python``). They are imported lazily the first time a grammar is
requested; a grammar that cannot be loaded is logged once and reported as
unavailable, which disables analysis for its file extensions.
"""

import importlib
import logging
import threading
from typing import Dict, Optional

import tree_sitter

from ..constants import GRAMMAR_MODULES, SUPPORTED_LANGUAGES

logger = logging.getLogger(__name__)


class GrammarRegistry:
    """Loads and caches tree-sitter languages by grammar name."""

    def __init__(self, grammar_modules: Optional[Dict[str, str]] = None):
        self._grammar_modules = dict(grammar_modules or GRAMMAR_MODULES)
        self._languages: Dict[str, Optional[tree_sitter.Language]] = {}
        self._lock = threading.RLock()

    def get_language(self, grammar: str) -> Optional[tree_sitter.Language]:
        """
        Return the loaded language for a grammar name.

        Args:
            grammar: Grammar name, e.g. 'javascript' or 'python'

        Returns:
            The tree-sitter Language, or None if the grammar is unavailable
        """
        with self._lock:
            if grammar not in self._languages:
                self._languages[grammar] = self._load(grammar)
            return self._languages[grammar]

    def grammar_for_extension(self, extension: str) -> Optional[str]:
        """Map a file extension (with or without dot) to its grammar name."""
        return SUPPORTED_LANGUAGES.get(extension.lstrip('.').lower())

    def _load(self, grammar: str) -> Optional[tree_sitter.Language]:
        module_name = self._grammar_modules.get(grammar)
        if not module_name:
            logger.warning(f"No grammar module registered for '{grammar}'")
            return None

        try:
            module = importlib.import_module(module_name)
            language = tree_sitter.Language(module.language())
        except Exception as e:
            logger.warning(
                f"Grammar '{grammar}' unavailable ({module_name}): {e}. "
                f"Analysis is disabled for its file extensions."
            )
            return None

        logger.info(f"Loaded tree-sitter grammar '{grammar}' from {module_name}")
        return language
