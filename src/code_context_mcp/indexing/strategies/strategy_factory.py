"""
Strategy factory for creating appropriate parsing strategies.
"""

import logging
import threading
from typing import Dict, List, Optional, Type

from ..grammars import GrammarRegistry
from .base_strategy import ParsingStrategy
from .javascript_strategy import JavaScriptParsingStrategy
from .python_strategy import PythonParsingStrategy

logger = logging.getLogger(__name__)

# Grammar name -> strategy class
STRATEGY_CLASSES: Dict[str, Type[ParsingStrategy]] = {
    'javascript': JavaScriptParsingStrategy,
    'python': PythonParsingStrategy,
}


class StrategyFactory:
    """Factory for creating appropriate parsing strategies."""

    def __init__(self, grammars: Optional[GrammarRegistry] = None):
        self._grammars = grammars or GrammarRegistry()
        self._strategies: Dict[str, ParsingStrategy] = {}
        self._unavailable: set = set()
        self._lock = threading.RLock()

    def get_strategy(self, file_extension: str) -> Optional[ParsingStrategy]:
        """
        Get appropriate strategy for file extension.

        Args:
            file_extension: File extension with or without dot (e.g. '.py', 'js')

        Returns:
            Parsing strategy, or None when no grammar is loaded for the extension
        """
        grammar = self._grammars.grammar_for_extension(file_extension)
        if grammar is None:
            return None

        with self._lock:
            if grammar in self._strategies:
                return self._strategies[grammar]
            if grammar in self._unavailable:
                return None

            language = self._grammars.get_language(grammar)
            strategy_class = STRATEGY_CLASSES.get(grammar)
            if language is None or strategy_class is None:
                self._unavailable.add(grammar)
                return None

            strategy = strategy_class(language)
            self._strategies[grammar] = strategy
            return strategy

    def get_specialized_extensions(self) -> List[str]:
        """Get extensions that currently have a loaded strategy."""
        with self._lock:
            return [ext for strategy in self._strategies.values()
                    for ext in strategy.get_supported_extensions()]
