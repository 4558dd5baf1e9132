"""
Symbol extraction entry point: one source file in, one symbol table out.
"""

import logging
import os
from typing import List, Optional

from ..constants import SUPPORTED_LANGUAGES
from .models import FileSymbolTable
from .strategies import StrategyFactory

logger = logging.getLogger(__name__)


class SymbolExtractor:
    """
    Extracts the symbol table of a single file.

    Extraction is pure: the same path and source always produce the same
    table, and no state is shared between files.
    """

    def __init__(self, strategy_factory: Optional[StrategyFactory] = None):
        self._factory = strategy_factory or StrategyFactory()

    def supported_extensions(self) -> List[str]:
        """Load every grammar and return the extensions that can be analyzed."""
        for extension in SUPPORTED_LANGUAGES:
            self._factory.get_strategy(extension)
        return self._factory.get_specialized_extensions()

    def extract(self, file_path: str, content: str) -> Optional[FileSymbolTable]:
        """
        Extract functions, variables, classes, imports and exports.

        Args:
            file_path: Absolute path of the file (used to select the grammar)
            content: Source text of the file

        Returns:
            FileSymbolTable, or None if no grammar is loaded for the file

        Raises:
            Exception: Whatever the parser raises on unparsable input; the
                caller logs it and skips the file.
        """
        extension = os.path.splitext(file_path)[1]
        strategy = self._factory.get_strategy(extension)
        if strategy is None:
            logger.debug(f"No grammar loaded for {file_path}, skipping analysis")
            return None

        return strategy.parse_file(file_path, content)
