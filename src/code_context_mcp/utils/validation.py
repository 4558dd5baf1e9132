"""
Common validation logic for the MCP server.

Requests that can never produce a useful result are rejected here, before
any traversal starts.
"""

import os
import re
import sys
from typing import List, Optional

from ..constants import SYMBOL_TYPES


class ValidationHelper:
    """
    Helper class containing request validation logic.

    Each method returns an error message, or None when the value is valid.
    """

    @staticmethod
    def validate_analysis_root(dir_path: str, platform: Optional[str] = None) -> Optional[str]:
        """
        Validate the directory a caller asks to analyze.

        A missing directory is not an error here; the tree walker reports it
        inline. Filesystem roots are rejected, and so is the system drive on
        Windows.

        Args:
            dir_path: The directory path to validate
            platform: Platform name to validate for (defaults to sys.platform)

        Returns:
            Error message if validation fails, None if valid
        """
        if not dir_path or not dir_path.strip():
            return "Directory path cannot be empty"

        platform = platform or sys.platform
        if platform == 'win32' and re.match(r'^[cC]:[\\/]', dir_path):
            return "C drive is not a project directory. Try different path"

        try:
            norm_path = os.path.normpath(dir_path)
        except (TypeError, ValueError) as e:
            return f"Invalid path format: {str(e)}"

        if os.path.dirname(norm_path) == norm_path:
            return f"Filesystem root is not a project directory: {norm_path}. Try different path"

        return None

    @staticmethod
    def validate_symbol_type(symbol_type: str) -> Optional[str]:
        """Validate the kind of symbols to list."""
        if symbol_type not in SYMBOL_TYPES:
            return f"Invalid symbol type '{symbol_type}'. Expected one of: {', '.join(SYMBOL_TYPES)}"
        return None

    @staticmethod
    def validate_max_depth(max_depth: int) -> Optional[str]:
        """Validate the analysis depth limit."""
        if not isinstance(max_depth, int) or isinstance(max_depth, bool):
            return "max_depth must be an integer"
        if max_depth < 0:
            return f"max_depth cannot be negative: {max_depth}"
        return None

    @staticmethod
    def validate_file_patterns(patterns: Optional[List[str]]) -> Optional[str]:
        """Validate caller file patterns (None means use the default languages)."""
        if patterns is None:
            return None
        for pattern in patterns:
            if not isinstance(pattern, str) or not pattern.strip():
                return "File patterns must be non-empty strings"
        return None
