"""
File eligibility for symbol extraction.

A file is eligible when its name matches one of the caller's file patterns,
or, when no patterns are given, when its extension has a supported grammar.
"""

import os
import re
from typing import Iterable, Optional

from ..constants import SUPPORTED_LANGUAGES


class FileFilter:
    """Decides which files are handed to the symbol extractor."""

    def __init__(self, supported_extensions: Optional[Iterable[str]] = None):
        """
        Initialize the file filter.

        Args:
            supported_extensions: Extensions (without dot) used when no file
                patterns are given; defaults to the supported grammar keys
        """
        if supported_extensions is None:
            supported_extensions = SUPPORTED_LANGUAGES.keys()
        self.supported_extensions = {ext.lower() for ext in supported_extensions}

    def is_eligible(self, file_path: str, patterns: Optional[Iterable[str]] = None) -> bool:
        """
        Check if a file should be analyzed.

        Args:
            file_path: Path of the file
            patterns: Optional allow-list. Each entry is a glob using ``*``
                ('*.test.js'), a dot-prefixed suffix ('.d.ts') or a bare
                extension ('py', case-insensitive)

        Returns:
            True if the file is eligible for symbol extraction
        """
        patterns = list(patterns or [])
        if patterns:
            return any(self.matches_pattern(file_path, pattern) for pattern in patterns)
        return self._extension(file_path) in self.supported_extensions

    def matches_pattern(self, file_path: str, pattern: str) -> bool:
        """Check a single file pattern against the file's basename."""
        file_name = os.path.basename(file_path)

        if '*' in pattern:
            regex = re.escape(pattern).replace(r'\*', '.*')
            return re.match(f'^{regex}$', file_name) is not None

        if pattern.startswith('.'):
            return file_name.endswith(pattern)

        return self._extension(file_path) == pattern.lower()

    @staticmethod
    def _extension(file_path: str) -> str:
        return os.path.splitext(file_path)[1][1:].lower()
