"""
Ignore-file pattern compilation and matching.

Lines of a ``.gitignore`` file are compiled into regular expressions covering
the common subset of gitignore globbing: literal segments, ``*`` (any run of
non-separator characters), ``**`` (any run including separators), ``?``, a
trailing ``/`` (directory only, approximated) and a leading ``/`` (anchored to
the directory holding the ignore file). Blank lines, ``#`` comments and ``!``
negations are skipped.

A compiled pattern is searched in two strings: the candidate's forward-slash
path relative to the pattern's base directory (with a trailing ``/`` for
directories) and the candidate's bare name. A match on either ignores it.
"""

import logging
import os
import re
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

from ..constants import DEFAULT_IGNORE_PATTERNS

logger = logging.getLogger(__name__)

NODE_MODULES_REGEX = r'^node_modules($|/)'


def glob_to_regex(pattern: str) -> Optional[str]:
    """
    Translate one ignore-file line into a regular expression.

    Args:
        pattern: A raw line from an ignore file

    Returns:
        Regex source string, or None for blank, comment and negation lines
    """
    pattern = pattern.strip()
    if not pattern or pattern.startswith('#') or pattern.startswith('!'):
        return None

    if pattern in ('node_modules', 'node_modules/'):
        return NODE_MODULES_REGEX

    body = pattern.rstrip('/')
    anchored = body.startswith('/')
    if anchored:
        body = body.lstrip('/')
    elif body.startswith('**/'):
        # "**/name" matches at any depth, same as an unanchored "name"
        body = body[3:]
    if not body:
        return None

    translated = _translate_glob(body)
    if anchored:
        return f'^{translated}($|/.*)'
    return f'(^|.*/){translated}($|/.*)'


def _translate_glob(body: str) -> str:
    parts = []
    i = 0
    while i < len(body):
        if body.startswith('**', i):
            parts.append('.*')
            i += 2
        elif body[i] == '*':
            parts.append('[^/]*')
            i += 1
        elif body[i] == '?':
            parts.append('[^/]')
            i += 1
        else:
            parts.append(re.escape(body[i]))
            i += 1
    return ''.join(parts)


@dataclass(frozen=True)
class IgnorePattern:
    """One compiled ignore predicate."""

    source: str  # the glob line, or the regex for built-in defaults
    regex: re.Pattern
    base_dir: str  # directory the pattern is anchored to

    def matches(self, path: str, is_dir: bool) -> bool:
        """Test the relative path and the bare name of ``path``."""
        relative = os.path.relpath(path, self.base_dir).replace(os.sep, '/')
        if is_dir:
            relative = f'{relative}/'
        name = os.path.basename(path)
        return bool(self.regex.search(relative) or self.regex.search(name))


def compile_ignore_lines(lines: Iterable[str], base_dir: str) -> List[IgnorePattern]:
    """
    Compile ignore-file lines into patterns anchored at ``base_dir``.

    Args:
        lines: Raw lines of an ignore file
        base_dir: Directory containing the ignore file

    Returns:
        Compiled patterns, in file order
    """
    patterns = []
    for line in lines:
        regex = glob_to_regex(line)
        if regex is None:
            continue
        patterns.append(IgnorePattern(source=line.strip(), regex=re.compile(regex), base_dir=base_dir))
    return patterns


def parse_gitignore(gitignore_path: str) -> List[IgnorePattern]:
    """
    Read and compile an ignore file.

    Returns an empty list when the file does not exist or cannot be read.
    """
    if not os.path.isfile(gitignore_path):
        return []

    try:
        with open(gitignore_path, 'r', encoding='utf-8', errors='replace') as f:
            lines = f.read().splitlines()
    except OSError as e:
        logger.error(f"Error parsing .gitignore {gitignore_path}: {e}")
        return []

    return compile_ignore_lines(lines, os.path.dirname(gitignore_path))


class IgnoreRules:
    """
    Ordered, immutable set of ignore patterns with union semantics.

    ``extend`` returns a new set, so rules added for one directory never leak
    into its siblings.
    """

    def __init__(self, patterns: Iterable[IgnorePattern] = ()):
        self._patterns: Tuple[IgnorePattern, ...] = tuple(patterns)

    @classmethod
    def defaults(cls, root_path: str) -> 'IgnoreRules':
        """Built-in patterns for build output, VCS metadata, editor and OS files."""
        return cls(
            IgnorePattern(source=regex, regex=re.compile(regex), base_dir=root_path)
            for regex in DEFAULT_IGNORE_PATTERNS
        )

    def extend(self, patterns: Iterable[IgnorePattern]) -> 'IgnoreRules':
        return IgnoreRules(self._patterns + tuple(patterns))

    def matches(self, path: str, is_dir: bool) -> bool:
        """Return True if any pattern ignores ``path``."""
        return any(pattern.matches(path, is_dir) for pattern in self._patterns)

    def __iter__(self) -> Iterator[IgnorePattern]:
        return iter(self._patterns)

    def __len__(self) -> int:
        return len(self._patterns)
