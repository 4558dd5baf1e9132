"""
Recursive directory walker that renders a tree view and analyzes source files.

The directory tree is always rendered in full; code analysis is limited to
``max_depth`` directory levels below the root. Directories pass analysis down
only while ``depth < max_depth``, while files are analyzed while
``depth <= max_depth``, so files one level below the deepest analyzed
directory boundary are still covered.
"""

import logging
import os
from dataclasses import dataclass
from typing import List, NamedTuple, Optional, Set, Tuple

from ..constants import DEFAULT_MAX_DEPTH, DEFAULT_SYMBOL_TYPE, IGNORE_FILE_NAME
from ..tools.filesystem import FileSystemTool
from ..utils.file_filter import FileFilter
from ..utils.ignore_rules import IgnoreRules, parse_gitignore
from ..utils.response_formatter import ResponseFormatter
from .analysis_run import AnalysisRun
from .symbol_extractor import SymbolExtractor

logger = logging.getLogger(__name__)

BRANCH = '├── '
LAST_BRANCH = '└── '
PIPE_INDENT = '│   '
SPACE_INDENT = '    '


@dataclass(frozen=True)
class WalkOptions:
    """Options of one top-level walk."""

    root_path: str
    analyze: bool = False
    include_symbols: bool = False
    symbol_type: str = DEFAULT_SYMBOL_TYPE
    file_patterns: Optional[Tuple[str, ...]] = None
    max_depth: int = DEFAULT_MAX_DEPTH


class _Entry(NamedTuple):
    name: str
    path: str
    is_dir: bool
    size_kb: int


class DirectoryTreeWalker:
    """
    Walks a directory tree depth-first and renders it as text.

    Analyzed files are recorded in the walker's AnalysisRun, which belongs to
    the request that created the walker.
    """

    def __init__(self,
                 options: WalkOptions,
                 extractor: Optional[SymbolExtractor] = None,
                 run: Optional[AnalysisRun] = None,
                 file_filter: Optional[FileFilter] = None,
                 filesystem: Optional[FileSystemTool] = None):
        self.options = options
        self.extractor = extractor or SymbolExtractor()
        self.run = run if run is not None else AnalysisRun()
        self._file_filter = file_filter or FileFilter()
        self._filesystem = filesystem or FileSystemTool()
        self._ancestors: Set[str] = set()  # real paths of the directories being walked

    def walk(self) -> str:
        """Render the tree below the root path, analyzing files as configured."""
        return self.walk_directory(self.options.root_path, IgnoreRules(), '', self.options.analyze, 0)

    def walk_directory(self, dir_path: str, inherited: IgnoreRules, indent: str,
                       analyze: bool, depth: int) -> str:
        """
        Render one directory level and recurse into its subdirectories.

        Args:
            dir_path: Directory to render
            inherited: Ignore rules collected from ancestor ignore files
            indent: Indentation prefix for this level's entries
            analyze: Whether code analysis is enabled at this level
            depth: Depth of ``dir_path`` below the root (root is 0)

        Returns:
            Rendered text for the directory's entries
        """
        if not os.path.exists(dir_path):
            return f"{indent}Path does not exist: {dir_path}"

        real_path = os.path.realpath(dir_path)
        self._ancestors.add(real_path)
        try:
            return self._render_directory(dir_path, inherited, indent, analyze, depth)
        finally:
            self._ancestors.discard(real_path)

    def _render_directory(self, dir_path: str, inherited: IgnoreRules, indent: str,
                          analyze: bool, depth: int) -> str:
        local_rules = parse_gitignore(os.path.join(dir_path, IGNORE_FILE_NAME))
        rules = IgnoreRules.defaults(self.options.root_path).extend(inherited).extend(local_rules)

        try:
            entries = self._visible_entries(dir_path, rules)
        except OSError as e:
            logger.error(f"Error processing directory {dir_path}: {e}")
            return f"{indent}Error: {e}\n"

        # Local rules apply to this subtree only
        child_rules = inherited.extend(local_rules)
        output = ''

        for index, entry in enumerate(entries):
            is_last = index == len(entries) - 1
            prefix = LAST_BRANCH if is_last else BRANCH
            child_indent = indent + (SPACE_INDENT if is_last else PIPE_INDENT)

            if entry.is_dir:
                output += f"{indent}{prefix}{entry.name}/\n"
                if os.path.realpath(entry.path) in self._ancestors:
                    logger.warning(f"Skipping directory loop at {entry.path}")
                    continue
                output += self.walk_directory(
                    entry.path,
                    child_rules,
                    child_indent,
                    analyze and depth < self.options.max_depth,
                    depth + 1,
                )
            else:
                output += f"{indent}{prefix}{entry.name} ({entry.size_kb} KB)\n"
                if analyze and depth <= self.options.max_depth and \
                        self._file_filter.is_eligible(entry.path, self.options.file_patterns):
                    output += self._analyze_file(entry.path, child_indent)

        return output

    def _visible_entries(self, dir_path: str, rules: IgnoreRules) -> List[_Entry]:
        """List the entries of a directory that survive the ignore rules."""
        entries = []
        for name in self._filesystem.list_directory(dir_path):
            if name == IGNORE_FILE_NAME or name.startswith('.'):
                continue

            path = os.path.join(dir_path, name)
            is_dir = os.path.isdir(path)
            if rules.matches(path, is_dir):
                continue

            size_kb = 0
            if not is_dir:
                try:
                    size_kb = self._filesystem.get_size_kb(path)
                except OSError as e:
                    logger.warning(f"Skipping unreadable entry {path}: {e}")
                    continue
            entries.append(_Entry(name, path, is_dir, size_kb))
        return entries

    def _analyze_file(self, file_path: str, indent: str) -> str:
        """Extract a file's symbols, record them and render their summary."""
        try:
            content = self._filesystem.read_file_content(file_path)
            table = self.extractor.extract(file_path, content)
        except Exception as e:
            logger.error(f"Error analyzing {file_path}: {e}")
            return ''

        if table is None:
            return ''

        self.run.record(table)
        output = ResponseFormatter.file_summary_line(table, indent)
        if self.options.include_symbols:
            output += ResponseFormatter.symbol_listing(table, self.options.symbol_type, indent)
        return output
