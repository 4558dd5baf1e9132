"""Shared fixtures for the Code Context MCP test suite."""
import sys
from pathlib import Path as _TestPath

import pytest

ROOT = _TestPath(__file__).resolve().parents[1]
SRC_PATH = ROOT / 'src'
if str(SRC_PATH) not in sys.path:
    sys.path.insert(0, str(SRC_PATH))

from code_context_mcp.indexing import GrammarRegistry, SymbolExtractor  # noqa: E402
from code_context_mcp.indexing.strategies import StrategyFactory  # noqa: E402


@pytest.fixture(scope="session")
def grammars():
    return GrammarRegistry()


@pytest.fixture(scope="session")
def extractor(grammars):
    return SymbolExtractor(StrategyFactory(grammars))


@pytest.fixture
def make_tree(tmp_path):
    """Create files from a {relative_path: content} mapping under tmp_path."""

    def _make(files):
        for rel_path, content in files.items():
            path = tmp_path / rel_path
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content)
        return tmp_path

    return _make


@pytest.fixture
def slice_span():
    """Cut the text covered by a Position out of the source."""

    def _slice(source, position):
        lines = source.split('\n')
        if position.start_line == position.end_line:
            return lines[position.start_line - 1][position.start_col:position.end_col]
        parts = [lines[position.start_line - 1][position.start_col:]]
        parts.extend(lines[position.start_line:position.end_line - 1])
        parts.append(lines[position.end_line - 1][:position.end_col])
        return '\n'.join(parts)

    return _slice
