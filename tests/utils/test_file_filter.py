"""Tests covering file eligibility for symbol extraction."""
from code_context_mcp.utils.file_filter import FileFilter


def test_supported_extensions_are_eligible_by_default():
    file_filter = FileFilter()

    for name in ('app.js', 'App.jsx', 'types.ts', 'view.tsx', 'main.py', 'UPPER.JS'):
        assert file_filter.is_eligible(f'/project/{name}'), name

    assert not file_filter.is_eligible('/project/README.md')
    assert not file_filter.is_eligible('/project/Makefile')


def test_star_patterns_match_the_whole_basename():
    file_filter = FileFilter()

    assert file_filter.is_eligible('/project/src/app.test.js', ['*.test.js'])
    assert not file_filter.is_eligible('/project/src/app.js', ['*.test.js'])
    assert not file_filter.is_eligible('/project/src/app.test.jsx', ['*.test.js'])


def test_dot_patterns_match_the_suffix():
    file_filter = FileFilter()

    assert file_filter.is_eligible('/project/types/index.d.ts', ['.d.ts'])
    assert not file_filter.is_eligible('/project/types/index.ts', ['.d.ts'])


def test_bare_patterns_compare_the_extension_case_insensitively():
    file_filter = FileFilter()

    assert file_filter.is_eligible('/project/Tool.PY', ['py'])
    assert file_filter.is_eligible('/project/tool.py', ['PY'])
    assert not file_filter.is_eligible('/project/tool.js', ['py'])


def test_patterns_replace_the_default_languages():
    file_filter = FileFilter()

    assert not file_filter.is_eligible('/project/app.js', ['py'])
    assert file_filter.is_eligible('/project/notes.txt', ['txt'])


def test_custom_supported_extensions():
    file_filter = FileFilter(supported_extensions=['py'])

    assert file_filter.is_eligible('/project/main.py')
    assert not file_filter.is_eligible('/project/main.js')
