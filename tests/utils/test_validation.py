"""Tests covering request validation."""
import pytest

from code_context_mcp.utils.validation import ValidationHelper


@pytest.mark.parametrize("path", ["", "   "])
def test_empty_paths_are_rejected(path):
    assert ValidationHelper.validate_analysis_root(path) == "Directory path cannot be empty"


def test_filesystem_root_is_rejected():
    error = ValidationHelper.validate_analysis_root('/', platform='linux')

    assert error is not None
    assert 'Filesystem root' in error


def test_windows_system_drive_is_rejected():
    error = ValidationHelper.validate_analysis_root('C:/Users/me/project', platform='win32')

    assert error == "C drive is not a project directory. Try different path"


def test_windows_drive_rule_only_applies_on_windows():
    assert ValidationHelper.validate_analysis_root('C:/Users/me/project', platform='linux') is None


def test_missing_directory_is_not_a_validation_error(tmp_path):
    assert ValidationHelper.validate_analysis_root(str(tmp_path / 'missing')) is None


def test_symbol_type():
    for symbol_type in ('functions', 'variables', 'classes', 'imports', 'exports', 'all'):
        assert ValidationHelper.validate_symbol_type(symbol_type) is None
    assert 'Invalid symbol type' in ValidationHelper.validate_symbol_type('methods')


def test_max_depth():
    assert ValidationHelper.validate_max_depth(0) is None
    assert ValidationHelper.validate_max_depth(5) is None
    assert ValidationHelper.validate_max_depth(-1) == "max_depth cannot be negative: -1"
    assert ValidationHelper.validate_max_depth(True) == "max_depth must be an integer"
    assert ValidationHelper.validate_max_depth("3") == "max_depth must be an integer"


def test_file_patterns():
    assert ValidationHelper.validate_file_patterns(None) is None
    assert ValidationHelper.validate_file_patterns(['*.js', 'py']) is None
    assert ValidationHelper.validate_file_patterns(['']) == "File patterns must be non-empty strings"
