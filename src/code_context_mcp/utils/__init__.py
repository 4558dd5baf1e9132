"""
Utility modules for the Code Context MCP server.

This package contains shared utilities used across services:
- error_handler: Decorator-based error handling for MCP entry points
- context_helper: Context access utilities and helpers
- validation: Request validation logic
- file_filter: File eligibility for symbol extraction
- ignore_rules: .gitignore pattern compilation and matching
- response_formatter: Response formatting utilities
"""

from .context_helper import ContextHelper
from .error_handler import handle_mcp_errors, handle_mcp_tool_errors
from .file_filter import FileFilter
from .ignore_rules import IgnoreRules, compile_ignore_lines, parse_gitignore
from .validation import ValidationHelper

__all__ = [
    "handle_mcp_errors",
    "handle_mcp_tool_errors",
    "ContextHelper",
    "ValidationHelper",
    "FileFilter",
    "IgnoreRules",
    "compile_ignore_lines",
    "parse_gitignore",
]
