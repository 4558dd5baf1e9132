"""
Tool Layer - Technical components for the Code Context MCP server.

This package contains pure technical components that provide specific
capabilities without business logic. These tools are composed by the
business layer to achieve business goals.
"""

from .filesystem import FileSystemTool

__all__ = ['FileSystemTool']
