"""
Filesystem Tools - Technical components for file system operations.
"""

from .file_system_tool import FileSystemTool

__all__ = ['FileSystemTool']
