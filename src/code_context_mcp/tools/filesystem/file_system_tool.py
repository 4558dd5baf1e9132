"""
File System Tool - Pure technical component for file system operations.

This tool handles low-level file system operations without any business logic.
"""

import math
import os
from typing import List


class FileSystemTool:
    """
    Pure technical component for file system operations.

    This tool provides low-level file system capabilities without
    any business logic or decision making.
    """

    def list_directory(self, dir_path: str) -> List[str]:
        """
        List entry names of a directory in the platform's enumeration order.

        Raises:
            OSError: If the directory cannot be read
        """
        return os.listdir(dir_path)

    def get_size_kb(self, file_path: str) -> int:
        """
        Get a file's size in kilobytes, rounded up.

        Raises:
            OSError: If the file cannot be accessed
        """
        return math.ceil(os.path.getsize(file_path) / 1024)

    def read_file_content(self, file_path: str) -> str:
        """
        Read file content with encoding fallback.

        Args:
            file_path: Absolute path to the file

        Returns:
            File content as string

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file cannot be decoded
        """
        if not os.path.exists(file_path):
            raise FileNotFoundError(f"File not found: {file_path}")

        # Try UTF-8 first (most common)
        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return f.read()
        except UnicodeDecodeError:
            pass

        for encoding in ('cp1252', 'latin-1'):
            try:
                with open(file_path, 'r', encoding=encoding) as f:
                    return f.read()
            except UnicodeDecodeError:
                continue

        raise ValueError(f"Could not decode file {file_path} with any supported encoding")
