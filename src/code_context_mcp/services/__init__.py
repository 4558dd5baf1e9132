"""
Service layer for the Code Context MCP server.

Each service follows a consistent pattern:
- Constructor accepts MCP Context parameter
- Methods correspond to MCP entry points
- Shared utilities accessed through utils module
- Meaningful exceptions raised for error conditions
"""

from .base_service import BaseService
from .code_context_service import CodeContextResult, CodeContextService

__all__ = [
    "BaseService",
    "CodeContextService",
    "CodeContextResult",
]
