"""
Context access utilities and helpers.

This module provides convenient access to the data the server keeps in the
MCP lifespan context.
"""

from typing import Optional

from mcp.server.fastmcp import Context

from ..indexing.symbol_extractor import SymbolExtractor


class ContextHelper:
    """
    Helper class for convenient access to MCP Context data.

    Every accessor tolerates a missing context (for example when a service is
    used outside a running server) and then returns None.
    """

    def __init__(self, ctx: Optional[Context]):
        """
        Initialize the context helper.

        Args:
            ctx: The MCP Context object, or None
        """
        self.ctx = ctx

    @property
    def lifespan_context(self):
        try:
            return self.ctx.request_context.lifespan_context
        except (AttributeError, ValueError):
            return None

    @property
    def extractor(self) -> Optional[SymbolExtractor]:
        """
        Get the shared symbol extractor created at server startup.

        Returns:
            The SymbolExtractor instance, or None if not available
        """
        return getattr(self.lifespan_context, 'extractor', None)
