"""
Base service class providing common functionality for all services.

This module defines the base service pattern that domain services inherit
from, ensuring consistent behavior and shared functionality across the
service layer.
"""

from abc import ABC
from typing import Optional

from mcp.server.fastmcp import Context

from ..indexing.symbol_extractor import SymbolExtractor
from ..utils import ContextHelper


class BaseService(ABC):
    """
    Base class for all MCP services.

    This class provides common functionality that all services need:
    - Context management through ContextHelper
    - Access to the shared symbol extractor
    """

    def __init__(self, ctx: Optional[Context] = None):
        """
        Initialize the base service.

        Args:
            ctx: The MCP Context object containing request and lifespan context
        """
        self.ctx = ctx
        self.helper = ContextHelper(ctx)
        self._extractor: Optional[SymbolExtractor] = None

    @property
    def extractor(self) -> SymbolExtractor:
        """
        The server's symbol extractor, or a private one outside a server.

        Returns:
            A SymbolExtractor instance
        """
        if self._extractor is None:
            self._extractor = self.helper.extractor or SymbolExtractor()
        return self._extractor

    @staticmethod
    def _require(error: Optional[str]) -> None:
        """
        Raise a validation error message, if any.

        Raises:
            ValueError: If ``error`` is set
        """
        if error:
            raise ValueError(error)
