"""
Model classes for extracted code symbols.
"""

from .file_info import FileSymbolTable
from .symbol_info import (
    ClassSymbol,
    ExportSymbol,
    FunctionSymbol,
    ImportItem,
    ImportSymbol,
    MethodSymbol,
    Position,
    VariableSymbol,
)

__all__ = [
    "FileSymbolTable",
    "Position",
    "FunctionSymbol",
    "VariableSymbol",
    "MethodSymbol",
    "ClassSymbol",
    "ImportItem",
    "ImportSymbol",
    "ExportSymbol",
]
