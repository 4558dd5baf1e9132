"""
Symbol models for representing the declarations found in one source file.
"""

from dataclasses import dataclass, field
from typing import List, Optional


@dataclass(frozen=True)
class Position:
    """Source span of a symbol: 1-based lines, 0-based columns."""

    start_line: int
    start_col: int
    end_line: int
    end_col: int


@dataclass
class FunctionSymbol:
    """A function, method or function expression."""

    name: str  # "anonymous" when the name cannot be inferred
    position: Position
    code: str
    parent: Optional[str] = None  # enclosing class or object name


@dataclass
class VariableSymbol:
    """A module-level or class-level binding."""

    name: str
    kind: str  # var, let, const
    position: Position
    code: str


@dataclass
class MethodSymbol:
    """A method defined directly in a class body."""

    name: str
    position: Position
    is_static: bool
    code: str


@dataclass
class ClassSymbol:
    """A class definition with its methods in source order."""

    name: str
    position: Position
    code: str
    methods: List[MethodSymbol] = field(default_factory=list)


@dataclass
class ImportItem:
    """One imported (or exported) name and its local alias."""

    name: str
    alias: Optional[str] = None


@dataclass
class ImportSymbol:
    """An import statement."""

    source: str
    position: Position
    code: str
    items: List[ImportItem] = field(default_factory=list)


@dataclass
class ExportSymbol:
    """An export statement or exported declaration."""

    source: Optional[str]  # re-export module, if any
    position: Position
    code: str
    items: List[ImportItem] = field(default_factory=list)
    is_default: bool = False
