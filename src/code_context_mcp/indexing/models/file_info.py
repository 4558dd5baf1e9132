"""
FileSymbolTable model for the symbols extracted from one file.
"""

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from .symbol_info import ClassSymbol, ExportSymbol, FunctionSymbol, ImportSymbol, VariableSymbol


@dataclass
class FileSymbolTable:
    """Symbols extracted from a single source file."""

    file_path: str  # absolute path of the analyzed file
    language: str
    functions: List[FunctionSymbol] = field(default_factory=list)
    variables: List[VariableSymbol] = field(default_factory=list)
    classes: List[ClassSymbol] = field(default_factory=list)
    imports: List[ImportSymbol] = field(default_factory=list)
    exports: List[ExportSymbol] = field(default_factory=list)
    discovered_functions: int = 0  # function candidates before the significance filter

    def __post_init__(self):
        """Never report fewer discovered functions than kept ones."""
        if self.discovered_functions < len(self.functions):
            self.discovered_functions = len(self.functions)

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-serializable representation of the table."""
        return asdict(self)
