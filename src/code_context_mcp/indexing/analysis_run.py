"""
Per-request analysis state and its run-level summary.
"""

from dataclasses import dataclass, field
from typing import Dict, List

from .models import FileSymbolTable


@dataclass(frozen=True)
class AnalysisSummary:
    """Totals across every file analyzed in one run."""

    files_analyzed: int = 0
    total_functions: int = 0
    total_variables: int = 0
    total_classes: int = 0


@dataclass
class AnalysisRun:
    """
    Symbol tables collected during one top-level analysis request.

    A run is created empty for each request, filled by the tree walker and
    handed back to the caller; it is never shared between requests.
    """

    tables: Dict[str, FileSymbolTable] = field(default_factory=dict)

    def record(self, table: FileSymbolTable) -> None:
        """Store the symbol table of an analyzed file."""
        self.tables[table.file_path] = table

    @property
    def files(self) -> List[str]:
        """Analyzed file paths, in traversal order."""
        return list(self.tables)

    def summarize(self) -> AnalysisSummary:
        """Reduce the run to file and symbol totals."""
        tables = self.tables.values()
        return AnalysisSummary(
            files_analyzed=len(self.tables),
            total_functions=sum(table.discovered_functions for table in tables),
            total_variables=sum(len(table.variables) for table in tables),
            total_classes=sum(len(table.classes) for table in tables),
        )
