"""
Code analysis package: symbol models, extraction and directory traversal.
"""

from .analysis_run import AnalysisRun, AnalysisSummary
from .grammars import GrammarRegistry
from .models import FileSymbolTable
from .symbol_extractor import SymbolExtractor
from .tree_walker import DirectoryTreeWalker, WalkOptions

__all__ = [
    "AnalysisRun",
    "AnalysisSummary",
    "GrammarRegistry",
    "FileSymbolTable",
    "SymbolExtractor",
    "DirectoryTreeWalker",
    "WalkOptions",
]
