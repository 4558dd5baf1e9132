"""Tests covering per-request analysis state."""
from code_context_mcp.indexing import AnalysisRun, AnalysisSummary
from code_context_mcp.indexing.models import (
    ClassSymbol,
    FileSymbolTable,
    FunctionSymbol,
    Position,
    VariableSymbol,
)

POSITION = Position(start_line=1, start_col=0, end_line=1, end_col=1)


def _table(path, functions=0, discovered=0, variables=0, classes=0):
    return FileSymbolTable(
        file_path=path,
        language='javascript',
        functions=[FunctionSymbol(name=f'f{i}', position=POSITION, code='') for i in range(functions)],
        variables=[VariableSymbol(name=f'v{i}', kind='const', position=POSITION, code='')
                   for i in range(variables)],
        classes=[ClassSymbol(name=f'C{i}', position=POSITION, code='') for i in range(classes)],
        discovered_functions=discovered,
    )


def test_empty_run_summary():
    assert AnalysisRun().summarize() == AnalysisSummary()


def test_summary_counts_discovered_functions():
    run = AnalysisRun()
    run.record(_table('/p/a.js', functions=1, discovered=3, variables=2))
    run.record(_table('/p/b.js', functions=2, discovered=2, classes=1))

    assert run.files == ['/p/a.js', '/p/b.js']
    assert run.summarize() == AnalysisSummary(
        files_analyzed=2, total_functions=5, total_variables=2, total_classes=1,
    )


def test_discovered_never_below_listed_functions():
    assert _table('/p/a.js', functions=2, discovered=0).discovered_functions == 2


def test_runs_are_independent():
    first, second = AnalysisRun(), AnalysisRun()
    first.record(_table('/p/a.js'))

    assert second.files == []
