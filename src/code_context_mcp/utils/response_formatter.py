"""
Response formatting utilities for the MCP server.

This module renders symbol tables and run summaries as the plain text the
get_code_context tool returns.
"""

from typing import List, Optional

from ..constants import ANONYMOUS, DEFAULT_MAX_DEPTH
from ..indexing.analysis_run import AnalysisSummary
from ..indexing.models import FileSymbolTable, ImportItem


class ResponseFormatter:
    """
    Helper class for formatting responses consistently across services.

    This class provides static methods that turn analysis results into the
    indented, tree-aligned text shown to the calling agent.
    """

    @staticmethod
    def file_summary_line(table: FileSymbolTable, indent: str) -> str:
        """
        Format the one-line summary appended under an analyzed file.

        Args:
            table: Symbol table of the file
            indent: Indentation of the file's children

        Returns:
            Summary line including the trailing newline
        """
        return (
            f"{indent}└── [Analyzed: {table.discovered_functions} functions, "
            f"{len(table.variables)} variables, {len(table.classes)} classes]\n"
        )

    @staticmethod
    def symbol_listing(table: FileSymbolTable, symbol_type: str, indent: str) -> str:
        """
        Format the detailed symbol listing for one file.

        Args:
            table: Symbol table of the file
            symbol_type: One of functions, variables, classes, imports, exports, all
            indent: Indentation of the file's children

        Returns:
            Listing text, empty when nothing of the requested kind exists
        """
        def wanted(kind: str) -> bool:
            return symbol_type in (kind, 'all')

        pad = f"{indent}    "
        output = ''

        if wanted('functions'):
            # Anonymous functions are never listed
            functions = [fn for fn in table.functions if fn.name != ANONYMOUS]
            if functions:
                output += f"{pad}Functions:\n"
                output += '\n'.join(
                    f"{pad}- {fn.name}{f' (in {fn.parent})' if fn.parent else ''} "
                    f"[{fn.position.start_line}:{fn.position.start_col}]"
                    for fn in functions
                ) + '\n'

        if wanted('variables') and table.variables:
            output += f"{pad}Variables:\n"
            output += '\n'.join(
                f"{pad}- {var.kind} {var.name} [{var.position.start_line}:{var.position.start_col}]"
                for var in table.variables
            ) + '\n'

        if wanted('classes') and table.classes:
            output += f"{pad}Classes:\n"
            blocks = []
            for cls in table.classes:
                block = f"{pad}- {cls.name} [{cls.position.start_line}:{cls.position.start_col}]"
                if cls.methods:
                    block += f"\n{pad}  Methods:\n"
                    block += '\n'.join(
                        f"{pad}  - {'static ' if method.is_static else ''}{method.name} "
                        f"[{method.position.start_line}:{method.position.start_col}]"
                        for method in cls.methods
                    )
                blocks.append(block)
            output += '\n'.join(blocks) + '\n'

        if wanted('imports') and table.imports:
            output += f"{pad}Imports:\n"
            lines = []
            for imp in table.imports:
                line = f"{pad}- from '{imp.source}'"
                if imp.items:
                    line += ': ' + ResponseFormatter.format_items(imp.items)
                lines.append(line)
            output += '\n'.join(lines) + '\n'

        if wanted('exports') and table.exports:
            output += f"{pad}Exports:\n"
            lines = []
            for exp in table.exports:
                line = f"{pad}- {'default export' if exp.is_default else 'export'}"
                if exp.source:
                    line += f" from '{exp.source}'"
                if exp.items:
                    line += ': ' + ResponseFormatter.format_items(exp.items)
                lines.append(line)
            output += '\n'.join(lines) + '\n'

        return output

    @staticmethod
    def format_items(items: List[ImportItem]) -> str:
        """Format import/export items as 'name as alias, other'."""
        return ', '.join(f"{item.name}{f' as {item.alias}' if item.alias else ''}" for item in items)

    @staticmethod
    def analysis_summary(summary: AnalysisSummary,
                         file_patterns: Optional[List[str]] = None,
                         max_depth: int = DEFAULT_MAX_DEPTH) -> str:
        """
        Format the run-level summary block placed above the tree.

        Args:
            summary: Totals of the analysis run
            file_patterns: Caller file patterns, if any
            max_depth: Analysis depth limit used for the run

        Returns:
            Summary block (leading blank lines included), or '' when no file
            was analyzed
        """
        if summary.files_analyzed == 0:
            return ''

        text = (
            "\n\nCode Analysis Summary:\n"
            f"- Files analyzed: {summary.files_analyzed}\n"
            f"- Total functions: {summary.total_functions}\n"
            f"- Total variables: {summary.total_variables}\n"
            f"- Total classes: {summary.total_classes}"
        )

        if file_patterns:
            text += f"\n\nAnalyzed files matching patterns: {', '.join(file_patterns)}"
        else:
            text += ("\n\nNote: Symbol analysis is supported for JavaScript/TypeScript "
                     "(.js, .jsx, .ts, .tsx) and Python (.py) files only.")

        if max_depth != DEFAULT_MAX_DEPTH:
            text += f"\n\nCode analysis limited to a maximum depth of {max_depth} directory levels."
        else:
            text += (f"\n\nCode analysis limited to a maximum depth of {DEFAULT_MAX_DEPTH} "
                     "directory levels (default).")
        return text

    @staticmethod
    def code_context_response(root_path: str, summary_text: str, tree: str) -> str:
        """Assemble the final tool response text."""
        return f"Directory structure for: {root_path}{summary_text}\n\n{tree}"
