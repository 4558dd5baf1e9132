"""
Abstract base class for language parsing strategies.

A strategy owns one grammar family. ``parse_file`` parses the source with
tree-sitter and runs five independent reduction passes over the tree, one per
symbol kind. Passes read node fields by name and dispatch on node type tags;
node types a pass does not know about are ignored.
"""

import itertools
from abc import ABC, abstractmethod
from typing import Iterable, Iterator, List, Optional

import tree_sitter

from ...constants import (
    ANONYMOUS,
    CALLBACK_CONTEXT_PREFIX,
    CALLBACK_METHODS,
    MAX_CALLBACK_LENGTH,
    MIN_ANONYMOUS_FUNCTION_LENGTH,
    MIN_INLINE_FUNCTION_LENGTH,
)
from ..models import (
    ClassSymbol,
    ExportSymbol,
    FileSymbolTable,
    FunctionSymbol,
    ImportSymbol,
    Position,
    VariableSymbol,
)


class ParsingStrategy(ABC):
    """Abstract base class for language parsing strategies."""

    # Node types treated as short inline functions by the significance filter
    INLINE_FUNCTION_TYPES: frozenset = frozenset()

    def __init__(self, language: tree_sitter.Language):
        self.language = language

    @abstractmethod
    def get_language_name(self) -> str:
        """Return the language name this strategy handles."""
        pass

    @abstractmethod
    def get_supported_extensions(self) -> List[str]:
        """Return list of file extensions (without dot) this strategy supports."""
        pass

    def parse_file(self, file_path: str, content: str) -> FileSymbolTable:
        """
        Parse file content and extract symbols.

        Args:
            file_path: Absolute path to the file being parsed
            content: File content as string

        Returns:
            FileSymbolTable with the five symbol lists for the file
        """
        source = content.encode('utf8')
        parser = tree_sitter.Parser(self.language)
        root = parser.parse(source).root_node

        candidates = self._extract_function_candidates(root)
        functions = [fn for node, fn in candidates if self._is_significant_function(node, fn.name)]

        table = FileSymbolTable(
            file_path=file_path,
            language=self.get_language_name(),
            functions=functions,
            variables=self._extract_variables(root),
            classes=self._extract_classes(root),
            imports=self._extract_imports(root),
            exports=self._extract_exports(root),
            discovered_functions=len(candidates),
        )
        self._convert_columns(table, source)
        return table

    @abstractmethod
    def _extract_function_candidates(self, root) -> List[tuple]:
        """Return (node, FunctionSymbol) pairs before significance filtering."""
        pass

    @abstractmethod
    def _extract_variables(self, root) -> List[VariableSymbol]:
        pass

    @abstractmethod
    def _extract_classes(self, root) -> List[ClassSymbol]:
        pass

    @abstractmethod
    def _extract_imports(self, root) -> List[ImportSymbol]:
        pass

    @abstractmethod
    def _extract_exports(self, root) -> List[ExportSymbol]:
        pass

    def _is_significant_function(self, node, name: str) -> bool:
        """
        Decide whether a function is worth reporting.

        Short inline functions, short callbacks passed to array methods and
        short anonymous functions are dropped.
        """
        text = self._text(node)

        if node.type in self.INLINE_FUNCTION_TYPES and len(text) < MIN_INLINE_FUNCTION_LENGTH:
            return False

        context = self._call_context(node)
        if context is not None and len(text) < MAX_CALLBACK_LENGTH:
            call_text = self._text(context)[:CALLBACK_CONTEXT_PREFIX].lower()
            if any(method in call_text for method in CALLBACK_METHODS):
                return False

        return name != ANONYMOUS or len(text) > MIN_ANONYMOUS_FUNCTION_LENGTH

    @staticmethod
    def _call_context(node):
        """Return the call or member expression a function is passed to, if any."""
        parent = node.parent
        if parent is not None and parent.type in ('arguments', 'argument_list'):
            parent = parent.parent
        if parent is not None and parent.type in ('call_expression', 'member_expression', 'call'):
            return parent
        return None

    @staticmethod
    def _convert_columns(table: FileSymbolTable, source: bytes) -> None:
        """Rewrite the byte columns reported by tree-sitter as character columns."""
        lines = source.split(b'\n')

        def to_chars(row: int, col: int) -> int:
            return len(lines[row][:col].decode('utf8', errors='replace'))

        methods = (method for cls in table.classes for method in cls.methods)
        symbols = itertools.chain(table.functions, table.variables, table.classes,
                                  table.imports, table.exports, methods)
        for symbol in symbols:
            position = symbol.position
            symbol.position = Position(
                start_line=position.start_line,
                start_col=to_chars(position.start_line - 1, position.start_col),
                end_line=position.end_line,
                end_col=to_chars(position.end_line - 1, position.end_col),
            )

    @staticmethod
    def _position(node) -> Position:
        """Convert a node's 0-based row/byte-column span into a Position."""
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        return Position(
            start_line=start_row + 1,
            start_col=start_col,
            end_line=end_row + 1,
            end_col=end_col,
        )

    @staticmethod
    def _text(node) -> str:
        if node is None or node.text is None:
            return ""
        return node.text.decode('utf8', errors='replace')

    def _field_text(self, node, field_name: str) -> Optional[str]:
        """Return the text of a named field, or None if the field is absent."""
        child = node.child_by_field_name(field_name)
        if child is None:
            return None
        return self._text(child)

    @staticmethod
    def _strip_quotes(text: str) -> str:
        return text.replace('"', '').replace("'", '')

    @staticmethod
    def _descendants(node, types: Iterable[str], skip: Iterable[str] = ()) -> Iterator:
        """
        Yield named descendants of ``node`` whose type is in ``types``, in
        source order. Keyword tokens sharing a type name are never yielded.

        Subtrees rooted at a node whose type is in ``skip`` are not entered
        (the node itself is still yielded if it matches).
        """
        types = frozenset(types)
        skip = frozenset(skip)
        stack = list(reversed(node.children))
        while stack:
            child = stack.pop()
            if child.is_named and child.type in types:
                yield child
            if child.type in skip:
                continue
            stack.extend(reversed(child.children))
