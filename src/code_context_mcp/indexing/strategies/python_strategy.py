"""
Python parsing strategy using tree-sitter.
"""

import logging
from typing import List, Optional

from ...constants import ANONYMOUS
from ..models import (
    ClassSymbol,
    ExportSymbol,
    FunctionSymbol,
    ImportItem,
    ImportSymbol,
    MethodSymbol,
    VariableSymbol,
)
from .base_strategy import ParsingStrategy
from .naming import infer_function_name

logger = logging.getLogger(__name__)


class PythonParsingStrategy(ParsingStrategy):
    """Python-specific parsing strategy using tree-sitter."""

    INLINE_FUNCTION_TYPES = frozenset({'lambda'})

    def get_language_name(self) -> str:
        return "python"

    def get_supported_extensions(self) -> List[str]:
        return ['py']

    # ----- functions -----

    def _extract_function_candidates(self, root) -> List[tuple]:
        candidates = []
        for node in self._descendants(root, ('function_definition', 'lambda')):
            if node.type == 'lambda':
                name = infer_function_name(node)
                parent_name = None
            else:
                name = self._field_text(node, 'name') or ANONYMOUS
                class_node = self._enclosing_class(node)
                parent_name = self._field_text(class_node, 'name') if class_node is not None else None

            candidates.append((node, FunctionSymbol(
                name=name,
                parent=parent_name,
                position=self._position(node),
                code=self._text(node),
            )))
        return candidates

    @staticmethod
    def _enclosing_class(node):
        """Return the class whose body directly defines ``node``, if any."""
        parent = node.parent
        if parent is not None and parent.type == 'decorated_definition':
            parent = parent.parent
        if parent is not None and parent.type == 'block':
            owner = parent.parent
            if owner is not None and owner.type == 'class_definition':
                return owner
        return None

    # ----- variables -----

    def _extract_variables(self, root) -> List[VariableSymbol]:
        variables = []
        for node in self._descendants(root, ('assignment',)):
            if not self._is_declaration_scope(node):
                continue
            left = node.child_by_field_name('left')
            if left is None or left.type != 'identifier':
                continue
            # Python has no declaration keyword
            variables.append(VariableSymbol(
                name=self._text(left),
                kind='var',
                position=self._position(node),
                code=self._text(node),
            ))
        return variables

    @staticmethod
    def _is_declaration_scope(assignment) -> bool:
        """True for assignments at module level or directly in a class body."""
        statement = assignment.parent
        if statement is None or statement.type != 'expression_statement':
            return False
        scope = statement.parent
        if scope is None:
            return False
        if scope.type == 'module':
            return True
        return scope.type == 'block' and scope.parent is not None and scope.parent.type == 'class_definition'

    # ----- classes -----

    def _extract_classes(self, root) -> List[ClassSymbol]:
        classes = []
        for node in self._descendants(root, ('class_definition',)):
            name = self._field_text(node, 'name')
            if not name:
                continue

            methods = []
            body = node.child_by_field_name('body')
            statements = body.named_children if body is not None else []
            for statement in statements:
                method = self._method_symbol(statement)
                if method is not None:
                    methods.append(method)

            classes.append(ClassSymbol(
                name=name,
                position=self._position(node),
                code=self._text(node),
                methods=methods,
            ))
        return classes

    def _method_symbol(self, statement) -> Optional[MethodSymbol]:
        decorators = []
        definition = statement
        if statement.type == 'decorated_definition':
            decorators = [self._text(child).strip() for child in statement.named_children
                          if child.type == 'decorator']
            definition = statement.child_by_field_name('definition')

        if definition is None or definition.type != 'function_definition':
            return None
        name = self._field_text(definition, 'name')
        if not name:
            return None

        return MethodSymbol(
            name=name,
            position=self._position(definition),
            is_static='@staticmethod' in decorators,
            code=self._text(definition),
        )

    # ----- imports -----

    def _extract_imports(self, root) -> List[ImportSymbol]:
        imports = []
        import_types = ('import_statement', 'import_from_statement', 'future_import_statement')
        for node in self._descendants(root, import_types):
            if node.type == 'import_statement':
                # import os.path as osp, sys -> one record per module
                for name_node in node.children_by_field_name('name'):
                    module, alias = self._aliased_name(name_node)
                    if module:
                        imports.append(ImportSymbol(
                            source=module,
                            items=[ImportItem(name='module', alias=alias)],
                            position=self._position(node),
                            code=self._text(node),
                        ))
                continue

            if node.type == 'future_import_statement':
                source = '__future__'
            else:
                source = self._field_text(node, 'module_name')
            if not source:
                continue

            items = []
            for name_node in node.children_by_field_name('name'):
                name, alias = self._aliased_name(name_node)
                if name:
                    items.append(ImportItem(name=name, alias=alias))
            if any(child.type == 'wildcard_import' for child in node.named_children):
                items.append(ImportItem(name='*'))

            imports.append(ImportSymbol(
                source=source,
                items=items,
                position=self._position(node),
                code=self._text(node),
            ))
        return imports

    def _aliased_name(self, node) -> tuple:
        """Return (name, alias) for a dotted_name or aliased_import node."""
        if node.type == 'aliased_import':
            return self._field_text(node, 'name'), self._field_text(node, 'alias')
        return self._text(node), None

    # ----- exports -----

    def _extract_exports(self, root) -> List[ExportSymbol]:
        """Python modules declare their public names through ``__all__``."""
        exports = []
        for statement in root.named_children:
            if statement.type != 'expression_statement':
                continue
            for assignment in statement.named_children:
                if assignment.type != 'assignment':
                    continue
                if self._field_text(assignment, 'left') != '__all__':
                    continue
                value = assignment.child_by_field_name('right')
                if value is None or value.type not in ('list', 'tuple'):
                    logger.debug(f"Skipping computed __all__ at line {assignment.start_point[0] + 1}")
                    continue

                items = [ImportItem(name=self._strip_quotes(self._text(entry)))
                         for entry in value.named_children if entry.type == 'string']
                exports.append(ExportSymbol(
                    source=None,
                    items=items,
                    position=self._position(assignment),
                    code=self._text(assignment),
                ))
        return exports
