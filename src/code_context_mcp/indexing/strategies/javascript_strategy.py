"""
JavaScript/TypeScript parsing strategy using tree-sitter.
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

DECLARED_FUNCTION_TYPES = ('function_declaration', 'generator_function_declaration')
EXPRESSION_FUNCTION_TYPES = ('arrow_function', 'function_expression', 'function', 'generator_function')
FUNCTION_TYPES = DECLARED_FUNCTION_TYPES + ('method_definition',) + EXPRESSION_FUNCTION_TYPES
DECLARATION_TYPES = ('lexical_declaration', 'variable_declaration')


class JavaScriptParsingStrategy(ParsingStrategy):
    """JavaScript-family parsing strategy, shared by .js, .jsx, .ts and .tsx."""

    INLINE_FUNCTION_TYPES = frozenset({'arrow_function'})

    def get_language_name(self) -> str:
        return "javascript"

    def get_supported_extensions(self) -> List[str]:
        return ['js', 'jsx', 'ts', 'tsx']

    # ----- functions -----

    def _extract_function_candidates(self, root) -> List[tuple]:
        candidates = []
        for node in self._descendants(root, FUNCTION_TYPES):
            parent_name = None

            if node.type in DECLARED_FUNCTION_TYPES:
                name = self._field_text(node, 'name') or ANONYMOUS
            elif node.type == 'method_definition':
                name = self._field_text(node, 'name') or ANONYMOUS
                parent_name = self._method_owner_name(node)
            else:
                name = infer_function_name(node)
                if name == ANONYMOUS:
                    name = self._field_text(node, 'name') or ANONYMOUS

            candidates.append((node, FunctionSymbol(
                name=name,
                parent=parent_name,
                position=self._position(node),
                code=self._text(node),
            )))
        return candidates

    def _method_owner_name(self, node) -> Optional[str]:
        """Name of the class or object literal a method is defined in."""
        container = node.parent
        if container is None:
            return None

        if container.type == 'class_body' and container.parent is not None:
            class_node = container.parent
            class_name = self._field_text(class_node, 'name')
            if class_name:
                return class_name
            container = class_node
        elif container.type != 'object':
            return None

        owner = infer_function_name(container)
        return None if owner == ANONYMOUS else owner

    # ----- variables -----

    def _extract_variables(self, root) -> List[VariableSymbol]:
        variables = []
        for statement in root.named_children:
            declaration = statement
            if statement.type == 'export_statement':
                declaration = statement.child_by_field_name('declaration')
            if declaration is None or declaration.type not in DECLARATION_TYPES:
                continue

            kind = self._field_text(declaration, 'kind') or 'var'
            for declarator in declaration.named_children:
                if declarator.type != 'variable_declarator':
                    continue
                name = self._field_text(declarator, 'name')
                if name:
                    variables.append(VariableSymbol(
                        name=name,
                        kind=kind,
                        position=self._position(declarator),
                        code=self._text(declarator),
                    ))
        return variables

    # ----- classes -----

    def _extract_classes(self, root) -> List[ClassSymbol]:
        classes = []
        for node in self._descendants(root, ('class_declaration',)):
            name = self._field_text(node, 'name')
            if not name:
                continue

            methods = []
            body = node.child_by_field_name('body')
            members = body.named_children if body is not None else []
            for member in members:
                if member.type != 'method_definition':
                    continue
                method_name = self._field_text(member, 'name')
                if method_name:
                    methods.append(MethodSymbol(
                        name=method_name,
                        position=self._position(member),
                        is_static=any(child.type == 'static' for child in member.children),
                        code=self._text(member),
                    ))

            classes.append(ClassSymbol(
                name=name,
                position=self._position(node),
                code=self._text(node),
                methods=methods,
            ))
        return classes

    # ----- imports -----

    def _extract_imports(self, root) -> List[ImportSymbol]:
        imports = []
        for node in self._descendants(root, ('import_statement',)):
            source = self._field_text(node, 'source')
            if source is None:
                continue

            items = []
            for clause in node.named_children:
                if clause.type == 'import_clause':
                    items.extend(self._import_clause_items(clause))

            imports.append(ImportSymbol(
                source=self._strip_quotes(source),
                items=items,
                position=self._position(node),
                code=self._text(node),
            ))
        return imports

    def _import_clause_items(self, clause) -> List[ImportItem]:
        items = []
        for child in clause.named_children:
            if child.type == 'identifier':
                # import React from 'react'
                items.append(ImportItem(name='default', alias=self._text(child)))
            elif child.type == 'namespace_import':
                alias = next((self._text(c) for c in child.named_children if c.type == 'identifier'), None)
                items.append(ImportItem(name='*', alias=alias))
            elif child.type == 'named_imports':
                for specifier in child.named_children:
                    if specifier.type != 'import_specifier':
                        continue
                    name = self._field_text(specifier, 'name')
                    if name:
                        items.append(ImportItem(name=name, alias=self._field_text(specifier, 'alias')))
        return items

    # ----- exports -----

    def _extract_exports(self, root) -> List[ExportSymbol]:
        """
        One record per export statement, plus one per declaration it wraps.

        ``export function f() {}`` therefore yields the statement record
        (no items) followed by a record naming ``f``.
        """
        exports = []
        for node in self._descendants(root, ('export_statement',)):
            source = self._field_text(node, 'source')
            is_default = any(child.type == 'default' for child in node.children)
            items = []

            value = node.child_by_field_name('value')
            if value is not None:
                if value.type == 'identifier':
                    items.append(ImportItem(name=self._text(value)))
            else:
                items.extend(self._export_clause_items(node))

            exports.append(ExportSymbol(
                source=self._strip_quotes(source) if source else None,
                items=items,
                is_default=is_default,
                position=self._position(node),
                code=self._text(node),
            ))

            declaration = node.child_by_field_name('declaration')
            if declaration is None:
                continue
            name = self._declared_name(declaration)
            if not name:
                logger.debug(f"No declared name for exported {declaration.type} at line "
                             f"{declaration.start_point[0] + 1}")
                continue
            exports.append(ExportSymbol(
                source=None,
                items=[ImportItem(name=name)],
                is_default=is_default,
                position=self._position(node),
                code=self._text(node),
            ))
        return exports

    def _export_clause_items(self, node) -> List[ImportItem]:
        items = []
        for child in node.children:
            if child.type == '*':
                items.append(ImportItem(name='*'))
            elif child.type == 'namespace_export':
                alias = next((self._text(c) for c in child.named_children), None)
                items.append(ImportItem(name='*', alias=alias))
            elif child.type == 'export_clause':
                for specifier in child.named_children:
                    if specifier.type != 'export_specifier':
                        continue
                    name = self._field_text(specifier, 'name')
                    if name:
                        items.append(ImportItem(name=name, alias=self._field_text(specifier, 'alias')))
        return items

    def _declared_name(self, declaration) -> Optional[str]:
        """Name of an exported declaration: the function/class name or first binding."""
        if declaration.type in DECLARATION_TYPES:
            for declarator in declaration.named_children:
                if declarator.type == 'variable_declarator':
                    return self._field_text(declarator, 'name')
            return None
        return self._field_text(declaration, 'name')
