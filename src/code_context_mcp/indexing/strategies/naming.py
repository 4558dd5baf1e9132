"""
Name inference for anonymous functions.

Function expressions, arrow functions and lambdas have no declared name, so
their name is recovered from the syntactic context they appear in. Each
recognizer inspects a read-only view of the node's ancestors and returns a
name or None. Recognizers are tried in priority order and the first name
found wins; when none applies the function is "anonymous".
"""

from typing import Callable, Optional, Sequence

from ...constants import ANONYMOUS, PROMISE_CHAIN_METHODS

NameRecognizer = Callable[[object], Optional[str]]


def _text(node) -> str:
    return node.text.decode('utf8', errors='replace') if node is not None and node.text else ""


def bound_variable_name(node) -> Optional[str]:
    """const handler = () => {...}"""
    parent = node.parent
    if parent is None or parent.type != 'variable_declarator':
        return None
    name_node = parent.child_by_field_name('name')
    return _text(name_node) if name_node is not None else None


def object_key_name(node) -> Optional[str]:
    """{ handler: function () {...} }"""
    parent = node.parent
    if parent is None or parent.type != 'pair':
        return None
    if parent.parent is None or parent.parent.type != 'object':
        return None
    key_node = parent.child_by_field_name('key')
    if key_node is None:
        return None
    return _text(key_node).replace('"', '').replace("'", '')


def assignment_target_name(node) -> Optional[str]:
    """obj.handler = function () {...}, handler = lambda: ..."""
    parent = node.parent
    if parent is None or parent.type not in ('assignment_expression', 'assignment'):
        return None
    left = parent.child_by_field_name('left')
    if left is None:
        return None
    if left.type == 'member_expression':
        property_node = left.child_by_field_name('property')
        return _text(property_node) if property_node is not None else None
    if left.type == 'attribute':
        attribute_node = left.child_by_field_name('attribute')
        return _text(attribute_node) if attribute_node is not None else None
    return _text(left)


def promise_callback_name(node) -> Optional[str]:
    """fetch(url).then(response => {...})"""
    parent = node.parent
    if parent is None or parent.type != 'arguments':
        return None
    call = parent.parent
    if call is None or call.type != 'call_expression':
        return None
    callee = call.child_by_field_name('function')
    if callee is None or callee.type != 'member_expression':
        return None
    property_node = callee.child_by_field_name('property')
    name = _text(property_node)
    return name if name in PROMISE_CHAIN_METHODS else None


NAME_RECOGNIZERS: Sequence[NameRecognizer] = (
    bound_variable_name,
    object_key_name,
    assignment_target_name,
    promise_callback_name,
)


def infer_function_name(node, recognizers: Sequence[NameRecognizer] = NAME_RECOGNIZERS) -> str:
    """
    Infer the name of an anonymous function from its context.

    Args:
        node: Tree-sitter node of the function expression
        recognizers: Recognizers to try, highest priority first

    Returns:
        The first name produced by a recognizer, or "anonymous"
    """
    for recognizer in recognizers:
        name = recognizer(node)
        if name:
            return name
    return ANONYMOUS
