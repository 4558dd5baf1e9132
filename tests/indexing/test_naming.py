"""Tests covering name inference for anonymous functions."""
import tree_sitter

from code_context_mcp.indexing.strategies.base_strategy import ParsingStrategy
from code_context_mcp.indexing.strategies.naming import (
    NAME_RECOGNIZERS,
    assignment_target_name,
    bound_variable_name,
    infer_function_name,
    object_key_name,
    promise_callback_name,
)

FUNCTION_NODE_TYPES = ('arrow_function', 'function_expression', 'lambda')


def _function_node(grammars, grammar, source):
    parser = tree_sitter.Parser(grammars.get_language(grammar))
    root = parser.parse(source.encode('utf8')).root_node
    return next(ParsingStrategy._descendants(root, FUNCTION_NODE_TYPES))


def test_recognizer_priority_order():
    assert NAME_RECOGNIZERS == (
        bound_variable_name,
        object_key_name,
        assignment_target_name,
        promise_callback_name,
    )


def test_bound_variable(grammars):
    node = _function_node(grammars, 'javascript', "const onClick = () => toggle();")

    assert bound_variable_name(node) == 'onClick'
    assert object_key_name(node) is None
    assert infer_function_name(node) == 'onClick'


def test_object_key_strips_quotes(grammars):
    node = _function_node(grammars, 'javascript', "const o = { \"save\": () => store() };")

    assert object_key_name(node) == 'save'
    assert bound_variable_name(node) is None


def test_assignment_to_member_uses_property(grammars):
    node = _function_node(grammars, 'javascript', "window.onload = function () { init(); };")

    assert assignment_target_name(node) == 'onload'


def test_python_assignment_to_attribute_uses_attribute(grammars):
    node = _function_node(grammars, 'python', "self.callback = lambda value: value\n")

    assert assignment_target_name(node) == 'callback'


def test_promise_callback_only_for_chain_methods(grammars):
    then_node = _function_node(grammars, 'javascript', "load().catch(err => report(err));")
    map_node = _function_node(grammars, 'javascript', "items.map(item => item.id);")

    assert promise_callback_name(then_node) == 'catch'
    assert promise_callback_name(map_node) is None
    assert infer_function_name(map_node) == 'anonymous'


def test_custom_recognizers_are_tried_in_order(grammars):
    node = _function_node(grammars, 'javascript', "const first = () => 1;")

    assert infer_function_name(node, recognizers=(lambda n: None, lambda n: 'second')) == 'second'
    assert infer_function_name(node, recognizers=()) == 'anonymous'
