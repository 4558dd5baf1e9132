"""Tests covering Python symbol extraction."""
import logging

from code_context_mcp.indexing.models import ImportItem


def _extract(extractor, source):
    table = extractor.extract('/project/module.py', source)
    assert table is not None
    return table


def test_staticmethod_decorator_marks_method_static(extractor):
    table = _extract(extractor, "class A:\n    @staticmethod\n    def f(): pass\n")

    assert [cls.name for cls in table.classes] == ['A']
    assert [(m.name, m.is_static) for m in table.classes[0].methods] == [('f', True)]
    assert [(fn.name, fn.parent) for fn in table.functions] == [('f', 'A')]


def test_methods_and_module_functions(extractor):
    source = (
        "def main():\n"
        "    return 0\n"
        "\n"
        "class Service:\n"
        "    def start(self):\n"
        "        return True\n"
        "\n"
        "    @classmethod\n"
        "    def build(cls):\n"
        "        return cls()\n"
    )
    table = _extract(extractor, source)

    assert [(fn.name, fn.parent) for fn in table.functions] == [
        ('main', None), ('start', 'Service'), ('build', 'Service'),
    ]
    assert [(m.name, m.is_static) for m in table.classes[0].methods] == [
        ('start', False), ('build', False),
    ]


def test_lambdas_are_named_from_assignment(extractor):
    source = (
        "handler = lambda event: process(event, retries=3)\n"
        "key = lambda x: x\n"
    )
    table = _extract(extractor, source)

    assert [fn.name for fn in table.functions] == ['handler']
    assert table.discovered_functions == 2


def test_variables_at_module_and_class_scope(extractor):
    source = (
        "X = 1\n"
        "class C:\n"
        "    y: int = 2\n"
        "    def m(self):\n"
        "        z = 3\n"
        "        return z\n"
        "a.b = 4\n"
    )
    table = _extract(extractor, source)

    assert [(var.kind, var.name) for var in table.variables] == [('var', 'X'), ('var', 'y')]


def test_imports(extractor):
    source = (
        "import os\n"
        "import numpy as np, sys\n"
        "from collections import OrderedDict as OD, defaultdict\n"
        "from . import sibling\n"
        "from pkg import *\n"
    )
    table = _extract(extractor, source)

    assert [imp.source for imp in table.imports] == ['os', 'numpy', 'sys', 'collections', '.', 'pkg']
    assert table.imports[0].items == [ImportItem(name='module')]
    assert table.imports[1].items == [ImportItem(name='module', alias='np')]
    assert table.imports[3].items == [ImportItem(name='OrderedDict', alias='OD'), ImportItem(name='defaultdict')]
    assert table.imports[4].items == [ImportItem(name='sibling')]
    assert table.imports[5].items == [ImportItem(name='*')]


def test_future_imports(extractor):
    table = _extract(extractor, "from __future__ import annotations\n")

    assert [imp.source for imp in table.imports] == ['__future__']
    assert table.imports[0].items == [ImportItem(name='annotations')]


def test_exports_come_from_dunder_all(extractor):
    table = _extract(extractor, "__all__ = [\"load\", 'save']\n\ndef load(): pass\n")

    assert len(table.exports) == 1
    assert table.exports[0].items == [ImportItem(name='load'), ImportItem(name='save')]
    assert not table.exports[0].is_default


def test_positions_cover_symbol_source(extractor, slice_span):
    source = (
        "import json\n"
        "LIMIT = 10\n"
        "\n"
        "class Store:\n"
        "    def load(self, key):\n"
        "        return json.loads(key)\n"
    )
    table = _extract(extractor, source)

    for symbol in table.functions + table.variables + table.classes + table.imports:
        assert slice_span(source, symbol.position) == symbol.code


def test_computed_dunder_all_is_skipped(extractor, caplog):
    with caplog.at_level(logging.DEBUG, logger='code_context_mcp.indexing.strategies.python_strategy'):
        table = _extract(extractor, "__all__ = build_names()\n")

    assert table.exports == []
    assert "Skipping computed __all__ at line 1" in caplog.text
