"""Tests covering the code context service and its MCP tool."""
import asyncio
from types import SimpleNamespace

import pytest

from code_context_mcp import server
from code_context_mcp.services import CodeContextService
from code_context_mcp.utils import ContextHelper

APP_JS = "function main() { return 1; }\nconst x = 1;\n"


def test_response_without_analysis(make_tree):
    root = make_tree({'app.js': APP_JS})

    text = CodeContextService().get_code_context(str(root))

    assert text == f"Directory structure for: {root}\n\n└── app.js (1 KB)\n"


def test_summary_block(make_tree):
    root = make_tree({'app.js': APP_JS})

    result = CodeContextService().analyze(str(root), analyze_js=True)

    assert result.text.startswith(
        f"Directory structure for: {root}\n\n"
        "Code Analysis Summary:\n"
        "- Files analyzed: 1\n"
        "- Total functions: 1\n"
        "- Total variables: 1\n"
        "- Total classes: 0\n\n"
        "Note: Symbol analysis is supported for JavaScript/TypeScript"
    )
    assert "maximum depth of 5 directory levels (default)." in result.text
    assert result.text.endswith("└── app.js (1 KB)\n    └── [Analyzed: 1 functions, 1 variables, 0 classes]\n")
    assert result.run.files == [str(root / 'app.js')]


def test_no_summary_when_nothing_was_analyzed(make_tree):
    root = make_tree({'notes.txt': 'hello'})

    text = CodeContextService().get_code_context(str(root), analyze_js=True)

    assert text == f"Directory structure for: {root}\n\n└── notes.txt (1 KB)\n"


def test_file_patterns_and_depth_note(make_tree):
    root = make_tree({'a.py': "def a():\n    return 1\n", 'b.js': APP_JS})

    result = CodeContextService().analyze(str(root), analyze_js=True, file_patterns=['py'], max_depth=2)

    assert "Analyzed files matching patterns: py" in result.text
    assert "Code analysis limited to a maximum depth of 2 directory levels." in result.text
    assert result.run.files == [str(root / 'a.py')]


def test_each_request_gets_its_own_run(make_tree):
    root = make_tree({'app.js': APP_JS})
    service = CodeContextService()

    first = service.analyze(str(root), analyze_js=True)
    second = service.analyze(str(root), analyze_js=True)

    assert first.run is not second.run
    assert first.run.summarize() == second.run.summarize()


def test_missing_directory_is_reported_inline(tmp_path):
    missing = tmp_path / 'missing'

    text = CodeContextService().get_code_context(str(missing))

    assert text.endswith(f"Path does not exist: {missing}")


def test_invalid_requests_are_rejected():
    service = CodeContextService()

    with pytest.raises(ValueError, match='Filesystem root'):
        service.get_code_context('/')
    with pytest.raises(ValueError, match='Invalid symbol type'):
        service.get_code_context('/tmp/project', symbol_type='methods')
    with pytest.raises(ValueError, match='negative'):
        service.get_code_context('/tmp/project', max_depth=-1)


def test_service_uses_extractor_from_lifespan_context(extractor):
    ctx = SimpleNamespace(request_context=SimpleNamespace(lifespan_context=SimpleNamespace(extractor=extractor)))

    assert CodeContextService(ctx).extractor is extractor
    assert ContextHelper(None).extractor is None


def test_tool_returns_errors_as_text():
    assert server.get_code_context('/', ctx=None) == (
        "Error: Filesystem root is not a project directory: /. Try different path"
    )


def test_tool_renders_directory(make_tree):
    root = make_tree({'app.js': APP_JS})

    text = server.get_code_context(str(root), ctx=None, analyzeJs=True, includeSymbols=True,
                                   symbolType='variables')

    assert "        Variables:\n        - const x [2:6]\n" in text


def test_hello_prompt():
    assert server.hello('Ada') == "Hello Ada, how can I assist you today?"


def _tool_text(result):
    # Newer FastMCP versions return (content, structured_content)
    if isinstance(result, tuple):
        result = result[0]
    return ''.join(block.text for block in result)


def test_tool_schema_uses_camel_case_arguments():
    tools = asyncio.run(server.mcp.list_tools())
    schema = next(tool for tool in tools if tool.name == 'get_code_context').inputSchema

    assert set(schema['properties']) == {
        'absolutePath', 'analyzeJs', 'includeSymbols', 'symbolType', 'filePatterns', 'maxDepth',
    }
    assert schema['required'] == ['absolutePath']


def test_tool_call_through_mcp(make_tree):
    root = make_tree({'app.js': APP_JS})

    result = asyncio.run(server.mcp.call_tool(
        'get_code_context', {'absolutePath': str(root), 'analyzeJs': True, 'maxDepth': 2},
    ))
    text = _tool_text(result)

    assert text.startswith(f"Directory structure for: {root}\n\nCode Analysis Summary:")
    assert text.endswith("└── app.js (1 KB)\n    └── [Analyzed: 1 functions, 1 variables, 0 classes]\n")


def test_lifespan_shares_one_extractor():
    async def enter():
        async with server.code_context_lifespan(server.mcp) as context:
            return context.extractor

    assert asyncio.run(enter()) is not None
