"""
Code Context MCP Server

This MCP server gives LLMs a quick overview of a project directory: the
directory tree, and for JavaScript/TypeScript and Python sources the
functions, variables, classes, imports and exports they define.

MCP decorators delegate to the service layer for business logic.
"""

import logging
import os
import sys
from contextlib import asynccontextmanager
from dataclasses import dataclass
from typing import AsyncIterator, List, Optional

from mcp.server.fastmcp import Context, FastMCP

from .constants import DEFAULT_MAX_DEPTH, DEFAULT_SYMBOL_TYPE
from .indexing import SymbolExtractor
from .services import CodeContextService
from .utils import handle_mcp_errors, handle_mcp_tool_errors


def setup_logging(level: Optional[str] = None) -> None:
    """Send all logging to stderr; stdout carries the stdio transport."""
    root_logger = logging.getLogger()
    root_logger.handlers.clear()

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    stderr_handler = logging.StreamHandler(sys.stderr)
    stderr_handler.setFormatter(formatter)

    root_logger.addHandler(stderr_handler)
    root_logger.setLevel((level or os.getenv("CODE_CONTEXT_LOG_LEVEL", "INFO")).upper())


logger = logging.getLogger(__name__)


@dataclass
class CodeContextServerContext:
    """Lifespan context for the Code Context MCP server."""

    extractor: SymbolExtractor


@asynccontextmanager
async def code_context_lifespan(_server: FastMCP) -> AsyncIterator[CodeContextServerContext]:
    """Manage the lifecycle of the Code Context MCP server."""
    # Grammars are loaded once here and shared by all requests
    extractor = SymbolExtractor()
    extensions = extractor.supported_extensions()
    logger.info(f"Symbol analysis available for: {', '.join(extensions) or 'no file types'}")
    yield CodeContextServerContext(extractor=extractor)


mcp = FastMCP("Context Provider MCP Server", lifespan=code_context_lifespan)

# ----- TOOLS -----


# Argument names follow the tool's published camelCase schema
@mcp.tool()
@handle_mcp_tool_errors(return_type="str")
def get_code_context(
    absolutePath: str,
    ctx: Context,
    analyzeJs: bool = False,
    includeSymbols: bool = False,
    symbolType: str = DEFAULT_SYMBOL_TYPE,
    filePatterns: Optional[List[str]] = None,
    maxDepth: int = DEFAULT_MAX_DEPTH,
) -> str:
    """
    Returns Complete Context of a given project directory, including directory tree,
    and code symbols. Useful for getting a quick overview of a project. Use this tool
    when you need a comprehensive overview of a project's codebase, e.g. at the start
    of a new task.

    Args:
        absolutePath: Absolute path to the directory to analyze. On Windows, forward
            slashes are recommended to avoid escaping (e.g. C:/Users/me/project/src).
        analyzeJs: Whether to analyze JavaScript/TypeScript and Python files. Adds the
            count of functions, variables and classes per file and a summary.
        includeSymbols: Whether to include code symbols for each analyzed file.
        symbolType: Type of symbols to include if includeSymbols is true: functions,
            variables, classes, imports, exports or all.
        filePatterns: Optional file patterns to analyze instead of the supported
            languages, e.g. ["*.test.js", ".d.ts", "py"].
        maxDepth: Maximum directory depth for code analysis (default: 5 levels). The
            directory tree is still built for all levels.

    Returns:
        The directory tree, with analysis summary and symbols when requested
    """
    return CodeContextService(ctx).get_code_context(
        absolutePath,
        analyze_js=analyzeJs,
        include_symbols=includeSymbols,
        symbol_type=symbolType,
        file_patterns=filePatterns,
        max_depth=maxDepth,
    )


# ----- PROMPTS -----


@mcp.prompt()
@handle_mcp_errors(return_type="str")
def hello(name: str) -> str:
    """Greet the user and offer assistance."""
    return f"Hello {name}, how can I assist you today?"


def main():
    """Main function to run the MCP server."""
    setup_logging()

    # Support both stdio (local) and HTTP/SSE modes via environment variable
    transport_mode = os.getenv("MCP_TRANSPORT", "stdio")

    if transport_mode == "http":
        # nosec B104: binding to all interfaces is expected in containers
        host = os.getenv("HOST", "0.0.0.0")  # nosec B104
        port = int(os.getenv("PORT", 8080))

        mcp.settings.host = host
        mcp.settings.port = port

        logger.info(f"Starting MCP server in HTTP/SSE mode on {host}:{port}")
        mcp.run(transport="sse")
    else:
        logger.info("Starting MCP server over stdio...")
        mcp.run()


if __name__ == "__main__":
    main()
