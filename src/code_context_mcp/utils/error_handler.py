"""
Decorator-based error handling for MCP entry points.

This module provides consistent error handling across all MCP tools and
prompts, so that no exception crosses the tool boundary. Supports both
synchronous and asynchronous functions.
"""

import functools
import inspect
import json
import logging
from typing import Any, Callable, Dict, List, Union

logger = logging.getLogger(__name__)

ErrorResponse = Union[str, Dict[str, Any], List[Dict[str, Any]]]


def format_error(message: str, return_type: str = "str") -> ErrorResponse:
    """
    Format an error message according to the entry point's return type.

    Args:
        message: The error message
        return_type: 'str', 'dict', 'json' or 'list'

    Returns:
        The error in the expected response shape
    """
    if return_type == "dict":
        return {"error": f"Operation failed: {message}"}
    if return_type == "json":
        return json.dumps({"error": f"Operation failed: {message}"})
    if return_type == "list":
        return [{"error": f"Operation failed: {message}"}]
    return f"Error: {message}"


def handle_mcp_errors(return_type: str = "str") -> Callable:
    """
    Decorator to handle exceptions in MCP entry points consistently.

    The wrapped function's exceptions are logged and converted into an error
    response of the expected shape instead of propagating to the transport.

    Args:
        return_type: The expected return type format
            - 'str': "Error: {message}"
            - 'dict': {"error": "Operation failed: {message}"}
            - 'json': JSON string of the dict format
            - 'list': [{"error": "Operation failed: {message}"}]

    Returns:
        Decorator function that wraps MCP entry points with error handling

    Example:
        @mcp.tool()
        @handle_mcp_errors(return_type='str')
        def get_code_context(absolute_path: str, ctx: Context) -> str:
            return CodeContextService(ctx).get_code_context(absolute_path)
    """

    def decorator(func: Callable) -> Callable:
        if inspect.iscoroutinefunction(func):

            @functools.wraps(func)
            async def async_wrapper(*args, **kwargs) -> Any:
                try:
                    return await func(*args, **kwargs)
                except Exception as e:
                    logger.error(f"Error in {func.__name__}: {e}")
                    return format_error(str(e), return_type)

            return async_wrapper

        @functools.wraps(func)
        def sync_wrapper(*args, **kwargs) -> Any:
            try:
                return func(*args, **kwargs)
            except Exception as e:
                logger.error(f"Error in {func.__name__}: {e}")
                return format_error(str(e), return_type)

        return sync_wrapper

    return decorator


def handle_mcp_tool_errors(return_type: str = "str") -> Callable:
    """
    Specialized error handler for MCP tools with flexible return types.

    Args:
        return_type: The expected return type ('str', 'dict', 'json' or 'list')

    Returns:
        Decorator function for MCP tools
    """
    return handle_mcp_errors(return_type=return_type)
