"""
Response helpers - every tool answers with a single text content item
"""
from typing import Any, Dict, Optional, Union

from mcp.types import CallToolResult, TextContent

from .logging_config import get_logger

logger = get_logger(__name__)


def format_number(value: float) -> str:
    """Render a coordinate the way it was given: 10.0 -> "10", 10.5 -> "10.5"."""
    value = float(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def format_position(x: float, y: float, z: float) -> str:
    return f"({format_number(x)}, {format_number(y)}, {format_number(z)})"


def error_message(error: Union[BaseException, str]) -> str:
    if isinstance(error, str):
        return error
    return str(error) or type(error).__name__


def build_success(text: str, meta: Optional[Dict[str, Any]] = None) -> CallToolResult:
    """Wrap free-form text as a success response"""
    if meta:
        return CallToolResult(content=[TextContent(type="text", text=text)], _meta=meta)
    return CallToolResult(content=[TextContent(type="text", text=text)])


def build_not_found(text: str, status: str = "not_found", **meta: Any) -> CallToolResult:
    """Informational "no" answer (nothing found, target occupied, unknown name).

    Not error-flagged; the ``_meta.status`` tag tells it apart from a plain success.
    """
    return build_success(text, {"status": status, **meta})


def build_failure(error: Union[BaseException, str]) -> CallToolResult:
    """Turn an engine failure or a message into an error-flagged response. Never raises."""
    message = error_message(error)
    logger.error(f"Error: {message}")
    return CallToolResult(content=[TextContent(type="text", text=f"Failed: {message}")], isError=True)


def response_text(result: CallToolResult) -> str:
    """Text of a response built by the helpers above"""
    return "".join(item.text for item in result.content if isinstance(item, TextContent))
