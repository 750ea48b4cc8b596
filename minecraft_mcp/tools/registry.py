"""
Tool registry - fixed table of MCP tools, each bound to its handler at startup
"""
from dataclasses import dataclass
from typing import Any, Awaitable, Callable, Dict, List, Optional, Type

from mcp import types
from pydantic import ValidationError

from ..logging_config import get_logger
from ..responses import build_failure
from ..schemas.tool_inputs import ToolInput

logger = get_logger(__name__)

ToolHandler = Callable[[ToolInput], Awaitable[types.CallToolResult]]


@dataclass(frozen=True)
class ToolSpec:
    """A registered tool: wire name, description, input schema and bound handler"""

    name: str
    description: str
    input_model: Type[ToolInput]
    handler: ToolHandler

    def to_mcp_tool(self) -> types.Tool:
        return types.Tool(
            name=self.name,
            description=self.description,
            inputSchema=self.input_model.model_json_schema(by_alias=True),
        )


class ToolRegistry:
    """Name -> tool table. Tools are registered once and never removed."""

    def __init__(self):
        self._tools: Dict[str, ToolSpec] = {}

    def register(self, name: str, description: str, input_model: Type[ToolInput], handler: ToolHandler) -> ToolSpec:
        if name in self._tools:
            raise ValueError(f"Tool already registered: {name}")
        spec = ToolSpec(name=name, description=description, input_model=input_model, handler=handler)
        self._tools[name] = spec
        logger.debug(f"Registered tool: {name}")
        return spec

    @property
    def names(self) -> List[str]:
        return list(self._tools)

    def list_tools(self) -> List[types.Tool]:
        return [spec.to_mcp_tool() for spec in self._tools.values()]

    async def call(self, name: str, arguments: Optional[Dict[str, Any]]) -> types.CallToolResult:
        """Validate ``arguments`` and run the tool. Always returns a response."""
        spec = self._tools.get(name)
        if spec is None:
            return build_failure(f"Unknown tool: {name}")

        try:
            params = spec.input_model.model_validate(arguments or {})
        except ValidationError as e:
            return build_failure(f"Invalid arguments for {name}: {e}")

        logger.info("Tool call", tool=name, args=params.model_dump())
        try:
            return await spec.handler(params)
        except Exception as e:
            # Handlers convert their own failures
            logger.error("Unhandled error in tool handler", tool=name, error=str(e), exc_info=True)
            return build_failure(e)
