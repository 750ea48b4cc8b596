"""
MCP transport adapter - exposes the tool registry over stdio
"""
from typing import Any, Dict, List

from mcp import types
from mcp.server.lowlevel import Server
from mcp.server.stdio import stdio_server

from .logging_config import get_logger
from .tools.registry import ToolRegistry

logger = get_logger(__name__)

SERVER_NAME = "minecraft-bot"
SERVER_VERSION = "1.0.0"


def create_server(registry: ToolRegistry) -> Server:
    """Low-level MCP server whose tools/list and tools/call are served by ``registry``"""
    server = Server(SERVER_NAME, version=SERVER_VERSION)

    @server.list_tools()
    async def list_tools() -> List[types.Tool]:
        return registry.list_tools()

    @server.call_tool()
    async def call_tool(name: str, arguments: Dict[str, Any]) -> types.CallToolResult:
        return await registry.call(name, arguments)

    return server


async def serve_stdio(server: Server) -> None:
    """Serve until the client closes stdin"""
    async with stdio_server() as (read_stream, write_stream):
        logger.info("Minecraft MCP Server running on stdio")
        await server.run(read_stream, write_stream, server.create_initialization_options())
