"""
Chat tool
"""
from functools import partial

from mcp.types import CallToolResult

from ..bridge.capabilities import Chatter
from ..responses import build_failure, build_success
from ..schemas.tool_inputs import SendChatInput
from .registry import ToolRegistry


async def send_chat(session: Chatter, params: SendChatInput) -> CallToolResult:
    try:
        session.chat(params.message)
        return build_success(f'Sent message: "{params.message}"')
    except Exception as e:
        return build_failure(e)


def register_chat_tools(registry: ToolRegistry, session: Chatter) -> None:
    registry.register("send-chat", "Send a chat message in-game", SendChatInput, partial(send_chat, session))
