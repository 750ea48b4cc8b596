from functools import partial
from typing import Optional

from ..minecraft_data_service import DEFAULT_FALLBACK_VERSION, get_data_service
from .blocks import register_block_tools
from .chat import register_chat_tools
from .entities import register_entity_tools
from .inventory import register_inventory_tools
from .movement import register_movement_tools
from .registry import ToolRegistry, ToolSpec


def build_registry(session, fallback_version: Optional[str] = None) -> ToolRegistry:
    """Register every tool group against ``session``"""
    registry = ToolRegistry()
    register_movement_tools(registry, session)
    register_inventory_tools(registry, session)
    register_block_tools(
        registry, session, partial(get_data_service, fallback_version=fallback_version or DEFAULT_FALLBACK_VERSION)
    )
    register_entity_tools(registry, session)
    register_chat_tools(registry, session)
    return registry


__all__ = [
    "ToolRegistry",
    "ToolSpec",
    "build_registry",
    "register_movement_tools",
    "register_inventory_tools",
    "register_block_tools",
    "register_entity_tools",
    "register_chat_tools",
]
