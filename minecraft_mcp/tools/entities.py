"""
Entity lookup tools
"""
from functools import partial
from typing import Callable

from mcp.types import CallToolResult

from ..bridge.capabilities import EntityTracker
from ..responses import build_failure, build_not_found, build_success, format_number
from ..schemas.tool_inputs import FindEntityInput
from ..schemas.world import EntityInfo
from .registry import ToolRegistry

# Entity categories matched exactly; anything else is a name search
ENTITY_CATEGORIES = ("player", "mob")


def entity_filter(entity_type: str) -> Callable[[EntityInfo], bool]:
    if not entity_type:
        return lambda entity: True
    if entity_type in ENTITY_CATEGORIES:
        return lambda entity: entity.type == entity_type

    needle = entity_type.lower()
    return lambda entity: bool(entity.name) and needle in entity.name.lower()


async def find_entity(session: EntityTracker, params: FindEntityInput) -> CallToolResult:
    entity_type = params.type or ""
    try:
        entity = await session.nearest_entity(entity_filter(entity_type))
        if entity is None or session.position().distance_to(entity.position) > params.max_distance:
            return build_not_found(
                f"No {entity_type or 'entity'} found within {format_number(params.max_distance)} blocks"
            )

        x, y, z = entity.position.floored()
        return build_success(f"Found {entity.display_name} at position ({x}, {y}, {z})")
    except Exception as e:
        return build_failure(e)


def register_entity_tools(registry: ToolRegistry, session: EntityTracker) -> None:
    registry.register(
        "find-entity", "Find the nearest entity of a specific type", FindEntityInput, partial(find_entity, session)
    )
