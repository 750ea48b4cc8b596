"""
Inventory management tools
"""
from functools import partial
from typing import List, Optional

from mcp.types import CallToolResult

from ..bridge.capabilities import InventoryHolder
from ..responses import build_failure, build_not_found, build_success
from ..schemas.tool_inputs import EquipItemInput, FindItemInput, ListInventoryInput
from ..schemas.world import InventoryItem
from .registry import ToolRegistry


def match_item(items: List[InventoryItem], query: str) -> Optional[InventoryItem]:
    """First item whose name contains ``query``, ignoring case"""
    needle = query.lower()
    return next((item for item in items if needle in item.name.lower()), None)


def _not_in_inventory(query: str) -> CallToolResult:
    return build_not_found(f"Couldn't find any item matching '{query}' in inventory")


async def list_inventory(session: InventoryHolder, params: ListInventoryInput) -> CallToolResult:
    try:
        items = session.inventory_items()
        if not items:
            return build_success("Inventory is empty")

        lines = [f"Found {len(items)} items in inventory:", ""]
        lines.extend(f"- {item.name} (x{item.count}) in slot {item.slot}" for item in items)
        return build_success("\n".join(lines) + "\n")
    except Exception as e:
        return build_failure(e)


async def find_item(session: InventoryHolder, params: FindItemInput) -> CallToolResult:
    try:
        item = match_item(session.inventory_items(), params.name_or_type)
        if item is None:
            return _not_in_inventory(params.name_or_type)
        return build_success(f"Found {item.count} {item.name} in inventory (slot {item.slot})")
    except Exception as e:
        return build_failure(e)


async def equip_item(session: InventoryHolder, params: EquipItemInput) -> CallToolResult:
    try:
        item = match_item(session.inventory_items(), params.item_name)
        if item is None:
            return _not_in_inventory(params.item_name)

        await session.equip(item, params.destination)
        return build_success(f"Equipped {item.name} to {params.destination}")
    except Exception as e:
        return build_failure(e)


def register_inventory_tools(registry: ToolRegistry, session: InventoryHolder) -> None:
    registry.register(
        "list-inventory", "List all items in the bot's inventory", ListInventoryInput, partial(list_inventory, session)
    )
    registry.register(
        "find-item", "Find a specific item in the bot's inventory", FindItemInput, partial(find_item, session)
    )
    registry.register("equip-item", "Equip a specific item", EquipItemInput, partial(equip_item, session))
