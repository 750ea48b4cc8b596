"""
Mock implementations for testing without a Minecraft server or Node.js
"""
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

from minecraft_mcp.minecraft_data_service import MinecraftDataService
from minecraft_mcp.schemas.world import BlockInfo, EntityInfo, InventoryItem, Position

BLOCK_IDS = {"air": 0, "stone": 1, "dirt": 10, "oak_log": 49, "diamond_ore": 180}


def block(name, x, y, z):
    """Block snapshot as the session would return it"""
    return BlockInfo(name=name, type=BLOCK_IDS.get(name, 999), position=Position(x=x, y=y, z=z))


def entity(type, x, y, z, name=None, username=None, id=None):
    return EntityInfo(type=type, position=Position(x=x, y=y, z=z), name=name, username=username, id=id)


class MockBotSession:
    """In-memory world standing in for BotSession

    ``blocks`` maps (x, y, z) to block names. Async operations are AsyncMocks and
    the instant predicates are MagicMocks, so tests can set side effects and
    inspect call order through ``history``.
    """

    def __init__(self, blocks=None, items=None, entities=None, position=(0, 64, 0), version="1.21.5"):
        self.blocks = {tuple(pos): block(name, *pos) for pos, name in (blocks or {}).items()}
        self.items = [InventoryItem(name=name, count=count, slot=slot) for name, count, slot in (items or [])]
        self.entities = list(entities or [])
        self.version = version
        self.control_states = {}
        self.history = []

        self.position = MagicMock(return_value=Position(x=position[0], y=position[1], z=position[2]))
        self.move_near = AsyncMock(side_effect=self._record("move_near"))
        self.look_at = AsyncMock(side_effect=self._record("look_at"))
        self.place_block = AsyncMock(side_effect=self._record("place_block"))
        self.dig = AsyncMock(side_effect=self._record("dig"))
        self.equip = AsyncMock(side_effect=self._record("equip"))
        self.can_see_block = MagicMock(return_value=True)
        self.can_dig_block = MagicMock(return_value=True)
        self.find_block = MagicMock(return_value=None)
        self.chat = MagicMock()
        self.inventory_items = MagicMock(side_effect=lambda: list(self.items))
        self.block_at = MagicMock(side_effect=self._block_at)
        self.nearest_entity = AsyncMock(side_effect=self._nearest_entity)

    def _record(self, name):
        def record(*args):
            self.history.append((name, args))

        return record

    def _block_at(self, position):
        self.history.append(("block_at", (position.as_tuple(),)))
        return self.blocks.get(position.as_tuple())

    def _nearest_entity(self, predicate):
        origin = self.position()
        matches = [e for e in self.entities if predicate(e)]
        return min(matches, key=lambda e: origin.distance_to(e.position), default=None)

    def set_control_state(self, control, state):
        self.history.append(("set_control_state", (control, state)))
        self.control_states[control] = state

    def calls(self, name):
        return [args for call, args in self.history if call == name]


def make_data_loader(available=("1.21.4",), blocks=BLOCK_IDS):
    """Loader standing in for node minecraft-data: only knows ``available`` versions"""

    def loader(version):
        if version not in available:
            raise KeyError(version)
        return SimpleNamespace(blocksByName={name: {"id": block_id, "name": name} for name, block_id in blocks.items()})

    return loader


def make_data_service(version="1.21.5", available=("1.21.4", "1.21.5")):
    return MinecraftDataService(version, fallback_version="1.21.4", loader=make_data_loader(available))
