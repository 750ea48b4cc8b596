"""
Narrow contracts the tool handlers depend on

BotSession implements all of them; tests substitute mocks.
"""
from typing import Callable, List, Optional, Protocol

from ..schemas.world import BlockInfo, EntityInfo, InventoryItem, Position


class Positionable(Protocol):
    def position(self) -> Position: ...

    async def move_near(self, target: Position, radius: float) -> None: ...

    async def look_at(self, target: Position) -> None: ...

    def set_control_state(self, control: str, state: bool) -> None: ...


class InventoryHolder(Protocol):
    def inventory_items(self) -> List[InventoryItem]: ...

    async def equip(self, item: InventoryItem, destination: str) -> None: ...


class BlockReader(Protocol):
    @property
    def version(self) -> str: ...

    def block_at(self, position: Position) -> Optional[BlockInfo]: ...

    def can_see_block(self, block: BlockInfo) -> bool: ...

    def find_block(self, block_id: int, max_distance: float) -> Optional[BlockInfo]: ...


class Diggable(BlockReader, Protocol):
    def can_dig_block(self, block: BlockInfo) -> bool: ...

    async def move_near(self, target: Position, radius: float) -> None: ...

    async def dig(self, block: BlockInfo) -> None: ...


class Placeable(BlockReader, Protocol):
    async def move_near(self, target: Position, radius: float) -> None: ...

    async def look_at(self, target: Position) -> None: ...

    async def place_block(self, reference: BlockInfo, face_vector: Position) -> None: ...


class EntityTracker(Protocol):
    def position(self) -> Position: ...

    async def nearest_entity(self, predicate: Callable[[EntityInfo], bool]) -> Optional[EntityInfo]: ...


class Chatter(Protocol):
    def chat(self, message: str) -> None: ...
