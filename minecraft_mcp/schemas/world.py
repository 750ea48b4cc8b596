"""World snapshots passed between the bot session and the tool handlers."""

from dataclasses import dataclass, field
from math import floor
from typing import Any, Optional, Tuple

from pydantic import BaseModel, Field


class Position(BaseModel):
    """3D position in the Minecraft world."""

    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")
    z: float = Field(..., description="Z coordinate")

    def offset(self, vector: "Position") -> "Position":
        return Position(x=self.x + vector.x, y=self.y + vector.y, z=self.z + vector.z)

    def scaled(self, factor: float) -> "Position":
        return Position(x=self.x * factor, y=self.y * factor, z=self.z * factor)

    def distance_to(self, other: "Position") -> float:
        return ((self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2) ** 0.5

    def floored(self) -> Tuple[int, int, int]:
        return floor(self.x), floor(self.y), floor(self.z)

    def as_tuple(self) -> Tuple[float, float, float]:
        return self.x, self.y, self.z


class InventoryItem(BaseModel):
    """Single inventory item, copied out of the bot's inventory at call time."""

    name: str
    count: int
    slot: int


@dataclass(frozen=True)
class FaceOption:
    """A cardinal direction and the offset from the target to its neighbour."""

    direction: str
    vector: Position


FACE_OPTIONS: Tuple[FaceOption, ...] = (
    FaceOption("down", Position(x=0, y=-1, z=0)),
    FaceOption("north", Position(x=0, y=0, z=-1)),
    FaceOption("south", Position(x=0, y=0, z=1)),
    FaceOption("east", Position(x=1, y=0, z=0)),
    FaceOption("west", Position(x=-1, y=0, z=0)),
    FaceOption("up", Position(x=0, y=1, z=0)),
)


@dataclass(frozen=True)
class BlockInfo:
    """Block at a position. ``handle`` is the engine object used for dig/place calls."""

    name: str
    type: int
    position: Position
    handle: Any = field(default=None, compare=False, repr=False)

    @property
    def is_air(self) -> bool:
        return self.name == "air"


@dataclass(frozen=True)
class EntityInfo:
    """Entity snapshot used for nearest-entity searches."""

    type: str
    position: Position
    name: Optional[str] = None
    username: Optional[str] = None
    id: Optional[int] = None

    @property
    def display_name(self) -> str:
        return self.name or self.username or self.type
