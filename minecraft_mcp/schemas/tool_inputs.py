"""Input schemas for the MCP tools.

Field aliases are the wire names clients send (``faceDirection``, ``maxDistance``...);
the JSON schema published to clients is generated from these models by alias.
"""

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from .world import Position

Direction = Literal["forward", "back", "left", "right"]
FaceDirection = Literal["up", "down", "north", "south", "east", "west"]
EquipDestination = Literal["hand", "head", "torso", "legs", "feet", "off-hand"]


class ToolInput(BaseModel):
    """Base for all tool inputs."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class CoordinatesInput(ToolInput):
    x: float = Field(..., description="X coordinate")
    y: float = Field(..., description="Y coordinate")
    z: float = Field(..., description="Z coordinate")

    @property
    def position(self) -> Position:
        return Position(x=self.x, y=self.y, z=self.z)


# Movement
class GetPositionInput(ToolInput):
    pass


class MoveToPositionInput(CoordinatesInput):
    range: float = Field(1, description="How close to get to the target (default: 1)")


class LookAtInput(CoordinatesInput):
    pass


class JumpInput(ToolInput):
    pass


class MoveInDirectionInput(ToolInput):
    direction: Direction = Field(..., description="Direction to move")
    duration: float = Field(1000, ge=0, description="Duration in milliseconds (default: 1000)")


# Inventory
class ListInventoryInput(ToolInput):
    pass


class FindItemInput(ToolInput):
    name_or_type: str = Field(..., alias="nameOrType", description="Name or type of item to find")


class EquipItemInput(ToolInput):
    item_name: str = Field(..., alias="itemName", description="Name of the item to equip")
    destination: EquipDestination = Field("hand", description="Where to equip the item (default: 'hand')")


# Blocks
class PlaceBlockInput(CoordinatesInput):
    face_direction: FaceDirection = Field(
        "down", alias="faceDirection", description="Direction to place against (default: 'down')"
    )


class DigBlockInput(CoordinatesInput):
    pass


class GetBlockInfoInput(CoordinatesInput):
    pass


class FindBlockInput(ToolInput):
    block_type: str = Field(..., alias="blockType", description="Type of block to find")
    max_distance: float = Field(16, alias="maxDistance", gt=0, description="Maximum search distance (default: 16)")


# Entities
class FindEntityInput(ToolInput):
    type: Optional[str] = Field("", description="Type of entity to find (empty for any entity)")
    max_distance: float = Field(16, alias="maxDistance", gt=0, description="Maximum search distance (default: 16)")


# Chat
class SendChatInput(ToolInput):
    message: str = Field(..., description="Message to send in chat")
