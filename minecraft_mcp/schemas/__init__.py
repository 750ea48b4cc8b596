"""Schema definitions for world snapshots and tool inputs."""

from .tool_inputs import *
from .world import *

__all__ = [
    # World
    "Position",
    "InventoryItem",
    "FaceOption",
    "FACE_OPTIONS",
    "BlockInfo",
    "EntityInfo",
    # Tool inputs
    "Direction",
    "FaceDirection",
    "EquipDestination",
    "ToolInput",
    "CoordinatesInput",
    "GetPositionInput",
    "MoveToPositionInput",
    "LookAtInput",
    "JumpInput",
    "MoveInDirectionInput",
    "ListInventoryInput",
    "FindItemInput",
    "EquipItemInput",
    "PlaceBlockInput",
    "DigBlockInput",
    "GetBlockInfoInput",
    "FindBlockInput",
    "FindEntityInput",
    "SendChatInput",
]
