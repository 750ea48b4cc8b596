"""
Block interaction tools
"""
import asyncio
from functools import partial
from typing import Callable, List, Optional

from mcp.types import CallToolResult

from ..bridge.capabilities import BlockReader, Diggable, Placeable
from ..logging_config import get_logger
from ..minecraft_data_service import MinecraftDataService, get_data_service
from ..responses import build_failure, build_not_found, build_success, error_message, format_number, format_position
from ..schemas.tool_inputs import DigBlockInput, FindBlockInput, GetBlockInfoInput, PlaceBlockInput
from ..schemas.world import FACE_OPTIONS, FaceOption
from .registry import ToolRegistry

logger = get_logger(__name__)

# Move within this distance of a block that is out of sight or reach
APPROACH_RADIUS = 2

DataForVersion = Callable[[str], MinecraftDataService]


def candidate_faces(face_direction: str = "down") -> List[FaceOption]:
    """Faces to try, canonical order with the requested face moved to the front.

    Only the requested face moves; the rest keep their canonical order.
    """
    faces = list(FACE_OPTIONS)
    if face_direction != "down":
        preferred = next((face for face in faces if face.direction == face_direction), None)
        if preferred is not None:
            faces.remove(preferred)
            faces.insert(0, preferred)
    return faces


async def place_block(session: Placeable, params: PlaceBlockInput) -> CallToolResult:
    coords = format_position(params.x, params.y, params.z)
    try:
        target = params.position
        existing = session.block_at(target)
        if existing is not None and not existing.is_air:
            return build_not_found(f"There's already a block ({existing.name}) at {coords}", status="occupied")

        last_error: Optional[Exception] = None
        for face in candidate_faces(params.face_direction):
            reference_pos = target.offset(face.vector)
            reference = session.block_at(reference_pos)
            if reference is None or reference.is_air:
                continue

            if not session.can_see_block(reference):
                await session.move_near(reference_pos, APPROACH_RADIUS)

            await session.look_at(target)

            try:
                await session.place_block(reference, face.vector.scaled(-1))
                return build_success(f"Placed block at {coords} using {face.direction} face")
            except Exception as place_error:
                logger.warning(f"Failed to place using {face.direction} face: {error_message(place_error)}")
                last_error = place_error

        if last_error is not None:
            return build_failure(
                f"No suitable reference block found for {coords}; last placement error: {error_message(last_error)}"
            )
        return build_not_found(
            f"Failed to place block at {coords}: No suitable reference block found", status="no_reference"
        )
    except Exception as e:
        return build_failure(e)


async def dig_block(session: Diggable, params: DigBlockInput) -> CallToolResult:
    coords = format_position(params.x, params.y, params.z)
    try:
        target = params.position
        block = session.block_at(target)
        if block is None or block.is_air:
            return build_not_found(f"No block found at position {coords}")

        if not session.can_dig_block(block) or not session.can_see_block(block):
            await session.move_near(target, APPROACH_RADIUS)

        await session.dig(block)
        return build_success(f"Dug {block.name} at {coords}")
    except Exception as e:
        return build_failure(e)


async def get_block_info(session: BlockReader, params: GetBlockInfoInput) -> CallToolResult:
    try:
        block = session.block_at(params.position)
        if block is None:
            return build_not_found(
                f"No block information found at position {format_position(params.x, params.y, params.z)}"
            )

        pos = block.position
        location = format_position(pos.x, pos.y, pos.z)
        return build_success(f"Found {block.name} (type: {block.type}) at position {location}")
    except Exception as e:
        return build_failure(e)


async def find_block(session: BlockReader, data_for_version: DataForVersion, params: FindBlockInput) -> CallToolResult:
    block_type = params.block_type
    max_distance = format_number(params.max_distance)
    try:
        version = session.version
        data = await asyncio.to_thread(data_for_version, version)
        lookup = data.lookup_block(block_type)
        meta = {"compatibility_data": data.version} if data.used_fallback else {}

        if not lookup.found:
            text = f"Unknown block type: {block_type}"
            if data.used_fallback:
                text = f"{text}. {data.compatibility_note}"
            return build_not_found(text, status="unknown_type", **meta)

        try:
            block = session.find_block(lookup.block_id, params.max_distance)
        except Exception as find_error:
            logger.error(f"Error finding block: {find_error}")
            return build_failure(
                f"Error finding {block_type}: {error_message(find_error)}. "
                f"This may be due to Minecraft {version} compatibility issues."
            )

        if block is None:
            return build_not_found(f"No {block_type} found within {max_distance} blocks", **meta)

        pos = block.position
        return build_success(
            f"Found {block_type} at position {format_position(pos.x, pos.y, pos.z)}", meta or None
        )
    except Exception as e:
        return build_failure(e)


def register_block_tools(
    registry: ToolRegistry, session: Placeable, data_for_version: Optional[DataForVersion] = None
) -> None:
    data_for_version = data_for_version or get_data_service
    registry.register(
        "place-block", "Place a block at the specified position", PlaceBlockInput, partial(place_block, session)
    )
    registry.register("dig-block", "Dig a block at the specified position", DigBlockInput, partial(dig_block, session))
    registry.register(
        "get-block-info",
        "Get information about a block at the specified position",
        GetBlockInfoInput,
        partial(get_block_info, session),
    )
    registry.register(
        "find-block",
        "Find the nearest block of a specific type",
        FindBlockInput,
        partial(find_block, session, data_for_version),
    )
