"""
Position and movement tools
"""
import asyncio
from functools import partial

from mcp.types import CallToolResult

from ..bridge.capabilities import Positionable
from ..logging_config import get_logger
from ..responses import build_failure, build_success, format_number, format_position
from ..schemas.tool_inputs import (
    GetPositionInput,
    JumpInput,
    LookAtInput,
    MoveInDirectionInput,
    MoveToPositionInput,
)
from .registry import ToolRegistry

logger = get_logger(__name__)

JUMP_RELEASE_MS = 250


def _release_control(session: Positionable, control: str) -> None:
    try:
        session.set_control_state(control, False)
    except Exception as e:
        logger.error(f"Failed to release {control}: {e}")


def schedule_release(session: Positionable, control: str, delay_ms: float) -> asyncio.TimerHandle:
    """Clear ``control`` after ``delay_ms`` without waiting for it. Cancel the handle to keep it held."""
    loop = asyncio.get_running_loop()
    return loop.call_later(delay_ms / 1000, _release_control, session, control)


async def get_position(session: Positionable, params: GetPositionInput) -> CallToolResult:
    try:
        x, y, z = session.position().floored()
        return build_success(f"Current position: ({x}, {y}, {z})")
    except Exception as e:
        return build_failure(e)


async def move_to_position(session: Positionable, params: MoveToPositionInput) -> CallToolResult:
    try:
        await session.move_near(params.position, params.range)
        return build_success(f"Successfully moved to position near {format_position(params.x, params.y, params.z)}")
    except Exception as e:
        return build_failure(e)


async def look_at(session: Positionable, params: LookAtInput) -> CallToolResult:
    try:
        await session.look_at(params.position)
        return build_success(f"Looking at position {format_position(params.x, params.y, params.z)}")
    except Exception as e:
        return build_failure(e)


async def jump(session: Positionable, params: JumpInput) -> CallToolResult:
    try:
        session.set_control_state("jump", True)
        schedule_release(session, "jump", JUMP_RELEASE_MS)
        return build_success("Successfully jumped")
    except Exception as e:
        return build_failure(e)


async def move_in_direction(session: Positionable, params: MoveInDirectionInput) -> CallToolResult:
    direction = params.direction
    try:
        try:
            session.set_control_state(direction, True)
            await asyncio.sleep(params.duration / 1000)
        finally:
            session.set_control_state(direction, False)
        return build_success(f"Moved {direction} for {format_number(params.duration)}ms")
    except Exception as e:
        return build_failure(e)


def register_movement_tools(registry: ToolRegistry, session: Positionable) -> None:
    registry.register(
        "get-position", "Get the current position of the bot", GetPositionInput, partial(get_position, session)
    )
    registry.register(
        "move-to-position",
        "Move the bot to a specific position",
        MoveToPositionInput,
        partial(move_to_position, session),
    )
    registry.register(
        "look-at", "Make the bot look at a specific position", LookAtInput, partial(look_at, session)
    )
    registry.register("jump", "Make the bot jump", JumpInput, partial(jump, session))
    registry.register(
        "move-in-direction",
        "Move the bot in a specific direction for a duration",
        MoveInDirectionInput,
        partial(move_in_direction, session),
    )
