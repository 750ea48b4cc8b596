"""
Bot Session - owns the single mineflayer bot driven through JSPyBridge
"""
import asyncio
from typing import Any, Callable, List, Optional

from ..config import ServerConfig
from ..logging_config import get_logger
from ..minecraft_data_service import get_data_service
from ..schemas.world import BlockInfo, EntityInfo, InventoryItem, Position
from .exceptions import BotSessionError

logger = get_logger(__name__)

LIMITED_FUNCTIONALITY_MESSAGE = "Bot initialized with limited functionality due to version compatibility issues"


class BotSession:
    """Single connection to the Minecraft world

    Instant queries are plain methods and run on the caller's thread. Operations
    that wait on the game (pathfinding, digging, placing, equipping, looking) are
    coroutines that push the blocking bridge call to a worker thread, so other
    tool calls keep being served meanwhile.
    """

    def __init__(self, config: ServerConfig, javascript_module: Any = None):
        self.config = config
        self._javascript = javascript_module
        self.bot = None
        self._pathfinder = None
        self._vec3 = None
        self._minecraft_data = None
        self.is_connected = False
        self.is_spawned = False

    def connect(self) -> None:
        """Create the bot and register lifecycle listeners. Does not wait for spawn."""
        javascript = self._javascript
        if javascript is None:
            import javascript

            self._javascript = javascript

        logger.info(
            f"Connecting to Minecraft server at {self.config.host}:{self.config.port} as {self.config.username}"
        )
        try:
            mineflayer = javascript.require("mineflayer")
            self._pathfinder = javascript.require("mineflayer-pathfinder")
            self._vec3 = javascript.require("vec3")
            self._minecraft_data = javascript.require("minecraft-data")

            self.bot = mineflayer.createBot(
                {
                    "host": self.config.host,
                    "port": self.config.port,
                    "username": self.config.username,
                    "version": self.config.minecraft_version,
                }
            )
            self.bot.loadPlugin(self._pathfinder.pathfinder)
        except Exception as e:
            logger.error("Failed to create bot", error=str(e))
            raise BotSessionError(f"Failed to create bot: {e}") from e

        self._register_listeners(javascript.On)
        self.is_connected = True

    def _register_listeners(self, on: Callable) -> None:
        bot = self.bot

        @on(bot, "spawn")
        def handle_spawn(this, *args):
            self._handle_spawn()

        @on(bot, "chat")
        def handle_chat(this, username, message, *args):
            if username == bot.username:
                return
            logger.info(f"[CHAT] {username}: {message}")

        @on(bot, "kicked")
        def handle_kicked(this, reason, *args):
            logger.warning(f"Bot was kicked: {reason}")

        @on(bot, "error")
        def handle_error(this, err, *args):
            logger.error(f"Bot error: {getattr(err, 'message', err)}")

        @on(bot, "end")
        def handle_end(this, *args):
            logger.info("Bot disconnected from server")
            self.is_connected = False
            self.is_spawned = False

    def _handle_spawn(self) -> None:
        self.is_spawned = True
        logger.info("Bot has spawned in the world")
        logger.info(f"Connected to Minecraft server using protocol version: {self.bot.version}")

        try:
            data = get_data_service(self.bot.version, self.config.fallback_version, loader=self._minecraft_data)
            if data.used_fallback:
                logger.warning(f"Block data for {self.bot.version} unavailable, using {data.version}")

            movements = self._pathfinder.Movements(self.bot)
            self.bot.pathfinder.setMovements(movements)
            self.bot.chat(self.config.ready_message)
        except Exception as e:
            logger.error(f"Error during bot setup: {e}")
            self.bot.chat(LIMITED_FUNCTIONALITY_MESSAGE)

    def _check_ready(self) -> None:
        if self.bot is None or not self.is_connected:
            raise BotSessionError("Bot is not connected to a Minecraft server")
        if not self.is_spawned:
            raise BotSessionError("Bot has not spawned in the world yet")

    def _vec(self, position: Position):
        return self._vec3(position.x, position.y, position.z)

    async def _call(self, func: Callable, *args) -> Any:
        return await asyncio.to_thread(func, *args, timeout=self.config.js_timeout_ms)

    @staticmethod
    def _block_info(block) -> Optional[BlockInfo]:
        if block is None:
            return None
        pos = block.position
        return BlockInfo(
            name=block.name,
            type=block.type,
            position=Position(x=pos.x, y=pos.y, z=pos.z),
            handle=block,
        )

    @staticmethod
    def _entity_info(entity) -> EntityInfo:
        pos = entity.position
        return EntityInfo(
            type=entity.type,
            position=Position(x=pos.x, y=pos.y, z=pos.z),
            name=entity.name,
            username=entity.username,
            id=entity.id,
        )

    # World metadata
    @property
    def version(self) -> str:
        self._check_ready()
        return self.bot.version

    # Movement
    def position(self) -> Position:
        self._check_ready()
        pos = self.bot.entity.position
        return Position(x=pos.x, y=pos.y, z=pos.z)

    async def move_near(self, target: Position, radius: float) -> None:
        self._check_ready()
        goal = self._pathfinder.goals.GoalNear(target.x, target.y, target.z, radius)
        logger.debug("Pathfinding", target=target.as_tuple(), radius=radius)
        await self._call(self.bot.pathfinder.goto, goal)

    async def look_at(self, target: Position) -> None:
        self._check_ready()
        await self._call(self.bot.lookAt, self._vec(target), True)

    def set_control_state(self, control: str, state: bool) -> None:
        self._check_ready()
        self.bot.setControlState(control, state)

    # Inventory
    def inventory_items(self) -> List[InventoryItem]:
        self._check_ready()
        return [InventoryItem(name=item.name, count=item.count, slot=item.slot) for item in self.bot.inventory.items()]

    async def equip(self, item: InventoryItem, destination: str) -> None:
        self._check_ready()
        raw_item = self.bot.inventory.slots[item.slot]
        if raw_item is None:
            raise BotSessionError(f"Slot {item.slot} no longer holds {item.name}")
        await self._call(self.bot.equip, raw_item, destination)

    # Blocks
    def block_at(self, position: Position) -> Optional[BlockInfo]:
        self._check_ready()
        return self._block_info(self.bot.blockAt(self._vec(position)))

    def can_see_block(self, block: BlockInfo) -> bool:
        self._check_ready()
        return bool(self.bot.canSeeBlock(block.handle))

    def can_dig_block(self, block: BlockInfo) -> bool:
        self._check_ready()
        return bool(self.bot.canDigBlock(block.handle))

    async def place_block(self, reference: BlockInfo, face_vector: Position) -> None:
        self._check_ready()
        await self._call(self.bot.placeBlock, reference.handle, self._vec(face_vector))

    async def dig(self, block: BlockInfo) -> None:
        self._check_ready()
        await self._call(self.bot.dig, block.handle)

    def find_block(self, block_id: int, max_distance: float) -> Optional[BlockInfo]:
        self._check_ready()
        return self._block_info(self.bot.findBlock({"matching": block_id, "maxDistance": max_distance}))

    # Entities
    async def nearest_entity(self, predicate: Callable[[EntityInfo], bool]) -> Optional[EntityInfo]:
        """Nearest entity other than the bot itself that satisfies ``predicate``. Scans on a worker thread."""
        self._check_ready()
        return await asyncio.to_thread(self._scan_entities, predicate)

    def _scan_entities(self, predicate: Callable[[EntityInfo], bool]) -> Optional[EntityInfo]:
        own_id = self.bot.entity.id
        origin = self.position()

        nearest = None
        nearest_distance = None
        entities = self.bot.entities
        for key in entities:
            raw = entities[key]
            if raw is None or raw.id == own_id:
                continue
            entity = self._entity_info(raw)
            if not predicate(entity):
                continue
            distance = origin.distance_to(entity.position)
            if nearest_distance is None or distance < nearest_distance:
                nearest, nearest_distance = entity, distance
        return nearest

    # Chat
    def chat(self, message: str) -> None:
        self._check_ready()
        self.bot.chat(message)

    def close(self) -> None:
        """Disconnect from the server. Safe to call more than once."""
        if self.bot is not None:
            logger.info("Closing bot session")
            try:
                self.bot.quit()
            except Exception as e:
                logger.warning(f"Error while quitting bot: {e}")
            self.bot = None
        self.is_connected = False
        self.is_spawned = False
        logger.info("Bot session closed")
