"""
Minecraft Data Service - block name lookups with an older-version fallback
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_FALLBACK_VERSION = "1.21.4"


def load_node_data(version: str) -> Any:
    """minecraft-data for ``version`` from the node package mineflayer resolves names with

    Returns None when the installed package does not know the version.
    """
    from javascript import require

    return require("minecraft-data")(version)


@dataclass(frozen=True)
class BlockLookup:
    """Result of resolving a block name to the engine's numeric id"""

    name: str
    block_id: Optional[int]
    used_fallback: bool
    data_version: str

    @property
    def found(self) -> bool:
        return self.block_id is not None


class MinecraftDataService:
    """Block data for one negotiated game version"""

    def __init__(
        self,
        mc_version: str,
        fallback_version: str = DEFAULT_FALLBACK_VERSION,
        loader: Callable[[str], Any] = load_node_data,
    ):
        """Load data for ``mc_version``, or for ``fallback_version`` when it is unavailable

        Args:
            mc_version: Version string negotiated with the server (e.g., "1.21.5")
            fallback_version: Known-compatible older version
            loader: Factory returning a minecraft-data object for a version
        """
        self.requested_version = mc_version
        self.fallback_version = fallback_version
        self.used_fallback = False

        self.mc_data = self._load(loader, mc_version)
        self.version = mc_version
        if self.mc_data is None:
            logger.warning(
                f"Warning: minecraft-data not found for version {mc_version}, falling back to {fallback_version}"
            )
            self.mc_data = self._load(loader, fallback_version)
            self.version = fallback_version
            self.used_fallback = True
            if self.mc_data is None:
                raise ValueError(f"No minecraft-data available for {mc_version} or {fallback_version}")

        logger.info("Initialized MinecraftDataService", version=self.version, used_fallback=self.used_fallback)

    @staticmethod
    def _load(loader: Callable[[str], Any], version: str) -> Optional[Any]:
        try:
            data = loader(version)
        except Exception as e:
            logger.debug(f"minecraft-data unavailable for {version}: {e}")
            return None
        if data is None or getattr(data, "blocksByName", None) is None:
            return None
        return data

    @property
    def compatibility_note(self) -> str:
        return f"Note: Using {self.version} compatibility data for {self.requested_version}."

    def get_block_by_name(self, name: str) -> Optional[Any]:
        """Get block data by name

        Args:
            name: Block name (e.g., "stone", "oak_log")

        Returns:
            Block data or None if not found
        """
        try:
            return self.mc_data.blocksByName[name]
        except KeyError:
            return None

    def lookup_block(self, name: str) -> BlockLookup:
        block = self.get_block_by_name(name)
        return BlockLookup(
            name=name,
            block_id=block["id"] if block is not None else None,
            used_fallback=self.used_fallback,
            data_version=self.version,
        )


_services: Dict[tuple, MinecraftDataService] = {}


def get_data_service(
    mc_version: str,
    fallback_version: str = DEFAULT_FALLBACK_VERSION,
    loader: Callable[[str], Any] = load_node_data,
) -> MinecraftDataService:
    """Shared service per (version, fallback) pair; loading block data is slow"""
    key = (mc_version, fallback_version)
    if key not in _services:
        _services[key] = MinecraftDataService(mc_version, fallback_version, loader=loader)
    return _services[key]
