"""
Entry point for the Minecraft MCP bridge

Connects one bot to the Minecraft server and serves its tools over stdio
until the MCP client goes away.
"""

import argparse
import asyncio
import sys
from typing import Callable, List, Optional

from .bridge.bot_session import BotSession
from .config import ServerConfig, get_config
from .logging_config import get_logger, setup_logging
from .server import create_server, serve_stdio
from .tools import build_registry

logger = get_logger(__name__)


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """Parse command line arguments

    Flags left out fall back to MINECRAFT_MCP_* environment variables, then defaults.
    """
    parser = argparse.ArgumentParser(description="Minecraft bot exposed as Model Context Protocol tools")
    parser.add_argument("--host", help="Minecraft server host (default: localhost)")
    parser.add_argument("--port", type=int, help="Minecraft server port (default: 25565)")
    parser.add_argument("--username", help="Bot username (default: LLMBot)")
    parser.add_argument("--version", dest="minecraft_version", help="Minecraft version to connect with")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> ServerConfig:
    return get_config(**vars(args))


async def run_server(config: ServerConfig, session_factory: Callable[[ServerConfig], BotSession] = BotSession) -> int:
    """Run until the transport closes. Returns the process exit code."""
    session = None
    try:
        session = session_factory(config)
        session.connect()
        server = create_server(build_registry(session, config.fallback_version))
    except Exception as e:
        logger.error(f"Failed to start server: {e}", exc_info=True)
        if session is not None:
            session.close()
        return 1

    try:
        await serve_stdio(server)
    except Exception as e:
        logger.error(f"Fatal error in MCP server: {e}", exc_info=True)
        session.close()
        return 1

    logger.info("Client has disconnected. Shutting down...")
    session.close()
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    config = load_config(parse_args(argv))
    setup_logging(log_level=config.log_level, log_file=config.log_file, json_format=config.log_json_format)
    sys.exit(asyncio.run(run_server(config)))


if __name__ == "__main__":
    main()
