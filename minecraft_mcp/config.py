"""
Configuration management for the Minecraft MCP bridge
"""

from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ServerConfig(BaseSettings):
    """Startup configuration, read once when the process starts"""

    # Minecraft server configuration
    host: str = Field(default="localhost", description="Minecraft server host")
    port: int = Field(default=25565, description="Minecraft server port")
    username: str = Field(default="LLMBot", description="Bot username")
    minecraft_version: str = Field(default="1.21.5", description="Protocol version the bot connects with")
    fallback_version: str = Field(
        default="1.21.4", description="Older version whose block data is used when the connected version has none"
    )

    # Bot behaviour
    ready_message: str = Field(
        default="Claude-powered bot ready to receive instructions!", description="Chat message sent after spawn"
    )
    js_timeout_ms: int = Field(default=100000, description="Ceiling for a single blocking JavaScript call")

    # Logging configuration
    log_level: str = Field(default="INFO", description="Logging level (DEBUG, INFO, WARNING, ERROR)")
    log_file: Optional[str] = Field(default=None, description="Log file path (None for no file logging)")
    log_json_format: bool = Field(default=False, description="Use JSON format for stderr logs")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="MINECRAFT_MCP_",
        case_sensitive=False,
        extra="ignore",
    )


def get_config(**overrides) -> ServerConfig:
    """Get the configuration instance

    Keyword overrides (e.g. from the command line) win over environment values;
    ``None`` overrides are ignored.
    """
    return ServerConfig(**{key: value for key, value in overrides.items() if value is not None})
