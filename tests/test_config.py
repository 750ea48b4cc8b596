"""Tests for configuration and command line parsing"""
from minecraft_mcp.config import ServerConfig, get_config
from minecraft_mcp.main import load_config, parse_args


def test_defaults(monkeypatch):
    for name in ("HOST", "PORT", "USERNAME"):
        monkeypatch.delenv(f"MINECRAFT_MCP_{name}", raising=False)

    config = ServerConfig()

    assert config.host == "localhost"
    assert config.port == 25565
    assert config.username == "LLMBot"
    assert config.fallback_version == "1.21.4"


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("MINECRAFT_MCP_HOST", "mc.example")
    monkeypatch.setenv("MINECRAFT_MCP_PORT", "25570")

    config = get_config()

    assert config.host == "mc.example"
    assert config.port == 25570


def test_none_overrides_are_ignored(monkeypatch):
    monkeypatch.setenv("MINECRAFT_MCP_USERNAME", "EnvBot")

    config = get_config(username=None, host="cli-host")

    assert config.username == "EnvBot"
    assert config.host == "cli-host"


def test_command_line_wins_over_environment(monkeypatch):
    monkeypatch.setenv("MINECRAFT_MCP_PORT", "1111")

    config = load_config(parse_args(["--port", "2222", "--username", "Builder", "--version", "1.21.1"]))

    assert config.port == 2222
    assert config.username == "Builder"
    assert config.minecraft_version == "1.21.1"


def test_parse_args_without_flags():
    args = parse_args([])

    assert args.host is None
    assert args.port is None
