"""Exceptions raised by the bot session."""


class BotSessionError(RuntimeError):
    """The session cannot serve a request (not connected, not spawned, bridge failure)."""
