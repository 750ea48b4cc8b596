from .bot_session import BotSession
from .exceptions import BotSessionError

__all__ = ["BotSession", "BotSessionError"]
