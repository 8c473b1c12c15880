"""
Bot transport and identity pool module.
"""

from .pool import BotPool
from .telegram import TelegramTransport, build_reply_markup, event_from_update

__all__ = [
    "BotPool",
    "TelegramTransport",
    "build_reply_markup",
    "event_from_update",
]
