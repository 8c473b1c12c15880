"""
Enums for the Care360 bot.
"""

from .booking import Stage, Command, MenuKind

__all__ = [
    "Stage",
    "Command",
    "MenuKind",
]
