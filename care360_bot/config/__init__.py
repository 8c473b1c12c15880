"""
Configuration management for the Care360 bot.
"""

from .settings import Settings, get_settings
from .upstream import UpstreamAPIConfig
from .files import load_tokens, load_users

__all__ = [
    "Settings",
    "get_settings",
    "UpstreamAPIConfig",
    "load_tokens",
    "load_users",
]
