"""
Utility modules for the Care360 bot.
"""

from .logging import configure_logging, get_logger, mask_token
from .text import split_text, utf8_length

__all__ = [
    "configure_logging",
    "get_logger",
    "mask_token",
    "split_text",
    "utf8_length",
]
