"""
Logging helpers.
"""

import logging

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str = "INFO") -> None:
    """Configure root logging once at process start."""
    logging.basicConfig(format=LOG_FORMAT, level=level.upper())
    # httpx logs every request at INFO, including bot API URLs with the token
    logging.getLogger("httpx").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


def mask_token(token: str) -> str:
    """Render a bot token as ``<bot id>:***`` so it can be logged."""
    bot_id, sep, _ = token.partition(":")
    if not sep or not bot_id:
        return "***"
    return f"{bot_id}:***"
