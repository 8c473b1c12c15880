"""
Main application entry point for the Care360 bot.
"""

import asyncio
import sys
from typing import Optional

from telegram.error import InvalidToken

from .config import Settings, UpstreamAPIConfig, get_settings, load_tokens
from .core.exceptions import ConfigLoadError
from .services.booking import BookingDispatcher, SlotReservations
from .services.bots import BotPool, TelegramTransport
from .services.external import UpstreamClient
from .services.profile import ProfileDirectory
from .utils import event_log
from .utils.logging import configure_logging, get_logger, mask_token

logger = get_logger("care360.main")


def create_pool(settings: Settings) -> BotPool:
    """Wire every identity to its own dispatcher over shared read-only collaborators.

    Raises:
        ConfigLoadError: the token file is missing, malformed or empty
    """
    tokens = load_tokens(settings.tokens_file)
    profiles = ProfileDirectory.from_file(settings.users_file)
    upstream = UpstreamClient(UpstreamAPIConfig.from_settings(settings))
    reservations: Optional[SlotReservations] = (
        SlotReservations() if settings.reserve_on_confirm else None
    )

    async def run_identity(token: str) -> None:
        dispatcher = BookingDispatcher(
            upstream,
            profiles,
            reservations,
            identity=mask_token(token),
        )
        transport = TelegramTransport(token, dispatcher, poll_timeout=settings.poll_timeout)
        await transport.run()

    return BotPool(
        tokens,
        run_identity,
        restart_delay=settings.restart_delay,
        fatal_errors=(InvalidToken,),
    )


async def run(settings: Settings) -> None:
    pool = create_pool(settings)
    await pool.run()


def main() -> int:
    settings = get_settings()
    configure_logging(settings.log_level)
    event_log.set_log_path(settings.event_log_path)

    logger.info("Starting %s %s against %s", settings.app_name, settings.app_version, settings.api_base_url)
    try:
        asyncio.run(run(settings))
    except ConfigLoadError as e:
        logger.critical("Cannot start: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    return 0


if __name__ == "__main__":
    sys.exit(main())
