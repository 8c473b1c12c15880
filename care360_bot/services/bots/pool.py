"""
Supervised pool of bot identities.
"""

import asyncio
from typing import Awaitable, Callable, List, Sequence, Tuple, Type

from ...utils.logging import get_logger, mask_token

logger = get_logger("care360.pool")

IdentityRunner = Callable[[str], Awaitable[None]]


class BotPool:
    """
    Run one independent task per bot token.

    Each task is its own failure boundary: an unexpected error restarts that
    identity after ``restart_delay`` seconds, an error listed in
    ``fatal_errors`` (e.g. a rejected token) stops only that identity.
    """

    def __init__(
        self,
        tokens: Sequence[str],
        runner: IdentityRunner,
        *,
        restart_delay: float = 5.0,
        fatal_errors: Tuple[Type[BaseException], ...] = (),
    ):
        self.tokens = self._dedupe(tokens)
        self.runner = runner
        self.restart_delay = restart_delay
        self.fatal_errors = fatal_errors

    @staticmethod
    def _dedupe(tokens: Sequence[str]) -> List[str]:
        unique = list(dict.fromkeys(tokens))
        if len(unique) != len(tokens):
            logger.warning("Ignoring %d duplicate token(s)", len(tokens) - len(unique))
        return unique

    async def run(self) -> None:
        """Start every identity and wait for all of them to finish."""
        tasks = [
            asyncio.create_task(self.supervise(token), name=f"bot-{mask_token(token)}")
            for token in self.tokens
        ]
        logger.info("Started %d bot identities", len(tasks))
        try:
            await asyncio.gather(*tasks)
        finally:
            for task in tasks:
                task.cancel()

    async def supervise(self, token: str) -> None:
        identity = mask_token(token)
        while True:
            try:
                await self.runner(token)
            except self.fatal_errors as e:
                logger.error("[%s] Stopping identity: %s", identity, e)
                return
            except Exception:
                logger.exception("[%s] Identity crashed, restarting in %ss", identity, self.restart_delay)
                await asyncio.sleep(self.restart_delay)
                continue

            logger.warning("[%s] Identity stopped", identity)
            return
