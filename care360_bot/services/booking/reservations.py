"""
In-process slot reservations.
"""

import asyncio
from typing import Dict, Optional, Tuple

from ...core.exceptions import SlotUnavailableError
from ...utils.logging import get_logger

logger = get_logger("care360.reservations")

SlotKey = Tuple[Optional[str], Optional[str], Optional[str]]


class SlotReservations:
    """Slots keyed by (category, date, time_range); a slot is held by at most one user."""

    def __init__(self):
        self._held: Dict[SlotKey, Optional[int]] = {}
        self._lock = asyncio.Lock()

    async def reserve(self, key: SlotKey, holder: Optional[int] = None) -> bool:
        """Reserve ``key`` if it is free.

        Returns False when another holder already has it. Re-reserving by the
        same known holder succeeds without changing anything.
        """
        async with self._lock:
            if key in self._held:
                return holder is not None and self._held[key] == holder
            self._held[key] = holder
        logger.info("Reserved slot %s for user %s", key, holder)
        return True

    async def reserve_or_raise(self, key: SlotKey, holder: Optional[int] = None) -> None:
        if not await self.reserve(key, holder):
            raise SlotUnavailableError(f"slot already reserved: {key}")

    def is_reserved(self, key: SlotKey) -> bool:
        return key in self._held
