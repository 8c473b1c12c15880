"""
Service layer for the Care360 bot.
"""

from .booking import BookingDispatcher, SlotReservations
from .external import UpstreamClient
from .profile import ProfileDirectory

__all__ = [
    "BookingDispatcher",
    "SlotReservations",
    "UpstreamClient",
    "ProfileDirectory",
]
