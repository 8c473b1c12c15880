"""
Booking service module.
"""

from .callbacks import parse_callback, parse_selector
from .dispatcher import BookingDispatcher
from .reservations import SlotReservations

__all__ = [
    "parse_callback",
    "parse_selector",
    "BookingDispatcher",
    "SlotReservations",
]
