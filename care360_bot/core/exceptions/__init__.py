"""
Custom exceptions for the Care360 bot.
"""

from .booking import BookingFlowError, MalformedCallbackError, SlotUnavailableError
from .config import ConfigLoadError
from .external import ExternalAPIError, UpstreamUnavailable

__all__ = [
    "BookingFlowError",
    "MalformedCallbackError",
    "SlotUnavailableError",
    "ConfigLoadError",
    "ExternalAPIError",
    "UpstreamUnavailable",
]
