"""
Booking-related exceptions.
"""


class BookingFlowError(Exception):
    """Base exception for booking flow errors."""
    pass


class MalformedCallbackError(BookingFlowError):
    """Exception raised when a callback payload does not match any known grammar."""
    pass


class SlotUnavailableError(BookingFlowError):
    """Exception raised when a booking slot is already reserved."""
    pass
