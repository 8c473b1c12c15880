"""
Booking-related enums.
"""

from enum import Enum
from typing import Optional


class Stage(str, Enum):
    """Enumeration of the booking flow stages carried by callback payloads."""

    SELECT_CATEGORY = "select_category"
    SELECT_DATE = "select_date"
    SELECT_TIME = "select_time"
    CONFIRMED = "confirmed"

    @classmethod
    def from_segment_count(cls, count: int) -> "Stage":
        """Map the number of segments after the keyword to a stage."""
        order = [cls.SELECT_CATEGORY, cls.SELECT_DATE, cls.SELECT_TIME, cls.CONFIRMED]
        if not 0 <= count < len(order):
            raise ValueError(f"No stage for {count} segments")
        return order[count]


class Command(str, Enum):
    """Menu commands a user can type or press on the reply keyboard."""

    START = "start"
    BOOK = "book"
    CLINIC_INFO = "clinic-info"
    MY_PROFILE = "my-profile"

    @property
    def label(self) -> str:
        """Reply keyboard label for the command."""
        return _LABELS[self]

    @classmethod
    def from_text(cls, value: str) -> Optional["Command"]:
        """Convert typed text or a menu label to a Command."""
        if not value:
            return None

        value = value.strip()

        # Slash commands, optionally addressed to a bot: /start@clinic_bot
        if value.startswith("/"):
            head = value[1:].split(maxsplit=1)
            name = head[0].split("@", 1)[0].lower() if head else ""
            return _SLASH_COMMANDS.get(name)

        for command, label in _LABELS.items():
            if value == label:
                return command

        return None


_LABELS = {
    Command.START: "/start",
    Command.BOOK: "Записаться на приём",
    Command.CLINIC_INFO: "Информация о клинике",
    Command.MY_PROFILE: "Личный кабинет",
}

_SLASH_COMMANDS = {
    "start": Command.START,
    "book": Command.BOOK,
    "clinic": Command.CLINIC_INFO,
    "profile": Command.MY_PROFILE,
}


class MenuKind(str, Enum):
    """How an outbound button grid is rendered by the transport."""

    INLINE = "inline"
    REPLY = "reply"
