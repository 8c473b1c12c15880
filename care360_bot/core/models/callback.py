"""
Structured form of the callback payload that carries booking progress.

Wire grammar::

    category
    category:<category>
    date:<category>:<date>
    time:<category>:<date>:<time_range>

``<category>`` is either a numeric category id or a profession name.
"""

from dataclasses import dataclass
from typing import Optional, Union

from ..enums import Stage


@dataclass(frozen=True)
class ById:
    """Category chosen from ``GET /categories``."""

    category_id: int

    def encode(self) -> str:
        return str(self.category_id)


@dataclass(frozen=True)
class ByName:
    """Category chosen by doctor profession."""

    profession: str

    def encode(self) -> str:
        return self.profession


CategorySelector = Union[ById, ByName]

# Telegram caps InlineKeyboardButton.callback_data at 64 bytes
CALLBACK_DATA_LIMIT = 64

_KEYWORDS = {
    Stage.SELECT_CATEGORY: "category",
    Stage.SELECT_DATE: "category",
    Stage.SELECT_TIME: "date",
    Stage.CONFIRMED: "time",
}


@dataclass(frozen=True)
class CallbackToken:
    """Parsed callback payload; segments only ever grow as the user advances."""

    stage: Stage
    selector: Optional[CategorySelector] = None
    date: Optional[str] = None
    time_range: Optional[str] = None

    @classmethod
    def category_menu(cls) -> "CallbackToken":
        return cls(Stage.SELECT_CATEGORY)

    @classmethod
    def for_category(cls, selector: CategorySelector) -> "CallbackToken":
        return cls(Stage.SELECT_DATE, selector=selector)

    def with_date(self, date: str) -> "CallbackToken":
        return CallbackToken(Stage.SELECT_TIME, selector=self.selector, date=date)

    def with_time(self, time_range: str) -> "CallbackToken":
        return CallbackToken(
            Stage.CONFIRMED, selector=self.selector, date=self.date, time_range=time_range
        )

    @property
    def category(self) -> Optional[str]:
        return self.selector.encode() if self.selector is not None else None

    @property
    def slot_key(self) -> tuple:
        """Reservation key for a confirmed token."""
        return (self.category, self.date, self.time_range)

    def encode(self) -> str:
        segments = [self.category, self.date, self.time_range]
        segments = [s for s in segments if s is not None]
        return ":".join([_KEYWORDS[self.stage], *segments])
