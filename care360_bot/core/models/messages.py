"""
Inbound events and outbound messages exchanged with the chat transport.
"""

from typing import List, Optional, Union
from pydantic import BaseModel, Field, ConfigDict

from ..enums import Command, MenuKind


class Button(BaseModel):
    """A single button; reply keyboard buttons carry no payload."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    label: str
    payload: Optional[str] = None


class OutboundMessage(BaseModel):
    """Text plus an optional button grid (ordered rows of ordered buttons)."""

    model_config = ConfigDict(extra="forbid")

    text: str
    buttons: List[List[Button]] = Field(default_factory=list)
    menu: MenuKind = MenuKind.INLINE

    @classmethod
    def plain(cls, text: str) -> "OutboundMessage":
        return cls(text=text)

    @classmethod
    def inline_column(cls, text: str, buttons: List[Button]) -> "OutboundMessage":
        """One button per row, as every booking menu is laid out."""
        return cls(text=text, buttons=[[b] for b in buttons], menu=MenuKind.INLINE)

    @property
    def payloads(self) -> List[str]:
        return [b.payload for row in self.buttons for b in row if b.payload is not None]

    @property
    def labels(self) -> List[str]:
        return [b.label for row in self.buttons for b in row]


class CommandEvent(BaseModel):
    """A typed menu command."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    command: Command
    user_id: int
    chat_id: int


class CallbackEvent(BaseModel):
    """A button press carrying the opaque callback payload."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    payload: str
    chat_id: int
    user_id: Optional[int] = None


InboundEvent = Union[CommandEvent, CallbackEvent]
