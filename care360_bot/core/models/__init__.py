"""
Core data models for the Care360 bot.
"""

from .callback import ById, ByName, CategorySelector, CallbackToken
from .clinic import (
    Availability,
    BranchRecord,
    ClinicSnapshot,
    DoctorCategory,
    DoctorRecord,
    ScheduleSlot,
)
from .messages import Button, CallbackEvent, CommandEvent, InboundEvent, OutboundMessage
from .user import UserProfile

__all__ = [
    "ById",
    "ByName",
    "CategorySelector",
    "CallbackToken",
    "Availability",
    "BranchRecord",
    "ClinicSnapshot",
    "DoctorCategory",
    "DoctorRecord",
    "ScheduleSlot",
    "Button",
    "CallbackEvent",
    "CommandEvent",
    "InboundEvent",
    "OutboundMessage",
    "UserProfile",
]
