"""
Clinic reference data returned by the upstream REST API.

Text fields the upstream sends as ``null`` or leaves out become empty
strings, so one incomplete record does not reject the whole payload.
"""

from typing import List, Optional
from pydantic import BaseModel, Field, ConfigDict, field_validator


class DoctorRecord(BaseModel):
    """Doctor entry from the global snapshot; profession doubles as the category key."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    doctor_id: Optional[int] = Field(default=None, alias="id")
    user_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    second_name: Optional[str] = None
    profession: Optional[str] = None


class ScheduleSlot(BaseModel):
    """One bookable interval of a doctor's schedule."""

    model_config = ConfigDict(extra="ignore")

    date: str = ""
    time_begin: str = ""
    time_end: str = ""
    doctor_id: Optional[int] = None
    branch_id: Optional[int] = None

    @field_validator("date", "time_begin", "time_end", mode="before")
    @classmethod
    def _blank_if_none(cls, value):
        return "" if value is None else value

    @property
    def time_range(self) -> str:
        return f"{self.time_begin} - {self.time_end}"


class BranchRecord(BaseModel):
    """Clinic branch shown on the info screen."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    branch_id: Optional[int] = Field(default=None, alias="id")
    name: str = ""
    city: str = ""
    address: str = ""

    @field_validator("name", "city", "address", mode="before")
    @classmethod
    def _blank_if_none(cls, value):
        return "" if value is None else value

    def display_line(self) -> str:
        return f"{self.name}, {self.city}, {self.address}"


class ClinicSnapshot(BaseModel):
    """Full payload of ``GET /global/doctor_time``."""

    model_config = ConfigDict(extra="ignore")

    doctors: List[DoctorRecord] = Field(default_factory=list)
    branches: List[BranchRecord] = Field(default_factory=list)
    doctor_times: List[ScheduleSlot] = Field(default_factory=list)


class DoctorCategory(BaseModel):
    """Category entry from ``GET /categories``."""

    model_config = ConfigDict(extra="ignore")

    id: int
    name: str = ""

    @field_validator("name", mode="before")
    @classmethod
    def _blank_if_none(cls, value):
        return "" if value is None else value


class Availability(BaseModel):
    """Availability entry from ``GET /availability``."""

    model_config = ConfigDict(extra="ignore")

    date: str = ""
    time: Optional[str] = None

    @field_validator("date", mode="before")
    @classmethod
    def _blank_if_none(cls, value):
        return "" if value is None else value
