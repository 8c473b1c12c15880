"""
Pytest configuration and fixtures.
"""

import pytest
from unittest.mock import Mock, AsyncMock
from care360_bot.core.models.clinic import (
    Availability,
    BranchRecord,
    DoctorCategory,
    DoctorRecord,
    ScheduleSlot,
)
from care360_bot.core.models.user import UserProfile
from care360_bot.services.booking import BookingDispatcher
from care360_bot.services.external import UpstreamClient
from care360_bot.services.profile import ProfileDirectory
from care360_bot.utils import event_log


SNAPSHOT_PAYLOAD = {
    "doctors": [
        {"id": 1, "user_id": 11, "first_name": "Анна", "last_name": "Иванова",
         "second_name": "Петровна", "profession": "Cardiology"},
        {"id": 2, "user_id": 12, "first_name": "Олег", "last_name": "Смирнов",
         "second_name": "", "profession": "Dermatology"},
        {"id": 3, "user_id": 13, "first_name": "Игорь", "last_name": "Козлов",
         "second_name": "", "profession": "Cardiology"},
    ],
    "branches": [
        {"id": 1, "name": "Центральный", "city": "Москва", "address": "ул. Ленина, 1"},
        {"id": 2, "name": "Северный", "city": "Москва", "address": "пр. Мира, 10"},
    ],
    "doctor_times": [
        {"date": "2024-05-01", "time_begin": "09:00", "time_end": "09:30", "doctor_id": 1, "branch_id": 1},
        {"date": "2024-05-01", "time_begin": "10:00", "time_end": "10:30", "doctor_id": 3, "branch_id": 1},
        {"date": "2024-05-02", "time_begin": "11:00", "time_end": "11:30", "doctor_id": 2, "branch_id": 2},
    ],
}


@pytest.fixture(autouse=True)
def no_event_log():
    """Keep the audit log disabled unless a test opts in."""
    event_log.set_log_path(None)
    yield
    event_log.set_log_path(None)


@pytest.fixture
def doctors():
    return [DoctorRecord.model_validate(d) for d in SNAPSHOT_PAYLOAD["doctors"]]


@pytest.fixture
def branches():
    return [BranchRecord.model_validate(b) for b in SNAPSHOT_PAYLOAD["branches"]]


@pytest.fixture
def doctor_times():
    return [ScheduleSlot.model_validate(s) for s in SNAPSHOT_PAYLOAD["doctor_times"]]


@pytest.fixture
def mock_upstream(doctors, branches, doctor_times):
    """Mock upstream clinic API."""
    api = Mock(spec=UpstreamClient)
    api.list_doctors = AsyncMock(return_value=doctors)
    api.list_branches = AsyncMock(return_value=branches)
    api.list_doctor_times = AsyncMock(return_value=doctor_times)
    api.list_categories = AsyncMock(return_value=[
        DoctorCategory(id=1, name="Терапевт"),
        DoctorCategory(id=2, name="Хирург"),
    ])
    api.list_availability = AsyncMock(return_value=[
        Availability(date="2024-06-01", time="09:00"),
        Availability(date="2024-06-01", time="10:00"),
        Availability(date="2024-06-03", time="12:00"),
    ])
    api.list_timeslots = AsyncMock(return_value=["09:00", "09:30", "10:00"])
    return api


@pytest.fixture
def profiles():
    return ProfileDirectory([
        UserProfile(user_id=42, name="Иванов Иван Иванович", phone="+79990001122"),
        UserProfile(user_id=7, name="Петров Пётр", phone="+79995554433"),
    ])


@pytest.fixture
def dispatcher(mock_upstream, profiles):
    """Dispatcher with mocked upstream and no reservations."""
    return BookingDispatcher(mock_upstream, profiles, identity="123:***")


@pytest.fixture
def upstream_calls(mock_upstream):
    """Total number of awaited upstream queries so far."""
    names = (
        "list_doctors",
        "list_branches",
        "list_doctor_times",
        "list_categories",
        "list_availability",
        "list_timeslots",
    )
    return lambda: sum(getattr(mock_upstream, name).await_count for name in names)
