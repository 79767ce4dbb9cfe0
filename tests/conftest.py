"""Shared test fixtures."""
from datetime import datetime

import pytest

from clinic.data.seed import DOCTORS, PATIENTS, SESSIONS
from clinic.models.event import ScheduledEvent
from clinic.models.session import SessionStatus
from clinic.services.clock import FixedClock
from clinic.services.event_source import InMemoryClinicStore


@pytest.fixture
def make_event():
    """Build a ScheduledEvent with sensible defaults."""
    def _create(event_id, scheduled_at: datetime, **overrides) -> ScheduledEvent:
        data = {
            "id": event_id,
            "scheduled_at": scheduled_at,
            "duration_minutes": 30,
            "subject_name": f"Patient {event_id}",
            "counterpart_name": "Dr. Test",
            "status": SessionStatus.SCHEDULED,
        }
        data.update(overrides)
        return ScheduledEvent(**data)
    return _create


@pytest.fixture
def clock() -> FixedClock:
    return FixedClock(datetime(2024, 12, 20, 9, 30))


@pytest.fixture
def store() -> InMemoryClinicStore:
    """Seeded demo store without the artificial delay."""
    return InMemoryClinicStore(DOCTORS, PATIENTS, SESSIONS, delay_ms=0)
