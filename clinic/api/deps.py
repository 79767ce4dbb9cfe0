from collections.abc import AsyncGenerator
from functools import lru_cache

from clinic.core.config import settings
from clinic.core.db import get_session
from clinic.data.seed import DOCTORS, PATIENTS, SESSIONS
from clinic.services.clock import Clock, SystemClock
from clinic.services.event_source import InMemoryClinicStore, SqlClinicStore


@lru_cache
def _memory_store() -> InMemoryClinicStore:
    return InMemoryClinicStore(
        DOCTORS,
        PATIENTS,
        SESSIONS,
        delay_ms=settings.mock_delay_ms,
        tz=settings.tzinfo,
    )


async def get_store() -> AsyncGenerator[InMemoryClinicStore | SqlClinicStore, None]:
    """Session/doctor/event store selected by EVENT_SOURCE."""
    if settings.event_source == "memory":
        yield _memory_store()
        return
    async for session in get_session():
        yield SqlClinicStore(session, tz=settings.tzinfo)


def get_clock() -> Clock:
    return SystemClock(settings.tzinfo)
