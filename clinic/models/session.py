from datetime import UTC, datetime
from enum import Enum

from pydantic import NaiveDatetime
from sqlalchemy import DateTime
from sqlmodel import Field, SQLModel


def _utc_naive_now() -> datetime:
    """Naive UTC for TIMESTAMP WITHOUT TIME ZONE columns."""
    return datetime.now(UTC).replace(tzinfo=None)


class SessionStatus(str, Enum):
    SCHEDULED = "scheduled"
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    CANCELLED = "cancelled"
    NO_SHOW = "no-show"


class ClinicSession(SQLModel, table=True):
    """A therapy session (appointment). scheduled_at is clinic-local wall time."""

    __tablename__ = "sessions"
    id: int | None = Field(default=None, primary_key=True)
    patient_id: int = Field(foreign_key="patients.id", index=True)
    doctor_id: int = Field(foreign_key="doctors.id", index=True)
    scheduled_at: NaiveDatetime = Field(index=True, sa_type=DateTime(timezone=False))
    duration_minutes: int = Field(default=30, gt=0)
    session_type: str | None = None
    status: SessionStatus = Field(default=SessionStatus.SCHEDULED)
    notes: str | None = None
    fee: float | None = None
    created_at: NaiveDatetime = Field(default_factory=_utc_naive_now, sa_type=DateTime(timezone=False))


class SessionPublic(SQLModel):
    id: int
    patient_id: int
    patient_name: str | None = None
    doctor_id: int
    doctor_name: str | None = None
    scheduled_at: datetime
    duration_minutes: int
    session_type: str | None = None
    status: SessionStatus
    notes: str | None = None
    fee: float | None = None
