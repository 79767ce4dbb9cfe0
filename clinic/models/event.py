from datetime import datetime, timedelta

from pydantic import BaseModel, ConfigDict, Field

from clinic.models.session import SessionStatus


class ScheduledEvent(BaseModel):
    """Read-only calendar view of a session.

    Created by an event source, never mutated by the calendar. A naive
    ``scheduled_at`` is clinic-local time; an aware one is converted to the
    clinic timezone before it is placed on the calendar.
    """

    model_config = ConfigDict(frozen=True)

    id: int | str
    scheduled_at: datetime
    duration_minutes: int = Field(gt=0)
    subject_name: str
    counterpart_name: str
    status: SessionStatus = SessionStatus.SCHEDULED
    doctor_id: int | None = None
    patient_id: int | None = None
    session_type: str | None = None

    @property
    def ends_at(self) -> datetime:
        return self.scheduled_at + timedelta(minutes=self.duration_minutes)
