"""Where the calendar gets its sessions and doctors from.

The calendar core only sees ScheduledEvent lists; these stores hide whether
they come from the seeded in-memory demo data or from the database.
"""
import asyncio
import logging
from datetime import date, datetime, time, tzinfo
from typing import Protocol

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from clinic.models.doctor import Doctor, DoctorSummary
from clinic.models.event import ScheduledEvent
from clinic.models.patient import Patient
from clinic.models.session import ClinicSession, SessionPublic, SessionStatus
from clinic.services.calendar_window import local_time

logger = logging.getLogger(__name__)


class SessionNotFoundError(LookupError):
    pass


class EventSource(Protocol):
    async def list_events(
        self,
        *,
        doctor_id: int | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ScheduledEvent]: ...


class DoctorDirectory(Protocol):
    async def list_doctors(self) -> list[DoctorSummary]: ...


def to_event(s: ClinicSession, patient: Patient | None, doctor: Doctor | None) -> ScheduledEvent:
    return ScheduledEvent(
        id=int(s.id) if s.id is not None else 0,
        scheduled_at=s.scheduled_at,
        duration_minutes=s.duration_minutes,
        subject_name=patient.name if patient else "",
        counterpart_name=doctor.name if doctor else "",
        status=s.status,
        doctor_id=s.doctor_id,
        patient_id=s.patient_id,
        session_type=s.session_type,
    )


def to_public(s: ClinicSession, patient: Patient | None, doctor: Doctor | None) -> SessionPublic:
    return SessionPublic(
        id=int(s.id) if s.id is not None else 0,
        patient_id=s.patient_id,
        patient_name=patient.name if patient else None,
        doctor_id=s.doctor_id,
        doctor_name=doctor.name if doctor else None,
        scheduled_at=s.scheduled_at,
        duration_minutes=s.duration_minutes,
        session_type=s.session_type,
        status=s.status,
        notes=s.notes,
        fee=s.fee,
    )


def to_summary(d: Doctor) -> DoctorSummary:
    return DoctorSummary(id=int(d.id) if d.id is not None else 0, name=d.name, specialization=d.specialization)


class InMemoryClinicStore:
    """Seeded demo store with an artificial response delay."""

    def __init__(
        self,
        doctors: list[Doctor],
        patients: list[Patient],
        sessions: list[ClinicSession],
        delay_ms: int = 0,
        tz: tzinfo | None = None,
    ) -> None:
        self._doctors = {d.id: d for d in doctors}
        self._patients = {p.id: p for p in patients}
        self._sessions = list(sessions)
        self.delay_ms = delay_ms
        self.tz = tz

    async def _delay(self) -> None:
        if self.delay_ms > 0:
            await asyncio.sleep(self.delay_ms / 1000)

    def _matching(
        self,
        doctor_id: int | None = None,
        patient_id: int | None = None,
        on_date: date | None = None,
        status: SessionStatus | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ClinicSession]:
        if start is not None:
            start = local_time(start, self.tz)
        if end is not None:
            end = local_time(end, self.tz)
        out: list[ClinicSession] = []
        for s in self._sessions:
            at = local_time(s.scheduled_at, self.tz)
            if doctor_id is not None and s.doctor_id != doctor_id:
                continue
            if patient_id is not None and s.patient_id != patient_id:
                continue
            if on_date is not None and at.date() != on_date:
                continue
            if status is not None and s.status != status:
                continue
            if start is not None and at < start:
                continue
            if end is not None and at > end:
                continue
            out.append(s)
        return sorted(out, key=lambda s: (s.scheduled_at, s.id or 0))

    async def list_events(
        self,
        *,
        doctor_id: int | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ScheduledEvent]:
        await self._delay()
        rows = self._matching(doctor_id=doctor_id, start=start, end=end)
        return [to_event(s, self._patients.get(s.patient_id), self._doctors.get(s.doctor_id)) for s in rows]

    async def list_doctors(self) -> list[DoctorSummary]:
        await self._delay()
        return [to_summary(d) for d in self._doctors.values() if d.is_active]

    async def list_sessions(
        self,
        doctor_id: int | None = None,
        patient_id: int | None = None,
        on_date: date | None = None,
        status: SessionStatus | None = None,
    ) -> list[SessionPublic]:
        await self._delay()
        rows = self._matching(doctor_id=doctor_id, patient_id=patient_id, on_date=on_date, status=status)
        return [to_public(s, self._patients.get(s.patient_id), self._doctors.get(s.doctor_id)) for s in rows]

    async def get_session(self, session_id: int) -> SessionPublic:
        await self._delay()
        for s in self._sessions:
            if s.id == session_id:
                return to_public(s, self._patients.get(s.patient_id), self._doctors.get(s.doctor_id))
        raise SessionNotFoundError(f"Session {session_id} not found")


class SqlClinicStore:
    """Database-backed store; sessions.scheduled_at holds clinic-local wall time."""

    def __init__(self, session: AsyncSession, tz: tzinfo | None = None) -> None:
        self.session = session
        self.tz = tz

    def _joined(self):
        return (
            select(ClinicSession, Patient, Doctor)
            .join(Patient, Patient.id == ClinicSession.patient_id, isouter=True)
            .join(Doctor, Doctor.id == ClinicSession.doctor_id, isouter=True)
            .order_by(ClinicSession.scheduled_at, ClinicSession.id)
        )

    async def list_events(
        self,
        *,
        doctor_id: int | None = None,
        start: datetime | None = None,
        end: datetime | None = None,
    ) -> list[ScheduledEvent]:
        q = self._joined()
        if doctor_id is not None:
            q = q.where(ClinicSession.doctor_id == doctor_id)
        if start is not None:
            q = q.where(ClinicSession.scheduled_at >= local_time(start, self.tz))
        if end is not None:
            q = q.where(ClinicSession.scheduled_at <= local_time(end, self.tz))
        result = await self.session.execute(q)
        return [to_event(s, p, d) for s, p, d in result.all()]

    async def list_doctors(self) -> list[DoctorSummary]:
        result = await self.session.execute(
            select(Doctor).where(Doctor.is_active == True).order_by(Doctor.id)  # noqa: E712
        )
        return [to_summary(d) for d in result.scalars().all()]

    async def list_sessions(
        self,
        doctor_id: int | None = None,
        patient_id: int | None = None,
        on_date: date | None = None,
        status: SessionStatus | None = None,
    ) -> list[SessionPublic]:
        q = self._joined()
        if doctor_id is not None:
            q = q.where(ClinicSession.doctor_id == doctor_id)
        if patient_id is not None:
            q = q.where(ClinicSession.patient_id == patient_id)
        if on_date is not None:
            q = q.where(
                ClinicSession.scheduled_at >= datetime.combine(on_date, time.min),
                ClinicSession.scheduled_at <= datetime.combine(on_date, time.max),
            )
        if status is not None:
            q = q.where(ClinicSession.status == status)
        result = await self.session.execute(q)
        return [to_public(s, p, d) for s, p, d in result.all()]

    async def get_session(self, session_id: int) -> SessionPublic:
        result = await self.session.execute(self._joined().where(ClinicSession.id == session_id))
        row = result.first()
        if row is None:
            raise SessionNotFoundError(f"Session {session_id} not found")
        s, p, d = row
        return to_public(s, p, d)
