from clinic.models.doctor import Doctor, DoctorSummary
from clinic.models.patient import Patient
from clinic.models.session import ClinicSession, SessionPublic, SessionStatus
from clinic.models.event import ScheduledEvent

__all__ = [
    "Doctor",
    "DoctorSummary",
    "Patient",
    "ClinicSession",
    "SessionPublic",
    "SessionStatus",
    "ScheduledEvent",
]
