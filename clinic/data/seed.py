"""Demo clinic data served by the in-memory store."""
from datetime import datetime

from clinic.models.doctor import Doctor
from clinic.models.patient import Patient
from clinic.models.session import ClinicSession, SessionStatus

DOCTORS: list[Doctor] = [
    Doctor(
        id=2,
        name="د. سارة أحمد",
        email="doctor1@clinic.com",
        department="قسم العلاج الطبيعي العام",
        specialization="العلاج الطبيعي للعظام والمفاصل",
    ),
    Doctor(
        id=3,
        name="د. محمد علي",
        email="doctor2@clinic.com",
        department="قسم علاج الأطفال",
        specialization="العلاج الطبيعي للأطفال",
    ),
    Doctor(
        id=4,
        name="د. أحمد محمود",
        email="doctor3@clinic.com",
        department="قسم العلاج الرياضي",
        specialization="العلاج الطبيعي الرياضي",
    ),
    Doctor(
        id=5,
        name="د. نورا سالم",
        email="doctor4@clinic.com",
        department="قسم العلاج العصبي",
        specialization="العلاج الطبيعي العصبي",
    ),
]

PATIENTS: list[Patient] = [
    Patient(id=1, name="محمد أحمد علي", phone="01111111111"),
    Patient(id=2, name="فاطمة محمد حسن", phone="01222222222"),
    Patient(id=3, name="أحمد سعد محمود", phone="01333333333"),
    Patient(id=4, name="نورا عبد الرحمن", phone="01444444444"),
    Patient(id=5, name="خالد محمد عبد الله", phone="01555555555"),
]

SESSIONS: list[ClinicSession] = [
    ClinicSession(
        id=1,
        patient_id=1,
        doctor_id=2,
        scheduled_at=datetime(2024, 12, 20, 10, 0),
        duration_minutes=30,
        session_type="assessment",
        status=SessionStatus.SCHEDULED,
        notes="تقييم أولي لآلام الظهر والرقبة",
        fee=200,
    ),
    ClinicSession(
        id=2,
        patient_id=2,
        doctor_id=2,
        scheduled_at=datetime(2024, 12, 19, 10, 30),
        duration_minutes=45,
        session_type="treatment",
        status=SessionStatus.COMPLETED,
        notes="جلسة علاج طبيعي للركبة اليمنى",
        fee=250,
    ),
    ClinicSession(
        id=3,
        patient_id=3,
        doctor_id=3,
        scheduled_at=datetime(2024, 12, 21, 14, 0),
        duration_minutes=30,
        session_type="exercise",
        status=SessionStatus.SCHEDULED,
        notes="جلسة تمارين علاجية للأطفال",
        fee=180,
    ),
    ClinicSession(
        id=4,
        patient_id=4,
        doctor_id=2,
        scheduled_at=datetime(2024, 12, 22, 11, 0),
        duration_minutes=30,
        session_type="consultation",
        status=SessionStatus.SCHEDULED,
        notes="متابعة حالة الربو",
        fee=200,
    ),
    ClinicSession(
        id=5,
        patient_id=5,
        doctor_id=2,
        scheduled_at=datetime(2024, 12, 18, 15, 30),
        duration_minutes=45,
        session_type="follow-up",
        status=SessionStatus.COMPLETED,
        notes="متابعة التهاب المفاصل",
        fee=250,
    ),
]
