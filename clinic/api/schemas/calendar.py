from datetime import date, datetime

from pydantic import BaseModel

from clinic.models.session import SessionStatus


class EventInfo(BaseModel):
    id: int | str
    scheduled_at: datetime
    ends_at: datetime
    duration_minutes: int
    patient_name: str
    doctor_name: str
    status: SessionStatus
    session_type: str | None = None


class DayBucketInfo(BaseModel):
    date: date
    events: list[EventInfo]


class HourBucketInfo(BaseModel):
    hour: int
    events: list[EventInfo]


class MonthCellInfo(BaseModel):
    date: date
    in_current_month: bool
    is_today: bool
    events: list[EventInfo]
    overflow: int


class DayColumnInfo(BaseModel):
    date: date
    weekday: str
    is_today: bool
    hours: list[HourBucketInfo]
    hidden_count: int  # events of the day outside business hours, not shown in the grid


class MonthGridInfo(BaseModel):
    weekdays: list[str]
    weeks: list[list[MonthCellInfo]]


class WeekGridInfo(BaseModel):
    hours: list[int]
    days: list[DayColumnInfo]


class WindowInfo(BaseModel):
    mode: str
    reference_date: date
    start: datetime
    end: datetime
    day_count: int


class CalendarResponse(BaseModel):
    window: WindowInfo
    title: str
    locale: str
    rtl: bool
    today: date
    doctor_id: int | None = None
    events_available: bool
    buckets: list[DayBucketInfo]
    month: MonthGridInfo | None = None
    week: WeekGridInfo | None = None
    day: DayColumnInfo | None = None
    legend: dict[str, str]


class NavigateResponse(BaseModel):
    mode: str
    reference_date: date
    title: str


class TodayResponse(BaseModel):
    date: date
