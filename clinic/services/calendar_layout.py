"""Data shaping for the month grid, week grid and day list.

Rendering itself lives in the frontend; these builders only decide which
events go in which cell.
"""
from dataclasses import dataclass, field
from datetime import date, datetime, time, timedelta, tzinfo

from clinic.models.event import ScheduledEvent
from clinic.models.session import SessionStatus
from clinic.services.calendar_buckets import (
    DEFAULT_HOUR_RANGE,
    DayBucket,
    HourBucket,
    bucket_by_day,
    bucket_by_hour,
    count_outside_hours,
)
from clinic.services.calendar_window import END_OF_DAY, ViewMode, ViewWindow

MONTH_GRID_CELLS = 42  # 6 rows x 7 columns
WEEKDAY_KEYS = ("sun", "mon", "tue", "wed", "thu", "fri", "sat")

# Legend shown under the calendar; values are colour keys the frontend maps to classes
STATUS_LEGEND: dict[SessionStatus, str] = {
    SessionStatus.SCHEDULED: "blue",
    SessionStatus.IN_PROGRESS: "yellow",
    SessionStatus.COMPLETED: "green",
    SessionStatus.CANCELLED: "red",
    SessionStatus.NO_SHOW: "gray",
}


@dataclass(frozen=True)
class MonthCell:
    date: date
    in_current_month: bool
    is_today: bool
    events: list[ScheduledEvent]
    overflow: int


@dataclass(frozen=True)
class DayColumn:
    date: date
    weekday: str
    is_today: bool
    hours: list[HourBucket]
    hidden_count: int


@dataclass(frozen=True)
class MonthGrid:
    weekdays: tuple[str, ...]
    weeks: list[list[MonthCell]] = field(default_factory=list)

    @property
    def cells(self) -> list[MonthCell]:
        return [cell for week in self.weeks for cell in week]


@dataclass(frozen=True)
class WeekGrid:
    hours: list[int]
    days: list[DayColumn]


def month_grid_window(window: ViewWindow) -> ViewWindow:
    """The month window stretched to the fixed 42-cell grid."""
    last = window.start_date + timedelta(days=MONTH_GRID_CELLS - 1)
    return ViewWindow(
        mode=window.mode,
        reference_date=window.reference_date,
        start=window.start,
        end=datetime.combine(last, END_OF_DAY),
    )


def _day_column(
    d: date, events: list[ScheduledEvent], today: date, hour_range: tuple[int, int], tz: tzinfo | None
) -> DayColumn:
    return DayColumn(
        date=d,
        weekday=WEEKDAY_KEYS[(d.weekday() + 1) % 7],
        is_today=d == today,
        hours=bucket_by_hour(events, d, hour_range, tz),
        hidden_count=count_outside_hours(events, d, hour_range, tz),
    )


def build_month_grid(
    window: ViewWindow,
    events: list[ScheduledEvent],
    today: date,
    max_per_cell: int = 3,
    tz: tzinfo | None = None,
) -> MonthGrid:
    if window.mode is not ViewMode.MONTH:
        raise ValueError(f"build_month_grid needs a month window, got {window.mode.value}")
    buckets: list[DayBucket] = bucket_by_day(events, month_grid_window(window), tz)
    month = (window.reference_date.year, window.reference_date.month)
    cells = [
        MonthCell(
            date=b.date,
            in_current_month=(b.date.year, b.date.month) == month,
            is_today=b.date == today,
            events=b.events[:max_per_cell],
            overflow=max(len(b.events) - max_per_cell, 0),
        )
        for b in buckets
    ]
    return MonthGrid(weekdays=WEEKDAY_KEYS, weeks=[cells[i:i + 7] for i in range(0, len(cells), 7)])


def build_week_grid(
    window: ViewWindow,
    events: list[ScheduledEvent],
    today: date,
    hour_range: tuple[int, int] = DEFAULT_HOUR_RANGE,
    tz: tzinfo | None = None,
) -> WeekGrid:
    columns = [_day_column(d, events, today, hour_range, tz) for d in window.days()]
    return WeekGrid(hours=list(range(hour_range[0], hour_range[1] + 1)), days=columns)


def build_day_view(
    window: ViewWindow,
    events: list[ScheduledEvent],
    today: date,
    hour_range: tuple[int, int] = DEFAULT_HOUR_RANGE,
    tz: tzinfo | None = None,
) -> DayColumn:
    return _day_column(window.reference_date, events, today, hour_range, tz)


def fetch_range(window: ViewWindow) -> tuple[datetime, datetime]:
    """Datetime span an event source must cover to fill the window's layout."""
    if window.mode is ViewMode.MONTH:
        window = month_grid_window(window)
    return window.start, datetime.combine(window.end_date, time.max)
