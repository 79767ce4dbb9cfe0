"""Group scheduled events by calendar day and by hour of day."""
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import date, datetime, tzinfo

from clinic.models.event import ScheduledEvent
from clinic.services.calendar_window import CalendarInputError, ViewWindow, local_time

DEFAULT_HOUR_RANGE = (8, 20)


@dataclass(frozen=True)
class DayBucket:
    date: date
    events: list[ScheduledEvent] = field(default_factory=list)


@dataclass(frozen=True)
class HourBucket:
    hour: int
    events: list[ScheduledEvent] = field(default_factory=list)


def _id_key(event_id: int | str) -> tuple[int, int | str]:
    # ints before strings so mixed id types still order deterministically
    if isinstance(event_id, int):
        return (0, event_id)
    return (1, str(event_id))


def _ordered(events: Iterable[ScheduledEvent], tz: tzinfo | None) -> list[ScheduledEvent]:
    return sorted(events, key=lambda e: (local_time(e.scheduled_at, tz), _id_key(e.id)))


def _check_hour_range(hour_range: tuple[int, int]) -> tuple[int, int]:
    first, last = hour_range
    if not (0 <= first <= last <= 23):
        raise CalendarInputError(f"hour_range must satisfy 0 <= start <= end <= 23, got {hour_range!r}")
    return first, last


def bucket_by_day(
    events: Iterable[ScheduledEvent], window: ViewWindow, tz: tzinfo | None = None
) -> list[DayBucket]:
    """One bucket per day in the window, in order, empty days included.

    Events outside the window are ignored; within a bucket events are sorted by
    scheduled_at, ties by id.
    """
    by_day: dict[date, list[ScheduledEvent]] = defaultdict(list)
    for event in events:
        by_day[local_time(event.scheduled_at, tz).date()].append(event)
    buckets: list[DayBucket] = []
    for d in window.days():
        buckets.append(DayBucket(date=d, events=_ordered(by_day.get(d, []), tz)))
    return buckets


def bucket_by_hour(
    events: Iterable[ScheduledEvent],
    day: date,
    hour_range: tuple[int, int] = DEFAULT_HOUR_RANGE,
    tz: tzinfo | None = None,
) -> list[HourBucket]:
    """Hour rows of a single day for the week/day grids.

    Only hours within hour_range (inclusive) are produced. Events of that day
    starting outside the range are left out on purpose: the grid shows business
    hours only. Use count_outside_hours() to tell the user they exist.
    """
    first, last = _check_hour_range(hour_range)
    by_hour: dict[int, list[ScheduledEvent]] = defaultdict(list)
    for event in events:
        at = local_time(event.scheduled_at, tz)
        if at.date() == day and first <= at.hour <= last:
            by_hour[at.hour].append(event)
    return [HourBucket(hour=h, events=_ordered(by_hour.get(h, []), tz)) for h in range(first, last + 1)]


def count_outside_hours(
    events: Iterable[ScheduledEvent],
    day: date,
    hour_range: tuple[int, int] = DEFAULT_HOUR_RANGE,
    tz: tzinfo | None = None,
) -> int:
    """Number of events on day that bucket_by_hour clips away."""
    first, last = _check_hour_range(hour_range)
    count = 0
    for event in events:
        at = local_time(event.scheduled_at, tz)
        if at.date() == day and not first <= at.hour <= last:
            count += 1
    return count
