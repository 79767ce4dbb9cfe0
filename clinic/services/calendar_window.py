"""View-window computation and navigation for the scheduling calendar.

Everything here is pure: no I/O, no reads of the system clock. "Today" comes
from an injected clock (see clinic.services.clock).
"""
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, tzinfo
from enum import Enum

from dateutil.relativedelta import relativedelta

# Last representable instant of a displayed day (millisecond precision)
END_OF_DAY = time(23, 59, 59, 999000)


class CalendarInputError(ValueError):
    """Invalid argument passed to a calendar function (programmer error)."""


class InvalidViewModeError(CalendarInputError):
    pass


class InvalidReferenceDateError(CalendarInputError):
    pass


class InvalidDirectionError(CalendarInputError):
    pass


class ViewMode(str, Enum):
    MONTH = "month"
    WEEK = "week"
    DAY = "day"

    @classmethod
    def parse(cls, value: "ViewMode | str") -> "ViewMode":
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                pass
        allowed = ", ".join(m.value for m in cls)
        raise InvalidViewModeError(f"Unknown view mode {value!r}; expected one of: {allowed}")


def to_reference_date(value: date | datetime | str) -> date:
    """Normalize a reference date; datetimes lose their time, strings must be YYYY-MM-DD."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError as e:
            raise InvalidReferenceDateError(
                f"Reference date {value!r} is not a valid YYYY-MM-DD date"
            ) from e
    raise InvalidReferenceDateError(
        f"Reference date must be a date, datetime or ISO string, got {type(value).__name__}"
    )


def sunday_index(d: date) -> int:
    """Weekday index with Sunday = 0 ... Saturday = 6."""
    return (d.weekday() + 1) % 7


def week_start(d: date) -> date:
    """The Sunday on or before d."""
    return d - timedelta(days=sunday_index(d))


def week_end(d: date) -> date:
    """The Saturday on or after d."""
    return d + timedelta(days=6 - sunday_index(d))


def local_time(moment: datetime, tz: tzinfo | None = None) -> datetime:
    """Wall-clock time of a moment in the clinic timezone (naive)."""
    if moment.tzinfo is not None and tz is not None:
        moment = moment.astimezone(tz)
    return moment.replace(tzinfo=None)


@dataclass(frozen=True)
class ViewWindow:
    mode: ViewMode
    reference_date: date
    start: datetime
    end: datetime

    @property
    def start_date(self) -> date:
        return self.start.date()

    @property
    def end_date(self) -> date:
        return self.end.date()

    @property
    def day_count(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def days(self) -> Iterator[date]:
        for offset in range(self.day_count):
            yield self.start_date + timedelta(days=offset)

    def contains(self, moment: datetime, tz: tzinfo | None = None) -> bool:
        """Aware moments are converted to tz first; naive ones are taken as clinic-local."""
        return self.start <= local_time(moment, tz) <= self.end


def _window(mode: ViewMode, reference: date, first: date, last: date) -> ViewWindow:
    return ViewWindow(
        mode=mode,
        reference_date=reference,
        start=datetime.combine(first, time.min),
        end=datetime.combine(last, END_OF_DAY),
    )


def _out_of_range(mode: ViewMode, ref: date) -> InvalidReferenceDateError:
    return InvalidReferenceDateError(
        f"Reference date {ref.isoformat()} is outside the supported date range for the {mode.value} view"
    )


def compute_window(mode: ViewMode | str, reference_date: date | datetime | str) -> ViewWindow:
    """Inclusive display window for a view mode anchored at reference_date.

    month: Sunday on/before the 1st through Saturday on/after the last day, so
    the span is always whole weeks (28, 35 or 42 days).
    week: Sunday on/before the reference through the following Saturday.
    day: the reference date alone.

    Raises InvalidReferenceDateError when the window would run past
    date.min or date.max.
    """
    mode = ViewMode.parse(mode)
    ref = to_reference_date(reference_date)
    try:
        if mode is ViewMode.MONTH:
            first_of_month = ref.replace(day=1)
            last_of_month = first_of_month + relativedelta(months=1) - timedelta(days=1)
            return _window(mode, ref, week_start(first_of_month), week_end(last_of_month))
        if mode is ViewMode.WEEK:
            start = week_start(ref)
            return _window(mode, ref, start, start + timedelta(days=6))
    except (OverflowError, ValueError) as e:
        raise _out_of_range(mode, ref) from e
    return _window(mode, ref, ref, ref)


def advance(mode: ViewMode | str, reference_date: date | datetime | str, direction: int) -> date:
    """Move the reference date one unit of the view mode forward (+1) or back (-1).

    Month steps clamp to the end of shorter months (Jan 31 + 1 month = Feb 29
    in a leap year), so the day of month is not preserved across the clamp.
    """
    mode = ViewMode.parse(mode)
    ref = to_reference_date(reference_date)
    if isinstance(direction, bool) or direction not in (1, -1):
        raise InvalidDirectionError(f"direction must be +1 or -1, got {direction!r}")
    try:
        if mode is ViewMode.MONTH:
            return ref + relativedelta(months=direction)
        if mode is ViewMode.WEEK:
            return ref + timedelta(days=7 * direction)
        return ref + timedelta(days=direction)
    except (OverflowError, ValueError) as e:
        raise _out_of_range(mode, ref) from e
