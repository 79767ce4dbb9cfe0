"""Stateful calendar view: current mode/date/doctor filter plus the fetched events.

Fetches are asynchronous and may complete out of order when the user
navigates quickly. Each fetch is tagged with the view state it was issued for
and its result is dropped if the state moved on before it finished.
"""
import logging
from dataclasses import dataclass
from datetime import date, tzinfo

from clinic.models.event import ScheduledEvent
from clinic.services.calendar_buckets import DEFAULT_HOUR_RANGE, DayBucket, bucket_by_day
from clinic.services.calendar_layout import (
    DayColumn,
    MonthGrid,
    WeekGrid,
    build_day_view,
    build_month_grid,
    build_week_grid,
    fetch_range,
)
from clinic.services.calendar_titles import format_title, is_rtl, parse_locale
from clinic.services.calendar_window import (
    ViewMode,
    ViewWindow,
    advance,
    compute_window,
    to_reference_date,
)
from clinic.services.clock import Clock, today
from clinic.services.event_source import EventSource

logger = logging.getLogger(__name__)

ViewTag = tuple[ViewMode, date, int | None]


@dataclass(frozen=True)
class CalendarSnapshot:
    window: ViewWindow
    title: str
    rtl: bool
    today: date
    buckets: list[DayBucket]
    layout: MonthGrid | WeekGrid | DayColumn
    events_available: bool


class CalendarController:
    def __init__(
        self,
        source: EventSource,
        clock: Clock,
        tz: tzinfo | None = None,
        locale: str = "en",
        hour_range: tuple[int, int] = DEFAULT_HOUR_RANGE,
        month_cell_limit: int = 3,
        mode: ViewMode | str = ViewMode.MONTH,
        reference_date: date | str | None = None,
    ) -> None:
        self.source = source
        self.clock = clock
        self.tz = tz
        self.locale = parse_locale(locale)
        self.hour_range = hour_range
        self.month_cell_limit = month_cell_limit
        self.mode = ViewMode.parse(mode)
        self.reference_date = today(clock) if reference_date is None else to_reference_date(reference_date)
        self.doctor_id: int | None = None
        self.events: list[ScheduledEvent] = []
        self.last_error: Exception | None = None
        self.discarded = 0

    @property
    def tag(self) -> ViewTag:
        return (self.mode, self.reference_date, self.doctor_id)

    @property
    def window(self) -> ViewWindow:
        return compute_window(self.mode, self.reference_date)

    def set_mode(self, mode: ViewMode | str) -> None:
        self.mode = ViewMode.parse(mode)

    def navigate(self, direction: int) -> date:
        self.reference_date = advance(self.mode, self.reference_date, direction)
        return self.reference_date

    def go_today(self) -> date:
        self.reference_date = today(self.clock)
        return self.reference_date

    def select_doctor(self, doctor_id: int | None) -> None:
        self.doctor_id = doctor_id

    async def refresh(self) -> bool:
        """Fetch events for the current view. Returns False if the result was stale."""
        issued = self.tag
        start, end = fetch_range(compute_window(issued[0], issued[1]))
        error: Exception | None = None
        try:
            events = await self.source.list_events(doctor_id=issued[2], start=start, end=end)
        except Exception as e:
            logger.exception("Fetching calendar events failed: %s", e)
            events, error = [], e
        if issued != self.tag:
            self.discarded += 1
            logger.debug("Discarding stale calendar fetch for %s (current %s)", issued, self.tag)
            return False
        self.events = list(events)
        self.last_error = error
        return True

    def snapshot(self) -> CalendarSnapshot:
        window = self.window
        now = today(self.clock)
        if window.mode is ViewMode.MONTH:
            layout = build_month_grid(window, self.events, now, self.month_cell_limit, self.tz)
        elif window.mode is ViewMode.WEEK:
            layout = build_week_grid(window, self.events, now, self.hour_range, self.tz)
        else:
            layout = build_day_view(window, self.events, now, self.hour_range, self.tz)
        return CalendarSnapshot(
            window=window,
            title=format_title(window.mode, window, self.locale),
            rtl=is_rtl(self.locale),
            today=now,
            buckets=bucket_by_day(self.events, window, self.tz),
            layout=layout,
            events_available=self.last_error is None,
        )
