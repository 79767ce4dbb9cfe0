from fastapi import APIRouter, Depends, HTTPException, Query, status

from clinic.api.deps import get_clock, get_store
from clinic.api.schemas.calendar import (
    CalendarResponse,
    DayBucketInfo,
    DayColumnInfo,
    EventInfo,
    HourBucketInfo,
    MonthCellInfo,
    MonthGridInfo,
    NavigateResponse,
    TodayResponse,
    WeekGridInfo,
    WindowInfo,
)
from clinic.core.config import settings
from clinic.models.event import ScheduledEvent
from clinic.services.calendar_buckets import HourBucket
from clinic.services.calendar_controller import CalendarController
from clinic.services.calendar_layout import STATUS_LEGEND, DayColumn, MonthGrid, WeekGrid
from clinic.services.calendar_titles import format_title
from clinic.services.calendar_window import CalendarInputError, advance, compute_window
from clinic.services.clock import Clock, today
from clinic.services.event_source import EventSource

router = APIRouter(prefix="/calendar", tags=["calendar"])


def _event_info(e: ScheduledEvent) -> EventInfo:
    return EventInfo(
        id=e.id,
        scheduled_at=e.scheduled_at,
        ends_at=e.ends_at,
        duration_minutes=e.duration_minutes,
        patient_name=e.subject_name,
        doctor_name=e.counterpart_name,
        status=e.status,
        session_type=e.session_type,
    )


def _hours_info(hours: list[HourBucket]) -> list[HourBucketInfo]:
    return [HourBucketInfo(hour=h.hour, events=[_event_info(e) for e in h.events]) for h in hours]


def _column_info(col: DayColumn) -> DayColumnInfo:
    return DayColumnInfo(
        date=col.date,
        weekday=col.weekday,
        is_today=col.is_today,
        hours=_hours_info(col.hours),
        hidden_count=col.hidden_count,
    )


def _month_info(grid: MonthGrid) -> MonthGridInfo:
    return MonthGridInfo(
        weekdays=list(grid.weekdays),
        weeks=[
            [
                MonthCellInfo(
                    date=c.date,
                    in_current_month=c.in_current_month,
                    is_today=c.is_today,
                    events=[_event_info(e) for e in c.events],
                    overflow=c.overflow,
                )
                for c in week
            ]
            for week in grid.weeks
        ],
    )


def _bad_request(e: CalendarInputError) -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.get("", response_model=CalendarResponse)
async def get_calendar(
    mode: str = Query("month"),
    date_param: str | None = Query(None, alias="date"),
    doctor_id: int | None = Query(None),
    locale: str | None = Query(None),
    store: EventSource = Depends(get_store),
    clock: Clock = Depends(get_clock),
) -> CalendarResponse:
    """Calendar view for mode/date. If fetching sessions fails the view is returned empty."""
    try:
        controller = CalendarController(
            store,
            clock,
            tz=settings.tzinfo,
            locale=locale or settings.default_locale,
            hour_range=settings.hour_range,
            month_cell_limit=settings.month_cell_event_limit,
            mode=mode,
            reference_date=date_param,
        )
        controller.window  # rejects dates whose window falls outside date.min..date.max
    except CalendarInputError as e:
        raise _bad_request(e) from e
    controller.select_doctor(doctor_id)
    await controller.refresh()
    snap = controller.snapshot()

    w = snap.window
    layout = snap.layout
    return CalendarResponse(
        window=WindowInfo(
            mode=w.mode.value,
            reference_date=w.reference_date,
            start=w.start,
            end=w.end,
            day_count=w.day_count,
        ),
        title=snap.title,
        locale=str(controller.locale),
        rtl=snap.rtl,
        today=snap.today,
        doctor_id=doctor_id,
        events_available=snap.events_available,
        buckets=[DayBucketInfo(date=b.date, events=[_event_info(e) for e in b.events]) for b in snap.buckets],
        month=_month_info(layout) if isinstance(layout, MonthGrid) else None,
        week=(
            WeekGridInfo(hours=layout.hours, days=[_column_info(c) for c in layout.days])
            if isinstance(layout, WeekGrid)
            else None
        ),
        day=_column_info(layout) if isinstance(layout, DayColumn) else None,
        legend={s.value: colour for s, colour in STATUS_LEGEND.items()},
    )


@router.get("/navigate", response_model=NavigateResponse)
async def navigate(
    mode: str = Query("month"),
    date_param: str = Query(..., alias="date"),
    direction: int = Query(...),
    locale: str | None = Query(None),
) -> NavigateResponse:
    try:
        new_date = advance(mode, date_param, direction)
        window = compute_window(mode, new_date)
        title = format_title(window.mode, window, locale or settings.default_locale)
    except CalendarInputError as e:
        raise _bad_request(e) from e
    return NavigateResponse(mode=window.mode.value, reference_date=new_date, title=title)


@router.get("/today", response_model=TodayResponse)
async def get_today(clock: Clock = Depends(get_clock)) -> TodayResponse:
    return TodayResponse(date=today(clock))
