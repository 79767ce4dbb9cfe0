"""Day and hour bucketing of scheduled events."""
from datetime import date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest
from pydantic import ValidationError

from clinic.models.event import ScheduledEvent
from clinic.services.calendar_buckets import (
    bucket_by_day,
    bucket_by_hour,
    count_outside_hours,
)
from clinic.services.calendar_window import CalendarInputError, compute_window


def test_empty_event_list_still_yields_every_day():
    for mode, expected in (("month", 35), ("week", 7), ("day", 1)):
        window = compute_window(mode, date(2024, 12, 20))
        buckets = bucket_by_day([], window)
        assert len(buckets) == expected == window.day_count
        assert [b.date for b in buckets] == list(window.days())
        assert all(b.events == [] for b in buckets)


def test_each_event_lands_in_exactly_one_bucket(make_event):
    window = compute_window("week", date(2024, 12, 20))
    events = [
        make_event(1, datetime(2024, 12, 20, 10, 0)),
        make_event(2, datetime(2024, 12, 19, 10, 30)),
        make_event(3, datetime(2024, 12, 21, 23, 59)),
        make_event(4, datetime(2024, 12, 15, 0, 0)),
        make_event(5, datetime(2024, 12, 22, 11, 0)),  # next week, outside the window
    ]
    buckets = bucket_by_day(events, window)
    placed = [e.id for b in buckets for e in b.events]
    assert sorted(placed) == [1, 2, 3, 4]
    by_date = {b.date: [e.id for e in b.events] for b in buckets}
    assert by_date[date(2024, 12, 15)] == [4]
    assert by_date[date(2024, 12, 20)] == [1]
    assert by_date[date(2024, 12, 21)] == [3]


def test_bucket_order_is_time_then_id(make_event):
    window = compute_window("day", date(2024, 12, 19))
    events = [
        make_event(7, datetime(2024, 12, 19, 14, 0)),
        make_event(3, datetime(2024, 12, 19, 14, 0)),
        make_event(9, datetime(2024, 12, 19, 9, 0)),
        make_event(10, datetime(2024, 12, 19, 14, 0)),
    ]
    (bucket,) = bucket_by_day(events, window)
    assert [e.id for e in bucket.events] == [9, 3, 7, 10]


def test_hour_buckets_for_same_hour_are_ordered_by_id(make_event):
    day = date(2024, 12, 19)
    events = [
        make_event(12, datetime(2024, 12, 19, 14, 0)),
        make_event(11, datetime(2024, 12, 19, 14, 0)),
        make_event(10, datetime(2024, 12, 19, 9, 0)),
    ]
    hours = bucket_by_hour(events, day)
    assert [h.hour for h in hours] == list(range(8, 21))
    by_hour = {h.hour: [e.id for e in h.events] for h in hours}
    assert by_hour[14] == [11, 12]
    assert by_hour[9] == [10]
    assert sum(len(h.events) for h in hours) == 3


def test_hour_buckets_clip_outside_business_hours(make_event):
    day = date(2024, 12, 19)
    events = [
        make_event(1, datetime(2024, 12, 19, 7, 59)),
        make_event(2, datetime(2024, 12, 19, 8, 0)),
        make_event(3, datetime(2024, 12, 19, 20, 45)),
        make_event(4, datetime(2024, 12, 19, 21, 0)),
        make_event(5, datetime(2024, 12, 20, 10, 0)),  # other day
    ]
    shown = [e.id for h in bucket_by_hour(events, day) for e in h.events]
    assert shown == [2, 3]
    assert count_outside_hours(events, day) == 2


def test_custom_hour_range(make_event):
    events = [make_event(1, datetime(2024, 12, 19, 6, 15))]
    hours = bucket_by_hour(events, date(2024, 12, 19), hour_range=(6, 9))
    assert [h.hour for h in hours] == [6, 7, 8, 9]
    assert [e.id for e in hours[0].events] == [1]
    assert count_outside_hours(events, date(2024, 12, 19), hour_range=(6, 9)) == 0


@pytest.mark.parametrize("hour_range", [(20, 8), (-1, 5), (8, 24)])
def test_invalid_hour_range(hour_range):
    with pytest.raises(CalendarInputError):
        bucket_by_hour([], date(2024, 12, 19), hour_range=hour_range)


def test_aware_timestamps_are_placed_in_clinic_time(make_event):
    riyadh = ZoneInfo("Asia/Riyadh")
    late_utc = make_event(1, datetime(2024, 12, 19, 23, 30, tzinfo=timezone.utc))
    window = compute_window("week", date(2024, 12, 20))
    by_date = {b.date: [e.id for e in b.events] for b in bucket_by_day([late_utc], window, tz=riyadh)}
    assert by_date[date(2024, 12, 20)] == [1]
    assert by_date[date(2024, 12, 19)] == []
    # 02:30 local is outside business hours
    assert count_outside_hours([late_utc], date(2024, 12, 20), tz=riyadh) == 1


def test_mixed_id_types_sort_deterministically(make_event):
    at = datetime(2024, 12, 19, 10, 0)
    events = [make_event("b", at), make_event(2, at), make_event("a", at), make_event(1, at)]
    (bucket,) = bucket_by_day(events, compute_window("day", date(2024, 12, 19)))
    assert [e.id for e in bucket.events] == [1, 2, "a", "b"]


def test_scheduled_event_invariants():
    with pytest.raises(ValidationError):
        ScheduledEvent(
            id=1,
            scheduled_at=datetime(2024, 12, 19, 10, 0),
            duration_minutes=0,
            subject_name="p",
            counterpart_name="d",
        )
    with pytest.raises(ValidationError):
        ScheduledEvent(
            id=1,
            scheduled_at="not a timestamp",
            duration_minutes=30,
            subject_name="p",
            counterpart_name="d",
        )


def test_scheduled_event_end_time(make_event):
    e = make_event(1, datetime(2024, 12, 19, 10, 30), duration_minutes=45)
    assert e.ends_at - e.scheduled_at == timedelta(minutes=45)
    assert e.status.value == "scheduled"
