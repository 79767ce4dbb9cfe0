"""Settings validation."""
import pytest
from pydantic import ValidationError

from clinic.core.config import Settings


def test_business_hours_out_of_order_are_rejected_at_startup():
    with pytest.raises(ValidationError, match="must not be after"):
        Settings(business_start_hour=18, business_end_hour=9)


def test_business_hours_define_hour_range():
    assert Settings(business_start_hour=7, business_end_hour=7).hour_range == (7, 7)
    assert Settings(business_start_hour=9, business_end_hour=17).hour_range == (9, 17)


@pytest.mark.parametrize("field", ["business_start_hour", "business_end_hour"])
def test_hour_outside_day_is_rejected(field):
    with pytest.raises(ValidationError):
        Settings(**{field: 24})


def test_event_source_is_normalised():
    assert Settings(event_source=" Database ").event_source == "database"
    with pytest.raises(ValidationError):
        Settings(event_source="redis")
