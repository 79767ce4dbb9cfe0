"""HTTP API with the demo store and a pinned clock."""
import pytest
from fastapi.testclient import TestClient

from clinic.api.deps import get_clock, get_store
from clinic.main import app


class BrokenStore:
    async def list_events(self, *, doctor_id=None, start=None, end=None):
        raise ConnectionError("database down")


@pytest.fixture
def client(store, clock):
    """Create FastAPI test client."""
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_clock] = lambda: clock
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    assert client.get("/health").json() == {"status": "ok"}


def test_month_view(client):
    response = client.get("/api/v1/calendar", params={"mode": "month", "date": "2024-12-20", "locale": "en"})
    assert response.status_code == 200
    data = response.json()
    assert data["title"] == "December 2024"
    assert data["window"]["start"] == "2024-12-01T00:00:00"
    assert data["window"]["day_count"] == 35
    assert len(data["buckets"]) == 35
    assert len(data["month"]["weeks"]) == 6
    assert data["week"] is None and data["day"] is None
    assert data["events_available"] is True
    assert data["legend"]["in-progress"] == "yellow"
    by_date = {b["date"]: [e["id"] for e in b["events"]] for b in data["buckets"]}
    assert by_date["2024-12-20"] == [1]
    today_cells = [c for week in data["month"]["weeks"] for c in week if c["is_today"]]
    assert [c["date"] for c in today_cells] == ["2024-12-20"]


def test_defaults_to_today(client):
    data = client.get("/api/v1/calendar", params={"mode": "day"}).json()
    assert data["window"]["reference_date"] == "2024-12-20"
    assert data["title"] == "Friday, December 20, 2024"
    assert [e["id"] for h in data["day"]["hours"] for e in h["events"]] == [1]


def test_week_view_with_doctor_filter(client):
    data = client.get(
        "/api/v1/calendar", params={"mode": "week", "date": "2024-12-20", "doctor_id": 2}
    ).json()
    assert data["title"] == "Dec 15, 2024 - Dec 21, 2024"
    assert data["week"]["hours"] == list(range(8, 21))
    ids = sorted(e["id"] for b in data["buckets"] for e in b["events"])
    assert ids == [1, 2, 5]
    thursday = data["week"]["days"][4]
    assert thursday["date"] == "2024-12-19"
    assert [e["patient_name"] for h in thursday["hours"] for e in h["events"]] == ["فاطمة محمد حسن"]


def test_arabic_locale(client):
    data = client.get("/api/v1/calendar", params={"mode": "month", "date": "2024-12-20", "locale": "ar-SA"}).json()
    assert data["rtl"] is True
    assert "ديسمبر" in data["title"]


@pytest.mark.parametrize(
    "params, message",
    [
        ({"mode": "year", "date": "2024-12-20"}, "Unknown view mode"),
        ({"mode": "month", "date": "2024-02-30"}, "not a valid"),
        ({"mode": "month", "date": "2024-12-20", "locale": "xx"}, "Unknown locale"),
        ({"mode": "month", "date": "9999-12-20"}, "outside the supported date range"),
        ({"mode": "week", "date": "0001-01-01"}, "outside the supported date range"),
    ],
)
def test_invalid_input_is_rejected(client, params, message):
    response = client.get("/api/v1/calendar", params=params)
    assert response.status_code == 400
    assert message in response.json()["detail"]


def test_event_source_failure_renders_empty_calendar(client):
    app.dependency_overrides[get_store] = lambda: BrokenStore()
    response = client.get("/api/v1/calendar", params={"mode": "week", "date": "2024-12-20"})
    assert response.status_code == 200
    data = response.json()
    assert data["events_available"] is False
    assert len(data["buckets"]) == 7
    assert all(b["events"] == [] for b in data["buckets"])


def test_navigate(client):
    data = client.get(
        "/api/v1/calendar/navigate", params={"mode": "month", "date": "2024-01-31", "direction": 1}
    ).json()
    assert data == {"mode": "month", "reference_date": "2024-02-29", "title": "February 2024"}
    back = client.get(
        "/api/v1/calendar/navigate", params={"mode": "week", "date": "2025-01-02", "direction": -1}
    ).json()
    assert back["reference_date"] == "2024-12-26"


def test_navigate_rejects_bad_direction(client):
    response = client.get("/api/v1/calendar/navigate", params={"mode": "day", "date": "2024-12-20", "direction": 2})
    assert response.status_code == 400


def test_navigate_past_date_limits(client):
    response = client.get(
        "/api/v1/calendar/navigate", params={"mode": "day", "date": "0001-01-01", "direction": -1}
    )
    assert response.status_code == 400
    assert "outside the supported date range" in response.json()["detail"]


def test_today(client):
    assert client.get("/api/v1/calendar/today").json() == {"date": "2024-12-20"}


def test_doctors(client):
    doctors = client.get("/api/v1/doctors").json()
    assert [d["id"] for d in doctors] == [2, 3, 4, 5]
    assert set(doctors[0]) == {"id", "name", "specialization"}


def test_sessions(client):
    data = client.get("/api/v1/sessions", params={"doctor_id": 2}).json()
    assert [s["id"] for s in data] == [5, 2, 1, 4]
    completed = client.get("/api/v1/sessions", params={"status": "completed"}).json()
    assert [s["id"] for s in completed] == [5, 2]
    assert client.get("/api/v1/sessions", params={"status": "bogus"}).status_code == 422


def test_session_detail(client):
    data = client.get("/api/v1/sessions/3").json()
    assert data["doctor_name"] == "د. محمد علي"
    assert data["scheduled_at"] == "2024-12-21T14:00:00"
    assert client.get("/api/v1/sessions/99").status_code == 404
