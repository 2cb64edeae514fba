"""API tests with stubbed services injected through dependency overrides."""
import pytest
from fastapi.testclient import TestClient

from landmark_core.main import (
    DEFAULT_DEVICE_ID,
    RouteSessions,
    app,
    get_detail_service,
    get_landmark_service,
    get_route_sessions,
)
from landmark_core.models.route import RouteSummary
from landmark_core.services.detail_service import LandmarkDetailService
from landmark_core.services.feedback_service import FeedbackService
from landmark_core.services.landmark_service import LandmarkService
from landmark_core.services.map.map_service import RouteProvider

from test_landmark_services import CHURCH_DOCUMENT, FORT_DOCUMENT, StubCollection


class InstantRouteProvider(RouteProvider):
    def __init__(self):
        self.received = []

    async def fetch_route(self, origin, destination):
        self.received.append((origin, destination))
        return RouteSummary(distance_meters=500, duration_seconds=420)


@pytest.fixture
def sessions():
    return RouteSessions(InstantRouteProvider())


@pytest.fixture
def coordinator(sessions):
    return sessions.get(DEFAULT_DEVICE_ID).coordinator


@pytest.fixture
def client(sessions):
    landmarks = LandmarkService(collection=StubCollection([FORT_DOCUMENT, CHURCH_DOCUMENT]))
    feedback = FeedbackService(
        collection=StubCollection([{"location": "Fort Santiago", "rating": 4}])
    )
    app.dependency_overrides[get_landmark_service] = lambda: landmarks
    app.dependency_overrides[get_detail_service] = lambda: LandmarkDetailService(feedback)
    app.dependency_overrides[get_route_sessions] = lambda: sessions
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_landmark_detail(client):
    response = client.get("/api/v1/landmarks/Fort Santiago")
    assert response.status_code == 200

    data = response.json()
    assert data["name"] == "Fort Santiago"
    assert data["entrance_text"] == "P75"
    assert data["rating"] == {"average": 4.0, "count": 1}
    assert data["rating_text"] == "4.0 / 5 (1 review)"
    assert data["opening_hours"][0]["day_label"] == "Monday - Tuesday"


def test_unknown_landmark_is_404(client):
    assert client.get("/api/v1/landmarks/Atlantis").status_code == 404


def test_landmark_search(client):
    response = client.get("/api/v1/landmarks", params={"q": "church"})
    data = response.json()
    assert data["total_count"] == 1
    assert data["landmarks"][0]["name"] == "San Agustin Church"

    response = client.get("/api/v1/landmarks", params={"category": "historical"})
    assert [item["name"] for item in response.json()["landmarks"]] == ["Fort Santiago"]

    assert client.get("/api/v1/landmarks").json()["total_count"] == 2


def test_request_route_returns_loading(client, coordinator):
    response = client.post(
        "/api/v1/route",
        json={"name": "Fort Santiago", "origin": {"lat": 14.59, "lng": 120.97}},
    )
    assert response.status_code == 200
    assert response.json()["status"] == "loading"
    assert response.json()["landmark_id"] == "abc123"
    assert coordinator.selected.name == "Fort Santiago"


def test_request_route_unknown_landmark(client):
    response = client.post(
        "/api/v1/route", json={"name": "Atlantis", "origin": {"lat": 0, "lng": 0}}
    )
    assert response.status_code == 404


def test_reload_without_selection_conflicts(client):
    assert client.post("/api/v1/route/reload").status_code == 409
    assert client.get("/api/v1/route").json()["status"] == "idle"


def test_route_endpoints_unavailable_without_provider(client):
    app.dependency_overrides[get_route_sessions] = lambda: None
    assert client.get("/api/v1/route").status_code == 503


def test_devices_keep_separate_route_selections(client, sessions):
    fort = client.post(
        "/api/v1/route",
        json={"name": "Fort Santiago", "origin": {"lat": 14.59, "lng": 120.97}},
        headers={"X-Device-Id": "a"},
    )
    church = client.post(
        "/api/v1/route",
        json={"name": "San Agustin Church", "origin": {"lat": 14.58, "lng": 120.98}},
        headers={"X-Device-Id": "b"},
    )
    assert fort.json()["landmark_id"] == "abc123"
    assert church.json()["landmark_id"] != "abc123"

    state = client.get("/api/v1/route", headers={"X-Device-Id": "a"}).json()
    assert state["landmark_id"] == "abc123"
    assert state["status"] in ("loading", "ready")

    first, second = sessions.get("a"), sessions.get("b")
    assert first.coordinator.selected.name == "Fort Santiago"
    assert second.coordinator.selected.name == "San Agustin Church"
    assert first.location().lat == 14.59
    assert second.location().lat == 14.58

    # no header falls back to the shared default session, still idle
    assert client.get("/api/v1/route").json()["status"] == "idle"
