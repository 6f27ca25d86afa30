"""Unit tests for the FastAPI surface - fake GitHub API, no internet."""

import pytest
from fastapi.testclient import TestClient

from devfinder import __version__
from devfinder.api import create_app
from devfinder.config import WidgetConfig, ColorScheme
from devfinder.core.widget import DevFinder


@pytest.fixture
def client(github):
    finder = DevFinder(WidgetConfig(color_scheme=ColorScheme.LIGHT), transport=github.transport)
    with TestClient(create_app(finder)) as test_client:
        yield test_client


class TestSystemEndpoints:
    """Test health check."""

    def test_health(self, client):
        response = client.get("/health")
        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
        assert response.json()["version"] == __version__


class TestStateEndpoint:
    """Test GET /api/state."""

    def test_initial_state_is_default_profile(self, client):
        payload = client.get("/api/state").json()
        assert payload["status"] == "loaded"
        assert payload["view"]["name"] == "The Octocat"
        assert payload["theme"]["mode"] == "light"


class TestSearchEndpoint:
    """Test POST /api/search."""

    def test_returns_loading_immediately(self, client):
        response = client.post("/api/search", json={"handle": "octocat"})
        assert response.status_code == 202
        payload = response.json()
        assert payload["status"] == "loading"
        assert payload["busy"] is True
        assert payload["view"] is None

    def test_blank_handle_changes_nothing(self, client, github):
        response = client.post("/api/search", json={"handle": "   "})
        assert response.status_code == 200
        assert response.json()["status"] == "loaded"
        assert github.requests == []

    def test_wait_returns_loaded(self, client):
        response = client.post("/api/search?wait=true", json={"handle": "ghost-dev"})
        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "loaded"
        assert payload["view"]["name"] == "ghost-dev"

    def test_wait_not_found(self, client):
        payload = client.post("/api/search?wait=true", json={"handle": "nobody"}).json()
        assert payload["status"] == "failed"
        assert payload["error"] == "User not found"
        assert payload["profile"] is None

    def test_wait_other_error(self, client):
        payload = client.post("/api/search?wait=true", json={"handle": "boom"}).json()
        assert payload["error"] == "Error fetching user"

    @pytest.mark.parametrize("handle", ["a\tb", "a\x00b"])
    def test_wait_handle_outside_url_alphabet(self, client, handle):
        response = client.post("/api/search?wait=true", json={"handle": handle})
        assert response.status_code == 200
        payload = response.json()
        assert payload["status"] == "failed"
        assert payload["error"] == "Error fetching user"
        assert payload["busy"] is False

    def test_fire_and_forget_bad_handle_settles(self, github):
        finder = DevFinder(WidgetConfig(), transport=github.transport)
        with TestClient(create_app(finder)) as test_client:
            response = test_client.post("/api/search", json={"handle": "a\tb"})
            assert response.status_code == 202

        assert finder.state.status == "failed"
        assert finder.state.message == "Error fetching user"

    def test_state_reflects_last_lookup(self, client):
        client.post("/api/search?wait=true", json={"handle": "octocat"})
        payload = client.get("/api/state").json()
        assert payload["profile"]["follower_count"] == 21483

    def test_missing_handle_is_rejected(self, client):
        assert client.post("/api/search", json={}).status_code == 422


class TestThemeEndpoint:
    """Test POST /api/theme/toggle."""

    def test_toggle_twice_restores(self, client):
        first = client.post("/api/theme/toggle").json()
        assert first["dark"] is True
        assert first["toggle_label"] == "LIGHT"

        second = client.post("/api/theme/toggle").json()
        assert second["dark"] is False
        assert second["mode"] == "light"

    def test_toggle_does_not_touch_lookup(self, client):
        client.post("/api/theme/toggle")
        assert client.get("/api/state").json()["status"] == "loaded"


class TestFormatDateEndpoint:
    """Test GET /api/format-date."""

    def test_formats(self, client):
        response = client.get("/api/format-date", params={"value": "2011-01-25T18:44:36Z"})
        assert response.status_code == 200
        assert response.json()["formatted"] == "25 Jan 2011"

    def test_rejects_garbage(self, client):
        response = client.get("/api/format-date", params={"value": "soon"})
        assert response.status_code == 422
