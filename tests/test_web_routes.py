"""
Tests for the HTTP API

FastAPI TestClient against a temporary SQLite file, with the catalog and
the AI analyzer replaced by fakes in the container.
"""

import logging
from unittest.mock import AsyncMock, patch

import pytest
from conftest import FakeCatalogClient, FakeMoodAnalyzer, make_track
from fastapi.testclient import TestClient

from moodtune.config.container import Container
from moodtune.config.settings import DatabaseSettings, Settings
from moodtune.infrastructure.web.app import create_app

VALID_ENTRY = {
    "text": "Finished a long project",
    "emoji": "😌",
    "quickMood": "relieved",
    "energy": 4,
    "valence": 8,
}


@pytest.fixture
def catalog():
    return FakeCatalogClient(
        query_result=[make_track("t1"), make_track("t2")],
        genres=["ambient", "jazz"],
    )


@pytest.fixture
def container(tmp_path, catalog):
    settings = Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite:///{tmp_path / 'api.db'}"),
    )
    container = Container(settings)
    container._catalog_client = catalog
    container._mood_analyzer = FakeMoodAnalyzer()
    return container


@pytest.fixture
def client(container):
    with TestClient(create_app(container)) as test_client:
        yield test_client


def _create_entry(client: TestClient, **overrides) -> dict:
    response = client.post("/api/mood-entries", json={**VALID_ENTRY, **overrides})
    assert response.status_code == 200
    return response.json()


class TestMoodEntryRoutes:
    """Tests for /api/mood-entries."""

    def test_create_returns_entry_reflection_and_recommendations(self, client):
        body = _create_entry(client)

        entry = body["moodEntry"]
        assert entry["quickMood"] == "relieved"
        assert len(entry["id"]) == 32
        assert "createdAt" in entry
        assert body["aiReflection"]["moodEntryId"] == entry["id"]
        assert [r["spotifyTrackId"] for r in body["recommendations"]] == ["t1", "t2"]
        assert body["recommendations"][0]["trackName"] == "Track t1"

    @pytest.mark.parametrize(
        "overrides",
        [
            {"text": ""},
            {"emoji": ""},
            {"quickMood": ""},
            {"energy": 0},
            {"valence": 11},
            {"energy": "high"},
        ],
    )
    def test_invalid_body_rejected(self, client, overrides):
        response = client.post("/api/mood-entries", json={**VALID_ENTRY, **overrides})
        assert response.status_code == 422

    def test_missing_field_rejected(self, client):
        body = {k: v for k, v in VALID_ENTRY.items() if k != "quickMood"}
        assert client.post("/api/mood-entries", json=body).status_code == 422

    def test_list_newest_first(self, client):
        first = _create_entry(client, text="first")
        second = _create_entry(client, text="second")

        ids = [e["id"] for e in client.get("/api/mood-entries").json()]

        assert ids == [second["moodEntry"]["id"], first["moodEntry"]["id"]]

    def test_recent_limit(self, client):
        for i in range(3):
            _create_entry(client, text=f"entry {i}")

        response = client.get("/api/mood-entries/recent", params={"limit": 2})

        assert response.status_code == 200
        assert [e["text"] for e in response.json()] == ["entry 2", "entry 1"]

    @pytest.mark.parametrize("limit", [0, 101])
    def test_recent_limit_out_of_range(self, client, limit):
        response = client.get("/api/mood-entries/recent", params={"limit": limit})
        assert response.status_code == 422

    def test_get_by_id(self, client):
        created = _create_entry(client)
        entry_id = created["moodEntry"]["id"]

        response = client.get(f"/api/mood-entries/{entry_id}")

        assert response.status_code == 200
        assert response.json()["text"] == VALID_ENTRY["text"]

    def test_get_unknown_id_is_404(self, client):
        response = client.get(f"/api/mood-entries/{'0' * 32}")

        assert response.status_code == 404
        assert "message" in response.json()

    def test_reflection_and_recommendations(self, client):
        entry_id = _create_entry(client)["moodEntry"]["id"]

        reflection = client.get(f"/api/mood-entries/{entry_id}/reflection")
        recs = client.get(f"/api/mood-entries/{entry_id}/recommendations")

        assert reflection.status_code == 200
        assert reflection.json()["content"].startswith("Reflecting on:")
        assert [r["spotifyTrackId"] for r in recs.json()] == ["t1", "t2"]

    def test_unknown_reflection_is_404(self, client):
        assert client.get(f"/api/mood-entries/{'0' * 32}/reflection").status_code == 404

    def test_catalog_outage_still_creates_entry(self, client, catalog):
        catalog.query_result = RuntimeError("catalog down")

        body = _create_entry(client)

        assert body["recommendations"] == []
        assert body["aiReflection"] is not None


class TestOtherRoutes:
    """Tests for affirmation, playlists, genres and health."""

    def test_affirmation(self, client):
        _create_entry(client)

        response = client.get("/api/affirmation")

        assert response.json() == {"affirmation": "You are doing great."}

    def test_create_and_list_playlists(self, client):
        entry_id = _create_entry(client)["moodEntry"]["id"]

        created = client.post(
            "/api/playlists",
            json={"name": "Calm", "description": "wind down", "moodEntryIds": [entry_id]},
        )
        listed = client.get("/api/playlists")

        assert created.status_code == 200
        assert created.json()["moodEntryIds"] == [entry_id]
        assert [p["name"] for p in listed.json()] == ["Calm"]

    @pytest.mark.parametrize(
        "body",
        [
            {"name": "", "moodEntryIds": []},
            {"name": "Bad ids", "moodEntryIds": ["not-an-id"]},
        ],
    )
    def test_invalid_playlist_rejected(self, client, body):
        assert client.post("/api/playlists", json=body).status_code == 422

    def test_genres(self, client):
        assert client.get("/api/genres").json() == {"genres": ["ambient", "jazz"]}

    def test_health(self, client):
        body = client.get("/api/health").json()

        assert body["status"] == "OK"
        assert body["database"] == "connected"
        assert "timestamp" in body


class TestAppBehaviour:
    """Tests for middleware, error mapping and lifecycle."""

    def test_unexpected_error_is_500_with_message(self, container):
        app = create_app(container)
        with TestClient(app, raise_server_exceptions=False) as client:
            with patch.object(
                container.journal_service,
                "list_entries",
                AsyncMock(side_effect=RuntimeError("boom")),
            ):
                response = client.get("/api/mood-entries")

        assert response.status_code == 500
        assert response.json() == {"message": "Internal server error"}

    def test_request_logging(self, client, caplog):
        with caplog.at_level(logging.INFO, logger="moodtune.infrastructure.web.app"):
            client.get("/api/health")

        assert any("GET /api/health 200" in r.getMessage() for r in caplog.records)

    def test_cors_allows_dev_frontend(self, client):
        response = client.options(
            "/api/health",
            headers={
                "Origin": "http://localhost:5173",
                "Access-Control-Request-Method": "GET",
            },
        )

        assert response.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_shutdown_closes_catalog(self, container, catalog):
        with TestClient(create_app(container)):
            pass

        assert catalog.closed
        assert not container.database.is_initialized
