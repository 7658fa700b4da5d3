"""
Integration tests for the catalog REST API.

Tests routers, result mapping and HTTP status codes against a fresh
catalog per test.
"""

import pytest
from fastapi.testclient import TestClient

# Import test dependencies
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from api.dependencies import get_catalog
from main import app
from services.catalog import Catalog

MOVIE = {
    "czech_name": "Pelisky",
    "original_name": "Pelisky",
    "year": 1999,
    "language": "CZ",
    "media": [{"length": 6900}],
}
SHOW = {"czech_name": "Show", "original_name": "Show"}
SEASON = {"number": 1, "start_year": 2000, "end_year": 2001}


@pytest.fixture
def client():
    """Create test client backed by an empty catalog."""
    catalog = Catalog()
    app.dependency_overrides[get_catalog] = lambda: catalog
    yield TestClient(app)
    app.dependency_overrides.clear()


def event_keys(response):
    return [event["key"] for event in response.json()["detail"]]


class TestGeneralEndpoints:
    """Test root, health and statistics endpoints."""

    def test_root(self, client):
        response = client.get("/")

        assert response.status_code == 200
        assert response.json()["status"] == "running"

    def test_health(self, client):
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {"status": "healthy"}

    def test_statistics(self, client):
        client.post("/movies/add", json=MOVIE)

        response = client.get("/statistics")

        assert response.status_code == 200
        assert response.json()["movies"]["count"] == 1
        assert response.json()["movies"]["total_length"]["formatted"] == "1:55:00"


class TestParentEndpoints:
    """Test endpoints of aggregate root kinds."""

    def test_add_and_get(self, client):
        """Test added movie is returned with generated ID and position."""
        response = client.post("/movies/add", json=MOVIE)

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "OK"
        assert body["data"]["id"] == 1
        assert body["data"]["position"] == 0

        fetched = client.get("/movies/1")
        assert fetched.status_code == 200
        assert fetched.json()["data"]["czech_name"] == "Pelisky"

    def test_get_missing(self, client):
        """Test unknown ID answers 404."""
        assert client.get("/movies/5").status_code == 404

    def test_add_invalid(self, client):
        """Test validation errors answer 422 with every event."""
        response = client.post("/movies/add", json={**MOVIE, "id": 3, "czech_name": "", "year": 1900})

        assert response.status_code == 422
        assert event_keys(response) == ["MOVIE_ID_NOT_NULL", "MOVIE_CZECH_NAME_EMPTY", "MOVIE_YEAR_NOT_VALID"]

    def test_update_missing(self, client):
        """Test update of unknown entity answers 404."""
        response = client.post("/genres/update", json={"id": 7, "name": "Drama"})

        assert response.status_code == 404
        assert event_keys(response) == ["GENRE_NOT_EXIST"]

    def test_move_and_list(self, client):
        """Test moving reorders the listing."""
        for name in ("A", "B", "C"):
            client.post("/genres/add", json={"name": name})

        assert client.post("/genres/moveDown", json={"id": 1}).status_code == 200
        second = client.post("/genres/moveDown", json={"id": 1})

        listing = client.get("/genres/").json()["data"]
        assert [genre["name"] for genre in listing] == ["B", "C", "A"]
        assert second.status_code == 200

        last = client.post("/genres/moveDown", json={"id": 1})
        assert last.status_code == 422
        assert event_keys(last) == ["GENRE_NOT_MOVABLE"]

    def test_duplicate_remove_and_update_positions(self, client):
        """Test duplicate, remove and compacting positions."""
        client.post("/genres/add", json={"name": "A"})
        client.post("/genres/add", json={"name": "B"})

        duplicate = client.post("/genres/duplicate", json={"id": 1})
        assert duplicate.json()["data"]["id"] == 3

        client.post("/genres/remove", json={"id": 2})
        client.post("/genres/updatePositions")

        listing = client.get("/genres/").json()["data"]
        assert [(genre["id"], genre["position"]) for genre in listing] == [(1, 0), (3, 1)]

    def test_new_data(self, client):
        """Test removing all entities of a kind."""
        client.post("/games/add", json={"name": "Game", "media_count": 1})

        assert client.post("/games/new").status_code == 200
        assert client.get("/games/").json()["data"] == []


class TestChildEndpoints:
    """Test endpoints of nested kinds."""

    def test_seasons_workflow(self, client):
        """Test adding, listing and moving seasons of a show."""
        client.post("/shows/add", json=SHOW)
        for number in (1, 2):
            response = client.post("/shows/1/seasons/add", json={**SEASON, "number": number})
            assert response.status_code == 200

        assert client.post("/seasons/moveUp", json={"id": 2}).status_code == 200

        seasons = client.get("/shows/1/seasons").json()["data"]
        assert [season["number"] for season in seasons] == [2, 1]
        assert client.get("/seasons/1").json()["data"]["number"] == 1

    def test_episodes_nested_in_season(self, client):
        """Test episodes are managed under their season."""
        client.post("/shows/add", json=SHOW)
        client.post("/shows/1/seasons/add", json=SEASON)

        response = client.post("/seasons/1/episodes/add", json={"number": 1, "name": "Pilot", "length": 1800})

        assert response.status_code == 200
        assert response.json()["data"]["id"] == 1
        assert [episode["name"] for episode in client.get("/seasons/1/episodes").json()["data"]] == ["Pilot"]

    def test_add_to_unknown_parent(self, client):
        """Test adding to unknown parent answers 404."""
        response = client.post("/music/3/songs/add", json={"name": "Song", "length": 100})

        assert response.status_code == 404
        assert event_keys(response) == ["MUSIC_NOT_EXIST"]

    def test_get_missing_child(self, client):
        """Test unknown child answers 404."""
        assert client.get("/books/1").status_code == 404
