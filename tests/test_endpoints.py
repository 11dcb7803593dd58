"""
Integration tests for API endpoints against the seeded SQLite DB.
"""
import pytest
from fastapi.testclient import TestClient

from app.core.errors import DataSourceError
from app.main import app
from app.routers.movements import get_record_store


class TestHealth:
    def test_health(self, client):
        r = client.get("/health")
        assert r.status_code == 200
        body = r.json()
        assert body["status"] == "OK"
        assert body["db"] == "ok"
        assert "timestamp" in body

    def test_root_is_health(self, client):
        r = client.get("/")
        assert r.status_code == 200
        assert r.json()["message"] == "Movement Ranking API"


class TestMovementRanking:
    def test_deadlift_ranking(self, client):
        r = client.get("/api/movements/Deadlift/ranking")
        assert r.status_code == 200
        assert r.json() == {
            "movement": "Deadlift",
            "ranking": [
                {"position": 1, "user_name": "Jose", "personal_record": 190.0, "record_date": "2021-01-06"},
                {"position": 2, "user_name": "Joao", "personal_record": 180.0, "record_date": "2021-01-02"},
                {"position": 3, "user_name": "Paulo", "personal_record": 170.0, "record_date": "2021-01-01"},
            ],
        }

    def test_back_squat_tie_skips_next_position(self, client):
        r = client.get("/api/movements/Back Squat/ranking")
        assert r.status_code == 200
        ranking = r.json()["ranking"]
        assert [(e["user_name"], e["position"], e["personal_record"]) for e in ranking] == [
            ("Joao", 1, 130.0),
            ("Jose", 1, 130.0),
            ("Paulo", 3, 125.0),
        ]

    def test_url_encoded_name(self, client):
        r = client.get("/api/movements/Back%20Squat/ranking")
        assert r.status_code == 200
        assert r.json()["movement"] == "Back Squat"

    @pytest.mark.parametrize("movement_id, name", [("1", "Deadlift"), ("2", "Back Squat")])
    def test_id_and_name_give_identical_bodies(self, client, movement_id, name):
        by_id = client.get(f"/api/movements/{movement_id}/ranking")
        by_name = client.get(f"/api/movements/{name}/ranking")
        assert by_id.status_code == 200
        assert by_id.content == by_name.content

    def test_repeated_requests_are_byte_identical(self, client):
        first = client.get("/api/movements/2/ranking")
        second = client.get("/api/movements/2/ranking")
        assert first.content == second.content

    def test_trailing_slash(self, client):
        r = client.get("/api/movements/1/ranking/")
        assert r.status_code == 200
        assert r.json()["movement"] == "Deadlift"

    def test_movement_without_records_returns_404(self, client):
        r = client.get("/api/movements/Bench Press/ranking")
        assert r.status_code == 404
        assert r.json() == {"error": "Movement not found"}

    @pytest.mark.parametrize("key", ["999", "Snatch", "deadlift", "9" * 20, "0"])
    def test_unknown_movement_returns_404(self, client, key):
        r = client.get(f"/api/movements/{key}/ranking")
        assert r.status_code == 404
        assert r.json() == {"error": "Movement not found"}


class TestServerErrors:
    def test_data_source_failure_returns_generic_500(self, client):
        class BrokenStore:
            def find_movement(self, key):
                raise DataSourceError("find_movement", {"movement_key": key})

            def list_observations(self, movement_id):
                raise AssertionError("not reached")

        app.dependency_overrides[get_record_store] = lambda: BrokenStore()
        r = client.get("/api/movements/Deadlift/ranking")
        assert r.status_code == 500
        assert r.json() == {
            "error": "Internal server error",
            "message": "An unexpected error occurred.",
        }

    def test_unexpected_exception_returns_generic_500(self):
        class ExplodingStore:
            def find_movement(self, key):
                raise RuntimeError("password=hunter2")

            def list_observations(self, movement_id):
                return []

        app.dependency_overrides[get_record_store] = lambda: ExplodingStore()
        try:
            with TestClient(app, raise_server_exceptions=False) as c:
                r = c.get("/api/movements/Deadlift/ranking")
        finally:
            app.dependency_overrides.clear()
        assert r.status_code == 500
        body = r.json()
        assert body["error"] == "Internal server error"
        assert "hunter2" not in r.text


class TestUnknownRoutes:
    def test_unknown_path_returns_404_with_path(self, client):
        r = client.get("/api/unknown")
        assert r.status_code == 404
        assert r.json() == {"error": "Endpoint not found", "path": "/api/unknown"}

    def test_ranking_is_read_only(self, client):
        r = client.post("/api/movements/1/ranking")
        assert r.status_code == 405
        assert "error" in r.json()
