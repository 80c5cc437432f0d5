"""Tests for recording exercises."""

from datetime import datetime, timezone

import pytest
from bson import ObjectId
from bson.errors import InvalidDocument
from fastapi.testclient import TestClient
from pymongo.errors import AutoReconnect

from app.services import exercises


def today() -> str:
    return datetime.now(timezone.utc).strftime("%a %b %d %Y")


@pytest.fixture
def alice(make_user):
    return make_user("alice")


class TestAddExercise:
    def test_returns_exercise_merged_with_user(self, client: TestClient, alice) -> None:
        response = client.post(
            f"/api/users/{alice['_id']}/exercises",
            json={"description": "run", "duration": "30", "date": "2023-01-16"},
        )

        assert response.status_code == 200
        assert response.json() == {
            "username": "alice",
            "description": "run",
            "duration": 30,
            "date": "Mon Jan 16 2023",
            "_id": alice["_id"],
        }

    def test_weekday_is_the_real_one(self, add_exercise, alice) -> None:
        body = add_exercise(alice["_id"], description="run", duration=30, date="2023-01-15")

        assert body["date"] == "Sun Jan 15 2023"

    @pytest.mark.parametrize(
        "fields",
        [
            {},
            {"date": ""},
            {"date": None},
            {"date": 0},
            {"date": False},
        ],
    )
    def test_absent_or_falsy_date_defaults_to_today(self, add_exercise, alice, fields) -> None:
        before = today()
        body = add_exercise(alice["_id"], description="swim", duration="20", **fields)
        after = today()

        assert body["date"] in {before, after}

    def test_accepts_form_post(self, client: TestClient, alice) -> None:
        response = client.post(
            f"/api/users/{alice['_id']}/exercises",
            data={"description": "row", "duration": "15", "date": "2023-03-01"},
        )

        assert response.json()["duration"] == 15
        assert response.json()["date"] == "Wed Mar 01 2023"

    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("45min", 45),
            ("12.9", 12),
            (" 7", 7),
            ("abc", None),
            ("", None),
        ],
    )
    def test_duration_is_coerced_not_rejected(self, add_exercise, alice, raw, expected) -> None:
        body = add_exercise(alice["_id"], description="lift", duration=raw)

        assert "error" not in body
        assert body["duration"] == expected

    def test_missing_duration_is_null(self, add_exercise, alice) -> None:
        body = add_exercise(alice["_id"], description="stretch")

        assert body["duration"] is None

    def test_unknown_user(self, client: TestClient) -> None:
        response = client.post(
            f"/api/users/{ObjectId()}/exercises",
            json={"description": "run", "duration": "30"},
        )

        assert response.status_code == 200
        assert response.json() == {"error": "User not found"}

    def test_malformed_user_id(self, client: TestClient) -> None:
        response = client.post(
            "/api/users/not-an-id/exercises",
            json={"description": "run", "duration": "30"},
        )

        assert response.status_code == 200
        assert response.json()["error"].startswith('Cast to ObjectId failed for value "not-an-id"')

    def test_unparseable_date(self, add_exercise, alice) -> None:
        body = add_exercise(alice["_id"], description="run", duration="30", date="someday")

        assert body["error"].startswith('Cast to date failed for value "someday"')

    def test_unknown_user_wins_over_bad_date(self, client: TestClient) -> None:
        response = client.post(
            f"/api/users/{ObjectId()}/exercises",
            json={"description": "run", "date": "someday"},
        )

        assert response.json() == {"error": "User not found"}

    def test_storage_failure_is_an_error_payload(
        self, client: TestClient, alice, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def failing_add_exercise(user, payload):
            raise AutoReconnect("primary stepped down")

        monkeypatch.setattr(exercises, "add_exercise", failing_add_exercise)

        response = client.post(
            f"/api/users/{alice['_id']}/exercises",
            json={"description": "run", "duration": "30"},
        )

        assert response.status_code == 200
        assert response.json() == {"error": "primary stepped down"}

    def test_duration_too_large_for_storage_is_an_error_payload(
        self, client: TestClient, alice
    ) -> None:
        response = client.post(
            f"/api/users/{alice['_id']}/exercises",
            json={"description": "ultra", "duration": "99999999999999999999"},
        )

        assert response.status_code == 200
        assert "8-byte ints" in response.json()["error"]

    def test_encoding_failure_is_an_error_payload(
        self, client: TestClient, alice, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        async def failing_add_exercise(user, payload):
            raise InvalidDocument("cannot encode object")

        monkeypatch.setattr(exercises, "add_exercise", failing_add_exercise)

        response = client.post(
            f"/api/users/{alice['_id']}/exercises",
            json={"description": "run", "duration": "30"},
        )

        assert response.status_code == 200
        assert response.json() == {"error": "cannot encode object"}
