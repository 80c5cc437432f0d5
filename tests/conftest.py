"""Shared fixtures: the app on an in-memory MongoDB."""

import os

os.environ.setdefault("MONGO_URI", "mongodb://localhost:27017/exercise_tracker_test")

from typing import Any, Callable, Dict, Iterator

import pytest
from fastapi.testclient import TestClient
from mongomock_motor import AsyncMongoMockClient

from database import Database
from main import create_app


@pytest.fixture
def database() -> Database:
    return Database(
        "mongodb://localhost:27017",
        "exercise_tracker_test",
        client=AsyncMongoMockClient(),
    )


@pytest.fixture
def client(database: Database) -> Iterator[TestClient]:
    with TestClient(create_app(database)) as test_client:
        yield test_client


@pytest.fixture
def make_user(client: TestClient) -> Callable[[str], Dict[str, Any]]:
    def _make_user(username: str) -> Dict[str, Any]:
        response = client.post("/api/users", json={"username": username})
        assert response.status_code == 200
        return response.json()

    return _make_user


@pytest.fixture
def add_exercise(client: TestClient) -> Callable[..., Dict[str, Any]]:
    def _add_exercise(user_id: str, **fields: Any) -> Dict[str, Any]:
        response = client.post(f"/api/users/{user_id}/exercises", json=fields)
        assert response.status_code == 200
        return response.json()

    return _add_exercise
