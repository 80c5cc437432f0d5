"""Tests for the home page, static assets and health checks."""

from fastapi.testclient import TestClient


class TestHomePage:
    def test_serves_html(self, client: TestClient) -> None:
        response = client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Exercise tracker" in response.text

    def test_serves_static_assets(self, client: TestClient) -> None:
        response = client.get("/style.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_cors_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/api/users", headers={"Origin": "https://example.org"})

        assert response.headers["access-control-allow-origin"] == "*"
