"""
Basic application tests.

Validates that the FastAPI app starts correctly and the
health endpoint responds with an envelope.
"""


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client) -> None:
        """Health endpoint must return HTTP 200 with code OK."""
        response = client.get("/api/v1/health")
        assert response.status_code == 200
        assert response.json()["code"] == "OK"

    def test_health_response_body(self, client) -> None:
        """Health endpoint must return status and version in data."""
        body = client.get("/api/v1/health").json()
        assert body["data"]["status"] == "ok"
        assert "version" in body["data"]

    def test_docs_hidden_outside_debug(self, client) -> None:
        """Interactive docs are only served in debug mode."""
        assert client.get("/docs").status_code == 404
