"""Tests for the service banner, health check and error envelope."""

from httpx import ASGITransport, AsyncClient

from mentora.api.deps import get_stores
from mentora.config import sanitize_error
from mentora.main import app


class TestHealth:
    async def test_banner(self, client):
        body = (await client.get("/")).json()

        assert body["status"] == "operational"
        assert body["version"] == "4.0.0"
        assert "ai_lecturers" in body["features"]

    async def test_health(self, client):
        body = (await client.get("/api/health")).json()

        assert body["status"] == "healthy"
        assert body["alleai"] in ("connected", "missing_key")
        assert "chat" in body["features_active"]
        assert body["timestamp"]

    async def test_unknown_route_uses_error_envelope(self, client):
        response = await client.get("/api/does-not-exist")

        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}


class TestUnhandledErrors:
    async def test_unexpected_failure_returns_500_envelope(self):
        failure = RuntimeError("store exploded")

        def broken_stores():
            raise failure

        app.dependency_overrides[get_stores] = broken_stores
        try:
            async with AsyncClient(
                transport=ASGITransport(app=app, raise_app_exceptions=False),
                base_url="http://test",
            ) as ac:
                response = await ac.get("/api/settings/ada@example.com")
        finally:
            app.dependency_overrides.clear()

        assert response.status_code == 500
        assert response.json() == {
            "success": False,
            "error": "Internal server error",
            "details": sanitize_error(failure),
        }
