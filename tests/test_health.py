"""Smoke tests for health and app wiring."""

from httpx import AsyncClient


async def test_health_returns_ok(client: AsyncClient) -> None:
    """GET /api/v1/health returns 200 and status ok."""
    response = await client.get("/api/v1/health")
    assert response.status_code == 200
    data = response.json()
    assert data.get("status") == "ok"


async def test_readiness_reports_search_index(client: AsyncClient) -> None:
    """GET /api/v1/health/ready reports whether the index path is enabled."""
    response = await client.get("/api/v1/health/ready")
    assert response.status_code == 200
    assert isinstance(response.json()["search_index"], bool)


async def test_request_id_is_echoed(client: AsyncClient) -> None:
    """RequestIDMiddleware returns the caller's request id."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "abc-123"})
    assert response.headers.get("X-Request-ID") == "abc-123"


async def test_unsafe_request_id_is_replaced(client: AsyncClient) -> None:
    """A request id with unsafe characters is replaced by a generated one."""
    response = await client.get("/api/v1/health", headers={"X-Request-ID": "not a valid id!"})
    echoed = response.headers.get("X-Request-ID")
    assert echoed
    assert echoed != "not a valid id!"
