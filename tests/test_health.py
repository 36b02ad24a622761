"""Smoke tests for health and app wiring."""

import logging

from httpx import AsyncClient


async def test_healthz_returns_ok(client: AsyncClient) -> None:
    """GET /healthz returns 200 and status ok."""
    response = await client.get("/healthz")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


async def test_root_returns_service_info(client: AsyncClient) -> None:
    response = await client.get("/")
    assert response.status_code == 200
    data = response.json()
    assert data["name"] == "Hiring API"
    assert data["docs"] == "/docs"


async def test_openapi_lists_role_routes(client: AsyncClient) -> None:
    response = await client.get("/openapi.json")
    assert response.status_code == 200
    paths = response.json()["paths"]
    assert "/api/v1/roles" in paths
    assert "/api/v1/roles/{role_id}/approve" in paths
    assert "/api/v1/hiring-status" in paths


async def test_cors_preflight_allows_configured_origin(client: AsyncClient) -> None:
    response = await client.options(
        "/api/v1/roles",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 200
    assert response.headers["access-control-allow-origin"] == "http://localhost:3000"


async def test_caller_request_id_is_echoed(client: AsyncClient) -> None:
    response = await client.get("/healthz", headers={"X-Request-Id": "trace-abc123"})
    assert response.headers["x-request-id"] == "trace-abc123"


async def test_request_id_generated_when_absent(client: AsyncClient) -> None:
    first = await client.get("/healthz")
    second = await client.get("/healthz")
    assert first.headers["x-request-id"] != second.headers["x-request-id"]


async def test_api_requests_logged_at_info(client: AsyncClient, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="hiring_api.http")
    await client.get("/api/v1/roles", headers={"X-Request-Id": "req-1"})

    records = [r for r in caplog.records if r.name == "hiring_api.http"]
    assert len(records) == 1
    assert records[0].levelno == logging.INFO
    assert "GET /api/v1/roles -> 200" in records[0].getMessage()
    assert "[req-1]" in records[0].getMessage()


async def test_liveness_checks_logged_at_debug(client: AsyncClient, caplog) -> None:
    caplog.set_level(logging.DEBUG, logger="hiring_api.http")
    await client.get("/healthz")

    records = [r for r in caplog.records if r.name == "hiring_api.http"]
    assert [r.levelno for r in records] == [logging.DEBUG]


async def test_cors_exposes_tracing_headers(client: AsyncClient) -> None:
    response = await client.get("/api/v1/roles", headers={"Origin": "http://localhost:5173"})
    exposed = response.headers["access-control-expose-headers"]
    assert "X-Request-Id" in exposed
    assert "Location" in exposed


async def test_cors_rejects_unlisted_origin(client: AsyncClient) -> None:
    response = await client.options(
        "/api/v1/roles",
        headers={
            "Origin": "http://evil.example",
            "Access-Control-Request-Method": "POST",
        },
    )
    assert response.status_code == 400
    assert "access-control-allow-origin" not in response.headers


async def test_cors_preflight_rejects_unlisted_method(client: AsyncClient) -> None:
    response = await client.options(
        "/api/v1/roles",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "DELETE",
        },
    )
    assert response.status_code == 400
