"""Hiring status endpoint."""

from httpx import AsyncClient


async def test_hired_flag_on_returns_welcome_message(client: AsyncClient, flag_settings) -> None:
    flag_settings.FEATURE_HIRED = True
    response = await client.get("/api/v1/hiring-status")
    assert response.status_code == 200
    data = response.json()
    assert data["hired"] is True
    assert "Congratulations" in data["message"]
    assert "Welcome aboard" in data["message"]


async def test_hired_flag_off_returns_rejection_message(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hiring-status")
    assert response.status_code == 200
    data = response.json()
    assert data["hired"] is False
    assert "Thank you for your interest" in data["message"]
    assert "other candidates" in data["message"]


async def test_hiring_status_is_json(client: AsyncClient) -> None:
    response = await client.get("/api/v1/hiring-status")
    assert response.headers["content-type"].startswith("application/json")
