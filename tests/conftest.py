"""Pytest configuration and fixtures for the hiring API.

HTTP tests run against hiring_api.main:app over ASGI. Each test gets its
own RoleService and feature flags through app.dependency_overrides, so no
state leaks between tests.
"""

import pytest
from httpx import ASGITransport, AsyncClient

from hiring_api.core.config import Settings
from hiring_api.core.features import FeatureFlags, get_feature_flags
from hiring_api.core.rate_limiter import limiter
from hiring_api.main import app
from hiring_api.schemas.schemas import RoleCreate
from hiring_api.services.role_service import RoleService, get_role_service

API = "/api/v1"


@pytest.fixture
def role_service() -> RoleService:
    """Empty role store with the default 3-month expiration."""
    return RoleService(expiration_months=3)


@pytest.fixture
def flag_settings() -> Settings:
    """Settings backing the feature flags; tests mutate fields directly."""
    return Settings(
        FEATURE_HIRED=False,
        FEATURE_ENABLE_ROLE_POSTING=True,
        FEATURE_REQUIRE_ROLE_APPROVAL=False,
        FEATURE_SHOW_EXPIRED_ROLES=False,
    )


@pytest.fixture(autouse=True)
def reset_rate_limits():
    limiter.reset()
    yield
    limiter.reset()


@pytest.fixture
async def client(role_service: RoleService, flag_settings: Settings) -> AsyncClient:
    """Async HTTP client against the FastAPI app (ASGI)."""
    app.dependency_overrides[get_role_service] = lambda: role_service
    app.dependency_overrides[get_feature_flags] = lambda: FeatureFlags(flag_settings)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def make_request():
    """Build a RoleCreate with sensible defaults."""

    def _make(**overrides) -> RoleCreate:
        data = {
            "title": "Engineer",
            "description": "Build things",
            "department": "Eng",
            "location": "Remote",
        }
        data.update(overrides)
        return RoleCreate(**data)

    return _make
