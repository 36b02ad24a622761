"""Models package."""

from hiring_api.models.role import Role

__all__ = ["Role"]
