"""Pydantic schemas for API request/response serialization."""

import uuid
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from hiring_api.models.role import Role


# ---- Role ----
class RoleCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None


class RoleOut(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    id: uuid.UUID
    title: str
    description: str
    department: str
    location: str
    created_at: datetime
    expires_at: datetime
    is_expired: bool
    is_approved: bool

    @classmethod
    def from_role(cls, role: Role, now: datetime) -> "RoleOut":
        """Build the response body, judging expiry at ``now``."""
        return cls(
            id=role.id,
            title=role.title,
            description=role.description,
            department=role.department,
            location=role.location,
            created_at=role.created_at,
            expires_at=role.expires_at,
            is_expired=role.is_expired_at(now),
            is_approved=role.is_approved,
        )


class ApprovalResponse(BaseModel):
    message: str
    role: Optional[RoleOut] = None


# ---- Hiring status ----
class HiringStatusResponse(BaseModel):
    hired: bool
    message: str


# ---- Common ----
class HealthResponse(BaseModel):
    status: str = "ok"
