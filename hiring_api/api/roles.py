"""Roles API router — post, list, fetch, approve."""

import uuid
import logging
from typing import List

from fastapi import APIRouter, Depends, Query, Request, Response, status

from hiring_api.core import features
from hiring_api.core.config import settings
from hiring_api.core.exceptions import (
    FeatureDisabledError, RoleNotFoundError, RoleValidationError,
)
from hiring_api.core.features import FeatureFlags, get_feature_flags
from hiring_api.core.rate_limiter import limit_writes
from hiring_api.schemas.schemas import RoleCreate, RoleOut, ApprovalResponse
from hiring_api.services.role_service import RoleService, get_role_service
from hiring_api.services.role_validator import validate_create_request

logger = logging.getLogger("hiring_api")

router = APIRouter(prefix="/roles", tags=["roles"])


@router.post("", response_model=RoleOut, status_code=status.HTTP_201_CREATED)
@limit_writes
async def create_role(
    request: Request,
    response: Response,
    body: RoleCreate,
    service: RoleService = Depends(get_role_service),
    flags: FeatureFlags = Depends(get_feature_flags),
):
    """Post a new job role."""
    if not flags.is_enabled(features.ENABLE_ROLE_POSTING):
        raise FeatureDisabledError(
            features.ENABLE_ROLE_POSTING,
            "Role posting is currently disabled",
            status.HTTP_503_SERVICE_UNAVAILABLE,
        )

    is_valid, error = validate_create_request(body)
    if not is_valid:
        logger.info("Rejected role request: %s", error)
        raise RoleValidationError(error)

    role = service.create_role(
        body, require_approval=flags.is_enabled(features.REQUIRE_ROLE_APPROVAL)
    )
    logger.info("New role posted: %s - %s", role.id, role.title)

    response.headers["Location"] = f"{settings.API_PREFIX}/roles/{role.id}"
    return RoleOut.from_role(role, service.now())


@router.get("", response_model=List[RoleOut])
async def list_roles(
    include_expired: bool = Query(False, alias="includeExpired"),
    service: RoleService = Depends(get_role_service),
    flags: FeatureFlags = Depends(get_feature_flags),
):
    """List open roles. Expired roles need both the query flag and the feature."""
    show_expired = include_expired and flags.is_enabled(features.SHOW_EXPIRED_ROLES)
    roles = service.list_roles(include_expired=show_expired, include_unapproved=False)
    now = service.now()
    return [RoleOut.from_role(r, now) for r in roles]


@router.get("/{role_id}", response_model=RoleOut)
async def get_role(role_id: uuid.UUID, service: RoleService = Depends(get_role_service)):
    """Get a role by id."""
    role = service.get_role(role_id)
    if role is None:
        raise RoleNotFoundError(f"Role {role_id} not found")
    return RoleOut.from_role(role, service.now())


@router.put("/{role_id}/approve", response_model=ApprovalResponse)
@limit_writes
async def approve_role(
    request: Request,
    role_id: uuid.UUID,
    service: RoleService = Depends(get_role_service),
    flags: FeatureFlags = Depends(get_feature_flags),
):
    """Approve a pending role."""
    if not flags.is_enabled(features.REQUIRE_ROLE_APPROVAL):
        raise FeatureDisabledError(
            features.REQUIRE_ROLE_APPROVAL,
            "Role approval workflow is not enabled",
            status.HTTP_400_BAD_REQUEST,
        )

    # The store ignores unknown ids, so existence is checked here.
    role = service.get_role(role_id)
    if role is None:
        raise RoleNotFoundError(f"Role {role_id} not found")

    if role.is_approved:
        return ApprovalResponse(
            message="Role is already approved",
            role=RoleOut.from_role(role, service.now()),
        )

    service.approve_role(role_id)
    return ApprovalResponse(
        message="Role approved",
        role=RoleOut.from_role(service.get_role(role_id), service.now()),
    )
