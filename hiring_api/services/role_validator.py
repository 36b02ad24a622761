"""Validation of role creation requests."""

from typing import Optional, Tuple

from hiring_api.schemas.schemas import RoleCreate

MAX_TITLE_LENGTH = 200
MAX_DESCRIPTION_LENGTH = 5000
MAX_DEPARTMENT_LENGTH = 100
MAX_LOCATION_LENGTH = 200


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def validate_create_request(request: RoleCreate) -> Tuple[bool, Optional[str]]:
    """Check a creation request, stopping at the first failure.

    Returns ``(True, None)`` when valid, otherwise ``(False, reason)``.
    Department and location are optional; only their length is checked.
    """
    if _is_blank(request.title):
        return False, "Title is required"

    if len(request.title) > MAX_TITLE_LENGTH:
        return False, f"Title cannot exceed {MAX_TITLE_LENGTH} characters"

    if _is_blank(request.description):
        return False, "Description is required"

    if len(request.description) > MAX_DESCRIPTION_LENGTH:
        return False, f"Description cannot exceed {MAX_DESCRIPTION_LENGTH} characters"

    if not _is_blank(request.department) and len(request.department) > MAX_DEPARTMENT_LENGTH:
        return False, f"Department cannot exceed {MAX_DEPARTMENT_LENGTH} characters"

    if not _is_blank(request.location) and len(request.location) > MAX_LOCATION_LENGTH:
        return False, f"Location cannot exceed {MAX_LOCATION_LENGTH} characters"

    return True, None
