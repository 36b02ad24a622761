"""Role service — in-memory store and lifecycle for job roles."""

import logging
import threading
import uuid
from datetime import datetime
from typing import Callable, Dict, List, Optional

from hiring_api.core.clock import add_months, utc_now
from hiring_api.core.config import settings
from hiring_api.core.exceptions import RoleConflictError
from hiring_api.models.role import Role
from hiring_api.schemas.schemas import RoleCreate

logger = logging.getLogger("hiring_api.roles")


class RoleService:
    """Thread-safe map of role id to role, with create/get/list/approve.

    Roles are never removed. Expiration is applied when listing, not by
    deleting records.
    """

    def __init__(
        self,
        expiration_months: int = 3,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], uuid.UUID] = uuid.uuid4,
    ):
        if expiration_months < 1:
            raise ValueError("expiration_months must be a positive integer")
        self.expiration_months = expiration_months
        self._clock = clock
        self._id_factory = id_factory
        self._roles: Dict[uuid.UUID, Role] = {}
        self._lock = threading.Lock()

    def create_role(self, request: RoleCreate, require_approval: bool) -> Role:
        """Store a new role and return it.

        The role starts unapproved only when ``require_approval`` is set.
        """
        created_at = self._clock()
        role = Role(
            id=self._id_factory(),
            title=request.title,
            description=request.description,
            department=request.department or "",
            location=request.location or "",
            created_at=created_at,
            expires_at=add_months(created_at, self.expiration_months),
            is_approved=not require_approval,
        )

        with self._lock:
            if role.id in self._roles:
                raise RoleConflictError(f"Role {role.id} already exists")
            self._roles[role.id] = role

        logger.info(
            "Role created: %s - %s, Expires: %s, Approved: %s",
            role.id, role.title, role.expires_at.isoformat(), role.is_approved,
        )
        return role

    def get_role(self, role_id: uuid.UUID) -> Optional[Role]:
        """Get a role by id, or None if it was never created."""
        with self._lock:
            return self._roles.get(role_id)

    def list_roles(
        self,
        include_expired: bool = False,
        include_unapproved: bool = False,
    ) -> List[Role]:
        """List roles, hiding expired and unapproved ones unless asked."""
        with self._lock:
            roles = list(self._roles.values())

        now = self._clock()
        if not include_expired:
            roles = [r for r in roles if not r.is_expired_at(now)]
        if not include_unapproved:
            roles = [r for r in roles if r.is_approved]
        return roles

    def approve_role(self, role_id: uuid.UUID) -> None:
        """Mark a role approved. Unknown ids are ignored."""
        with self._lock:
            role = self._roles.get(role_id)
            if role is None:
                return
            role.is_approved = True

        logger.info("Role approved: %s - %s", role.id, role.title)

    def now(self) -> datetime:
        """Current time on the store's clock, used to judge expiry."""
        return self._clock()

    def count(self) -> int:
        """Number of roles ever stored."""
        with self._lock:
            return len(self._roles)


role_service = RoleService(expiration_months=settings.ROLE_EXPIRATION_MONTHS)


def get_role_service() -> RoleService:
    """FastAPI dependency returning the process-wide role store."""
    return role_service
