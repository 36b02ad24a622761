"""Role model for job postings."""

import uuid
from dataclasses import dataclass, field
from datetime import datetime

from hiring_api.core.clock import utc_now


@dataclass
class Role:
    """Job role with an expiration date and an approval flag.

    Only ``is_approved`` changes after creation; it goes from False to
    True and never back. ``is_expired`` is computed on every access against
    the wall clock; the store judges expiry with its own clock through
    ``is_expired_at``.
    """

    title: str
    description: str
    expires_at: datetime
    department: str = ""
    location: str = ""
    created_at: datetime = field(default_factory=utc_now)
    is_approved: bool = True
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    def is_expired_at(self, now: datetime) -> bool:
        return now > self.expires_at

    @property
    def is_expired(self) -> bool:
        return self.is_expired_at(utc_now())
