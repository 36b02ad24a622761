"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter) and the route modules use the same
instance without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from hiring_api.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

limit_writes = limiter.limit(settings.RATE_LIMIT_WRITES)
