"""Rate limiter instance for SlowAPI.

Shared so main (app.state.limiter) and route modules use the same instance
without circular imports.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from pinkbeam.core.config import get_settings

limiter = Limiter(key_func=get_remote_address)


def search_limit() -> str:
    """Limit string for the search endpoint (read from settings per request)."""
    return get_settings().search_rate_limit


limit_search = limiter.limit(search_limit)
