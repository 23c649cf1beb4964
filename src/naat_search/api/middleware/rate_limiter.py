"""
Search rate limiting (slowapi, keyed by client IP).

The limit string comes from settings.SEARCH_RATE_LIMIT and is read on
every request, so it can be changed without re-decorating the routes.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from naat_search.core.config import settings

logger = logging.getLogger(__name__)

limiter = Limiter(key_func=get_remote_address)


def search_rate_limit() -> str:
    return settings.SEARCH_RATE_LIMIT


def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    """429 with the window length so clients can back off."""
    retry_after = exc.limit.limit.get_expiry()
    logger.warning(
        "Search rate limit exceeded",
        extra={"client": get_remote_address(request), "limit": exc.detail},
    )
    return JSONResponse(
        status_code=429,
        content={
            "error": "rate_limit_exceeded",
            "message": f"Search limit of {exc.detail} reached, try again later.",
            "limit": exc.detail,
            "retry_after": retry_after,
        },
        headers={"Retry-After": str(retry_after)},
    )
