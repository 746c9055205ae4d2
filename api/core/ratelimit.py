"""Rate limiting configuration using slowapi.

SCALABILITY NOTES:
- Production MUST use Redis: set RATELIMIT_STORAGE_URI="redis://host:port/db"
- memory:// storage does NOT work with multiple workers/replicas
"""

import logging

from fastapi import Request, Response
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from core.config import get_settings
from core.responses import send_error

logger = logging.getLogger(__name__)

settings = get_settings()


def _get_request_identifier(request: Request) -> str:
    """Authenticated user id when available, otherwise the client address."""
    user_id = getattr(request.state, "user_id", None)
    if user_id:
        return f"user:{user_id}"

    return get_remote_address(request)


_using_redis = settings.ratelimit_storage_uri.startswith("redis://")

limiter = Limiter(
    key_func=_get_request_identifier,
    default_limits=[settings.ratelimit_default],
    storage_uri=settings.ratelimit_storage_uri,
    # Fall back to memory when Redis is temporarily unavailable
    in_memory_fallback_enabled=_using_redis,
    key_prefix="wsr:",
)


def rate_limit_exceeded_handler(request: Request, exc: Exception) -> Response:
    """Custom handler for rate limit exceeded errors."""
    if not isinstance(exc, RateLimitExceeded):
        return send_error("Unexpected error", "An unexpected error occurred", 500)

    detail = exc.detail
    logger.warning(
        "ratelimit.exceeded",
        extra={"client": _get_request_identifier(request), "limit": detail},
    )
    response = send_error(
        f"RateLimitExceeded: {detail}", "Rate limit exceeded. Please slow down.", 429
    )
    response.headers["Retry-After"] = str(getattr(exc, "retry_after", 60))
    return response


__all__ = ["RateLimitExceeded", "limiter", "rate_limit_exceeded_handler"]
