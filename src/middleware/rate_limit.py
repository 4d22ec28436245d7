"""Rate limiting for the seed trigger, using slowapi.

Seeding hashes passwords with bcrypt and runs DDL, so the trigger is limited
per client IP (``settings.seed_rate_limit``, default ``5/minute``).

Wiring in ``main.py``::

    app.state.limiter = limiter
    app.add_exception_handler(RateLimitExceeded, rate_limit_exceeded_handler)

Rate-limited endpoints must accept ``request: Request`` and
``response: Response`` so slowapi can inject the ``X-RateLimit-*`` headers.
"""

import logging

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.responses import Response

from src.schemas.common import ErrorCode, ErrorResponse

__all__ = [
    "limiter",
    "rate_limit_exceeded_handler",
]

logger = logging.getLogger(__name__)


async def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> Response:
    """Return 429 with the standard error envelope when a rate limit is exceeded.

    ``X-RateLimit-*`` and ``Retry-After`` headers are added from
    ``request.state.view_rate_limit``, which slowapi sets before raising.
    """
    body = ErrorResponse(
        error=ErrorCode(
            code="RATE_LIMITED",
            message="Rate limit exceeded. Please try again later.",
        )
    )
    resp: Response = JSONResponse(
        status_code=429,
        content=body.model_dump(),
    )
    view_rate_limit = getattr(request.state, "view_rate_limit", None)
    if view_rate_limit is not None:
        app_limiter: Limiter | None = getattr(request.app.state, "limiter", None)
        if app_limiter is not None:
            try:
                resp = app_limiter._inject_headers(resp, view_rate_limit)
            except Exception:  # noqa: BLE001
                logger.warning("Could not inject rate-limit headers", exc_info=True)
    return resp


#: Shared in-memory limiter (counters reset on restart).
limiter: Limiter = Limiter(key_func=get_remote_address, headers_enabled=True)
