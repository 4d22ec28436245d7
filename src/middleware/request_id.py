"""Request ID middleware.

Every request gets a UUID4, returned in the ``X-Request-Id`` response header
and held in :data:`REQUEST_ID_CTX` for the duration of the request so logs
written while seeding can be correlated with the triggering call.

Register it *last* with ``app.add_middleware`` so it runs outermost.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-Id"

# Empty string outside of a request.
REQUEST_ID_CTX: ContextVar[str] = ContextVar("request_id", default="")


class RequestIdMiddleware(BaseHTTPMiddleware):
    """Attach a UUID4 ``X-Request-Id`` header to every HTTP response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = str(uuid.uuid4())
        token = REQUEST_ID_CTX.set(request_id)
        try:
            response: Response = await call_next(request)
        finally:
            REQUEST_ID_CTX.reset(token)
        response.headers[REQUEST_ID_HEADER] = request_id
        return response
