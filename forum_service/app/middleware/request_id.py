"""Request ID middleware for per-request log correlation.

1. Reads X-Request-ID if the client sent one, otherwise generates a UUID
2. Stores it in request.state.request_id and in the logging context
3. Echoes it in the X-Request-ID response header
4. Clears the logging context when the request completes
"""

from __future__ import annotations

from forum_service.app.middleware.base import HeaderContextMiddleware, generate_uuid


class RequestIDMiddleware(HeaderContextMiddleware):
    """Add a unique request ID to every request.

    Usage:
        app = FastAPI()
        app.add_middleware(RequestIDMiddleware)
    """

    header_name = "x-request-id"
    state_key = "request_id"
    log_context_key = "request_id"
    should_clear_context_on_finish = True

    def generate_value(self) -> str:
        return generate_uuid()
