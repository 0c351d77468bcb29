import time
import uuid
from collections.abc import Awaitable
from typing import Callable
from typing_extensions import override
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response
from starlette.types import ASGIApp

from course_library.core.config import settings
from course_library.core.logging import get_logger


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Propagates the correlation id and logs one line per request.
    - Reuses the incoming request id header or generates a uuid4
    - Sets `request.state.correlation_id`
    - Echoes the id back in the response headers
    """

    def __init__(self, app: ASGIApp, header_name: str | None = None):
        super().__init__(app)
        self.header_name: str = header_name or settings.REQUEST_ID_HEADER

    @override
    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        corr_id = request.headers.get(self.header_name) or str(uuid.uuid4())
        request.state.correlation_id = corr_id

        logger = get_logger(__name__, request)
        started = time.perf_counter()
        response = await call_next(request)
        latency_ms = round((time.perf_counter() - started) * 1000, 2)

        logger.info(
            "%s %s -> %s (%.2f ms)",
            request.method,
            request.url.path,
            response.status_code,
            latency_ms,
        )
        response.headers[self.header_name] = corr_id
        return response
