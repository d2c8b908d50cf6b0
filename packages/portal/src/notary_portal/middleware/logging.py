"""Per-request access log; binds request_id for every log line in the request."""

from __future__ import annotations

import time
from uuid import uuid4

import structlog
from fastapi import Request, Response
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from notary_portal.responses import error_response

logger = structlog.get_logger(__name__)

REQUEST_ID_HEADER = "X-Request-ID"


def _elapsed_ms(start: float) -> float:
    return round((time.perf_counter() - start) * 1000, 2)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        request_id = request.headers.get(REQUEST_ID_HEADER) or uuid4().hex
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=request.url.path,
        )

        start = time.perf_counter()
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                # Unhandled error: 500 envelope, request id kept
                logger.error(
                    "request_failed", error=repr(exc), duration_ms=_elapsed_ms(start), exc_info=True
                )
                response = JSONResponse(status_code=500, content=error_response(500))
            else:
                logger.info(
                    "request_completed", status=response.status_code, duration_ms=_elapsed_ms(start)
                )
            response.headers[REQUEST_ID_HEADER] = request_id
            return response
        finally:
            structlog.contextvars.clear_contextvars()
