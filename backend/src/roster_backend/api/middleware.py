"""HTTP middleware for request tracing."""

from __future__ import annotations

import time

from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request  # noqa: TC002
from starlette.responses import Response  # noqa: TC002


class RequestTracingMiddleware(BaseHTTPMiddleware):
    """Log every request on arrival and every response on completion."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        started = time.perf_counter()
        logger.debug("started processing request {} {}", request.method, request.url.path)
        try:
            response = await call_next(request)
        except Exception:
            elapsed_ms = (time.perf_counter() - started) * 1000
            logger.exception(
                "request {} {} failed after {:.2f} ms",
                request.method,
                request.url.path,
                elapsed_ms,
            )
            raise

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "finished processing request {} {} status={} latency={:.2f} ms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response
