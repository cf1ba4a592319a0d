"""
Request telemetry middleware.

For every request this middleware:
1. Continues the caller's W3C trace context (or starts a new trace)
2. Opens a server span around the downstream app
3. Logs the outcome with method, route, status and duration
4. Records Prometheus request count and latency
5. Injects the trace context into the response headers
"""

import logging
import time

from opentelemetry import propagate, trace
from opentelemetry.trace import SpanKind
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.infrastructure.telemetry.metrics import (
    http_request_duration_seconds,
    http_requests_total,
)

logger = logging.getLogger(__name__)

_tracer = trace.get_tracer(__name__)


class TelemetryMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        parent = propagate.extract(dict(request.headers))
        start = time.perf_counter()

        with _tracer.start_as_current_span(
            "http.request", context=parent, kind=SpanKind.SERVER
        ) as span:
            span.set_attribute("http.method", request.method)
            span.set_attribute("http.target", request.url.path)
            span.set_attribute("http.user_agent", request.headers.get("user-agent", ""))

            try:
                response = await call_next(request)
            except Exception as exc:
                duration = time.perf_counter() - start
                logger.error(
                    "Request failed",
                    extra={
                        "method": request.method,
                        "path": request.url.path,
                        "error": str(exc),
                        "error_type": type(exc).__name__,
                        "duration_ms": round(duration * 1000, 2),
                    },
                    exc_info=True,
                )
                raise

            duration = time.perf_counter() - start
            endpoint = _route_template(request)
            span.set_attribute("http.route", endpoint)
            span.set_attribute("http.status_code", response.status_code)

            http_requests_total.labels(
                method=request.method,
                endpoint=endpoint,
                status_code=str(response.status_code),
            ).inc()
            http_request_duration_seconds.labels(
                method=request.method, endpoint=endpoint
            ).observe(duration)

            _log_response(request, response, endpoint, duration)
            propagate.inject(response.headers)

        return response


def _route_template(request: Request) -> str:
    """Prefer the matched route template so metric labels stay low-cardinality."""
    route = request.scope.get("route")
    return getattr(route, "path", request.url.path)


def _log_response(request: Request, response: Response, endpoint: str, duration: float) -> None:
    log_extra = {
        "method": request.method,
        "path": request.url.path,
        "route": endpoint,
        "status_code": response.status_code,
        "duration_ms": round(duration * 1000, 2),
    }
    if response.status_code >= 500:
        logger.error("Request completed with server error", extra=log_extra)
    elif response.status_code >= 400:
        logger.warning("Request completed with client error", extra=log_extra)
    else:
        logger.info("Request completed successfully", extra=log_extra)
