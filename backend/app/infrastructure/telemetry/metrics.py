"""
Prometheus metrics for the catalog service.

Module-level collectors registered on the default registry; exposed by
the ``/metrics`` endpoint.
"""

import functools
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from prometheus_client import CONTENT_TYPE_LATEST, Counter, Histogram, generate_latest

P = ParamSpec("P")
R = TypeVar("R")

# HTTP metrics
http_requests_total = Counter(
    "http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

http_request_duration_seconds = Histogram(
    "http_request_duration_seconds",
    "HTTP request duration in seconds",
    ["method", "endpoint"],
    buckets=[0.005, 0.01, 0.05, 0.1, 0.5, 1.0, 2.0, 5.0],
)

# Database metrics
db_calls_total = Counter(
    "db_calls_total",
    "Total database calls",
    ["operation"],
)

db_errors_total = Counter(
    "db_errors_total",
    "Total failed database calls",
    ["operation"],
)

# Catalog metrics
brands_created_total = Counter("brands_created_total", "Total brands created")
brands_updated_total = Counter("brands_updated_total", "Total brands updated")
brands_deleted_total = Counter("brands_deleted_total", "Total brands deleted")
products_created_total = Counter("products_created_total", "Total products created")
products_updated_total = Counter("products_updated_total", "Total products updated")
products_deleted_total = Counter("products_deleted_total", "Total products deleted")


def count_success(counter: Counter) -> Callable[
    [Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]
]:
    """Increment ``counter`` each time the wrapped coroutine returns normally."""

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            result = await func(*args, **kwargs)
            counter.inc()
            return result

        return wrapper

    return decorator


def render_latest() -> tuple[bytes, str]:
    """Return the current exposition payload and its content type."""
    return generate_latest(), CONTENT_TYPE_LATEST
