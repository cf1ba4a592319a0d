"""
OpenTelemetry tracing setup.

``setup_tracing`` installs a TracerProvider for the process (exporting over
OTLP gRPC when an endpoint is configured). ``traced`` wraps coroutine
methods in a span; the tracer is resolved through the global proxy, so
decorated code works whether or not a provider has been installed.
"""

import functools
import logging
from collections.abc import Awaitable, Callable
from typing import ParamSpec, TypeVar

from opentelemetry import trace
from opentelemetry.sdk.resources import Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from app.config import Settings

P = ParamSpec("P")
R = TypeVar("R")

logger = logging.getLogger(__name__)

_tracer = trace.get_tracer("app")


def setup_tracing(settings: Settings) -> TracerProvider | None:
    """Install the process-wide TracerProvider.

    Returns the provider so the caller can shut it down, or None when
    tracing is disabled.
    """
    if not settings.tracing_enabled:
        logger.info("Tracing disabled by configuration")
        return None

    resource = Resource.create(
        {
            "service.name": settings.otel_service_name,
            "service.version": settings.app_version,
            "deployment.environment": settings.app_env,
        }
    )
    provider = TracerProvider(resource=resource)

    endpoint = settings.otel_exporter_otlp_endpoint.strip()
    if endpoint:
        from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )
        logger.info("Exporting traces to %s", endpoint)
    else:
        logger.info("No OTLP endpoint configured; spans are recorded but not exported")

    trace.set_tracer_provider(provider)
    return provider


def traced(span_name: str) -> Callable[[Callable[P, Awaitable[R]]], Callable[P, Awaitable[R]]]:
    """Run the wrapped coroutine inside a span named ``span_name``.

    Exceptions escaping the coroutine are recorded on the span and mark it
    as errored before being re-raised.
    """

    def decorator(func: Callable[P, Awaitable[R]]) -> Callable[P, Awaitable[R]]:
        @functools.wraps(func)
        async def wrapper(*args: P.args, **kwargs: P.kwargs) -> R:
            with _tracer.start_as_current_span(span_name):
                return await func(*args, **kwargs)

        return wrapper

    return decorator
