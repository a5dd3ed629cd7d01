"""OpenTelemetry tracing configuration for the Bedrock token generator.

The library only creates spans; exporters are attached when an application
(or the ``bedrock-token`` CLI) calls :func:`init_tracing`. Until then spans go
to whatever tracer provider is globally registered, which is a no-op by
default.
"""

import inspect
import os
from functools import wraps
from typing import Any, Callable, TypeVar, ParamSpec

from opentelemetry import trace
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor, ConsoleSpanExporter
from opentelemetry.sdk.resources import Resource, SERVICE_NAME
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter
from opentelemetry.propagators.aws import AwsXRayPropagator
from opentelemetry.sdk.extension.aws.trace import AwsXRayIdGenerator
from opentelemetry.propagate import set_global_textmap
from opentelemetry.trace import Status, StatusCode

from . import __version__

# Type variables for decorator
P = ParamSpec("P")
T = TypeVar("T")

INSTRUMENTATION_NAME = "bedrock_token"

_tracer: trace.Tracer | None = None
_initialized = False


def init_tracing(
    service_name: str = "bedrock-token-generator",
    otlp_endpoint: str | None = None,
    enable_console_export: bool = False,
) -> trace.Tracer:
    """Install a tracer provider with AWS X-Ray ids and optional exporters.

    Args:
        service_name: Name of the service for tracing
        otlp_endpoint: OTLP collector endpoint (e.g., "http://localhost:4317")
                      If None, uses OTEL_EXPORTER_OTLP_ENDPOINT env var
        enable_console_export: If True, also export spans to console (for debugging)

    Returns:
        Configured tracer instance
    """
    global _tracer, _initialized

    if _initialized and _tracer is not None:
        return _tracer

    resource = Resource.create({
        SERVICE_NAME: service_name,
        "service.version": __version__,
    })

    provider = TracerProvider(
        resource=resource,
        id_generator=AwsXRayIdGenerator(),
    )
    set_global_textmap(AwsXRayPropagator())

    endpoint = otlp_endpoint or os.getenv("OTEL_EXPORTER_OTLP_ENDPOINT")
    if endpoint:
        provider.add_span_processor(
            BatchSpanProcessor(OTLPSpanExporter(endpoint=endpoint, insecure=True))
        )

    if enable_console_export:
        provider.add_span_processor(BatchSpanProcessor(ConsoleSpanExporter()))

    trace.set_tracer_provider(provider)

    _tracer = trace.get_tracer(INSTRUMENTATION_NAME, __version__)
    _initialized = True
    return _tracer


def get_tracer() -> trace.Tracer:
    """Get the configured tracer, or one from the global provider if
    :func:`init_tracing` has not been called."""
    if _tracer is None:
        return trace.get_tracer(INSTRUMENTATION_NAME, __version__)
    return _tracer


def traced(
    name: str | None = None,
    attributes: dict[str, Any] | None = None,
) -> Callable[[Callable[P, T]], Callable[P, T]]:
    """Decorator to add tracing to a function.

    Args:
        name: Span name (defaults to function name)
        attributes: Additional span attributes

    Returns:
        Decorated function with tracing
    """
    def decorator(func: Callable[P, T]) -> Callable[P, T]:
        span_name = name or func.__name__

        @wraps(func)
        def sync_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with get_tracer().start_as_current_span(span_name) as span:
                if attributes:
                    span.set_attributes(attributes)
                try:
                    result = func(*args, **kwargs)
                    span.set_status(Status(StatusCode.OK))
                    return result
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise

        @wraps(func)
        async def async_wrapper(*args: P.args, **kwargs: P.kwargs) -> T:
            with get_tracer().start_as_current_span(span_name) as span:
                if attributes:
                    span.set_attributes(attributes)
                try:
                    result = await func(*args, **kwargs)  # type: ignore
                    span.set_status(Status(StatusCode.OK))
                    return result
                except Exception as e:
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    span.record_exception(e)
                    raise

        if inspect.iscoroutinefunction(func):
            return async_wrapper  # type: ignore
        return sync_wrapper

    return decorator
