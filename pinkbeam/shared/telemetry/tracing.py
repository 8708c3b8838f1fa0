"""Span helpers: the ``traced`` decorator and current-span attributes.

When no tracer provider is registered the OpenTelemetry API hands out
non-recording spans, so these helpers cost next to nothing in tests.
"""

import inspect
from collections.abc import Callable
from functools import wraps
from typing import Any

from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode

# Only these keyword arguments are copied onto spans (no free text, no addresses).
_SAFE_SPAN_ATTR_KEYS = frozenset(
    {"limit", "limit_per_type", "offset", "stage", "new_status", "type", "entity_type"}
)


def traced(operation_name: str | None = None) -> Callable:
    """Decorator: run the (sync or async) function inside a span.

    The span records allowlisted keyword arguments and is marked ERROR with
    the exception recorded when the function raises; the exception is re-raised.
    """

    def decorator(func: Callable) -> Callable:
        tracer = trace.get_tracer(func.__module__)
        span_name = operation_name or f"{func.__module__}.{func.__qualname__}"

        def _start():
            return tracer.start_as_current_span(
                span_name, record_exception=True, set_status_on_exception=True
            )

        def _annotate(span: trace.Span, kwargs: dict[str, Any]) -> None:
            for key, value in kwargs.items():
                if key in _SAFE_SPAN_ATTR_KEYS:
                    span.set_attribute(f"arg.{key}", str(value))

        @wraps(func)
        async def async_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _start() as span:
                _annotate(span, kwargs)
                result = await func(*args, **kwargs)
                span.set_status(Status(StatusCode.OK))
                return result

        @wraps(func)
        def sync_wrapper(*args: Any, **kwargs: Any) -> Any:
            with _start() as span:
                _annotate(span, kwargs)
                result = func(*args, **kwargs)
                span.set_status(Status(StatusCode.OK))
                return result

        if inspect.iscoroutinefunction(func):
            return async_wrapper
        return sync_wrapper

    return decorator


def add_span_attributes(**attributes: str | int | float | bool) -> None:
    """Add attributes to the current span (no-op when not recording)."""
    span = trace.get_current_span()
    if span and span.is_recording():
        for key, value in attributes.items():
            span.set_attribute(key, value)
