"""
Detects whether OpenTelemetry can be used.

OpenTelemetry ships in the ``telemetry`` extra. Nothing else in orderflow
imports it at module level.
"""

try:
    import opentelemetry.trace  # noqa: F401

    OTEL_AVAILABLE = True
except ImportError:
    OTEL_AVAILABLE = False


def should_trace(enable_tracing: bool) -> bool:
    """True when the caller asked for tracing and OpenTelemetry is installed."""
    return enable_tracing and OTEL_AVAILABLE


__all__ = [
    "OTEL_AVAILABLE",
    "should_trace",
]
