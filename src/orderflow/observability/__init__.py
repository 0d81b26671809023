"""
Tracing for orderflow.

OpenTelemetry is optional; without it every tracer is a NullTracer.

Example:
    >>> from orderflow.observability import MockTracer
    >>> tracer = MockTracer()
    >>> Cart(tracer=tracer).process_to("checkout")
    >>> tracer.span_names
    ['orderflow.state_machine.apply']
"""

from orderflow.observability.attributes import (
    ATTR_AMOUNT,
    ATTR_FROM_STATE,
    ATTR_ORDER_ID,
    ATTR_ORDER_NUMBER,
    ATTR_PAYMENT_ID,
    ATTR_PAYMENT_OUTCOME,
    ATTR_PROVIDER,
    ATTR_TO_STATE,
    ATTR_TRANSITION,
)
from orderflow.observability.tracer import (
    MockTracer,
    NullTracer,
    OpenTelemetryTracer,
    RecordedSpan,
    SpanKind,
    Tracer,
    create_tracer,
)
from orderflow.observability.tracing import OTEL_AVAILABLE, should_trace

__all__ = [
    "OTEL_AVAILABLE",
    "should_trace",
    # Tracers
    "MockTracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "RecordedSpan",
    "SpanKind",
    "Tracer",
    "create_tracer",
    # Attributes
    "ATTR_AMOUNT",
    "ATTR_FROM_STATE",
    "ATTR_ORDER_ID",
    "ATTR_ORDER_NUMBER",
    "ATTR_PAYMENT_ID",
    "ATTR_PAYMENT_OUTCOME",
    "ATTR_PROVIDER",
    "ATTR_TO_STATE",
    "ATTR_TRANSITION",
]
