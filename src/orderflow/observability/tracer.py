"""
Tracers handed to the state machine and the payment processor.

Components take a Tracer instead of importing OpenTelemetry, so tracing can
be switched off through OrderFlowConfig.enable_tracing and asserted on in
tests with MockTracer.

Example:
    >>> tracer = create_tracer(__name__, enable_tracing=True)
    >>> with tracer.span("orderflow.payment.charge", {ATTR_PAYMENT_ID: "..."}, kind=SpanKind.CLIENT):
    ...     provider.purchase(amount, options)
"""

from __future__ import annotations

import contextlib
from collections.abc import Iterator
from contextlib import AbstractContextManager
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

from orderflow.observability.tracing import OTEL_AVAILABLE

if TYPE_CHECKING:
    from opentelemetry.trace import Span

Attributes = dict[str, Any]


class SpanKind(Enum):
    """Kinds of span orderflow emits."""

    INTERNAL = "internal"
    """State machine transitions."""

    CLIENT = "client"
    """Calls out to a payment provider."""


@runtime_checkable
class Tracer(Protocol):
    """
    Protocol for span factories.

    ``span()`` yields the live span, or None when nothing is recorded.
    Callers only touch the span after checking it.
    """

    @property
    def enabled(self) -> bool: ...

    def span(
        self,
        name: str,
        attributes: Attributes | None = None,
        *,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> AbstractContextManager[Span | None]: ...


class NullTracer:
    """Tracer used when tracing is off or OpenTelemetry is not installed."""

    @property
    def enabled(self) -> bool:
        return False

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: Attributes | None = None,
        *,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> Iterator[None]:
        yield None


class OpenTelemetryTracer:
    """
    Emits spans through the globally configured OpenTelemetry provider.

    Raises:
        ImportError: If OpenTelemetry is not installed
    """

    def __init__(self, tracer_name: str) -> None:
        from opentelemetry import trace

        self._tracer = trace.get_tracer(tracer_name)

    @property
    def enabled(self) -> bool:
        return True

    def span(
        self,
        name: str,
        attributes: Attributes | None = None,
        *,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> AbstractContextManager[Span | None]:
        from opentelemetry.trace import SpanKind as OtelSpanKind

        otel_kind = OtelSpanKind.CLIENT if kind is SpanKind.CLIENT else OtelSpanKind.INTERNAL
        return self._tracer.start_as_current_span(
            name,
            kind=otel_kind,
            attributes=attributes or {},
        )


@dataclass(frozen=True)
class RecordedSpan:
    name: str
    attributes: Attributes
    kind: SpanKind


class MockTracer:
    """
    Records the spans it is asked to open.

    Example:
        >>> tracer = MockTracer()
        >>> cart = Cart(tracer=tracer)
        >>> cart.process_to("checkout")
        >>> tracer.span_names
        ['orderflow.state_machine.apply']
    """

    def __init__(self) -> None:
        self.spans: list[RecordedSpan] = []

    @property
    def enabled(self) -> bool:
        return True

    @property
    def span_names(self) -> list[str]:
        return [span.name for span in self.spans]

    def find(self, name: str) -> list[RecordedSpan]:
        """All recorded spans called ``name``, oldest first."""
        return [span for span in self.spans if span.name == name]

    def clear(self) -> None:
        self.spans.clear()

    @contextlib.contextmanager
    def span(
        self,
        name: str,
        attributes: Attributes | None = None,
        *,
        kind: SpanKind = SpanKind.INTERNAL,
    ) -> Iterator[None]:
        self.spans.append(RecordedSpan(name, dict(attributes or {}), kind))
        yield None


def create_tracer(name: str, enable_tracing: bool = True) -> Tracer:
    """
    Build the tracer a component should use.

    Returns an OpenTelemetryTracer when tracing is enabled and OpenTelemetry
    is importable, a NullTracer otherwise.
    """
    if enable_tracing and OTEL_AVAILABLE:
        return OpenTelemetryTracer(name)
    return NullTracer()


__all__ = [
    "MockTracer",
    "NullTracer",
    "OpenTelemetryTracer",
    "RecordedSpan",
    "SpanKind",
    "Tracer",
    "create_tracer",
]
