"""
Blocking boundary around payment providers.

PaymentProcessor is the only place that calls PaymentProvider.purchase().
It applies the configured timeout and converts anything that goes wrong at
the provider (exceptions, timeouts, malformed responses) into a Failure, so
an unavailable provider can never break an order transition.
"""

from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import TYPE_CHECKING, Any

from orderflow.config import DEFAULT_CONFIG, OrderFlowConfig
from orderflow.money import Money
from orderflow.observability import (
    ATTR_AMOUNT,
    ATTR_ORDER_NUMBER,
    ATTR_PAYMENT_ID,
    ATTR_PAYMENT_OUTCOME,
    ATTR_PROVIDER,
    SpanKind,
    Tracer,
    create_tracer,
)
from orderflow.payment.outcome import Failure, PaymentOutcome, Redirect, Success
from orderflow.payment.provider import PaymentProvider

if TYPE_CHECKING:
    from orderflow.payment.payment import Payment


logger = logging.getLogger(__name__)


class PaymentProcessor:
    """
    Calls payment providers under a timeout.

    Args:
        config: Supplies provider_timeout and enable_tracing
        tracer: Optional tracer; created from config when omitted

    Example:
        >>> processor = PaymentProcessor(OrderFlowConfig(provider_timeout=5.0))
        >>> outcome = processor.charge(payment, Money(21))
    """

    def __init__(
        self,
        config: OrderFlowConfig | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._tracer = tracer or create_tracer(__name__, self._config.enable_tracing)

    @property
    def config(self) -> OrderFlowConfig:
        return self._config

    def charge(self, payment: Payment, amount: Money) -> PaymentOutcome:
        """
        Charge ``amount`` for ``payment`` through its method's provider.

        Never raises for provider problems; they come back as Failure.
        """
        provider = payment.method.provider
        order_number = payment.order.number if payment.order is not None else None
        options: dict[str, Any] = {
            **payment.method.purchase_options(),
            "payment_id": str(payment.id),
            "order_number": order_number,
        }

        with self._tracer.span(
            "orderflow.payment.charge",
            {
                ATTR_PAYMENT_ID: str(payment.id),
                ATTR_ORDER_NUMBER: order_number or "",
                ATTR_PROVIDER: type(provider).__name__,
                ATTR_AMOUNT: str(amount),
            },
            kind=SpanKind.CLIENT,
        ) as span:
            outcome = self._call_provider(provider, amount, options, payment)
            if span:
                span.set_attribute(ATTR_PAYMENT_OUTCOME, outcome.kind)

        if isinstance(outcome, Failure):
            logger.warning(
                "Payment %s failed: %s",
                payment.id,
                outcome.reason,
                extra={
                    "payment_id": str(payment.id),
                    "order_number": order_number,
                    "reason": outcome.reason,
                    "code": outcome.code,
                },
            )
        else:
            logger.info(
                "Payment %s finished with %s",
                payment.id,
                outcome.kind,
                extra={
                    "payment_id": str(payment.id),
                    "order_number": order_number,
                    "outcome": outcome.kind,
                    "amount": str(amount),
                },
            )
        return outcome

    def _call_provider(
        self,
        provider: PaymentProvider,
        amount: Money,
        options: dict[str, Any],
        payment: Payment,
    ) -> PaymentOutcome:
        timeout = self._config.provider_timeout
        try:
            if timeout is None:
                result = provider.purchase(amount, options)
            else:
                result = self._call_with_timeout(provider, amount, options, timeout)
        except TimeoutError:
            return Failure(
                reason=f"Payment provider did not respond within {timeout} seconds",
                code="timeout",
            )
        except Exception as e:
            logger.exception(
                "Payment provider %s raised during purchase",
                type(provider).__name__,
                extra={"payment_id": str(payment.id), "error_type": type(e).__name__},
            )
            return Failure(
                reason=str(e) or "Payment provider is unavailable",
                code="provider_error",
            )

        if not isinstance(result, Success | Redirect | Failure):
            logger.error(
                "Payment provider %s returned %r instead of an outcome",
                type(provider).__name__,
                result,
                extra={"payment_id": str(payment.id)},
            )
            return Failure(reason="Payment provider returned an invalid response", code="invalid")

        if isinstance(result, Success) and (
            result.amount.currency != amount.currency or result.amount.is_negative()
        ):
            logger.error(
                "Payment provider %s settled %s for a charge of %s",
                type(provider).__name__,
                result.amount,
                amount,
                extra={"payment_id": str(payment.id), "settled": str(result.amount)},
            )
            return Failure(reason="Payment provider returned an invalid response", code="invalid")
        return result

    @staticmethod
    def _call_with_timeout(
        provider: PaymentProvider,
        amount: Money,
        options: dict[str, Any],
        timeout: float,
    ) -> Any:
        # The worker is not joined: a call that times out keeps running in the
        # background until the provider returns.
        executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="orderflow-provider")
        try:
            future = executor.submit(provider.purchase, amount, options)
            return future.result(timeout=timeout)
        finally:
            executor.shutdown(wait=False)


__all__ = [
    "PaymentProcessor",
]
