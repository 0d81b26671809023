"""
Standard span attributes for orderflow.

Attribute constants used by the state machine and the payment processor so
spans carry consistent keys.

Example:
    >>> from orderflow.observability.attributes import ATTR_ORDER_NUMBER, ATTR_TRANSITION
    >>>
    >>> with tracer.span(
    ...     "orderflow.state_machine.apply",
    ...     {ATTR_ORDER_NUMBER: order.number, ATTR_TRANSITION: "pay"},
    ... ):
    ...     pass
"""

# =============================================================================
# Order Attributes
# =============================================================================

ATTR_ORDER_ID = "orderflow.order.id"
"""Unique identifier for the order (UUID string)."""

ATTR_ORDER_NUMBER = "orderflow.order.number"
"""Human facing order number (string)."""

# =============================================================================
# State Machine Attributes
# =============================================================================

ATTR_TRANSITION = "orderflow.transition.name"
"""Name of the transition being applied (e.g. 'pay')."""

ATTR_FROM_STATE = "orderflow.transition.from_state"
"""State before the transition (string)."""

ATTR_TO_STATE = "orderflow.transition.to_state"
"""State after the transition (string)."""

# =============================================================================
# Payment Attributes
# =============================================================================

ATTR_PAYMENT_ID = "orderflow.payment.id"
"""Unique identifier for the payment (UUID string)."""

ATTR_PAYMENT_OUTCOME = "orderflow.payment.outcome"
"""Outcome kind returned by the provider: success, redirect or failure."""

ATTR_PROVIDER = "orderflow.payment.provider"
"""Class name of the payment provider."""

ATTR_AMOUNT = "orderflow.amount"
"""Monetary amount as a string, e.g. '21.00 EUR'."""


__all__ = [
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
