"""Library exceptions for the orderflow package."""

from collections.abc import Iterable
from uuid import UUID


class OrderFlowError(Exception):
    """Base exception for orderflow library."""

    pass


class InvalidTransitionError(OrderFlowError):
    """
    Raised when a transition cannot be applied from the current state.

    The check happens before any side effect runs, so the state machine and
    the order it drives are left untouched.

    Attributes:
        transition: Name of the requested transition
        state: State the machine was in when the request was made
        allowed: Transitions that are available from that state
    """

    def __init__(
        self,
        transition: str,
        state: str,
        allowed: Iterable[str] = (),
        reason: str | None = None,
    ) -> None:
        self.transition = transition
        self.state = state
        self.allowed = sorted(allowed)
        self.reason = reason
        message = f"Cannot apply transition '{transition}' from state '{state}'"
        if reason:
            message += f": {reason}"
        message += f". Available transitions: {self.allowed or 'none'}"
        super().__init__(message)


class OrderNotFoundError(OrderFlowError):
    """Raised when an order cannot be found by its number."""

    def __init__(self, number: str) -> None:
        self.number = number
        super().__init__(f"Could not find order with number '{number}'")


class ItemNotFoundError(OrderFlowError):
    """Raised when an order item does not exist in the order."""

    def __init__(self, identifier: UUID | str, order_number: str | None = None) -> None:
        self.identifier = identifier
        self.order_number = order_number
        order_info = f" in order '{order_number}'" if order_number else ""
        super().__init__(f"Order item '{identifier}' does not exist{order_info}")


class PaymentNotFoundError(OrderFlowError):
    """Raised when removing a payment that is not attached to the order."""

    def __init__(self, payment_id: UUID) -> None:
        self.payment_id = payment_id
        super().__init__(f"Payment not found: {payment_id}")


class ShipmentNotFoundError(OrderFlowError):
    """Raised when removing a shipment that is not attached to the order."""

    def __init__(self, shipment_id: UUID) -> None:
        self.shipment_id = shipment_id
        super().__init__(f"Shipment not found: {shipment_id}")


class AdjustmentNotFoundError(OrderFlowError):
    """Raised when removing an adjustment that is not on the order."""

    def __init__(self, adjustment_id: UUID) -> None:
        self.adjustment_id = adjustment_id
        super().__init__(f"Adjustment not found: {adjustment_id}")


class CurrencyMismatchError(OrderFlowError, ValueError):
    """Raised when money in different currencies is combined."""

    def __init__(self, expected: str, actual: str) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(f"Currency mismatch: expected {expected}, got {actual}")


__all__ = [
    "AdjustmentNotFoundError",
    "CurrencyMismatchError",
    "InvalidTransitionError",
    "ItemNotFoundError",
    "OrderFlowError",
    "OrderNotFoundError",
    "PaymentNotFoundError",
    "ShipmentNotFoundError",
]
