"""
Domain events recorded by orders.

Example:
    >>> from orderflow.events import OrderStateChanged
    >>> [e for e in order.uncommitted_events if isinstance(e, OrderStateChanged)]
"""

from orderflow.events.base import DomainEvent
from orderflow.events.order import (
    AdjustmentAdded,
    AdjustmentRemoved,
    ItemAdded,
    ItemQuantityChanged,
    ItemRemoved,
    OrderEvent,
    OrderStateChanged,
    PaymentAttached,
    PaymentDetached,
    PaymentProcessed,
    ShipmentAttached,
    ShipmentDetached,
    ShipmentShipped,
)

__all__ = [
    "AdjustmentAdded",
    "AdjustmentRemoved",
    "DomainEvent",
    "ItemAdded",
    "ItemQuantityChanged",
    "ItemRemoved",
    "OrderEvent",
    "OrderStateChanged",
    "PaymentAttached",
    "PaymentDetached",
    "PaymentProcessed",
    "ShipmentAttached",
    "ShipmentDetached",
    "ShipmentShipped",
]
