"""Domain events recorded by the Order aggregate."""

from typing import Literal
from uuid import UUID

from orderflow.events.base import DomainEvent
from orderflow.money import Money


class OrderEvent(DomainEvent):
    """Base class for events recorded by an Order."""

    aggregate_type: str = "Order"


# =============================================================================
# Items
# =============================================================================


class ItemAdded(OrderEvent):
    item_id: UUID
    orderable_id: str
    quantity: int
    unit_price: Money


class ItemQuantityChanged(OrderEvent):
    item_id: UUID
    orderable_id: str
    old_quantity: int
    new_quantity: int


class ItemRemoved(OrderEvent):
    item_id: UUID
    orderable_id: str


# =============================================================================
# Adjustments
# =============================================================================


class AdjustmentAdded(OrderEvent):
    adjustment_id: UUID
    label: str
    amount: Money
    owner_id: UUID | None = None


class AdjustmentRemoved(OrderEvent):
    adjustment_id: UUID
    label: str
    owner_id: UUID | None = None


# =============================================================================
# Payments
# =============================================================================


class PaymentAttached(OrderEvent):
    payment_id: UUID
    method: str
    amount: Money | None = None


class PaymentDetached(OrderEvent):
    payment_id: UUID


class PaymentProcessed(OrderEvent):
    """A provider attempt finished for one payment."""

    payment_id: UUID
    outcome: Literal["success", "redirect", "failure"]
    amount: Money
    reason: str | None = None


# =============================================================================
# Shipments
# =============================================================================


class ShipmentAttached(OrderEvent):
    shipment_id: UUID
    method: str
    cost: Money


class ShipmentDetached(OrderEvent):
    shipment_id: UUID


class ShipmentShipped(OrderEvent):
    shipment_id: UUID


# =============================================================================
# State
# =============================================================================


class OrderStateChanged(OrderEvent):
    """The order state machine applied a transition."""

    transition: str
    from_state: str
    to_state: str


__all__ = [
    "AdjustmentAdded",
    "AdjustmentRemoved",
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
