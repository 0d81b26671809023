"""
Shipments and their own small state machine.

State Machine:
    PENDING -> SHIPPED (ship)
    SHIPPED -> (terminal)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from orderflow.exceptions import InvalidTransitionError
from orderflow.money import Money
from orderflow.shipment.method import ShippingMethod

if TYPE_CHECKING:
    from orderflow.sale.order import Order


class ShipmentState(Enum):
    """States a shipment can be in."""

    PENDING = "pending"
    SHIPPED = "shipped"


SHIPMENT_TRANSITIONS: dict[str, tuple[frozenset[ShipmentState], ShipmentState]] = {
    "ship": (frozenset({ShipmentState.PENDING}), ShipmentState.SHIPPED),
}


@dataclass(eq=False)
class Shipment:
    """
    A shipment attached to an order.

    The cost is computed by the order when the shipment is attached and is
    carried as a shipping adjustment owned by this shipment.
    """

    method: ShippingMethod
    id: UUID = field(default_factory=uuid4)
    cost: Money | None = None
    state: ShipmentState = ShipmentState.PENDING
    shipped_at: datetime | None = None
    order: Order | None = field(default=None, repr=False)

    @property
    def is_shipped(self) -> bool:
        return self.state is ShipmentState.SHIPPED

    def can(self, transition: str) -> bool:
        allowed_from, _ = SHIPMENT_TRANSITIONS.get(transition, (frozenset(), self.state))
        return self.state in allowed_from

    def apply(self, transition: str) -> None:
        """
        Apply a shipment transition.

        Raises:
            InvalidTransitionError: If the transition is unknown or not allowed
        """
        if not self.can(transition):
            raise InvalidTransitionError(
                transition=transition,
                state=self.state.value,
                allowed=[name for name in SHIPMENT_TRANSITIONS if self.can(name)],
            )
        _, target = SHIPMENT_TRANSITIONS[transition]
        self.state = target

    def ship(self, now: datetime | None = None) -> None:
        self.apply("ship")
        self.shipped_at = now or datetime.now(UTC)


__all__ = [
    "SHIPMENT_TRANSITIONS",
    "Shipment",
    "ShipmentState",
]
