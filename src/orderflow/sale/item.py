"""Order items and the orderable protocol."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable
from uuid import UUID, uuid4

from orderflow.money import Money


@runtime_checkable
class Orderable(Protocol):
    """
    Anything that can be put in a cart.

    ``orderable_id`` must be stable for the same purchasable thing; two
    orderables with the same id end up in the same order item.
    """

    @property
    def orderable_id(self) -> str: ...

    @property
    def unit_price(self) -> Money: ...

    @property
    def description(self) -> str: ...


@dataclass(eq=False)
class OrderItem:
    """
    A purchasable line in an order.

    Attributes:
        orderable_id: Deduplication key, compared by value
        unit_price: Price of one unit
        quantity: Number of units, at least 1
        description: Copied from the orderable when the item was created
        orderable: The orderable itself, when available
        id: Unique identifier of the line
    """

    orderable_id: str
    unit_price: Money
    quantity: int = 1
    description: str = ""
    orderable: Any = field(default=None, repr=False)
    id: UUID = field(default_factory=uuid4)

    def __post_init__(self) -> None:
        self._check_quantity(self.quantity)

    @classmethod
    def from_orderable(cls, orderable: Orderable, quantity: int = 1) -> OrderItem:
        return cls(
            orderable_id=str(orderable.orderable_id),
            unit_price=orderable.unit_price,
            quantity=quantity,
            description=orderable.description,
            orderable=orderable,
        )

    @property
    def total_price(self) -> Money:
        return self.unit_price * self.quantity

    def set_quantity(self, quantity: int) -> None:
        self._check_quantity(quantity)
        self.quantity = quantity

    def matches(self, other: OrderItem) -> bool:
        """Check whether both items are for the same orderable."""
        return self.orderable_id == other.orderable_id

    @staticmethod
    def _check_quantity(quantity: int) -> None:
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity < 1:
            raise ValueError(f"quantity must be a positive integer, got {quantity!r}")


__all__ = [
    "OrderItem",
    "Orderable",
]
