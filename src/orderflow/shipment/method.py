"""Shipping methods and the calculators that price them."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from orderflow.money import Money

if TYPE_CHECKING:
    from orderflow.sale.order import Order


@runtime_checkable
class ShippingCostCalculator(Protocol):
    """Protocol for anything that can price shipping an order."""

    def calculate_cost(self, order: Order) -> Money:
        """Return the shipping cost for ``order``."""
        ...


@dataclass(frozen=True)
class FlatRateCalculator:
    """Charges the same amount regardless of the order contents."""

    amount: Money

    def calculate_cost(self, order: Order) -> Money:
        return self.amount


@dataclass(frozen=True)
class PerItemCalculator:
    """
    Charges per unit shipped.

    Attributes:
        amount_per_item: Cost of every unit in the order
        minimum: Lower bound for the total, if any
    """

    amount_per_item: Money
    minimum: Money | None = None

    def calculate_cost(self, order: Order) -> Money:
        cost = self.amount_per_item * order.total_quantity
        if self.minimum is not None and cost < self.minimum:
            return self.minimum
        return cost


@dataclass
class ShippingMethod:
    """
    A way of shipping, priced by its calculator.

    Example:
        >>> courier = ShippingMethod(
        ...     name="courier",
        ...     calculator=FlatRateCalculator(Money(5)),
        ... )
        >>> courier.calculate_cost(order)
        Money(amount=Decimal('5'), currency='EUR')
    """

    name: str
    calculator: ShippingCostCalculator = field(repr=False)
    description: str = ""

    def calculate_cost(self, order: Order) -> Money:
        return self.calculator.calculate_cost(order)


__all__ = [
    "FlatRateCalculator",
    "PerItemCalculator",
    "ShippingCostCalculator",
    "ShippingMethod",
]
