"""Payment methods offered to buyers."""

from dataclasses import dataclass, field
from typing import Any

from orderflow.money import Money
from orderflow.payment.provider import PaymentProvider
from orderflow.payment.source import CreditCard


@dataclass
class PaymentMethod:
    """
    A way of paying, bound to the provider that settles it.

    Attributes:
        name: Stable identifier of the method (e.g. "cash_on_delivery")
        provider: Provider that performs the purchase
        cost: Surcharge added to the order when a payment uses this method
        description: Label shown to buyers
        source: Payment source forwarded to the provider, if the method needs one

    Example:
        >>> cod = PaymentMethod(
        ...     name="cash_on_delivery",
        ...     provider=LocalProvider(),
        ...     cost=Money(6),
        ... )
    """

    name: str
    provider: PaymentProvider = field(repr=False)
    cost: Money | None = None
    description: str = ""
    source: CreditCard | None = field(default=None, repr=False)

    def set_source_options(self, options: dict[str, Any]) -> CreditCard:
        """Build the card source from raw form data."""
        self.source = CreditCard.model_validate(options)
        return self.source

    @property
    def surcharge(self) -> Money | None:
        """The cost to add to an order, or None when the method is free."""
        if self.cost is None or self.cost.is_zero():
            return None
        return self.cost

    def purchase_options(self) -> dict[str, Any]:
        """Options passed to the provider along with the amount."""
        options: dict[str, Any] = {"method": self.name}
        if self.source is not None:
            options["source"] = self.source
        return options


__all__ = [
    "PaymentMethod",
]
