"""
Adjustments applied to an order total.

An adjustment is a named amount added to the items total: shipping costs,
payment surcharges, discounts (negative amounts). Adjustments produced by a
payment or shipment carry that entity's id in ``owner_id`` so they can be
removed together with it and nothing else.
"""

from enum import StrEnum
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field

from orderflow.money import Money


class AdjustmentLabel(StrEnum):
    """Labels used by the adjustments orderflow creates itself."""

    SHIPPING = "shipping"
    PAYMENT_SURCHARGE = "payment-surcharge"
    DISCOUNT = "discount"


class Adjustment(BaseModel):
    """
    An immutable amount delta on an order.

    Attributes:
        id: Unique identifier
        label: What the adjustment is for (see AdjustmentLabel)
        amount: Delta applied to the total; may be zero or negative
        owner_id: Payment or shipment that produced it, None for manual ones
        description: Label shown to buyers
    """

    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    label: str
    amount: Money
    owner_id: UUID | None = None
    description: str = ""

    def is_owned_by(self, owner_id: UUID) -> bool:
        return self.owner_id is not None and self.owner_id == owner_id


__all__ = [
    "Adjustment",
    "AdjustmentLabel",
]
