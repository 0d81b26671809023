"""
Catalog types used as orderables in tests.

A Product groups Variants; each Variant satisfies the Orderable protocol.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from orderflow.money import Money


@dataclass(eq=False)
class Variant:
    """A sellable variant of a product."""

    sku: str
    price: Money
    description: str = ""
    product: Product | None = field(default=None, repr=False)

    @property
    def orderable_id(self) -> str:
        return self.sku

    @property
    def unit_price(self) -> Money:
        return self.price


@dataclass(eq=False)
class Product:
    """A product with one or more variants; the first is the default."""

    sku: str
    name: str
    variants: list[Variant] = field(default_factory=list)

    def add_variant(self, variant: Variant) -> None:
        variant.product = self
        self.variants.append(variant)

    @property
    def default_variant(self) -> Variant:
        return self.variants[0]
