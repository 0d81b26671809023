"""
Builds fixture objects from FIXTURE_DATA.

A Hydrator keeps one instance per fixture key, so asking twice for
"product_1" within a test returns the same Product. Create a new Hydrator
per test to start from fresh objects.
"""

from collections.abc import Callable
from typing import Any, TypeVar

from orderflow.money import Money
from orderflow.payment.method import PaymentMethod
from orderflow.payment.provider import LocalProvider, PaymentProvider
from orderflow.sale.item import OrderItem
from orderflow.shipment.method import FlatRateCalculator, PerItemCalculator, ShippingMethod
from tests.fixtures.catalog import Product, Variant
from tests.fixtures.data import FIXTURE_DATA
from tests.fixtures.providers import FailingProvider, FakeGateway, RedirectProvider

T = TypeVar("T")


def default_providers() -> dict[str, PaymentProvider]:
    return {
        "local": LocalProvider(),
        "fake_gateway": FakeGateway(),
        "redirect": RedirectProvider(),
        "failing": FailingProvider(),
    }


class Hydrator:
    def __init__(
        self,
        data: dict[str, dict[str, Any]] | None = None,
        providers: dict[str, PaymentProvider] | None = None,
        currency: str = "EUR",
    ) -> None:
        self._data = data if data is not None else FIXTURE_DATA
        self.providers = providers if providers is not None else default_providers()
        self._currency = currency
        self._storage: dict[str, Any] = {}

    def product(self, key: str) -> Product:
        return self._hydrate(key, self._build_product)

    def order_item(self, key: str) -> OrderItem:
        return self._hydrate(key, self._build_order_item)

    def payment_method(self, key: str) -> PaymentMethod:
        return self._hydrate(key, self._build_payment_method)

    def shipping_method(self, key: str) -> ShippingMethod:
        return self._hydrate(key, self._build_shipping_method)

    def _hydrate(self, key: str, build: Callable[[dict[str, Any]], T]) -> T:
        if key not in self._storage:
            self._storage[key] = build(self._data[key])
        return self._storage[key]

    def _money(self, value: str | None) -> Money | None:
        return None if value is None else Money(value, self._currency)

    def _build_product(self, data: dict[str, Any]) -> Product:
        product = Product(sku=data["sku"], name=data["name"])
        for variant in data.get("variants", []):
            product.add_variant(
                Variant(
                    sku=variant["sku"],
                    price=Money(variant["price"], self._currency),
                    description=variant.get("description", ""),
                )
            )
        return product

    def _build_order_item(self, data: dict[str, Any]) -> OrderItem:
        return OrderItem(
            orderable_id=data["orderable_id"],
            unit_price=Money(data["unit_price"], self._currency),
            quantity=data.get("quantity", 1),
            description=data.get("description", ""),
        )

    def _build_payment_method(self, data: dict[str, Any]) -> PaymentMethod:
        return PaymentMethod(
            name=data["name"],
            provider=self.providers[data["provider"]],
            cost=self._money(data.get("cost")),
            description=data.get("description", ""),
        )

    def _build_shipping_method(self, data: dict[str, Any]) -> ShippingMethod:
        if "flat_rate" in data:
            calculator: Any = FlatRateCalculator(Money(data["flat_rate"], self._currency))
        else:
            calculator = PerItemCalculator(
                amount_per_item=Money(data["per_item"], self._currency),
                minimum=self._money(data.get("minimum")),
            )
        return ShippingMethod(
            name=data["name"],
            calculator=calculator,
            description=data.get("description", ""),
        )
