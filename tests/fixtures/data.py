"""
Raw fixture data, keyed by fixture name.

Values are plain dicts the Hydrator turns into catalog, payment and shipping
objects. Provider names refer to entries in ``tests.fixtures.providers``.
"""

from datetime import date
from typing import Any

FIXTURE_DATA: dict[str, dict[str, Any]] = {
    # Catalog
    "product_1": {
        "sku": "product-1",
        "name": "Product 1",
        "variants": [
            {"sku": "product-1-default", "price": "10", "description": "Product 1"},
        ],
    },
    "product_2": {
        "sku": "product-2",
        "name": "Product 2",
        "variants": [
            {"sku": "product-2-default", "price": "11", "description": "Product 2"},
            {"sku": "product-2-large", "price": "13", "description": "Product 2 (large)"},
        ],
    },
    "order_item_1": {
        "orderable_id": "product-1-default",
        "unit_price": "10",
        "quantity": 1,
        "description": "Product 1",
    },
    # Payment methods
    "cash_on_delivery_payment_method": {
        "name": "cash_on_delivery",
        "provider": "local",
        "cost": "6",
        "description": "Cash on delivery",
    },
    "creditcard_payment_method": {
        "name": "creditcard",
        "provider": "fake_gateway",
        "description": "Credit card",
    },
    "redirect_payment_method": {
        "name": "redirect",
        "provider": "redirect",
        "description": "Pay at the bank",
    },
    "failing_payment_method": {
        "name": "failing",
        "provider": "failing",
    },
    # Shipping methods
    "courier_shipping_method": {
        "name": "courier",
        "flat_rate": "5",
        "description": "Courier",
    },
    "per_item_shipping_method": {
        "name": "per_item",
        "per_item": "2",
        "minimum": "3",
    },
}


def valid_credit_card_options() -> dict[str, Any]:
    return {
        "first_name": "John",
        "last_name": "Doe",
        "month": "2",
        "year": date.today().year + 5,
        "number": "1",
    }


def declined_credit_card_options() -> dict[str, Any]:
    return {**valid_credit_card_options(), "number": "2"}
