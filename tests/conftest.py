"""
Shared pytest fixtures for the orderflow library tests.

This module provides:
- Fixture data (hydrator, products, payment and shipping methods)
- Cart fixtures (cart, cart_with_one_item)
- Processing fixtures (config, processor, mock_tracer)
- Repository fixtures (repository)
"""

from __future__ import annotations

from typing import Any

import pytest

from orderflow.config import OrderFlowConfig
from orderflow.observability import MockTracer
from orderflow.payment.method import PaymentMethod
from orderflow.payment.processor import PaymentProcessor
from orderflow.sale.cart import Cart
from orderflow.sale.repository import InMemoryOrderRepository
from orderflow.shipment.method import ShippingMethod
from tests.fixtures import Hydrator, Product, valid_credit_card_options

# ============================================================================
# Configuration Fixtures
# ============================================================================


@pytest.fixture
def config() -> OrderFlowConfig:
    """Configuration with tracing off and a short provider timeout."""
    return OrderFlowConfig(provider_timeout=5.0, enable_tracing=False)


@pytest.fixture
def inline_config() -> OrderFlowConfig:
    """Configuration that calls providers inline, without a timeout."""
    return OrderFlowConfig(provider_timeout=None, enable_tracing=False)


@pytest.fixture
def mock_tracer() -> MockTracer:
    return MockTracer()


@pytest.fixture
def processor(inline_config: OrderFlowConfig) -> PaymentProcessor:
    return PaymentProcessor(inline_config)


# ============================================================================
# Fixture Data
# ============================================================================


@pytest.fixture
def hydrator() -> Hydrator:
    """A fresh hydrator per test, so fixture objects are never shared."""
    return Hydrator()


@pytest.fixture
def product_1(hydrator: Hydrator) -> Product:
    return hydrator.product("product_1")


@pytest.fixture
def product_2(hydrator: Hydrator) -> Product:
    return hydrator.product("product_2")


@pytest.fixture
def cash_on_delivery(hydrator: Hydrator) -> PaymentMethod:
    return hydrator.payment_method("cash_on_delivery_payment_method")


@pytest.fixture
def creditcard(hydrator: Hydrator) -> PaymentMethod:
    return hydrator.payment_method("creditcard_payment_method")


@pytest.fixture
def redirect_method(hydrator: Hydrator) -> PaymentMethod:
    return hydrator.payment_method("redirect_payment_method")


@pytest.fixture
def failing_method(hydrator: Hydrator) -> PaymentMethod:
    return hydrator.payment_method("failing_payment_method")


@pytest.fixture
def courier(hydrator: Hydrator) -> ShippingMethod:
    return hydrator.shipping_method("courier_shipping_method")


@pytest.fixture
def credit_card_options() -> dict[str, Any]:
    return valid_credit_card_options()


# ============================================================================
# Cart Fixtures
# ============================================================================


@pytest.fixture
def cart(config: OrderFlowConfig) -> Cart:
    return Cart(config=config)


@pytest.fixture
def cart_with_one_item(cart: Cart, product_1: Product) -> Cart:
    """A cart holding one unit of product_1 (10 EUR)."""
    cart.add_item(product_1.default_variant)
    return cart


# ============================================================================
# Repository Fixtures
# ============================================================================


@pytest.fixture
def repository() -> InMemoryOrderRepository:
    return InMemoryOrderRepository()
