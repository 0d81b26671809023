"""
orderflow - Orders, carts and payments driven by an explicit state machine.

This library provides:
- Money with Decimal amounts and currency checks
- Order aggregate with items, payments, shipments and owned adjustments
- Order state machine with guard and after-transition hooks
- Cart facade and cart commands over an order repository
- Payment processing with timeout-bounded provider calls
- Domain events journaled for every order mutation
"""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("orderflow")
except PackageNotFoundError:
    # Package not installed (running from source without install)
    __version__ = "0.0.0.dev0"

from orderflow.aggregates.base import AggregateRoot
from orderflow.config import DEFAULT_CONFIG, OrderFlowConfig
from orderflow.events.base import DomainEvent
from orderflow.exceptions import (
    AdjustmentNotFoundError,
    CurrencyMismatchError,
    InvalidTransitionError,
    ItemNotFoundError,
    OrderFlowError,
    OrderNotFoundError,
    PaymentNotFoundError,
    ShipmentNotFoundError,
)
from orderflow.money import DEFAULT_CURRENCY, Money
from orderflow.payment import (
    CreditCard,
    Failure,
    LocalProvider,
    Payment,
    PaymentMethod,
    PaymentOutcome,
    PaymentProcessor,
    PaymentProvider,
    PaymentState,
    Redirect,
    Success,
)
from orderflow.sale import (
    Adjustment,
    AdjustmentLabel,
    Cart,
    CartAddItemCommand,
    CartAddItemHandler,
    CartRemoveItemCommand,
    CartRemoveItemHandler,
    InMemoryOrderRepository,
    Order,
    OrderItem,
    Orderable,
    OrderRepository,
    OrderState,
    OrderStateMachine,
    after,
    guard,
)
from orderflow.shipment import (
    FlatRateCalculator,
    PerItemCalculator,
    Shipment,
    ShipmentState,
    ShippingMethod,
)

__all__ = [
    "__version__",
    # Configuration
    "DEFAULT_CONFIG",
    "OrderFlowConfig",
    # Exceptions
    "AdjustmentNotFoundError",
    "CurrencyMismatchError",
    "InvalidTransitionError",
    "ItemNotFoundError",
    "OrderFlowError",
    "OrderNotFoundError",
    "PaymentNotFoundError",
    "ShipmentNotFoundError",
    # Core
    "AggregateRoot",
    "DEFAULT_CURRENCY",
    "DomainEvent",
    "Money",
    # Sale
    "Adjustment",
    "AdjustmentLabel",
    "Cart",
    "CartAddItemCommand",
    "CartAddItemHandler",
    "CartRemoveItemCommand",
    "CartRemoveItemHandler",
    "InMemoryOrderRepository",
    "Order",
    "OrderItem",
    "Orderable",
    "OrderRepository",
    "OrderState",
    "OrderStateMachine",
    "after",
    "guard",
    # Payment
    "CreditCard",
    "Failure",
    "LocalProvider",
    "Payment",
    "PaymentMethod",
    "PaymentOutcome",
    "PaymentProcessor",
    "PaymentProvider",
    "PaymentState",
    "Redirect",
    "Success",
    # Shipment
    "FlatRateCalculator",
    "PerItemCalculator",
    "Shipment",
    "ShipmentState",
    "ShippingMethod",
]
