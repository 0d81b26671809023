"""
The cart facade.

A Cart wraps exactly one Order and the OrderStateMachine bound to it. It is
what callers talk to; the Order is what gets persisted.
"""

from __future__ import annotations

from typing import Any, cast

from orderflow.config import DEFAULT_CONFIG, OrderFlowConfig
from orderflow.money import Money
from orderflow.observability import Tracer, create_tracer
from orderflow.payment.method import PaymentMethod
from orderflow.payment.payment import Payment
from orderflow.payment.processor import PaymentProcessor
from orderflow.sale.item import Orderable, OrderItem
from orderflow.sale.order import Order
from orderflow.sale.state_machine import OrderStateMachine
from orderflow.shipment.method import ShippingMethod
from orderflow.shipment.shipment import Shipment


class Cart:
    """
    Facade over an Order and its state machine.

    The order is created lazily on first access. Assigning a different order
    rebuilds the state machine so it always drives the current order.

    Args:
        order: Existing order to wrap, e.g. one loaded from a repository
        config: Currency for new orders, provider and tracing settings
        processor: Payment processor used during `pay`
        tracer: Optional tracer shared with the state machine
        state_machine_class: OrderStateMachine subclass to bind

    Example:
        >>> cart = Cart()
        >>> cart.add_item(variant, quantity=2)
        >>> cart.process_to("checkout")
        >>> cart.add_payment_method(cash_on_delivery)
        >>> cart.set_shipping_method(courier)
        >>> cart.process_to("pay")
        >>> cart.order.balance.is_zero()
        True
    """

    def __init__(
        self,
        order: Order | None = None,
        *,
        config: OrderFlowConfig | None = None,
        processor: PaymentProcessor | None = None,
        tracer: Tracer | None = None,
        state_machine_class: type[OrderStateMachine] = OrderStateMachine,
    ) -> None:
        self._config = config or DEFAULT_CONFIG
        self._tracer = tracer or create_tracer(__name__, self._config.enable_tracing)
        self._processor = processor or PaymentProcessor(self._config, self._tracer)
        self._state_machine_class = state_machine_class
        self._order: Order | None = None
        self._state_machine: OrderStateMachine | None = None
        if order is not None:
            self.set_order(order)

    # =========================================================================
    # Order binding
    # =========================================================================

    @property
    def order(self) -> Order:
        return self.get_order()

    @order.setter
    def order(self, order: Order) -> None:
        self.set_order(order)

    def get_order(self) -> Order:
        """Return the order, creating a new one on first access."""
        if self._order is None:
            order = Order(
                currency=self._config.currency,
                record_events=self._config.record_events,
            )
            self.set_order(order)
            return order
        return self._order

    def set_order(self, order: Order) -> None:
        """Wrap ``order`` and bind a fresh state machine to it."""
        self._order = order
        self._state_machine = self._state_machine_class(
            order,
            processor=self._processor,
            config=self._config,
            tracer=self._tracer,
        )

    @property
    def state_machine(self) -> OrderStateMachine:
        self.get_order()
        return cast(OrderStateMachine, self._state_machine)

    # =========================================================================
    # Items
    # =========================================================================

    @property
    def items(self) -> list[OrderItem]:
        return self.order.items

    @property
    def items_count(self) -> int:
        return self.order.items_count

    @property
    def total_quantity(self) -> int:
        return self.order.total_quantity

    def add_item(self, orderable: Orderable, quantity: int = 1) -> OrderItem:
        """
        Put ``quantity`` units of ``orderable`` in the cart.

        Adding an orderable that is already in the cart increases the
        quantity of its line instead of adding a second one.

        Returns:
            The line holding the orderable, new or updated

        Raises:
            ValueError: If quantity is not a positive integer
        """
        item = OrderItem.from_orderable(orderable, quantity)
        return self.order.add_item(item)

    def remove_item(self, item: OrderItem) -> OrderItem:
        """
        Remove a line from the cart.

        Raises:
            ItemNotFoundError: If the line is not in the cart
        """
        return self.order.remove_item(item)

    # =========================================================================
    # Payment and shipping
    # =========================================================================

    def add_payment_method(self, method: PaymentMethod, amount: Money | None = None) -> Payment:
        """
        Pay (part of) the order with ``method``.

        Args:
            method: Payment method to use
            amount: Amount to charge; None charges whatever is owed at `pay`
        """
        return self.order.add_payment(Payment(method=method, amount=amount))

    def set_shipping_method(self, method: ShippingMethod) -> Shipment:
        """
        Ship the order with ``method``.

        The shipping cost is priced from the cart's current contents and is
        not updated when items change later. Call this after the cart is
        filled, or remove the shipment from the order and set it again.
        """
        return self.order.add_shipment(Shipment(method=method))

    # =========================================================================
    # State
    # =========================================================================

    def process_to(self, transition: str) -> Any:
        """
        Apply a transition to the order.

        Returns:
            Whatever the transition's hooks produce: None normally, a Redirect
            or Failure when a payment could not be settled during `pay`

        Raises:
            InvalidTransitionError: If the transition is not allowed
        """
        return self.state_machine.apply(transition)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(order={self._order!r})"


__all__ = [
    "Cart",
]
