"""
Orders, carts and the order state machine.

Example:
    >>> from orderflow.sale import Cart
    >>> cart = Cart()
    >>> cart.add_item(variant)
    >>> cart.process_to("checkout")
"""

from orderflow.sale.adjustment import Adjustment, AdjustmentLabel
from orderflow.sale.cart import Cart
from orderflow.sale.commands import (
    CartAddItemCommand,
    CartAddItemHandler,
    CartRemoveItemCommand,
    CartRemoveItemHandler,
)
from orderflow.sale.item import Orderable, OrderItem
from orderflow.sale.order import (
    TERMINAL_STATES,
    Order,
    OrderState,
    generate_order_number,
)
from orderflow.sale.repository import InMemoryOrderRepository, OrderRepository
from orderflow.sale.state_machine import (
    ORDER_TRANSITIONS,
    OrderStateMachine,
    Transition,
    after,
    guard,
)

__all__ = [
    "ORDER_TRANSITIONS",
    "TERMINAL_STATES",
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
    "OrderRepository",
    "OrderState",
    "OrderStateMachine",
    "Orderable",
    "Transition",
    "after",
    "guard",
    "generate_order_number",
]
