"""
Cart commands and their handlers.

Handlers load the order by number, apply the change through a Cart and save
the order back, so every command runs as one unit of work against the
repository.

Example:
    >>> handler = CartRemoveItemHandler(repository)
    >>> cart = handler.handle(CartRemoveItemCommand(order_number="R000000001", identifier=item_id))
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from uuid import UUID

from orderflow.config import OrderFlowConfig
from orderflow.exceptions import ItemNotFoundError, OrderNotFoundError
from orderflow.sale.cart import Cart
from orderflow.sale.item import Orderable
from orderflow.sale.order import Order
from orderflow.sale.repository import OrderRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CartAddItemCommand:
    """Put ``quantity`` units of ``orderable`` in the cart of an existing order."""

    order_number: str
    orderable: Orderable
    quantity: int = 1


@dataclass(frozen=True)
class CartRemoveItemCommand:
    """
    Remove a line from the cart of an existing order.

    Attributes:
        order_number: Number of the order holding the cart
        identifier: Id of the order item to remove
    """

    order_number: str
    identifier: UUID | str


class _CartCommandHandler:
    def __init__(
        self,
        repository: OrderRepository,
        config: OrderFlowConfig | None = None,
    ) -> None:
        self._repository = repository
        self._config = config

    def _load(self, order_number: str) -> Order:
        order = self._repository.find_by_number(order_number)
        if order is None:
            raise OrderNotFoundError(order_number)
        return order

    def _cart(self, order: Order) -> Cart:
        return Cart(order, config=self._config)


class CartAddItemHandler(_CartCommandHandler):
    """Handles CartAddItemCommand."""

    def handle(self, command: CartAddItemCommand) -> Cart:
        """
        Raises:
            OrderNotFoundError: If no order has the command's number
            ValueError: If the quantity is not a positive integer
        """
        order = self._load(command.order_number)
        cart = self._cart(order)
        item = cart.add_item(command.orderable, command.quantity)
        self._repository.save(order)

        logger.info(
            "Added %s to cart %s",
            item.orderable_id,
            order.number,
            extra={
                "order_number": order.number,
                "item_id": str(item.id),
                "quantity": command.quantity,
            },
        )
        return cart


class CartRemoveItemHandler(_CartCommandHandler):
    """Handles CartRemoveItemCommand."""

    def handle(self, command: CartRemoveItemCommand) -> Cart:
        """
        Remove the item and return the cart wrapping the updated order.

        Raises:
            OrderNotFoundError: If no order has the command's number
            ItemNotFoundError: If the order has no item with that id
        """
        order = self._load(command.order_number)
        item = order.get_item(command.identifier)
        if item is None:
            raise ItemNotFoundError(command.identifier, order_number=order.number)

        cart = self._cart(order)
        cart.remove_item(item)
        self._repository.save(order)

        logger.info(
            "Removed item %s from cart %s",
            item.id,
            order.number,
            extra={"order_number": order.number, "item_id": str(item.id)},
        )
        return cart


__all__ = [
    "CartAddItemCommand",
    "CartAddItemHandler",
    "CartRemoveItemCommand",
    "CartRemoveItemHandler",
]
