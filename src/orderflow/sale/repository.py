"""
Order repository protocol and in-memory implementation.

The repository is the seam to whatever persists orders. orderflow only
needs to look orders up by number and hand them back after a mutation.
"""

import logging
from typing import Protocol, runtime_checkable

from orderflow.events.base import DomainEvent
from orderflow.sale.order import Order

logger = logging.getLogger(__name__)


@runtime_checkable
class OrderRepository(Protocol):
    """Protocol for order repositories."""

    def find_by_number(self, number: str) -> Order | None:
        """
        Get an order by its number.

        Returns:
            The order, or None if no order has that number
        """
        ...

    def save(self, order: Order) -> None:
        """
        Persist an order.

        Implementations are expected to drain the order's uncommitted events
        (e.g. into an outbox) as part of the same unit of work.
        """
        ...


class InMemoryOrderRepository:
    """
    In-memory order repository for tests and prototypes.

    Keeps every event drained from saved orders in ``committed_events``.

    Example:
        >>> repo = InMemoryOrderRepository()
        >>> repo.save(cart.order)
        >>> repo.find_by_number(cart.order.number) is cart.order
        True
    """

    def __init__(self) -> None:
        self._orders: dict[str, Order] = {}
        self._committed_events: list[DomainEvent] = []

    def find_by_number(self, number: str) -> Order | None:
        return self._orders.get(number)

    def save(self, order: Order) -> None:
        self._orders[order.number] = order
        events = order.clear_uncommitted_events()
        self._committed_events.extend(events)
        logger.debug(
            "Saved order %s with %d new events",
            order.number,
            len(events),
            extra={"order_number": order.number, "event_count": len(events)},
        )

    @property
    def committed_events(self) -> list[DomainEvent]:
        return self._committed_events.copy()

    def get_all(self) -> list[Order]:
        return list(self._orders.values())

    def clear(self) -> None:
        self._orders.clear()
        self._committed_events.clear()

    def __len__(self) -> int:
        return len(self._orders)


__all__ = [
    "InMemoryOrderRepository",
    "OrderRepository",
]
