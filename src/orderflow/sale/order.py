"""
The Order aggregate.

An Order owns its items, payments, shipments and adjustments. Every monetary
figure (items total, total amount, balance) is derived from those parts when
read, so it cannot drift out of sync with them:

    items_total  = sum(item.total_price)
    total_amount = items_total + sum(adjustment.amount)
    balance      = total_amount - sum(amount of paid payments)

The state is changed only through the OrderStateMachine.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from uuid import UUID, uuid4

from orderflow.aggregates.base import AggregateRoot
from orderflow.events.order import (
    AdjustmentAdded,
    AdjustmentRemoved,
    ItemAdded,
    ItemQuantityChanged,
    ItemRemoved,
    OrderStateChanged,
    PaymentAttached,
    PaymentDetached,
    PaymentProcessed,
    ShipmentAttached,
    ShipmentDetached,
    ShipmentShipped,
)
from orderflow.exceptions import (
    AdjustmentNotFoundError,
    CurrencyMismatchError,
    ItemNotFoundError,
    PaymentNotFoundError,
    ShipmentNotFoundError,
)
from orderflow.money import DEFAULT_CURRENCY, Money
from orderflow.payment.outcome import PaymentOutcome, Success
from orderflow.payment.payment import Payment, PaymentState
from orderflow.payment.processor import PaymentProcessor
from orderflow.sale.adjustment import Adjustment, AdjustmentLabel
from orderflow.sale.item import OrderItem
from orderflow.shipment.shipment import Shipment, ShipmentState

logger = logging.getLogger(__name__)


class OrderState(Enum):
    """
    States an order can be in during its lifecycle.

    CART is the initial state; CANCELLED, DELIVERED and RETURNED are terminal.
    """

    CART = "cart"
    CHECKOUT = "checkout"
    PARTIAL_PAID = "partial_paid"
    PAID = "paid"
    PROCESSING = "processing"
    SENT = "sent"
    CANCELLED = "cancelled"
    DELIVERED = "delivered"
    RETURNED = "returned"


TERMINAL_STATES: frozenset[OrderState] = frozenset(
    {OrderState.CANCELLED, OrderState.DELIVERED, OrderState.RETURNED}
)


def generate_order_number() -> str:
    return f"R{uuid4().int % 10**9:09d}"


class Order(AggregateRoot):
    """
    Aggregate root for a sale.

    Example:
        >>> order = Order()
        >>> order.add_item(OrderItem(orderable_id="sku-1", unit_price=Money(10)))
        >>> order.add_shipment(Shipment(method=courier))
        >>> order.total_amount
        Money(amount=Decimal('15'), currency='EUR')
        >>> order.needs_payment
        True

    Attributes:
        number: Human facing order number
        currency: Currency of every amount on the order
        state: Current OrderState
    """

    aggregate_type = "Order"

    def __init__(
        self,
        number: str | None = None,
        *,
        currency: str = DEFAULT_CURRENCY,
        order_id: UUID | None = None,
        state: OrderState = OrderState.CART,
        record_events: bool = True,
    ) -> None:
        super().__init__(order_id, record_events=record_events)
        self.number = number or generate_order_number()
        self.currency = currency
        self._state = OrderState(state)
        self._items: list[OrderItem] = []
        self._payments: list[Payment] = []
        self._shipments: list[Shipment] = []
        self._adjustments: list[Adjustment] = []

    @property
    def id(self) -> UUID:
        return self.aggregate_id

    # =========================================================================
    # State
    # =========================================================================

    @property
    def state(self) -> OrderState:
        return self._state

    @property
    def is_terminal(self) -> bool:
        return self._state in TERMINAL_STATES

    def change_state(self, transition: str, to_state: OrderState) -> None:
        """
        Set the state on behalf of the state machine.

        Callers other than OrderStateMachine should use Cart.process_to().
        """
        from_state = self._state
        self._state = OrderState(to_state)
        self._record(
            OrderStateChanged,
            transition=transition,
            from_state=from_state.value,
            to_state=self._state.value,
        )

    # =========================================================================
    # Items
    # =========================================================================

    @property
    def items(self) -> list[OrderItem]:
        return self._items.copy()

    @property
    def items_count(self) -> int:
        return len(self._items)

    @property
    def total_quantity(self) -> int:
        return sum(item.quantity for item in self._items)

    def contains_item(self, item: OrderItem) -> OrderItem | None:
        """Return the item in this order for the same orderable, if any."""
        for existing in self._items:
            if existing.matches(item):
                return existing
        return None

    def get_item(self, identifier: UUID | str) -> OrderItem | None:
        for item in self._items:
            if item.id == identifier or str(item.id) == str(identifier):
                return item
        return None

    def add_item(self, item: OrderItem) -> OrderItem:
        """
        Add an item, merging it into an existing line for the same orderable.

        Returns:
            The line that now holds the quantity: ``item`` itself when it was
            appended, otherwise the existing line whose quantity was increased
        """
        self._check_currency(item.unit_price)

        existing = self.contains_item(item)
        if existing is not None:
            old_quantity = existing.quantity
            existing.set_quantity(old_quantity + item.quantity)
            self._record(
                ItemQuantityChanged,
                item_id=existing.id,
                orderable_id=existing.orderable_id,
                old_quantity=old_quantity,
                new_quantity=existing.quantity,
            )
            logger.debug(
                "Increased quantity of %s to %d on order %s",
                existing.orderable_id,
                existing.quantity,
                self.number,
                extra={"order_number": self.number, "item_id": str(existing.id)},
            )
            return existing

        self._items.append(item)
        self._record(
            ItemAdded,
            item_id=item.id,
            orderable_id=item.orderable_id,
            quantity=item.quantity,
            unit_price=item.unit_price,
        )
        logger.debug(
            "Added %s x%d to order %s",
            item.orderable_id,
            item.quantity,
            self.number,
            extra={"order_number": self.number, "item_id": str(item.id)},
        )
        return item

    def remove_item(self, item: OrderItem | UUID | str) -> OrderItem:
        """
        Remove an item by identity or id.

        Raises:
            ItemNotFoundError: If the item is not in this order
        """
        identifier = item.id if isinstance(item, OrderItem) else item
        existing = self.get_item(identifier)
        if existing is None:
            raise ItemNotFoundError(identifier, order_number=self.number)

        self._items.remove(existing)
        self._record(ItemRemoved, item_id=existing.id, orderable_id=existing.orderable_id)
        return existing

    # =========================================================================
    # Adjustments
    # =========================================================================

    @property
    def adjustments(self) -> list[Adjustment]:
        return self._adjustments.copy()

    def add_adjustment(
        self,
        label: str,
        amount: Money,
        owner_id: UUID | None = None,
        description: str = "",
    ) -> Adjustment:
        self._check_currency(amount)
        adjustment = Adjustment(
            label=str(label),
            amount=amount,
            owner_id=owner_id,
            description=description,
        )
        self._adjustments.append(adjustment)
        self._record(
            AdjustmentAdded,
            adjustment_id=adjustment.id,
            label=adjustment.label,
            amount=adjustment.amount,
            owner_id=owner_id,
        )
        return adjustment

    def remove_adjustment(self, adjustment: Adjustment | UUID) -> Adjustment:
        """
        Remove a single adjustment.

        Raises:
            AdjustmentNotFoundError: If it is not on this order
        """
        adjustment_id = adjustment.id if isinstance(adjustment, Adjustment) else adjustment
        for existing in self._adjustments:
            if existing.id == adjustment_id:
                self._adjustments.remove(existing)
                self._record(
                    AdjustmentRemoved,
                    adjustment_id=existing.id,
                    label=existing.label,
                    owner_id=existing.owner_id,
                )
                return existing
        raise AdjustmentNotFoundError(adjustment_id)

    def adjustments_owned_by(self, owner_id: UUID) -> list[Adjustment]:
        return [a for a in self._adjustments if a.is_owned_by(owner_id)]

    def _remove_adjustments_owned_by(self, owner_id: UUID) -> list[Adjustment]:
        removed = self.adjustments_owned_by(owner_id)
        for adjustment in removed:
            self.remove_adjustment(adjustment)
        return removed

    # =========================================================================
    # Payments
    # =========================================================================

    @property
    def payments(self) -> list[Payment]:
        return self._payments.copy()

    @property
    def unpaid_payments(self) -> list[Payment]:
        return [p for p in self._payments if p.state is PaymentState.UNPAID]

    def add_payment(self, payment: Payment) -> Payment:
        """
        Attach a payment and the surcharge its method carries, if any.

        Raises:
            ValueError: If the payment already belongs to another order
        """
        if payment.order is not None and payment.order is not self:
            raise ValueError(f"Payment {payment.id} is already attached to another order")
        if payment.amount is not None:
            self._check_currency(payment.amount)

        payment.order = self
        self._payments.append(payment)
        self._record(
            PaymentAttached,
            payment_id=payment.id,
            method=payment.method.name,
            amount=payment.amount,
        )

        surcharge = payment.method.surcharge
        if surcharge is not None:
            self.add_adjustment(
                AdjustmentLabel.PAYMENT_SURCHARGE,
                surcharge,
                owner_id=payment.id,
                description=payment.method.description or payment.method.name,
            )
        return payment

    def remove_payment(self, payment: Payment) -> Payment:
        """
        Detach a payment together with exactly the adjustments it produced.

        Raises:
            PaymentNotFoundError: If the payment is not attached to this order
        """
        if payment not in self._payments:
            raise PaymentNotFoundError(payment.id)

        self._remove_adjustments_owned_by(payment.id)
        self._payments.remove(payment)
        payment.order = None
        self._record(PaymentDetached, payment_id=payment.id)
        return payment

    def process_payments(self, processor: PaymentProcessor) -> list[PaymentOutcome]:
        """
        Charge every unpaid payment, in the order they were attached.

        Returns:
            The outcome of each provider call that was made
        """
        outcomes: list[PaymentOutcome] = []
        for payment in self.unpaid_payments:
            attempts = len(payment.transactions)
            outcome = payment.process(processor)
            if outcome is None:
                continue

            outcomes.append(outcome)
            attempted = (
                outcome.amount
                if isinstance(outcome, Success)
                else payment.transactions[attempts].amount
            )
            self._record(
                PaymentProcessed,
                payment_id=payment.id,
                outcome=outcome.kind,
                amount=attempted,
                reason=payment.failure_reason,
            )
        return outcomes

    # =========================================================================
    # Shipments
    # =========================================================================

    @property
    def shipments(self) -> list[Shipment]:
        return self._shipments.copy()

    def add_shipment(self, shipment: Shipment) -> Shipment:
        """
        Attach a shipment and add its cost as a shipping adjustment.

        The cost is computed once, here. Items added or removed afterwards do
        not change it; remove the shipment and attach it again to re-price.

        Raises:
            ValueError: If the shipment already belongs to another order
        """
        if shipment.order is not None and shipment.order is not self:
            raise ValueError(f"Shipment {shipment.id} is already attached to another order")

        cost = shipment.method.calculate_cost(self)
        self._check_currency(cost)

        shipment.cost = cost
        shipment.order = self
        self._shipments.append(shipment)
        self._record(
            ShipmentAttached,
            shipment_id=shipment.id,
            method=shipment.method.name,
            cost=cost,
        )
        self.add_adjustment(
            AdjustmentLabel.SHIPPING,
            cost,
            owner_id=shipment.id,
            description=shipment.method.description or shipment.method.name,
        )
        return shipment

    def remove_shipment(self, shipment: Shipment) -> Shipment:
        """
        Detach a shipment together with exactly the adjustments it produced.

        Raises:
            ShipmentNotFoundError: If the shipment is not attached to this order
        """
        if shipment not in self._shipments:
            raise ShipmentNotFoundError(shipment.id)

        self._remove_adjustments_owned_by(shipment.id)
        self._shipments.remove(shipment)
        shipment.order = None
        self._record(ShipmentDetached, shipment_id=shipment.id)
        return shipment

    def ship_pending_shipments(self) -> list[Shipment]:
        shipped: list[Shipment] = []
        for shipment in self._shipments:
            if shipment.state is ShipmentState.PENDING:
                shipment.ship()
                self._record(ShipmentShipped, shipment_id=shipment.id)
                shipped.append(shipment)
        return shipped

    # =========================================================================
    # Totals
    # =========================================================================

    @property
    def items_total(self) -> Money:
        return self._sum(item.total_price for item in self._items)

    @property
    def adjustments_total(self) -> Money:
        return self._sum(a.amount for a in self._adjustments)

    @property
    def total_amount(self) -> Money:
        return self.items_total + self.adjustments_total

    @property
    def shipping_cost(self) -> Money:
        return self._sum(
            a.amount for a in self._adjustments if a.label == AdjustmentLabel.SHIPPING
        )

    @property
    def paid_amount(self) -> Money:
        return self._sum(
            p.amount
            for p in self._payments
            if p.state is PaymentState.PAID and p.amount is not None
        )

    @property
    def balance(self) -> Money:
        """Amount still owed; negative when the order is over-paid."""
        return self.total_amount - self.paid_amount

    @property
    def needs_payment(self) -> bool:
        return self.balance.is_positive()

    def _sum(self, values: Iterable[Money]) -> Money:
        return Money.sum(values, self.currency)

    def _check_currency(self, amount: Money) -> None:
        if amount.currency != self.currency:
            raise CurrencyMismatchError(expected=self.currency, actual=amount.currency)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"number={self.number!r}, "
            f"state={self._state.value}, "
            f"items={len(self._items)}, "
            f"version={self.version})"
        )


__all__ = [
    "TERMINAL_STATES",
    "Order",
    "OrderState",
    "generate_order_number",
]
