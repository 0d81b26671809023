"""
Payments and their own small state machine.

State Machine:
    UNPAID -> PAID (purchase)
    PAID -> (terminal)

A payment never drives itself: the order state machine processes unpaid
payments during the `pay` transition and folds each provider outcome back
into the payment.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum
from typing import TYPE_CHECKING
from uuid import UUID, uuid4

from orderflow.exceptions import InvalidTransitionError
from orderflow.money import Money
from orderflow.payment.method import PaymentMethod
from orderflow.payment.outcome import Failure, PaymentOutcome, Redirect, Success

if TYPE_CHECKING:
    from orderflow.payment.processor import PaymentProcessor
    from orderflow.sale.order import Order


logger = logging.getLogger(__name__)


class PaymentState(Enum):
    """States a payment can be in."""

    UNPAID = "unpaid"
    """Created, or attempted without settling (redirect pending, failed)."""

    PAID = "paid"
    """Settled; its amount counts toward the order balance."""


# Valid payment transitions: name -> (allowed from states, target state)
PAYMENT_TRANSITIONS: dict[str, tuple[frozenset[PaymentState], PaymentState]] = {
    "purchase": (frozenset({PaymentState.UNPAID}), PaymentState.PAID),
}


@dataclass(frozen=True)
class Transaction:
    """
    One provider attempt for a payment.

    Attributes:
        kind: Outcome kind (success, redirect, failure)
        amount: Amount that was attempted
        reference: Provider reference for a settled charge
        reason: Failure reason shown to the buyer
        redirect_url: Where the buyer was sent for a redirect
        created_at: When the attempt finished
    """

    kind: str
    amount: Money
    reference: str | None = None
    reason: str | None = None
    redirect_url: str | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(UTC))


@dataclass(eq=False)
class Payment:
    """
    A payment attached to an order.

    The amount may be left as None, in which case the outstanding balance of
    the order at processing time is charged.

    Attributes:
        method: Payment method (and through it the provider)
        amount: Amount to charge, or None for "whatever is owed"
        id: Unique identifier, also used to tag the adjustments it owns
        state: Current PaymentState
        order: Owning order (back-reference set on attach)
        redirect: Pending redirect from the last attempt
        failure_reason: Reason of the last failed attempt
        transactions: Every provider attempt, oldest first
    """

    method: PaymentMethod
    amount: Money | None = None
    id: UUID = field(default_factory=uuid4)
    state: PaymentState = PaymentState.UNPAID
    order: Order | None = field(default=None, repr=False)
    redirect: Redirect | None = None
    failure_reason: str | None = None
    transactions: list[Transaction] = field(default_factory=list, repr=False)

    @property
    def is_paid(self) -> bool:
        return self.state is PaymentState.PAID

    def can(self, transition: str) -> bool:
        """Check whether a payment transition is allowed from the current state."""
        allowed_from, _ = PAYMENT_TRANSITIONS.get(transition, (frozenset(), self.state))
        return self.state in allowed_from

    def apply(self, transition: str) -> None:
        """
        Apply a payment transition.

        Raises:
            InvalidTransitionError: If the transition is unknown or not allowed
        """
        if not self.can(transition):
            raise InvalidTransitionError(
                transition=transition,
                state=self.state.value,
                allowed=[name for name in PAYMENT_TRANSITIONS if self.can(name)],
            )
        _, target = PAYMENT_TRANSITIONS[transition]
        self.state = target

    def resolve_amount(self) -> Money:
        """
        Amount to charge on the next attempt.

        The explicit amount when set, otherwise the positive part of the
        order balance.

        Raises:
            ValueError: If no amount is set and the payment is not attached
        """
        if self.amount is not None:
            return self.amount
        if self.order is None:
            raise ValueError(f"Payment {self.id} has no amount and is not attached to an order")
        balance = self.order.balance
        if balance.is_negative():
            return Money.zero(balance.currency)
        return balance

    def process(self, processor: PaymentProcessor) -> PaymentOutcome | None:
        """
        Charge this payment and fold the outcome into its state.

        Returns:
            The provider outcome, or None when there was nothing to charge

        Raises:
            InvalidTransitionError: If the payment is already paid
        """
        if not self.can("purchase"):
            raise InvalidTransitionError(
                transition="purchase",
                state=self.state.value,
                reason="payment is already settled",
            )

        amount = self.resolve_amount()
        if amount.is_zero():
            logger.debug(
                "Skipping payment %s, nothing to charge",
                self.id,
                extra={"payment_id": str(self.id)},
            )
            return None

        outcome = processor.charge(self, amount)
        self._fold_outcome(outcome, amount)
        return outcome

    def _fold_outcome(self, outcome: PaymentOutcome, attempted: Money) -> None:
        match outcome:
            case Success(amount=settled, reference=reference):
                self.amount = settled
                self.redirect = None
                self.failure_reason = None
                self.apply("purchase")
                self.transactions.append(
                    Transaction(kind=outcome.kind, amount=settled, reference=reference)
                )
            case Redirect(url=url):
                self.redirect = outcome
                self.failure_reason = None
                self.transactions.append(
                    Transaction(kind=outcome.kind, amount=attempted, redirect_url=url)
                )
            case Failure(reason=reason):
                self.redirect = None
                self.failure_reason = reason
                self.transactions.append(
                    Transaction(kind=outcome.kind, amount=attempted, reason=reason)
                )


__all__ = [
    "PAYMENT_TRANSITIONS",
    "Payment",
    "PaymentState",
    "Transaction",
]
