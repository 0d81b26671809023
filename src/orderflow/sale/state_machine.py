"""
The order state machine.

State Machine:
    CART -> CHECKOUT (checkout)
    CHECKOUT | PARTIAL_PAID -> PAID (pay)
    PAID | PARTIAL_PAID -> PARTIAL_PAID (partial_pay)
    PAID -> PROCESSING (process)
    PROCESSING -> SENT (send)
    SENT -> DELIVERED (deliver)
    SENT -> RETURNED (return)
    PAID | PROCESSING -> CANCELLED (cancel)
    CANCELLED -> CHECKOUT (retry)
    DELIVERED, RETURNED -> (terminal)

Guards and after-hooks are methods marked with @guard / @after. They are
collected into tables keyed by (from_state, transition name) when the class
is created, so subclasses can add their own.

The `pay` transition optimistically moves the order to PAID and then runs
two after-hooks in this order:

1. every unpaid payment is charged through the PaymentProcessor
2. if the order still owes money, `partial_pay` is applied, moving the
   order back to PARTIAL_PAID
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, ClassVar, TypeVar

from orderflow.config import DEFAULT_CONFIG, OrderFlowConfig
from orderflow.exceptions import InvalidTransitionError
from orderflow.observability import (
    ATTR_FROM_STATE,
    ATTR_ORDER_ID,
    ATTR_ORDER_NUMBER,
    ATTR_TO_STATE,
    ATTR_TRANSITION,
    Tracer,
    create_tracer,
)
from orderflow.payment.outcome import Failure, PaymentOutcome, Redirect, Success
from orderflow.payment.processor import PaymentProcessor
from orderflow.sale.order import Order, OrderState

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

HookKey = tuple[OrderState, str]


@dataclass(frozen=True)
class Transition:
    """A named move from any of ``from_states`` to ``to_state``."""

    name: str
    from_states: frozenset[OrderState]
    to_state: OrderState


def _transition(name: str, from_states: Iterable[OrderState], to_state: OrderState) -> Transition:
    return Transition(name=name, from_states=frozenset(from_states), to_state=to_state)


# Valid order transitions
ORDER_TRANSITIONS: dict[str, Transition] = {
    t.name: t
    for t in (
        _transition("checkout", [OrderState.CART], OrderState.CHECKOUT),
        _transition("pay", [OrderState.CHECKOUT, OrderState.PARTIAL_PAID], OrderState.PAID),
        _transition(
            "partial_pay", [OrderState.PAID, OrderState.PARTIAL_PAID], OrderState.PARTIAL_PAID
        ),
        _transition("process", [OrderState.PAID], OrderState.PROCESSING),
        _transition("send", [OrderState.PROCESSING], OrderState.SENT),
        _transition("deliver", [OrderState.SENT], OrderState.DELIVERED),
        _transition("return", [OrderState.SENT], OrderState.RETURNED),
        _transition("cancel", [OrderState.PAID, OrderState.PROCESSING], OrderState.CANCELLED),
        _transition("retry", [OrderState.CANCELLED], OrderState.CHECKOUT),
    )
}


def _mark(kind: str, transition: str, from_states: Iterable[OrderState] | None) -> Callable[[F], F]:
    def decorator(func: F) -> F:
        hooks = list(getattr(func, "_transition_hooks", []))
        hooks.append((kind, transition, None if from_states is None else tuple(from_states)))
        func._transition_hooks = hooks  # type: ignore[attr-defined]
        return func

    return decorator


def after(transition: str, from_states: Iterable[OrderState] | None = None) -> Callable[[F], F]:
    """
    Mark a method to run after ``transition`` has set the new state.

    Args:
        transition: Transition name
        from_states: Restrict the hook to these source states. Defaults to
            every state the transition can start from.

    The method is called as ``hook(self, transition)``. The first non-None
    value returned by the hooks of a transition becomes the result of
    ``OrderStateMachine.apply()``.

    A subclass that overrides a marked method without decorating it again
    keeps the original registration; the override is what gets called.

    Example:
        >>> class NotifyingStateMachine(OrderStateMachine):
        ...     @after("send")
        ...     def _notify_buyer(self, transition: Transition) -> None:
        ...         mailer.order_sent(self.order)
    """
    return _mark("after", transition, from_states)


def guard(transition: str, from_states: Iterable[OrderState] | None = None) -> Callable[[F], F]:
    """
    Mark a predicate that must hold before ``transition`` is applied.

    The method is called as ``guard(self, transition)`` and returns a bool.
    A False result rejects the transition with InvalidTransitionError before
    the state changes.
    Overrides follow the same rule as for `after`.

    Example:
        >>> class StrictStateMachine(OrderStateMachine):
        ...     @guard("checkout")
        ...     def _has_items(self, transition: Transition) -> bool:
        ...         return self.order.items_count > 0
    """
    return _mark("guard", transition, from_states)


class OrderStateMachine:
    """
    Applies transitions to an Order and runs their hooks.

    Args:
        order: The order whose state this machine drives
        processor: Charges payments during `pay`; built from config if omitted
        config: Supplies tracing and provider settings
        tracer: Optional tracer; created from config when omitted

    Example:
        >>> machine = OrderStateMachine(order)
        >>> machine.apply("checkout")
        >>> result = machine.apply("pay")
        >>> if isinstance(result, Redirect):
        ...     send_buyer_to(result.url)
    """

    transitions: ClassVar[dict[str, Transition]] = ORDER_TRANSITIONS

    # Populated per class from @guard / @after marked methods
    _guards: ClassVar[dict[HookKey, list[str]]] = {}
    _after_hooks: ClassVar[dict[HookKey, list[str]]] = {}

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        cls._collect_hooks()

    @classmethod
    def _collect_hooks(cls) -> None:
        """Build the guard and after-hook tables for this class."""
        cls._guards = {}
        cls._after_hooks = {}

        # Base classes first, then definition order, so inherited hooks run
        # before the ones a subclass adds. An override keeps the marks of the
        # method it replaces unless it is decorated itself.
        marks: dict[str, list[tuple[str, str, tuple[OrderState, ...] | None]]] = {}
        for klass in reversed(cls.__mro__):
            for name, value in vars(klass).items():
                if hasattr(value, "_transition_hooks"):
                    marks[name] = value._transition_hooks

        for name, hooks in marks.items():
            for kind, transition_name, from_states in hooks:
                transition = cls.transitions.get(transition_name)
                if transition is None:
                    raise ValueError(
                        f"{cls.__name__}.{name} is registered for unknown transition "
                        f"'{transition_name}'"
                    )
                table = cls._guards if kind == "guard" else cls._after_hooks
                for state in from_states or transition.from_states:
                    table.setdefault((state, transition_name), []).append(name)

    def __init__(
        self,
        order: Order,
        processor: PaymentProcessor | None = None,
        config: OrderFlowConfig | None = None,
        tracer: Tracer | None = None,
    ) -> None:
        self._order = order
        self._config = config or DEFAULT_CONFIG
        self._tracer = tracer or create_tracer(__name__, self._config.enable_tracing)
        self._processor = processor or PaymentProcessor(self._config, self._tracer)

    @property
    def order(self) -> Order:
        return self._order

    @property
    def processor(self) -> PaymentProcessor:
        return self._processor

    @property
    def state(self) -> OrderState:
        return self._order.state

    @property
    def is_terminal(self) -> bool:
        return self._order.is_terminal

    def can(self, name: str) -> bool:
        """Check whether ``name`` can be applied right now, guards included."""
        transition = self.transitions.get(name)
        if transition is None or self.state not in transition.from_states:
            return False
        return self._rejecting_guard(transition) is None

    def available_transitions(self) -> list[str]:
        return [name for name in self.transitions if self.can(name)]

    def apply(self, name: str) -> Any:
        """
        Apply a transition and run its after-hooks.

        Returns:
            The first non-None value produced by the after-hooks. For `pay`
            that is a Redirect if any payment needs one, else a Failure if any
            payment failed, else None.

        Raises:
            InvalidTransitionError: If the transition is unknown, not allowed
                from the current state, or rejected by a guard. Nothing is
                changed in that case.
        """
        from_state = self.state
        transition = self.transitions.get(name)
        if transition is None:
            raise InvalidTransitionError(
                transition=name,
                state=from_state.value,
                allowed=self.available_transitions(),
                reason="unknown transition",
            )
        if from_state not in transition.from_states:
            raise InvalidTransitionError(
                transition=name,
                state=from_state.value,
                allowed=self.available_transitions(),
            )

        rejected_by = self._rejecting_guard(transition)
        if rejected_by is not None:
            raise InvalidTransitionError(
                transition=name,
                state=from_state.value,
                allowed=self.available_transitions(),
                reason=f"rejected by {rejected_by}",
            )

        with self._tracer.span(
            "orderflow.state_machine.apply",
            {
                ATTR_ORDER_ID: str(self._order.id),
                ATTR_ORDER_NUMBER: self._order.number,
                ATTR_TRANSITION: name,
                ATTR_FROM_STATE: from_state.value,
                ATTR_TO_STATE: transition.to_state.value,
            },
        ):
            self._order.change_state(name, transition.to_state)
            logger.info(
                "Order state changed",
                extra={
                    "order_number": self._order.number,
                    "transition": name,
                    "from_state": from_state.value,
                    "to_state": transition.to_state.value,
                },
            )

            result: Any = None
            for hook_name in self._after_hooks.get((from_state, name), []):
                value = getattr(self, hook_name)(transition)
                if result is None:
                    result = value
        return result

    def _rejecting_guard(self, transition: Transition) -> str | None:
        for guard_name in self._guards.get((self.state, transition.name), []):
            if not getattr(self, guard_name)(transition):
                return guard_name
        return None

    # =========================================================================
    # Hooks
    # =========================================================================

    @after("pay")
    def _process_payments(self, transition: Transition) -> PaymentOutcome | None:
        redirect: Redirect | None = None
        failure: Failure | None = None
        for outcome in self._order.process_payments(self._processor):
            match outcome:
                case Redirect():
                    redirect = redirect or outcome
                case Failure():
                    failure = failure or outcome
                case Success():
                    pass
        return redirect or failure

    @after("pay")
    def _rollback_payment(self, transition: Transition) -> None:
        if not self._order.needs_payment:
            return
        logger.warning(
            "Order %s still owes %s after payment, moving to partial_paid",
            self._order.number,
            self._order.balance,
            extra={
                "order_number": self._order.number,
                "balance": str(self._order.balance),
            },
        )
        self.apply("partial_pay")

    @after("send")
    def _ship_pending_shipments(self, transition: Transition) -> None:
        self._order.ship_pending_shipments()


OrderStateMachine._collect_hooks()


__all__ = [
    "ORDER_TRANSITIONS",
    "OrderStateMachine",
    "Transition",
    "after",
    "guard",
]
