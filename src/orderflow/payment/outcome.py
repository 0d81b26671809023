"""
Outcomes of a payment provider call.

A provider answers every purchase with exactly one of three shapes:

- Success: the money was taken; the payment becomes paid
- Redirect: the buyer must complete an out-of-band step (e.g. 3-D Secure)
- Failure: the attempt was declined or the provider was unavailable

None of them is an exception. Consumers match on the concrete type.

Example:
    >>> match outcome:
    ...     case Success(amount=amount):
    ...         credit(amount)
    ...     case Redirect(url=url):
    ...         send_buyer_to(url)
    ...     case Failure(reason=reason):
    ...         show_error(reason)
"""

from dataclasses import dataclass, field
from typing import Any, Literal

from orderflow.money import Money


@dataclass(frozen=True)
class Success:
    """The provider settled ``amount``."""

    amount: Money
    reference: str | None = None

    kind: Literal["success"] = field(default="success", init=False)


@dataclass(frozen=True)
class Redirect:
    """
    The provider needs the buyer to continue at ``url``.

    Attributes:
        url: Where the buyer has to be sent
        params: Form fields or query parameters the provider expects back
    """

    url: str
    params: dict[str, Any] = field(default_factory=dict)

    kind: Literal["redirect"] = field(default="redirect", init=False)


@dataclass(frozen=True)
class Failure:
    """The attempt did not settle; ``reason`` is meant for the buyer."""

    reason: str
    code: str | None = None

    kind: Literal["failure"] = field(default="failure", init=False)


PaymentOutcome = Success | Redirect | Failure


__all__ = [
    "Failure",
    "PaymentOutcome",
    "Redirect",
    "Success",
]
