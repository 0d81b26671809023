"""
Payment provider protocol and the local provider.

A provider performs the actual charge. Gateways that talk to the network
live outside this package and only need to satisfy PaymentProvider.
"""

from typing import Any, Protocol, runtime_checkable

from orderflow.money import Money
from orderflow.payment.outcome import PaymentOutcome, Success


@runtime_checkable
class PaymentProvider(Protocol):
    """
    Protocol for payment providers.

    Providers may block, be slow or raise. PaymentProcessor wraps every call
    so that timeouts and exceptions turn into Failure outcomes.
    """

    def purchase(self, amount: Money, options: dict[str, Any]) -> PaymentOutcome:
        """
        Charge ``amount``.

        Args:
            amount: Amount to charge
            options: Provider specific data such as the payment source,
                the order number and the payment id

        Returns:
            Success, Redirect or Failure
        """
        ...


class LocalProvider:
    """
    Provider for settlements that happen outside any gateway.

    Used for cash on delivery, bank transfer or manual settlement: the
    purchase always succeeds for the full amount. Any surcharge is configured
    on the PaymentMethod that uses this provider.
    """

    def purchase(self, amount: Money, options: dict[str, Any]) -> PaymentOutcome:
        return Success(amount=amount)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


__all__ = [
    "LocalProvider",
    "PaymentProvider",
]
