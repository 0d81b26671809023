"""
Payments, payment methods and the provider boundary.

Example:
    >>> from orderflow.payment import LocalProvider, PaymentMethod
    >>> cod = PaymentMethod(name="cash_on_delivery", provider=LocalProvider(), cost=Money(6))
"""

from orderflow.payment.method import PaymentMethod
from orderflow.payment.outcome import Failure, PaymentOutcome, Redirect, Success
from orderflow.payment.payment import (
    PAYMENT_TRANSITIONS,
    Payment,
    PaymentState,
    Transaction,
)
from orderflow.payment.processor import PaymentProcessor
from orderflow.payment.provider import LocalProvider, PaymentProvider
from orderflow.payment.source import CreditCard

__all__ = [
    "PAYMENT_TRANSITIONS",
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
    "Transaction",
]
