"""
Immutable monetary amounts.

Money pairs a Decimal amount with an ISO-4217 currency code. Arithmetic and
ordering are only defined between amounts of the same currency; mixing
currencies raises CurrencyMismatchError instead of silently converting.
"""

from __future__ import annotations

from collections.abc import Iterable
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from orderflow.exceptions import CurrencyMismatchError

DEFAULT_CURRENCY = "EUR"

AmountLike = Decimal | int | str | float


class Money(BaseModel):
    """
    An immutable amount of money in a single currency.

    Amounts accept ints, strings, Decimals and floats. Floats are converted
    through their string representation so ``Money(0.1)`` is exactly
    ``Decimal("0.1")``.

    Example:
        >>> price = Money(10)
        >>> shipping = Money("5.50")
        >>> (price + shipping).amount
        Decimal('15.50')
        >>> price * 3 == Money(30)
        True
    """

    model_config = ConfigDict(frozen=True)

    amount: Decimal = Field(default=Decimal(0), description="Amount in currency units")
    currency: str = Field(
        default=DEFAULT_CURRENCY,
        pattern=r"^[A-Z]{3}$",
        description="ISO-4217 currency code",
    )

    def __init__(
        self,
        amount: AmountLike = 0,
        currency: str = DEFAULT_CURRENCY,
        **data: Any,
    ) -> None:
        super().__init__(amount=amount, currency=currency, **data)

    @field_validator("amount", mode="before")
    @classmethod
    def _coerce_amount(cls, value: Any) -> Any:
        if isinstance(value, float):
            return Decimal(str(value))
        return value

    @classmethod
    def zero(cls, currency: str = DEFAULT_CURRENCY) -> Money:
        """Return a zero amount in the given currency."""
        return cls(0, currency)

    @classmethod
    def sum(cls, values: Iterable[Money], currency: str = DEFAULT_CURRENCY) -> Money:
        """
        Sum an iterable of amounts.

        Returns a zero amount in ``currency`` for an empty iterable.

        Raises:
            CurrencyMismatchError: If any value is not in ``currency``
        """
        total = cls.zero(currency)
        for value in values:
            total = total + value
        return total

    def is_zero(self) -> bool:
        return self.amount == 0

    def is_positive(self) -> bool:
        return self.amount > 0

    def is_negative(self) -> bool:
        return self.amount < 0

    def _check_currency(self, other: Money) -> None:
        if not isinstance(other, Money):
            raise TypeError(f"Expected Money, got {type(other).__name__}")
        if other.currency != self.currency:
            raise CurrencyMismatchError(expected=self.currency, actual=other.currency)

    def __add__(self, other: Money) -> Money:
        self._check_currency(other)
        return Money(self.amount + other.amount, self.currency)

    def __sub__(self, other: Money) -> Money:
        self._check_currency(other)
        return Money(self.amount - other.amount, self.currency)

    def __neg__(self) -> Money:
        return Money(-self.amount, self.currency)

    def __mul__(self, factor: int | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, int | Decimal):
            return NotImplemented
        return Money(self.amount * factor, self.currency)

    __rmul__ = __mul__

    def __lt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount < other.amount

    def __le__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount <= other.amount

    def __gt__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount > other.amount

    def __ge__(self, other: Money) -> bool:
        self._check_currency(other)
        return self.amount >= other.amount

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"


__all__ = [
    "DEFAULT_CURRENCY",
    "AmountLike",
    "Money",
]
