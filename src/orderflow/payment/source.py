"""Payment sources handed to providers along with the amount."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field


class CreditCard(BaseModel):
    """
    A card used as payment source.

    Only the data a gateway needs to attempt a charge; validation of the
    number itself is the gateway's job.
    """

    model_config = ConfigDict(frozen=True)

    first_name: str = ""
    last_name: str = ""
    number: str
    month: int = Field(ge=1, le=12)
    year: int = Field(ge=2000)
    verification_value: str | None = Field(default=None, repr=False)

    description: str = "Credit Card Payment"

    @property
    def holder_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def display_number(self) -> str:
        """Number with everything but the last four digits masked."""
        return "XXXX-XXXX-XXXX-" + self.number[-4:].rjust(4, "X")

    def is_expired(self, now: datetime | None = None) -> bool:
        """A card expires after the last day of its expiry month."""
        now = now or datetime.now(UTC)
        return (self.year, self.month) < (now.year, now.month)


__all__ = [
    "CreditCard",
]
