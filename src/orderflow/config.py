"""
Configuration for carts, orders and payment processing.

This module provides:
- OrderFlowConfig: Settings shared by Cart, Order and PaymentProcessor
- DEFAULT_CONFIG: The configuration used when none is supplied
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from orderflow.money import DEFAULT_CURRENCY

_CURRENCY_PATTERN = re.compile(r"^[A-Z]{3}$")


@dataclass(frozen=True)
class OrderFlowConfig:
    """
    Configuration for order handling.

    Attributes:
        currency: ISO-4217 code used for new orders and their totals
        provider_timeout: Max seconds to wait for a payment provider call.
            None runs the provider inline without a timeout.
        enable_tracing: Whether spans are emitted (requires OpenTelemetry)
        record_events: Whether orders record domain events for every mutation

    Example:
        >>> config = OrderFlowConfig(currency="USD", provider_timeout=10.0)
        >>> cart = Cart(config=config)
    """

    currency: str = DEFAULT_CURRENCY

    # Payment provider boundary
    provider_timeout: float | None = 30.0

    # Observability
    enable_tracing: bool = True

    # Event journal
    record_events: bool = True

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not _CURRENCY_PATTERN.match(self.currency):
            raise ValueError(
                f"currency must be a 3-letter upper-case ISO-4217 code, got {self.currency!r}."
            )

        if self.provider_timeout is not None and self.provider_timeout <= 0:
            raise ValueError(
                f"provider_timeout must be positive or None, got {self.provider_timeout}. "
                "Use None to call providers inline without a timeout."
            )


DEFAULT_CONFIG = OrderFlowConfig()


__all__ = [
    "DEFAULT_CONFIG",
    "OrderFlowConfig",
]
