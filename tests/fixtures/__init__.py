"""
Shared test fixtures for the orderflow library.

This module provides:
- Catalog types used as orderables (Product, Variant)
- Raw fixture data and the Hydrator that builds objects from it
- Payment providers with scripted behaviour

Usage:
    from tests.fixtures import Hydrator, FakeGateway, valid_credit_card_options
"""

from tests.fixtures.catalog import Product, Variant
from tests.fixtures.data import (
    FIXTURE_DATA,
    declined_credit_card_options,
    valid_credit_card_options,
)
from tests.fixtures.hydrator import Hydrator, default_providers
from tests.fixtures.providers import (
    FailingProvider,
    FakeGateway,
    InvalidResponseProvider,
    MisreportingProvider,
    RaisingProvider,
    RecordingProvider,
    RedirectProvider,
    SlowProvider,
)

__all__ = [
    # Catalog
    "Product",
    "Variant",
    # Data
    "FIXTURE_DATA",
    "Hydrator",
    "declined_credit_card_options",
    "default_providers",
    "valid_credit_card_options",
    # Providers
    "FailingProvider",
    "FakeGateway",
    "InvalidResponseProvider",
    "MisreportingProvider",
    "RaisingProvider",
    "RecordingProvider",
    "RedirectProvider",
    "SlowProvider",
]
