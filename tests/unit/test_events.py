"""
Unit tests for domain events.

Tests cover:
- event_type derivation
- Immutability
- Serialization to and from dictionaries
- Metadata enrichment
"""

from datetime import UTC
from uuid import uuid4

import pytest
from pydantic import ValidationError

from orderflow.events import (
    DomainEvent,
    ItemAdded,
    OrderEvent,
    OrderStateChanged,
    PaymentProcessed,
)
from orderflow.money import Money


def item_added(**overrides) -> ItemAdded:
    data = {
        "aggregate_id": uuid4(),
        "item_id": uuid4(),
        "orderable_id": "sku-1",
        "quantity": 2,
        "unit_price": Money("9.99"),
    }
    data.update(overrides)
    return ItemAdded(**data)


class TestDomainEvent:
    def test_event_type_derived_from_class(self):
        assert item_added().event_type == "ItemAdded"

    def test_explicit_event_type_kept(self):
        assert item_added(event_type="LegacyItemAdded").event_type == "LegacyItemAdded"

    def test_order_events_default_aggregate_type(self):
        event = item_added()
        assert isinstance(event, OrderEvent)
        assert event.aggregate_type == "Order"

    def test_occurred_at_is_utc(self):
        assert item_added().occurred_at.tzinfo is UTC

    def test_frozen(self):
        event = item_added()
        with pytest.raises(ValidationError):
            event.quantity = 3  # type: ignore[misc]

    def test_version_must_be_positive(self):
        with pytest.raises(ValidationError):
            item_added(aggregate_version=0)

    def test_str(self):
        event = item_added(aggregate_version=4)
        assert str(event).startswith("ItemAdded(event_id=")
        assert "version=4" in str(event)


class TestSerialization:
    def test_round_trip(self):
        event = item_added()

        restored = ItemAdded.from_dict(event.to_dict())

        assert restored == event
        assert restored.unit_price == Money("9.99")

    def test_to_dict_is_json_compatible(self):
        data = item_added().to_dict()
        assert isinstance(data["aggregate_id"], str)
        assert data["unit_price"] == {"amount": "9.99", "currency": "EUR"}

    def test_outcome_is_restricted(self):
        with pytest.raises(ValidationError):
            PaymentProcessed(
                aggregate_id=uuid4(),
                payment_id=uuid4(),
                outcome="pending",
                amount=Money(1),
            )


class TestMetadata:
    def test_with_metadata_returns_copy(self):
        event = OrderStateChanged(
            aggregate_id=uuid4(),
            transition="checkout",
            from_state="cart",
            to_state="checkout",
        )

        enriched = event.with_metadata(request_id="abc123")

        assert enriched.metadata == {"request_id": "abc123"}
        assert event.metadata == {}
        assert enriched.event_id == event.event_id

    def test_base_event_requires_aggregate(self):
        with pytest.raises(ValidationError):
            DomainEvent(aggregate_type="Order")
