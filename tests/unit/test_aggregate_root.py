"""
Unit tests for AggregateRoot.

Tests cover:
- Initialization and identity
- Version tracking
- Uncommitted event tracking
"""

import logging
from uuid import uuid4

from orderflow.aggregates.base import AggregateRoot
from orderflow.events.base import DomainEvent


class BasketRenamed(DomainEvent):
    aggregate_type: str = "Basket"
    name: str


class Basket(AggregateRoot):
    aggregate_type = "Basket"

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.name = ""

    def rename(self, name: str) -> None:
        self.name = name
        self._record(BasketRenamed, name=name)


class TestInitialization:
    def test_generates_id(self):
        basket = Basket()
        assert basket.aggregate_id is not None
        assert basket.version == 0
        assert not basket.has_uncommitted_events

    def test_explicit_id(self):
        basket_id = uuid4()
        assert Basket(basket_id).aggregate_id == basket_id

    def test_equality_by_id(self):
        basket_id = uuid4()
        assert Basket(basket_id) == Basket(basket_id)
        assert Basket() != Basket()
        assert len({Basket(basket_id), Basket(basket_id)}) == 1


class TestRecording:
    def test_record_bumps_version_and_collects_event(self):
        basket = Basket()
        basket.rename("weekly")
        basket.rename("monthly")

        assert basket.version == 2
        assert basket.get_next_version() == 3
        events = basket.uncommitted_events
        assert [e.name for e in events] == ["weekly", "monthly"]
        assert [e.aggregate_version for e in events] == [1, 2]
        assert events[0].aggregate_type == "Basket"
        assert events[0].event_type == "BasketRenamed"

    def test_uncommitted_events_is_copy(self):
        basket = Basket()
        basket.rename("weekly")
        basket.uncommitted_events.clear()
        assert basket.has_uncommitted_events

    def test_mark_events_as_committed(self):
        basket = Basket()
        basket.rename("weekly")
        basket.mark_events_as_committed()

        assert basket.uncommitted_events == []
        assert basket.version == 1

    def test_clear_uncommitted_events_returns_them(self):
        basket = Basket()
        basket.rename("weekly")

        events = basket.clear_uncommitted_events()

        assert len(events) == 1
        assert not basket.has_uncommitted_events

    def test_recording_disabled(self):
        basket = Basket(record_events=False)
        basket.rename("weekly")

        assert basket.name == "weekly"
        assert basket.version == 1
        assert basket.uncommitted_events == []

    def test_record_logs_at_debug(self, caplog):
        basket = Basket()
        with caplog.at_level(logging.DEBUG, logger="orderflow.aggregates.base"):
            basket.rename("weekly")

        [record] = caplog.records
        assert record.event_type == "BasketRenamed"
        assert record.version == 1
