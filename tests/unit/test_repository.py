"""
Unit tests for InMemoryOrderRepository.
"""

from orderflow.events import ItemAdded
from orderflow.money import Money
from orderflow.sale.item import OrderItem
from orderflow.sale.order import Order
from orderflow.sale.repository import InMemoryOrderRepository, OrderRepository


class TestInMemoryOrderRepository:
    def test_satisfies_protocol(self, repository):
        assert isinstance(repository, OrderRepository)

    def test_find_missing(self, repository):
        assert repository.find_by_number("R404") is None

    def test_save_and_find(self, repository):
        order = Order("R000000001")
        repository.save(order)

        assert repository.find_by_number("R000000001") is order
        assert len(repository) == 1
        assert repository.get_all() == [order]

    def test_save_drains_events(self, repository):
        order = Order()
        order.add_item(OrderItem(orderable_id="sku", unit_price=Money(1)))

        repository.save(order)

        assert not order.has_uncommitted_events
        [event] = repository.committed_events
        assert isinstance(event, ItemAdded)

    def test_saving_again_only_adds_new_events(self, repository):
        order = Order()
        order.add_item(OrderItem(orderable_id="sku", unit_price=Money(1)))
        repository.save(order)
        repository.save(order)

        assert len(repository.committed_events) == 1
        assert len(repository) == 1

    def test_clear(self, repository):
        repository.save(Order())
        repository.clear()

        assert len(repository) == 0
        assert repository.committed_events == []

    def test_new_instance_is_empty(self):
        assert len(InMemoryOrderRepository()) == 0
