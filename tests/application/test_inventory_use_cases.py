"""Integration tests for the inventory use cases."""

import pytest

from ems.application.add_inventory_item import AddInventoryItemHandler
from ems.application.allocate_inventory import (
    AllocateInventoryHandler,
    DeallocateInventoryHandler,
)
from ems.application.show_inventory import InventoryReportHandler, ShowInventoryHandler
from ems.application.update_inventory_item import UpdateInventoryItemHandler
from ems.domain.exceptions import EntityNotFoundError, ValidationError
from ems.domain.model.event import Event
from ems.domain.model.inventory import InventoryItem
from tests.fakes import FakeEventRepository, FakeInventoryRepository


def _setup():
    inventory = FakeInventoryRepository(
        [
            InventoryItem(id=1, name="Projector", total_quantity=5, description="HD Projector"),
            InventoryItem(id=2, name="Chairs", total_quantity=100, description="Standard chairs"),
        ]
    )
    events = FakeEventRepository(
        [
            Event(id=1, name="Tech Conference", date="2025-10-20", time="09:00"),
            Event(id=2, name="Music Festival", date="2025-07-15", time="14:00"),
        ]
    )
    return inventory, events


class TestAddInventoryItem:

    def test_add_item(self):
        inventory, _ = _setup()
        item = AddInventoryItemHandler(inventory).handle("Tables", 20, "Round")
        assert item.id == 3
        assert item.allocated_quantity == 0

    def test_non_positive_quantity_rejected(self):
        inventory, _ = _setup()
        with pytest.raises(ValidationError, match="must be positive"):
            AddInventoryItemHandler(inventory).handle("Tables", 0)


class TestUpdateInventoryItem:

    def test_update_all_fields(self):
        inventory, events = _setup()
        item = UpdateInventoryItemHandler(inventory, events).handle(
            2, name="Folding chairs", total_quantity=120, description="Stackable"
        )
        assert (item.name, item.total_quantity, item.description) == (
            "Folding chairs", 120, "Stackable",
        )

    def test_rejected_total_changes_nothing(self):
        inventory, events = _setup()
        AllocateInventoryHandler(inventory, events).handle(1, 2, 60)

        with pytest.raises(ValidationError, match="cannot be less than allocated"):
            UpdateInventoryItemHandler(inventory, events).handle(2, name="Seats", total_quantity=50)

        item = inventory.get_by_id(2)
        assert item.name == "Chairs"
        assert item.total_quantity == 100

    def test_unknown_item(self):
        inventory, events = _setup()
        with pytest.raises(EntityNotFoundError):
            UpdateInventoryItemHandler(inventory, events).handle(9, name="x")


class TestAllocateAndDeallocate:

    def test_allocate_returns_available(self):
        inventory, events = _setup()
        assert AllocateInventoryHandler(inventory, events).handle(1, 2, 30) == 70

    def test_deallocate_returns_clamped_amount(self):
        inventory, events = _setup()
        AllocateInventoryHandler(inventory, events).handle(1, 2, 3)

        removed = DeallocateInventoryHandler(inventory, events).handle(1, 2, 10)

        assert removed == 3
        assert inventory.get_by_id(2).allocated_quantity == 0
        assert events.get_by_id(1).allocated_inventory == {}


class TestInventoryQueries:

    def test_show_inventory(self):
        inventory, events = _setup()
        AllocateInventoryHandler(inventory, events).handle(1, 1, 2)

        lines = ShowInventoryHandler(inventory).handle()

        assert [(l.name, l.total, l.allocated, l.available) for l in lines] == [
            ("Projector", 5, 2, 3),
            ("Chairs", 100, 0, 100),
        ]

    def test_report_totals_and_per_event_breakdown(self):
        inventory, events = _setup()
        AllocateInventoryHandler(inventory, events).handle(1, 1, 2)
        AllocateInventoryHandler(inventory, events).handle(1, 2, 40)

        report = InventoryReportHandler(inventory, events).handle()

        assert (report.total, report.allocated, report.available) == (105, 42, 63)
        assert [e.event_id for e in report.per_event] == [1]
        assert [(a.item_name, a.quantity) for a in report.per_event[0].allocations] == [
            ("Projector", 2),
            ("Chairs", 40),
        ]
