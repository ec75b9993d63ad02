"""Domain service: Inventory Allocation.

This service coordinates the cross-aggregate operation of moving
inventory between an item's pool and an event's allocation map.  It
lives in the domain layer because the quantity invariant is a core
business rule, not just orchestration:

    item.allocated_quantity == sum(event.allocated_inventory[item.id])

Both sides are validated before either is mutated, and both tables are
persisted right after.  Nothing makes the two writes atomic, so
``reconcile_from_events()`` exists to restore the invariant from the
event side after a crash or a manual file edit.
"""

from __future__ import annotations

import logging

from ems.domain.exceptions import EntityNotFoundError, ValidationError
from ems.domain.model.event import Event
from ems.domain.model.inventory import InventoryItem
from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository

logger = logging.getLogger(__name__)


class InventoryAllocationService:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        event_repo: EventRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._event_repo = event_repo

    def allocate(self, event_id: int, item_id: int, quantity: int) -> InventoryItem:
        """Allocate *quantity* units of an item to an event."""
        event = self._get_event(event_id)
        item = self._get_item(item_id)

        # Phase 1: validate on the item (raises before any mutation)
        item.allocate(quantity)

        # Phase 2: mirror onto the event and persist both tables
        event.record_allocation(item.id, quantity)
        self._inventory_repo.save(item)
        self._event_repo.save(event)
        return item

    def deallocate(self, event_id: int, item_id: int, quantity: int) -> int:
        """Return up to *quantity* units from an event to the pool.

        Requests above the event's recorded allocation are clamped.
        Returns the amount actually deallocated.
        """
        if quantity <= 0:
            raise ValidationError("Deallocation quantity must be positive")
        event = self._get_event(event_id)
        item = self._get_item(item_id)
        if event.allocated_quantity_of(item.id) == 0:
            raise ValidationError(
                f"'{item.name}' was not allocated to event '{event.name}'"
            )

        # Clamp to what this event holds, validate on the item, then mutate
        removed = min(quantity, event.allocated_quantity_of(item.id))
        item.release(removed)
        event.remove_allocation(item.id, removed)
        self._inventory_repo.save(item)
        self._event_repo.save(event)
        return removed

    def release_event(self, event: Event) -> dict[int, int]:
        """Return every allocation of *event* to the pool.

        Used when an event is deleted.  Allocations of unknown items
        are simply dropped.  Does not persist the event itself.
        """
        released: dict[int, int] = {}
        touched: list[InventoryItem] = []
        for item_id, quantity in list(event.allocated_inventory.items()):
            removed = event.remove_allocation(item_id, quantity)
            item = self._inventory_repo.get_by_id(item_id)
            if item is None:
                logger.debug("Event %s referenced unknown item %s", event.id, item_id)
                continue
            item.allocated_quantity = max(0, item.allocated_quantity - removed)
            released[item_id] = removed
            touched.append(item)
        if touched:
            self._inventory_repo.save_all(touched)
        return released

    def set_total_quantity(self, item_id: int, total_quantity: int) -> InventoryItem:
        item = self._get_item(item_id)
        item.set_total_quantity(total_quantity)
        self._inventory_repo.save(item)
        return item

    def reconcile_from_events(self) -> list[InventoryItem]:
        """Recompute every item's allocated quantity from the events.

        Returns the items whose stored quantity was wrong.  Allocations
        referencing items that no longer exist are ignored.
        """
        items = self._inventory_repo.list_all()
        previous = {item.id: item.allocated_quantity for item in items}
        by_id = {item.id: item for item in items}
        for item in items:
            item.allocated_quantity = 0
        for event in self._event_repo.list_all():
            for item_id, quantity in event.allocated_inventory.items():
                item = by_id.get(item_id)
                if item is not None:
                    item.allocated_quantity += quantity

        drifted = [item for item in items if item.allocated_quantity != previous[item.id]]
        for item in drifted:
            logger.info(
                "Reconciled allocated quantity of item %s '%s': %d -> %d",
                item.id, item.name, previous[item.id], item.allocated_quantity,
            )
        return drifted

    # --- Internal helpers -----------------------------------------------------

    def _get_event(self, event_id: int) -> Event:
        event = self._event_repo.get_by_id(event_id)
        if event is None:
            raise EntityNotFoundError(f"Event with ID {event_id} not found")
        return event

    def _get_item(self, item_id: int) -> InventoryItem:
        item = self._inventory_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Inventory item with ID {item_id} not found")
        return item
