"""Application service: Allocate / Deallocate Inventory use cases.

Thin wrappers over the allocation domain service, which keeps the item
pool and the event's allocation map in step.
"""

from __future__ import annotations

from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository
from ems.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)


class AllocateInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        event_repo: EventRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._event_repo = event_repo

    def handle(self, event_id: int, item_id: int, quantity: int) -> int:
        """Allocate and return the item's remaining available quantity."""
        svc = InventoryAllocationService(self._inventory_repo, self._event_repo)
        item = svc.allocate(event_id, item_id, quantity)
        return item.available_quantity


class DeallocateInventoryHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        event_repo: EventRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._event_repo = event_repo

    def handle(self, event_id: int, item_id: int, quantity: int) -> int:
        """Deallocate and return the amount actually removed (clamped)."""
        svc = InventoryAllocationService(self._inventory_repo, self._event_repo)
        return svc.deallocate(event_id, item_id, quantity)
