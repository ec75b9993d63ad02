"""Application service: Update Inventory Item use case.

Name and description are free edits.  The total quantity goes through
the allocation service so it can never drop below what is allocated.
"""

from __future__ import annotations

from ems.domain.exceptions import EntityNotFoundError, ValidationError
from ems.domain.model.inventory import InventoryItem
from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository
from ems.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)


class UpdateInventoryItemHandler:

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        event_repo: EventRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._event_repo = event_repo

    def handle(
        self,
        item_id: int,
        name: str | None = None,
        total_quantity: int | None = None,
        description: str | None = None,
    ) -> InventoryItem:
        item = self._inventory_repo.get_by_id(item_id)
        if item is None:
            raise EntityNotFoundError(f"Inventory item with ID {item_id} not found")
        if name is not None and not name.strip():
            raise ValidationError("Item name is required")

        # Quantity first: if it is rejected nothing else changes either
        if total_quantity is not None:
            svc = InventoryAllocationService(self._inventory_repo, self._event_repo)
            svc.set_total_quantity(item_id, total_quantity)
        if name is not None:
            item.name = name.strip()
        if description is not None:
            item.description = description
        if name is not None or description is not None:
            self._inventory_repo.save(item)
        return item
