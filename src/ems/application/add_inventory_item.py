"""Application service: Add Inventory Item use case."""

from __future__ import annotations

from ems.domain.exceptions import ValidationError
from ems.domain.model.inventory import InventoryItem
from ems.domain.repository.inventory_repository import InventoryRepository


class AddInventoryItemHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self, name: str, total_quantity: int, description: str = "") -> InventoryItem:
        """Add a new item with nothing allocated."""
        if not name or not name.strip():
            raise ValidationError("Item name is required")
        if total_quantity <= 0:
            raise ValidationError("Total quantity must be positive")

        item = InventoryItem(
            id=None,
            name=name.strip(),
            total_quantity=total_quantity,
            description=description,
        )
        self._inventory_repo.save(item)
        return item
