"""Abstract repository for InventoryItem aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ems.domain.model.inventory import InventoryItem


class InventoryRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next unique item ID."""

    @abstractmethod
    def get_by_id(self, item_id: int) -> InventoryItem | None:
        """Return the inventory item with this ID, or None."""

    @abstractmethod
    def get_by_name(self, name: str) -> InventoryItem | None:
        """Return an item by name (case-insensitive), or None."""

    @abstractmethod
    def list_all(self) -> list[InventoryItem]:
        """Return every inventory item."""

    @abstractmethod
    def save(self, item: InventoryItem) -> None:
        """Persist a new or updated item, assigning an ID to new ones."""

    @abstractmethod
    def save_all(self, items: list[InventoryItem]) -> None:
        """Persist several updated items with a single table write."""
