"""Application service: Show Inventory use cases (queries)."""

from __future__ import annotations

from ems.application.dto import EventAllocationDTO, InventoryLineDTO, InventoryReportDTO
from ems.application.references import allocation_line
from ems.domain.model.inventory import InventoryItem
from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository


def _to_line(item: InventoryItem) -> InventoryLineDTO:
    return InventoryLineDTO(
        id=item.id,  # type: ignore[arg-type]
        name=item.name,
        total=item.total_quantity,
        allocated=item.allocated_quantity,
        available=item.available_quantity,
        description=item.description,
    )


class ShowInventoryHandler:

    def __init__(self, inventory_repo: InventoryRepository) -> None:
        self._inventory_repo = inventory_repo

    def handle(self) -> list[InventoryLineDTO]:
        return [_to_line(item) for item in self._inventory_repo.list_all()]


class InventoryReportHandler:
    """Full report: every item, overall totals and the per-event breakdown.

    Events only appear in the breakdown when they hold at least one
    allocation of a known item.
    """

    def __init__(
        self,
        inventory_repo: InventoryRepository,
        event_repo: EventRepository,
    ) -> None:
        self._inventory_repo = inventory_repo
        self._event_repo = event_repo

    def handle(self) -> InventoryReportDTO:
        lines = [_to_line(item) for item in self._inventory_repo.list_all()]

        per_event: list[EventAllocationDTO] = []
        for event in self._event_repo.list_all():
            allocations = [
                allocation_line(self._inventory_repo, item_id, quantity)
                for item_id, quantity in event.allocated_inventory.items()
            ]
            allocations = [a for a in allocations if a.found and a.quantity > 0]
            if allocations:
                per_event.append(
                    EventAllocationDTO(
                        event_id=event.id,  # type: ignore[arg-type]
                        event_name=event.name,
                        allocations=allocations,
                    )
                )

        return InventoryReportDTO(
            items=lines,
            total=sum(line.total for line in lines),
            allocated=sum(line.allocated for line in lines),
            available=sum(line.available for line in lines),
            per_event=per_event,
        )
