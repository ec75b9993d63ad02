"""Application service: Show / Search Events use case (query)."""

from __future__ import annotations

from ems.application.dto import EventDTO
from ems.application.references import allocation_line, attendee_line
from ems.domain.exceptions import EntityNotFoundError
from ems.domain.model.event import Event
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository


class ShowEventsHandler:

    def __init__(
        self,
        event_repo: EventRepository,
        attendee_repo: AttendeeRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._event_repo = event_repo
        self._attendee_repo = attendee_repo
        self._inventory_repo = inventory_repo

    def handle(self, event_id: int) -> EventDTO:
        event = self._event_repo.get_by_id(event_id)
        if event is None:
            raise EntityNotFoundError(f"Event with ID {event_id} not found")
        return self._to_dto(event)

    def list_all(self) -> list[EventDTO]:
        return [self._to_dto(event) for event in self._event_repo.list_all()]

    def search(self, term: str) -> list[EventDTO]:
        """Case-insensitive match on the name, plain substring on the date."""
        needle = term.lower()
        return [
            self._to_dto(event)
            for event in self._event_repo.list_all()
            if needle in event.name.lower() or needle in event.date
        ]

    def _to_dto(self, event: Event) -> EventDTO:
        return EventDTO(
            id=event.id,  # type: ignore[arg-type]
            name=event.name,
            date=event.date,
            time=event.time,
            location=event.location,
            description=event.description,
            category=event.category,
            status=event.status.label,
            attendees=[attendee_line(self._attendee_repo, a) for a in event.attendee_ids],
            allocations=[
                allocation_line(self._inventory_repo, item_id, quantity)
                for item_id, quantity in event.allocated_inventory.items()
            ],
        )
