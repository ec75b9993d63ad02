"""Application service: Delete Event use case.

Deleting an event cascades: its allocated inventory goes back to the
pool and every attendee registered for it is removed.  Events,
inventory and attendees are all persisted.
"""

from __future__ import annotations

from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository
from ems.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)
from ems.domain.service.registration_service import EventDeletion, RegistrationService


class DeleteEventHandler:

    def __init__(
        self,
        event_repo: EventRepository,
        attendee_repo: AttendeeRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._event_repo = event_repo
        self._attendee_repo = attendee_repo
        self._inventory_repo = inventory_repo

    def handle(self, event_id: int) -> EventDeletion:
        svc = RegistrationService(self._attendee_repo, self._event_repo)
        allocation_svc = InventoryAllocationService(self._inventory_repo, self._event_repo)
        return svc.delete_event(event_id, allocation_svc)
