"""Domain service: Event Registration.

Keeps the attendee table and the events' attendee-id lists in step:
no duplicate registrations, hard deletes on cancellation, and the
cascade that runs when an event is deleted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ems.domain.exceptions import EntityNotFoundError, ValidationError
from ems.domain.model.attendee import Attendee
from ems.domain.model.event import Event
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Registration:
    """What ``register()`` did.

    ``created`` is True when a new attendee record was written;
    ``added`` is False when the attendee was already on the event.
    """

    attendee: Attendee
    event: Event
    created: bool
    added: bool


@dataclass(frozen=True)
class EventDeletion:
    event: Event
    removed_attendees: list[Attendee]
    released_inventory: dict[int, int]


class RegistrationService:

    def __init__(
        self,
        attendee_repo: AttendeeRepository,
        event_repo: EventRepository,
    ) -> None:
        self._attendee_repo = attendee_repo
        self._event_repo = event_repo

    def register(self, name: str, event_id: int, contact_info: str) -> Registration:
        """Register the person called *name* for an event.

        Lookup order: an attendee with this name already tied to the
        event, then a generic profile with this name (its contact info
        is refreshed), then a brand-new attendee scoped to the event.
        """
        event = self._get_event(event_id)
        if not event.accepts_registrations:
            raise ValidationError(
                f"Cannot register for a {event.status.label} event"
            )

        created = False
        attendee = self._attendee_repo.find_for_event(name, event.id)
        if attendee is None:
            attendee = self._attendee_repo.find_generic_profile(name)
            if attendee is not None:
                attendee.contact_info = contact_info
        if attendee is None:
            attendee = Attendee(
                id=None, name=name, contact_info=contact_info, event_id=event.id
            )
            created = True
        self._attendee_repo.save(attendee)

        added = event.add_attendee(attendee.id)
        if not added:
            logger.info(
                "Attendee %s already registered for event '%s'", attendee.id, event.name
            )
        self._event_repo.save(event)
        return Registration(attendee=attendee, event=event, created=created, added=added)

    def cancel(self, name: str, event_id: int) -> Attendee:
        """Hard-delete the attendee called *name* registered for an event."""
        event = self._get_event(event_id)
        attendee = self._attendee_repo.find_for_event(name, event.id)
        if attendee is None:
            raise EntityNotFoundError(
                f"'{name}' is not registered for event '{event.name}'"
            )
        event.remove_attendee(attendee.id)
        self._event_repo.save(event)
        self._attendee_repo.remove(attendee.id)
        return attendee

    def check_in(self, attendee_id: int, event_id: int) -> tuple[Attendee, bool]:
        """Check an attendee in for the event they registered for.

        Returns the attendee and whether this call changed the flag;
        checking in twice is not an error.
        """
        self._get_event(event_id)
        attendee = self._attendee_repo.get_by_id(attendee_id)
        if attendee is None or attendee.event_id != event_id:
            raise EntityNotFoundError(
                f"Attendee ID {attendee_id} not found or not registered "
                f"for event ID {event_id}"
            )
        changed = attendee.check_in()
        if changed:
            self._attendee_repo.save(attendee)
        return attendee, changed

    def update_contact_info(self, name: str, contact_info: str) -> Attendee:
        """Update contact info on every record for *name*.

        Returns the generic profile, creating it when none exists.
        """
        profile = None
        for attendee in self._attendee_repo.find_by_name(name):
            attendee.contact_info = contact_info
            self._attendee_repo.save(attendee)
            if attendee.is_generic_profile and profile is None:
                profile = attendee
        if profile is None:
            profile = Attendee(id=None, name=name, contact_info=contact_info)
            self._attendee_repo.save(profile)
        return profile

    def delete_event(
        self, event_id: int, allocation_service: InventoryAllocationService
    ) -> EventDeletion:
        """Delete an event with its registrations and allocations.

        Allocated inventory goes back to the pool and every attendee
        whose registration points at this event is removed.
        """
        event = self._get_event(event_id)
        released = allocation_service.release_event(event)
        removed = self._attendee_repo.remove_for_event(event.id)
        self._event_repo.remove(event.id)
        logger.info(
            "Deleted event %s '%s' with %d attendees", event.id, event.name, len(removed)
        )
        return EventDeletion(event=event, removed_attendees=removed, released_inventory=released)

    # --- Internal helpers -----------------------------------------------------

    def _get_event(self, event_id: int) -> Event:
        event = self._event_repo.get_by_id(event_id)
        if event is None:
            raise EntityNotFoundError(f"Event with ID {event_id} not found")
        return event
