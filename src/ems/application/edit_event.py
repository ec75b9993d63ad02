"""Application service: Edit Event use cases.

Covers descriptive field edits and free-form status changes.  There is
no status state machine: any status can follow any other.
"""

from __future__ import annotations

from ems.domain.exceptions import EntityNotFoundError
from ems.domain.model.event import Event, EventStatus
from ems.domain.repository.event_repository import EventRepository


def _get_event(event_repo: EventRepository, event_id: int) -> Event:
    event = event_repo.get_by_id(event_id)
    if event is None:
        raise EntityNotFoundError(f"Event with ID {event_id} not found")
    return event


class EditEventHandler:

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def handle(self, event_id: int, field_name: str, value: str) -> Event:
        """Change one of name, date, time, location, description, category."""
        event = _get_event(self._event_repo, event_id)
        event.update_field(field_name, value)
        self._event_repo.save(event)
        return event


class UpdateEventStatusHandler:

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def handle(self, event_id: int, status: EventStatus) -> Event:
        event = _get_event(self._event_repo, event_id)
        event.status = status
        self._event_repo.save(event)
        return event
