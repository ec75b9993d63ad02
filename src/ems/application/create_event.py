"""Application service: Create Event use case."""

from __future__ import annotations

from ems.domain.model.event import Event
from ems.domain.repository.event_repository import EventRepository


class CreateEventHandler:

    def __init__(self, event_repo: EventRepository) -> None:
        self._event_repo = event_repo

    def handle(
        self,
        name: str,
        date: str,
        time: str,
        location: str = "",
        description: str = "",
        category: str = "",
    ) -> Event:
        """Create a new UPCOMING event after validating date and time."""
        event = Event.create(name, date, time, location, description, category)
        self._event_repo.save(event)
        return event
