"""Abstract repository for Event aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (flat file, in-memory)
live in the infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from ems.domain.model.event import Event


class EventRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next unique event ID."""

    @abstractmethod
    def get_by_id(self, event_id: int) -> Event | None:
        """Return an event by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Event]:
        """Return every event in insertion order."""

    @abstractmethod
    def save(self, event: Event) -> None:
        """Persist a new or updated event, assigning an ID to new ones."""

    @abstractmethod
    def remove(self, event_id: int) -> None:
        """Delete an event and persist the table."""
