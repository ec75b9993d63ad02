"""Abstract repository for Attendee records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ems.domain.model.attendee import GENERIC_PROFILE_EVENT_ID, Attendee


class AttendeeRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next unique attendee ID."""

    @abstractmethod
    def get_by_id(self, attendee_id: int) -> Attendee | None:
        """Return an attendee by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Attendee]:
        """Return every attendee record."""

    @abstractmethod
    def save(self, attendee: Attendee) -> None:
        """Persist a new or updated attendee, assigning an ID to new ones."""

    @abstractmethod
    def remove(self, attendee_id: int) -> None:
        """Delete one attendee and persist the table."""

    @abstractmethod
    def remove_for_event(self, event_id: int) -> list[Attendee]:
        """Delete every attendee registered for an event; return them."""

    def find_for_event(self, name: str, event_id: int) -> Attendee | None:
        """First attendee with this name (case-insensitive) tied to the event."""
        for attendee in self.list_all():
            if attendee.event_id == event_id and attendee.matches_name(name):
                return attendee
        return None

    def find_by_name(self, name: str) -> list[Attendee]:
        return [a for a in self.list_all() if a.matches_name(name)]

    def find_generic_profile(self, name: str) -> Attendee | None:
        """The attendee record for *name* not tied to any event."""
        return self.find_for_event(name, GENERIC_PROFILE_EVENT_ID)
