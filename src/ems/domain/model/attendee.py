"""Attendee entity — a person registered for an event.

An attendee with ``event_id == GENERIC_PROFILE_EVENT_ID`` is a generic
profile that is not tied to any event; it only carries contact details.
"""

from __future__ import annotations

from dataclasses import dataclass

GENERIC_PROFILE_EVENT_ID = 0


@dataclass
class Attendee:

    id: int | None
    name: str
    contact_info: str
    event_id: int = GENERIC_PROFILE_EVENT_ID
    checked_in: bool = False

    @property
    def is_generic_profile(self) -> bool:
        return self.event_id == GENERIC_PROFILE_EVENT_ID

    def matches_name(self, name: str) -> bool:
        return self.name.lower() == name.lower()

    def check_in(self) -> bool:
        """Set the one-way checked-in flag.

        Returns False when the attendee was already checked in, in which
        case nothing changes.
        """
        if self.checked_in:
            return False
        self.checked_in = True
        return True
