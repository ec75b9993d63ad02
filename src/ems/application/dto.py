"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Cross-table
references are resolved here; a dangling id is shown as "Unknown".
"""

from __future__ import annotations

from dataclasses import dataclass

UNKNOWN = "Unknown"


@dataclass(frozen=True)
class AttendeeLineDTO:
    id: int
    name: str
    contact_info: str
    checked_in: bool
    found: bool = True


@dataclass(frozen=True)
class AllocationLineDTO:
    item_id: int
    item_name: str
    quantity: int
    found: bool = True


@dataclass(frozen=True)
class EventDTO:
    """Output: an event with its references resolved for display."""

    id: int
    name: str
    date: str
    time: str
    location: str
    description: str
    category: str
    status: str
    attendees: list[AttendeeLineDTO]
    allocations: list[AllocationLineDTO]


@dataclass(frozen=True)
class InventoryLineDTO:
    id: int
    name: str
    total: int
    allocated: int
    available: int
    description: str


@dataclass(frozen=True)
class EventAllocationDTO:
    event_id: int
    event_name: str
    allocations: list[AllocationLineDTO]


@dataclass(frozen=True)
class InventoryReportDTO:
    items: list[InventoryLineDTO]
    total: int
    allocated: int
    available: int
    per_event: list[EventAllocationDTO]


@dataclass(frozen=True)
class AttendanceReportDTO:
    event_id: int
    event_name: str
    attendees: list[AttendeeLineDTO]
    registered: int
    checked_in: int

    @property
    def percentage(self) -> float:
        if self.registered == 0:
            return 0.0
        return self.checked_in / self.registered * 100.0


@dataclass(frozen=True)
class CheckInResultDTO:
    attendee_id: int
    attendee_name: str
    event_id: int
    already_checked_in: bool


@dataclass(frozen=True)
class RegistrationResultDTO:
    attendee_id: int
    attendee_name: str
    event_id: int
    event_name: str
    created: bool
    already_registered: bool
