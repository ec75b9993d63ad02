"""Event aggregate — consumes inventory and collects registrations.

An event holds only weak references: attendee ids into the attendee
table and item ids into the inventory table.  Either may dangle; the
presentation layer renders missing records as "Unknown".
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum

from ems.domain.exceptions import ValidationError
from ems.domain.model.validators import is_valid_date, is_valid_time


class EventStatus(IntEnum):
    UPCOMING = 0
    ONGOING = 1
    COMPLETED = 2
    CANCELED = 3

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass
class Event:
    """Aggregate root for events.

    Use ``Event.create()`` for new events; it validates date and time.
    The ``__init__`` stays permissive so the codec can reconstitute
    persisted events as they were written.
    """

    id: int | None
    name: str
    date: str
    time: str
    location: str = ""
    description: str = ""
    category: str = ""
    status: EventStatus = EventStatus.UPCOMING
    attendee_ids: list[int] = field(default_factory=list)
    allocated_inventory: dict[int, int] = field(default_factory=dict)

    # --- Factory (used for NEW events only) -----------------------------------

    @staticmethod
    def create(
        name: str,
        date: str,
        time: str,
        location: str = "",
        description: str = "",
        category: str = "",
    ) -> Event:
        if not name or not name.strip():
            raise ValidationError("Event name is required")
        if not is_valid_date(date):
            raise ValidationError(f"Invalid date '{date}', expected YYYY-MM-DD")
        if not is_valid_time(time):
            raise ValidationError(f"Invalid time '{time}', expected HH:MM")
        return Event(
            id=None,
            name=name.strip(),
            date=date,
            time=time,
            location=location,
            description=description,
            category=category,
        )

    # --- Registrations --------------------------------------------------------

    @property
    def accepts_registrations(self) -> bool:
        return self.status not in (EventStatus.CANCELED, EventStatus.COMPLETED)

    def add_attendee(self, attendee_id: int) -> bool:
        """Add an attendee id; returns False if it was already present."""
        if attendee_id in self.attendee_ids:
            return False
        self.attendee_ids.append(attendee_id)
        return True

    def remove_attendee(self, attendee_id: int) -> None:
        if attendee_id in self.attendee_ids:
            self.attendee_ids.remove(attendee_id)

    # --- Inventory allocations ------------------------------------------------

    def allocated_quantity_of(self, item_id: int) -> int:
        return self.allocated_inventory.get(item_id, 0)

    def record_allocation(self, item_id: int, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Allocation quantity must be positive")
        self.allocated_inventory[item_id] = self.allocated_quantity_of(item_id) + quantity

    def remove_allocation(self, item_id: int, quantity: int) -> int:
        """Remove up to *quantity* units of an item from this event.

        Requests above the recorded amount are clamped.  Entries that
        reach zero are dropped.  Returns the amount actually removed.
        """
        if quantity <= 0 or item_id not in self.allocated_inventory:
            return 0
        current = self.allocated_inventory[item_id]
        removed = min(current, quantity)
        if current - removed <= 0:
            del self.allocated_inventory[item_id]
        else:
            self.allocated_inventory[item_id] = current - removed
        return removed

    # --- Editing --------------------------------------------------------------

    def update_field(self, field_name: str, value: str) -> None:
        """Edit one descriptive field, validating date and time."""
        if field_name not in EDITABLE_FIELDS:
            raise ValidationError(f"Field '{field_name}' cannot be edited")
        if field_name == "name" and not value.strip():
            raise ValidationError("Event name is required")
        if field_name == "date" and not is_valid_date(value):
            raise ValidationError(f"Invalid date '{value}', expected YYYY-MM-DD")
        if field_name == "time" and not is_valid_time(value):
            raise ValidationError(f"Invalid time '{value}', expected HH:MM")
        setattr(self, field_name, value)


EDITABLE_FIELDS = ("name", "date", "time", "location", "description", "category")
