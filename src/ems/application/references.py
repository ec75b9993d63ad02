"""Resolve weak cross-table references for display.

Events point at attendees and inventory items by id only.  A missing
record is not an error: it is rendered as "Unknown".
"""

from __future__ import annotations

from ems.application.dto import UNKNOWN, AllocationLineDTO, AttendeeLineDTO
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.inventory_repository import InventoryRepository


def attendee_line(attendee_repo: AttendeeRepository, attendee_id: int) -> AttendeeLineDTO:
    attendee = attendee_repo.get_by_id(attendee_id)
    if attendee is None:
        return AttendeeLineDTO(
            id=attendee_id, name=UNKNOWN, contact_info="", checked_in=False, found=False
        )
    return AttendeeLineDTO(
        id=attendee_id,
        name=attendee.name,
        contact_info=attendee.contact_info,
        checked_in=attendee.checked_in,
    )


def allocation_line(
    inventory_repo: InventoryRepository, item_id: int, quantity: int
) -> AllocationLineDTO:
    item = inventory_repo.get_by_id(item_id)
    return AllocationLineDTO(
        item_id=item_id,
        item_name=item.name if item is not None else UNKNOWN,
        quantity=quantity,
        found=item is not None,
    )
