"""Line codecs for the four flat-file tables.

Each record is one line of comma-separated fields.  Events carry two
extra trailing fields: attendee ids joined with ``;`` and allocations
as ``;``-joined ``itemId:quantity`` pairs.  Enumerations are written as
their integer ordinal.

There is no quoting or escaping.  A free-text value containing ``,``
``;`` or ``:`` is written as-is and will not read back correctly; the
inventory description is the one exception, since it is the last field
and takes the rest of the line.

Decoding is lossy by contract: a malformed line is logged and turned
into a sentinel error record (or ``None`` for users) instead of
raising, so one bad line never aborts a load.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from ems.domain.model.attendee import Attendee
from ems.domain.model.event import Event, EventStatus
from ems.domain.model.inventory import InventoryItem
from ems.domain.model.user import Role, User

logger = logging.getLogger(__name__)

FIELD_SEPARATOR = ","
LIST_SEPARATOR = ";"
PAIR_SEPARATOR = ":"

ERROR_NAME = "ERROR"

T = TypeVar("T")


def is_error_record(record: object) -> bool:
    """True for ``None`` and for the sentinels returned on malformed lines."""
    if record is None:
        return True
    return getattr(record, "id", None) == 0 and getattr(record, "name", None) == ERROR_NAME


def _split_fields(line: str, minimum: int, maxsplit: int = -1) -> list[str]:
    fields = line.split(FIELD_SEPARATOR, maxsplit)
    if len(fields) < minimum:
        raise ValueError(f"expected at least {minimum} fields, got {len(fields)}")
    return fields


def _parse_int(value: str, field_name: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{field_name} is not an integer: {value!r}") from None


class LineCodec(ABC, Generic[T]):
    """Encode a record to one line and decode it back.

    Subclasses implement ``encode`` and ``_parse``; ``_parse`` signals a
    malformed line by raising ValueError.
    """

    table: str

    @abstractmethod
    def encode(self, record: T) -> str:
        """Render a record as a single line, without the newline."""

    @abstractmethod
    def _parse(self, line: str) -> T | None:
        """Parse a line or raise ValueError."""

    @abstractmethod
    def error_record(self) -> T | None:
        """The value returned for a malformed line."""

    def decode(self, line: str) -> T | None:
        try:
            return self._parse(line)
        except ValueError as exc:
            logger.warning("Malformed %s line %r: %s. Skipping.", self.table, line, exc)
            return self.error_record()


class UserCodec(LineCodec[User]):
    """``id,username,password,roleOrdinal``"""

    table = "user"

    def encode(self, record: User) -> str:
        return FIELD_SEPARATOR.join(
            [str(record.id), record.username, record.password, str(int(record.role))]
        )

    def _parse(self, line: str) -> User | None:
        fields = _split_fields(line, 4)
        user_id = _parse_int(fields[0], "id")
        role_value = _parse_int(fields[3], "role")
        if role_value not in (Role.ADMIN, Role.REGULAR_USER):
            logger.warning("Unknown role in user line %r. Skipping.", line)
            return None
        return User(id=user_id, username=fields[1], password=fields[2], role=Role(role_value))

    def error_record(self) -> None:
        return None


class AttendeeCodec(LineCodec[Attendee]):
    """``id,name,contactInfo,eventId,checkedIn``"""

    table = "attendee"

    def encode(self, record: Attendee) -> str:
        return FIELD_SEPARATOR.join(
            [
                str(record.id),
                record.name,
                record.contact_info,
                str(record.event_id),
                "1" if record.checked_in else "0",
            ]
        )

    def _parse(self, line: str) -> Attendee:
        fields = _split_fields(line, 5)
        return Attendee(
            id=_parse_int(fields[0], "id"),
            name=fields[1],
            contact_info=fields[2],
            event_id=_parse_int(fields[3], "event id"),
            checked_in=fields[4] == "1",
        )

    def error_record(self) -> Attendee:
        return Attendee(
            id=0, name=ERROR_NAME, contact_info=ERROR_NAME, event_id=0, checked_in=False
        )


class InventoryCodec(LineCodec[InventoryItem]):
    """``id,name,totalQuantity,allocatedQuantity,description``

    The description is everything after the fourth comma.
    """

    table = "inventory"

    def encode(self, record: InventoryItem) -> str:
        return FIELD_SEPARATOR.join(
            [
                str(record.id),
                record.name,
                str(record.total_quantity),
                str(record.allocated_quantity),
                record.description,
            ]
        )

    def _parse(self, line: str) -> InventoryItem:
        fields = _split_fields(line, 4, maxsplit=4)
        return InventoryItem(
            id=_parse_int(fields[0], "id"),
            name=fields[1],
            total_quantity=_parse_int(fields[2], "total quantity"),
            allocated_quantity=_parse_int(fields[3], "allocated quantity"),
            description=fields[4] if len(fields) > 4 else "",
        )

    def error_record(self) -> InventoryItem:
        return InventoryItem(
            id=0, name=ERROR_NAME, total_quantity=0, allocated_quantity=0,
            description=ERROR_NAME,
        )


class EventCodec(LineCodec[Event]):
    """``id,name,date,time,location,description,category,status,attendees,allocations``

    The last two fields may be empty or missing altogether; both read
    back as empty collections.
    """

    table = "event"

    def encode(self, record: Event) -> str:
        attendees = LIST_SEPARATOR.join(str(a) for a in record.attendee_ids)
        allocations = LIST_SEPARATOR.join(
            f"{item_id}{PAIR_SEPARATOR}{record.allocated_inventory[item_id]}"
            for item_id in sorted(record.allocated_inventory)
        )
        return FIELD_SEPARATOR.join(
            [
                str(record.id),
                record.name,
                record.date,
                record.time,
                record.location,
                record.description,
                record.category,
                str(int(record.status)),
                attendees,
                allocations,
            ]
        )

    def _parse(self, line: str) -> Event:
        fields = _split_fields(line, 8, maxsplit=9)
        status_value = _parse_int(fields[7], "status")
        try:
            status = EventStatus(status_value)
        except ValueError:
            raise ValueError(f"unknown status ordinal {status_value}") from None

        event = Event(
            id=_parse_int(fields[0], "id"),
            name=fields[1],
            date=fields[2],
            time=fields[3],
            location=fields[4],
            description=fields[5],
            category=fields[6],
            status=status,
        )
        if len(fields) > 8:
            for value in fields[8].split(LIST_SEPARATOR):
                if value:
                    event.add_attendee(_parse_int(value, "attendee id"))
        if len(fields) > 9:
            event.allocated_inventory = self._parse_allocations(fields[9], line)
        return event

    def error_record(self) -> Event:
        return Event(
            id=0, name=ERROR_NAME, date=ERROR_NAME, time=ERROR_NAME,
            location=ERROR_NAME, description=ERROR_NAME, category=ERROR_NAME,
        )

    @staticmethod
    def _parse_allocations(value: str, line: str) -> dict[int, int]:
        """Parse ``itemId:qty`` pairs, skipping (and logging) bad ones."""
        allocations: dict[int, int] = {}
        for pair in value.split(LIST_SEPARATOR):
            if not pair:
                continue
            item_id, separator, quantity = pair.partition(PAIR_SEPARATOR)
            try:
                if not separator:
                    raise ValueError("missing ':'")
                parsed_id = _parse_int(item_id, "item id")
                parsed_quantity = _parse_int(quantity, "quantity")
            except ValueError as exc:
                logger.warning(
                    "Malformed allocation %r in event line %r: %s. Skipping.", pair, line, exc
                )
                continue
            if parsed_quantity <= 0:
                logger.warning(
                    "Non-positive allocation %r in event line %r. Skipping.", pair, line
                )
                continue
            allocations[parsed_id] = parsed_quantity
        return allocations
