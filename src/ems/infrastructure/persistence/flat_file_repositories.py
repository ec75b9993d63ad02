"""Flat-file implementations of the four domain repositories."""

from __future__ import annotations

from pathlib import Path

from ems.domain.model.attendee import Attendee
from ems.domain.model.event import Event
from ems.domain.model.inventory import InventoryItem
from ems.domain.model.user import User
from ems.domain.repository.attendee_repository import AttendeeRepository
from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository
from ems.domain.repository.user_repository import UserRepository
from ems.infrastructure.persistence.codec import (
    AttendeeCodec,
    EventCodec,
    InventoryCodec,
    UserCodec,
)
from ems.infrastructure.persistence.flat_file_table import FlatFileTable


class FlatFileUserRepository(FlatFileTable[User], UserRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__(file_path, UserCodec())

    def get_by_username(self, username: str) -> User | None:
        for user in self._records:
            if user.username == username:
                return user
        return None


class FlatFileEventRepository(FlatFileTable[Event], EventRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__(file_path, EventCodec())


class FlatFileAttendeeRepository(FlatFileTable[Attendee], AttendeeRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__(file_path, AttendeeCodec())

    def remove_for_event(self, event_id: int) -> list[Attendee]:
        return self._remove_where(lambda attendee: attendee.event_id == event_id)


class FlatFileInventoryRepository(FlatFileTable[InventoryItem], InventoryRepository):

    def __init__(self, file_path: Path) -> None:
        super().__init__(file_path, InventoryCodec())

    def get_by_name(self, name: str) -> InventoryItem | None:
        for item in self._records:
            if item.name.lower() == name.lower():
                return item
        return None
