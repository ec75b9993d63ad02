"""Application service: Seed Initial Data use case.

Fills empty tables with a starter set so a fresh data directory is
usable straight away.  Tables that already hold records are left alone.
"""

from __future__ import annotations

from ems.domain.model.event import Event
from ems.domain.model.inventory import InventoryItem
from ems.domain.model.user import Role, User
from ems.domain.repository.event_repository import EventRepository
from ems.domain.repository.inventory_repository import InventoryRepository
from ems.domain.repository.user_repository import UserRepository

SEED_USERS = [
    ("admin", "adminpass", Role.ADMIN),
    ("user1", "user1pass", Role.REGULAR_USER),
    ("user2", "user2pass", Role.REGULAR_USER),
]

SEED_EVENTS = [
    ("Tech Conference 2025", "2025-10-20", "09:00", "Grand Hall", "Annual tech conference", "Conference"),
    ("Summer Music Festival", "2025-07-15", "14:00", "City Park", "Outdoor music event", "Social"),
]

SEED_INVENTORY = [
    ("Projector", 5, "HD Projector"),
    ("Chairs", 100, "Standard chairs"),
]


class SeedInitialDataHandler:

    def __init__(
        self,
        user_repo: UserRepository,
        event_repo: EventRepository,
        inventory_repo: InventoryRepository,
    ) -> None:
        self._user_repo = user_repo
        self._event_repo = event_repo
        self._inventory_repo = inventory_repo

    def handle(self) -> list[str]:
        """Seed every empty table; returns the names of seeded tables."""
        seeded: list[str] = []
        if not self._user_repo.list_all():
            for username, password, role in SEED_USERS:
                self._user_repo.save(User.create(username, password, role))
            seeded.append("users")
        if not self._event_repo.list_all():
            for fields in SEED_EVENTS:
                self._event_repo.save(Event.create(*fields))
            seeded.append("events")
        if not self._inventory_repo.list_all():
            for name, quantity, description in SEED_INVENTORY:
                self._inventory_repo.save(
                    InventoryItem(id=None, name=name, total_quantity=quantity, description=description)
                )
            seeded.append("inventory")
        return seeded
