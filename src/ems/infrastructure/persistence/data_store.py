"""Repository facade — owns the four tables of one data directory.

``DataStore`` is the single application-state object: it is built once
by the composition root and handed to every use case that needs it.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

from ems.domain.service.inventory_allocation_service import (
    InventoryAllocationService,
)
from ems.infrastructure.persistence.flat_file_repositories import (
    FlatFileAttendeeRepository,
    FlatFileEventRepository,
    FlatFileInventoryRepository,
    FlatFileUserRepository,
)
from ems.infrastructure.persistence.flat_file_table import FlatFileTable

logger = logging.getLogger(__name__)

USERS_FILE = "users.txt"
EVENTS_FILE = "events.txt"
INVENTORY_FILE = "inventory.txt"
ATTENDEES_FILE = "attendees.txt"


@dataclass(frozen=True)
class LoadReport:
    """Record counts per table after ``load_all()``."""

    users: int
    events: int
    inventory: int
    attendees: int
    skipped_lines: int
    reconciled_items: int


class DataStore:

    def __init__(self, data_dir: Path) -> None:
        self.data_dir = data_dir
        self.users = FlatFileUserRepository(data_dir / USERS_FILE)
        self.events = FlatFileEventRepository(data_dir / EVENTS_FILE)
        self.inventory = FlatFileInventoryRepository(data_dir / INVENTORY_FILE)
        self.attendees = FlatFileAttendeeRepository(data_dir / ATTENDEES_FILE)

    @property
    def tables(self) -> dict[str, FlatFileTable]:
        return {
            "users": self.users,
            "events": self.events,
            "inventory": self.inventory,
            "attendees": self.attendees,
        }

    # --- Services bound to this store -----------------------------------------

    def allocation_service(self) -> InventoryAllocationService:
        return InventoryAllocationService(self.inventory, self.events)

    # --- Load / save ----------------------------------------------------------

    def load_all(self) -> LoadReport:
        """Load every table, reseed id allocators, then reconcile inventory.

        Reconciliation recomputes each item's allocated quantity from the
        events, repairing drift left by an interrupted save or a manual
        edit.  Repaired quantities are written back immediately.
        """
        counts = {name: table.load() for name, table in self.tables.items()}
        for table in self.tables.values():
            table.reseed_ids()

        drifted = self.allocation_service().reconcile_from_events()
        if drifted:
            self.inventory.persist()

        skipped = sum(table.skipped_lines for table in self.tables.values())
        if skipped:
            logger.info("Skipped %d malformed lines while loading %s", skipped, self.data_dir)
        logger.info("Loaded data from %s: %s", self.data_dir, counts)
        return LoadReport(
            users=counts["users"],
            events=counts["events"],
            inventory=counts["inventory"],
            attendees=counts["attendees"],
            skipped_lines=skipped,
            reconciled_items=len(drifted),
        )

    def save_all(self) -> list[str]:
        """Rewrite every table; returns the names of tables written.

        A table that cannot be written is logged and skipped, the others
        are still saved.
        """
        return [name for name, table in self.tables.items() if table.persist()]

    def export_table(self, name: str, path: Path) -> bool:
        """Write a copy of one table, in its line format, to *path*."""
        table = self.tables.get(name)
        if table is None:
            raise KeyError(f"Unknown table '{name}'")
        written = table.write_to(path)
        if written:
            logger.info("Exported %s to %s", name, path)
        return written
