"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
from pathlib import Path

from ems.application.seed_data import SeedInitialDataHandler
from ems.infrastructure.persistence.data_store import DataStore

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_store(data_dir: Path | None = None, seed: bool = True) -> DataStore:
    """Build the store for *data_dir*, load it and seed empty tables."""
    store = DataStore(data_dir or DEFAULT_DATA_DIR)
    store.load_all()
    if seed:
        seeded = SeedInitialDataHandler(store.users, store.events, store.inventory).handle()
        if seeded:
            logger.info("Seeded initial data for: %s", ", ".join(seeded))
    return store
