"""Shared machinery for the flat-file repositories.

A table keeps its records in memory as the authoritative copy and
rewrites the whole file after every mutation (truncate-and-rewrite,
never append or patch).
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Generic, TypeVar

from ems.domain.model.identifiers import IdAllocator
from ems.infrastructure.persistence.codec import LineCodec, is_error_record

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FlatFileTable(Generic[T]):

    def __init__(self, file_path: Path, codec: LineCodec[T]) -> None:
        self._file_path = file_path
        self._codec = codec
        self._records: list[T] = []
        self._ids = IdAllocator()
        self.skipped_lines = 0

    # --- Repository interface -------------------------------------------------

    def next_id(self) -> int:
        return self._ids.allocate()

    def get_by_id(self, record_id: int) -> T | None:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def list_all(self) -> list[T]:
        return list(self._records)

    def save(self, record: T) -> None:
        self._upsert(record)
        self.persist()

    def save_all(self, records: list[T]) -> None:
        for record in records:
            self._upsert(record)
        self.persist()

    def remove(self, record_id: int) -> None:
        self._remove_where(lambda record: record.id == record_id)

    # --- Load / persist -------------------------------------------------------

    def load(self) -> int:
        """Replace the in-memory records with the file contents.

        A missing file means an empty table.  Blank lines are ignored and
        lines the codec cannot parse are counted in ``skipped_lines``.
        """
        self._records = []
        self.skipped_lines = 0
        if not self._file_path.exists():
            logger.debug("%s does not exist, starting empty", self._file_path)
            return 0

        for line in self._file_path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            record = self._codec.decode(line)
            if is_error_record(record):
                self.skipped_lines += 1
                continue
            self._records.append(record)
        logger.debug("Loaded %d records from %s", len(self._records), self._file_path)
        return len(self._records)

    def reseed_ids(self) -> None:
        self._ids.reseed(record.id for record in self._records)

    def persist(self) -> bool:
        """Rewrite the whole file; returns False if it could not be written."""
        return self.write_to(self._file_path)

    def write_to(self, path: Path) -> bool:
        text = "".join(self._codec.encode(record) + "\n" for record in self._records)
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(text, encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write %s: %s", path, exc)
            return False
        return True

    # --- Internal helpers -----------------------------------------------------

    def _upsert(self, record: T) -> None:
        if record.id is None:
            record.id = self.next_id()
        else:
            self._ids.observe(record.id)

        for i, existing in enumerate(self._records):
            if existing is record or existing.id == record.id:
                self._records[i] = record
                return
        self._records.append(record)

    def _remove_where(self, predicate: Callable[[T], bool]) -> list[T]:
        removed = [record for record in self._records if predicate(record)]
        if removed:
            self._records = [record for record in self._records if not predicate(record)]
            self.persist()
        return removed
