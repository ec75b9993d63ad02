"""Monotonic id allocation, one allocator per entity table."""

from __future__ import annotations

from collections.abc import Iterable


class IdAllocator:
    """Issues increasing integer ids.

    The allocator must be reseeded from loaded records so that freshly
    created records never collide with restored ones.
    """

    def __init__(self, next_id: int = 1) -> None:
        self._next_id = next_id

    @property
    def next_id(self) -> int:
        return self._next_id

    def allocate(self) -> int:
        allocated = self._next_id
        self._next_id += 1
        return allocated

    def observe(self, record_id: int) -> None:
        """Make sure *record_id* will never be handed out again."""
        if record_id >= self._next_id:
            self._next_id = record_id + 1

    def reseed(self, record_ids: Iterable[int]) -> None:
        """Reset to ``max(record_ids) + 1``, or 1 for an empty table."""
        self._next_id = max(record_ids, default=0) + 1
