"""InventoryItem aggregate — a limited quantity pool shared by events.

Each item knows its total quantity and how much of it is currently
allocated to events.  The per-event breakdown lives on the events
themselves; ``allocated_quantity`` must always equal the sum of it.
"""

from __future__ import annotations

from dataclasses import dataclass

from ems.domain.exceptions import ValidationError


@dataclass
class InventoryItem:
    """Aggregate root for inventory tracking.

    Invariants:
    - ``allocated_quantity`` can never exceed ``total_quantity``
    - ``available_quantity`` is always >= 0

    ``allocated_quantity`` should only be changed through the allocation
    service, which updates the owning event in the same step.
    """

    id: int | None
    name: str
    total_quantity: int
    allocated_quantity: int = 0
    description: str = ""

    @property
    def available_quantity(self) -> int:
        return self.total_quantity - self.allocated_quantity

    def allocate(self, quantity: int) -> None:
        """Take *quantity* units out of the available pool.

        Raises ValidationError if insufficient inventory is available.
        """
        if quantity <= 0:
            raise ValidationError("Allocation quantity must be positive")
        if quantity > self.available_quantity:
            raise ValidationError(
                f"Not enough '{self.name}' available "
                f"(need {quantity}, have {self.available_quantity} available)"
            )
        self.allocated_quantity += quantity

    def release(self, quantity: int) -> None:
        """Return previously allocated units to the pool."""
        if quantity <= 0:
            raise ValidationError("Deallocation quantity must be positive")
        if quantity > self.allocated_quantity:
            raise ValidationError(
                f"Cannot deallocate {quantity} of '{self.name}' "
                f"(only {self.allocated_quantity} allocated)"
            )
        self.allocated_quantity -= quantity

    def set_total_quantity(self, total_quantity: int) -> None:
        """Replace the total, refusing to drop below what is allocated."""
        if total_quantity < 0:
            raise ValidationError("Total quantity cannot be negative")
        if total_quantity < self.allocated_quantity:
            raise ValidationError(
                f"New total quantity ({total_quantity}) cannot be less than "
                f"allocated ({self.allocated_quantity})"
            )
        self.total_quantity = total_quantity
