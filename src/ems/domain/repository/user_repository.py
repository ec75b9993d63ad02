"""Abstract repository for User accounts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from ems.domain.model.user import User


class UserRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Allocate the next unique user ID."""

    @abstractmethod
    def get_by_id(self, user_id: int) -> User | None:
        """Return a user by its ID, or None if not found."""

    @abstractmethod
    def get_by_username(self, username: str) -> User | None:
        """Return a user by its exact username, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[User]:
        """Return every user account."""

    @abstractmethod
    def save(self, user: User) -> None:
        """Persist a new or updated user, assigning an ID to new ones."""

    @abstractmethod
    def remove(self, user_id: int) -> None:
        """Delete a user and persist the table."""
