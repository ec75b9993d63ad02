"""User account — a record tagged with a role.

The role decides which operations the account may invoke; see
``ems.application.access`` for the dispatch table.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

from ems.domain.exceptions import ValidationError

MIN_PASSWORD_LENGTH = 6


class Role(IntEnum):
    ADMIN = 0
    REGULAR_USER = 1
    NONE = 2


@dataclass
class User:

    id: int | None
    username: str
    password: str
    role: Role = Role.REGULAR_USER

    @staticmethod
    def create(username: str, password: str, role: Role) -> User:
        """Create a new account, enforcing password and role rules."""
        if not username or not username.strip():
            raise ValidationError("Username is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if role == Role.NONE:
            raise ValidationError("Invalid role, account not created")
        return User(id=None, username=username.strip(), password=password, role=role)

    @property
    def is_admin(self) -> bool:
        return self.role == Role.ADMIN

