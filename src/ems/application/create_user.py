"""Application service: Create User Account use case."""

from __future__ import annotations

from ems.domain.exceptions import ValidationError
from ems.domain.model.user import Role, User
from ems.domain.repository.user_repository import UserRepository


class CreateUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, username: str, password: str, role: Role) -> User:
        """Create an account; usernames are unique across the table."""
        if self._user_repo.get_by_username(username.strip()) is not None:
            raise ValidationError(f"Username '{username}' already exists")

        user = User.create(username, password, role)
        self._user_repo.save(user)
        return user
