"""Application service: Delete User Account use case."""

from __future__ import annotations

from ems.domain.exceptions import EntityNotFoundError, ValidationError
from ems.domain.model.user import User
from ems.domain.repository.user_repository import UserRepository


class DeleteUserHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, username: str, acting_user: User) -> User:
        if acting_user.username == username:
            raise ValidationError("Cannot delete the currently logged-in user")

        user = self._user_repo.get_by_username(username)
        if user is None:
            raise EntityNotFoundError(f"User '{username}' not found")

        self._user_repo.remove(user.id)
        return user
