"""Application service: Authenticate use case."""

from __future__ import annotations

from ems.domain.exceptions import AuthenticationError
from ems.domain.model.user import User
from ems.domain.repository.user_repository import UserRepository


class AuthenticateHandler:

    def __init__(self, user_repo: UserRepository) -> None:
        self._user_repo = user_repo

    def handle(self, username: str, password: str) -> User:
        user = self._user_repo.get_by_username(username)
        if user is None or user.password != password:
            raise AuthenticationError("Invalid username or password")
        return user
