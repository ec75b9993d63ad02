"""Integration tests for the user account use cases."""

import pytest

from ems.application.authenticate import AuthenticateHandler
from ems.application.create_user import CreateUserHandler
from ems.application.delete_user import DeleteUserHandler
from ems.domain.exceptions import AuthenticationError, EntityNotFoundError, ValidationError
from ems.domain.model.user import Role, User
from tests.fakes import FakeUserRepository


def _repo() -> FakeUserRepository:
    return FakeUserRepository(
        [
            User(id=1, username="admin", password="adminpass", role=Role.ADMIN),
            User(id=2, username="user1", password="user1pass", role=Role.REGULAR_USER),
        ]
    )


class TestCreateUser:

    def test_creates_with_next_id(self):
        repo = _repo()
        user = CreateUserHandler(repo).handle("carol", "carolpass", Role.REGULAR_USER)
        assert user.id == 3
        assert repo.get_by_username("carol") is user

    def test_duplicate_username_rejected(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="already exists"):
            CreateUserHandler(repo).handle("user1", "another1", Role.REGULAR_USER)
        assert len(repo.list_all()) == 2

    def test_short_password_rejected(self):
        repo = _repo()
        with pytest.raises(ValidationError, match="at least 6"):
            CreateUserHandler(repo).handle("carol", "abc", Role.REGULAR_USER)
        assert repo.get_by_username("carol") is None


class TestDeleteUser:

    def test_admin_deletes_other_user(self):
        repo = _repo()
        admin = repo.get_by_username("admin")
        DeleteUserHandler(repo).handle("user1", admin)
        assert repo.get_by_username("user1") is None

    def test_cannot_delete_self(self):
        repo = _repo()
        admin = repo.get_by_username("admin")
        with pytest.raises(ValidationError, match="currently logged-in"):
            DeleteUserHandler(repo).handle("admin", admin)

    def test_unknown_user(self):
        repo = _repo()
        with pytest.raises(EntityNotFoundError, match="not found"):
            DeleteUserHandler(repo).handle("ghost", repo.get_by_username("admin"))


class TestAuthenticate:

    def test_valid_credentials(self):
        user = AuthenticateHandler(_repo()).handle("user1", "user1pass")
        assert user.id == 2

    @pytest.mark.parametrize("username,password", [("user1", "wrong!"), ("nobody", "user1pass")])
    def test_invalid_credentials(self, username, password):
        with pytest.raises(AuthenticationError):
            AuthenticateHandler(_repo()).handle(username, password)
