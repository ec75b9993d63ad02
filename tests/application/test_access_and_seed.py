"""Tests for the role dispatch table and initial data seeding."""

import pytest

from ems.application.access import OPERATIONS_BY_ROLE, Operation, ensure_permitted, is_permitted
from ems.application.seed_data import SeedInitialDataHandler
from ems.domain.exceptions import PermissionDeniedError
from ems.domain.model.event import Event
from ems.domain.model.user import Role, User
from tests.fakes import FakeEventRepository, FakeInventoryRepository, FakeUserRepository


class TestAccess:

    def test_admin_manages_but_does_not_register(self):
        admin = User(id=1, username="admin", password="adminpass", role=Role.ADMIN)
        assert is_permitted(admin, Operation.ALLOCATE_INVENTORY)
        assert not is_permitted(admin, Operation.REGISTER)

    def test_regular_user_cannot_allocate(self):
        user = User(id=2, username="user1", password="user1pass", role=Role.REGULAR_USER)
        with pytest.raises(PermissionDeniedError, match="may not allocate inventory"):
            ensure_permitted(user, Operation.ALLOCATE_INVENTORY)

    def test_role_none_has_no_operations(self):
        assert OPERATIONS_BY_ROLE[Role.NONE] == frozenset()

    def test_every_operation_is_reachable(self):
        reachable = set().union(*OPERATIONS_BY_ROLE.values())
        assert reachable == set(Operation)


class TestSeedInitialData:

    def test_seeds_empty_tables(self):
        users, events, inventory = FakeUserRepository(), FakeEventRepository(), FakeInventoryRepository()

        seeded = SeedInitialDataHandler(users, events, inventory).handle()

        assert seeded == ["users", "events", "inventory"]
        assert users.get_by_username("admin").role == Role.ADMIN
        assert [e.name for e in events.list_all()] == ["Tech Conference 2025", "Summer Music Festival"]
        assert inventory.get_by_name("chairs").total_quantity == 100

    def test_leaves_populated_tables_alone(self):
        events = FakeEventRepository([Event(id=5, name="Mine", date="2025-01-01", time="08:00")])
        users, inventory = FakeUserRepository(), FakeInventoryRepository()

        seeded = SeedInitialDataHandler(users, events, inventory).handle()

        assert seeded == ["users", "inventory"]
        assert [e.id for e in events.list_all()] == [5]
