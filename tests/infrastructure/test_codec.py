"""Tests for the flat-file line codecs."""

import logging

from ems.domain.model.attendee import Attendee
from ems.domain.model.event import Event, EventStatus
from ems.domain.model.inventory import InventoryItem
from ems.domain.model.user import Role, User
from ems.infrastructure.persistence.codec import (
    AttendeeCodec,
    EventCodec,
    InventoryCodec,
    UserCodec,
    is_error_record,
)


def _warnings(caplog):
    return [r for r in caplog.records if r.levelno == logging.WARNING]


class TestUserCodec:

    def test_encode(self):
        user = User(id=1, username="admin", password="adminpass", role=Role.ADMIN)
        assert UserCodec().encode(user) == "1,admin,adminpass,0"

    def test_decode(self):
        user = UserCodec().decode("2,user1,user1pass,1")
        assert user == User(id=2, username="user1", password="user1pass", role=Role.REGULAR_USER)

    def test_role_none_is_dropped(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert UserCodec().decode("3,ghost,ghostpass,2") is None
        assert len(_warnings(caplog)) == 1

    def test_non_integer_role_is_dropped(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert UserCodec().decode("3,ghost,ghostpass,admin") is None
        assert len(_warnings(caplog)) == 1


class TestAttendeeCodec:

    def test_encode(self):
        attendee = Attendee(id=4, name="user1", contact_info="u1@x.org", event_id=2, checked_in=True)
        assert AttendeeCodec().encode(attendee) == "4,user1,u1@x.org,2,1"

    def test_only_one_means_checked_in(self):
        assert AttendeeCodec().decode("4,user1,u1@x.org,2,1").checked_in is True
        assert AttendeeCodec().decode("4,user1,u1@x.org,2,yes").checked_in is False

    def test_bad_id_gives_sentinel_and_one_warning(self, caplog):
        with caplog.at_level(logging.WARNING):
            record = AttendeeCodec().decode("abc,user1,u1@x.org,2,0")

        assert is_error_record(record)
        assert record.name == "ERROR"
        warnings = _warnings(caplog)
        assert len(warnings) == 1
        assert "abc,user1" in warnings[0].getMessage()

    def test_too_few_fields(self):
        assert is_error_record(AttendeeCodec().decode("4,user1,u1@x.org"))


class TestInventoryCodec:

    def test_description_keeps_its_commas(self):
        item = InventoryCodec().decode("2,Chairs,100,40,Stackable, blue, plastic")
        assert item.description == "Stackable, blue, plastic"
        assert (item.total_quantity, item.allocated_quantity) == (100, 40)

    def test_missing_description(self):
        item = InventoryCodec().decode("1,Projector,5,0")
        assert item.description == ""

    def test_encode(self):
        item = InventoryItem(id=1, name="Projector", total_quantity=5, allocated_quantity=2, description="HD")
        assert InventoryCodec().encode(item) == "1,Projector,5,2,HD"

    def test_non_integer_quantity(self, caplog):
        with caplog.at_level(logging.WARNING):
            assert is_error_record(InventoryCodec().decode("1,Projector,five,0,HD"))
        assert len(_warnings(caplog)) == 1


class TestEventCodec:

    def _event(self, **kwargs):
        defaults = dict(
            id=1, name="Expo", date="2025-05-01", time="10:00",
            location="Hall", description="Trade fair", category="Business",
        )
        defaults.update(kwargs)
        return Event(**defaults)

    def test_encode_sorts_allocations_by_item_id(self):
        event = self._event(
            status=EventStatus.ONGOING,
            attendee_ids=[3, 1],
            allocated_inventory={2: 40, 1: 2},
        )
        assert EventCodec().encode(event) == (
            "1,Expo,2025-05-01,10:00,Hall,Trade fair,Business,1,3;1,1:2;2:40"
        )

    def test_empty_collections_give_empty_trailing_fields(self):
        line = EventCodec().encode(self._event())
        assert line.endswith(",0,,")
        decoded = EventCodec().decode(line)
        assert decoded.attendee_ids == []
        assert decoded.allocated_inventory == {}

    def test_missing_trailing_fields(self):
        event = EventCodec().decode("1,Expo,2025-05-01,10:00,Hall,Trade fair,Business,3")
        assert event.status == EventStatus.CANCELED
        assert event.attendee_ids == []
        assert event.allocated_inventory == {}

    def test_decode_full_line(self):
        event = EventCodec().decode(
            "7,Expo,2025-05-01,10:00,Hall,Trade fair,Business,0,3;1,1:2;2:40"
        )
        assert event.id == 7
        assert event.attendee_ids == [3, 1]
        assert event.allocated_inventory == {1: 2, 2: 40}

    def test_bad_allocation_pairs_are_skipped(self, caplog):
        with caplog.at_level(logging.WARNING):
            event = EventCodec().decode(
                "1,Expo,2025-05-01,10:00,Hall,Trade fair,Business,0,,1:5;x:3;7;2:0"
            )

        assert not is_error_record(event)
        assert event.allocated_inventory == {1: 5}
        assert len(_warnings(caplog)) == 3

    def test_unknown_status_gives_sentinel(self):
        assert is_error_record(
            EventCodec().decode("1,Expo,2025-05-01,10:00,Hall,Trade fair,Business,9,,")
        )

    def test_bad_attendee_id_gives_sentinel(self):
        assert is_error_record(
            EventCodec().decode("1,Expo,2025-05-01,10:00,Hall,Trade fair,Business,0,1;x,")
        )

    def test_separator_in_free_text_does_not_survive(self):
        """Free-text fields are not escaped; a comma in the name shifts every field."""
        line = EventCodec().encode(self._event(name="Expo, North", location="", description="", category=""))
        assert is_error_record(EventCodec().decode(line))
