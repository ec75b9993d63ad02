"""Unit tests for the Event aggregate."""

import pytest

from ems.domain.exceptions import ValidationError
from ems.domain.model.event import Event, EventStatus


def _event(**overrides) -> Event:
    fields = dict(id=1, name="Expo", date="2025-05-01", time="10:00")
    fields.update(overrides)
    return Event(**fields)


class TestEventCreate:

    def test_create_starts_upcoming_without_id(self):
        event = Event.create("  Expo ", "2025-05-01", "10:00", "Hall", "Trade fair", "Fair")
        assert event.id is None
        assert event.name == "Expo"
        assert event.status == EventStatus.UPCOMING
        assert event.attendee_ids == []
        assert event.allocated_inventory == {}

    def test_invalid_date_rejected(self):
        with pytest.raises(ValidationError, match="Invalid date"):
            Event.create("Expo", "2025-13-01", "10:00")

    def test_invalid_time_rejected(self):
        with pytest.raises(ValidationError, match="Invalid time"):
            Event.create("Expo", "2025-05-01", "24:00")

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="name is required"):
            Event.create("   ", "2025-05-01", "10:00")


class TestEventAttendees:

    def test_add_attendee_keeps_insertion_order(self):
        event = _event()
        event.add_attendee(5)
        event.add_attendee(2)
        assert event.attendee_ids == [5, 2]

    def test_duplicate_add_is_noop(self):
        event = _event()
        assert event.add_attendee(5) is True
        assert event.add_attendee(5) is False
        assert event.attendee_ids == [5]

    def test_remove_missing_attendee_is_noop(self):
        event = _event(attendee_ids=[1])
        event.remove_attendee(99)
        assert event.attendee_ids == [1]

    @pytest.mark.parametrize("status", [EventStatus.CANCELED, EventStatus.COMPLETED])
    def test_closed_events_refuse_registrations(self, status):
        assert _event(status=status).accepts_registrations is False

    @pytest.mark.parametrize("status", [EventStatus.UPCOMING, EventStatus.ONGOING])
    def test_open_events_accept_registrations(self, status):
        assert _event(status=status).accepts_registrations is True


class TestEventAllocations:

    def test_record_allocation_accumulates(self):
        event = _event()
        event.record_allocation(7, 3)
        event.record_allocation(7, 2)
        assert event.allocated_inventory == {7: 5}

    def test_remove_allocation_partial(self):
        event = _event(allocated_inventory={7: 5})
        assert event.remove_allocation(7, 2) == 2
        assert event.allocated_inventory == {7: 3}

    def test_remove_allocation_clamps_and_drops_entry(self):
        event = _event(allocated_inventory={7: 3})
        assert event.remove_allocation(7, 10) == 3
        assert 7 not in event.allocated_inventory

    def test_remove_unknown_item_removes_nothing(self):
        event = _event(allocated_inventory={7: 3})
        assert event.remove_allocation(8, 1) == 0
        assert event.allocated_inventory == {7: 3}


class TestEventEdit:

    def test_update_location(self):
        event = _event()
        event.update_field("location", "Room 2")
        assert event.location == "Room 2"

    def test_update_date_validated(self):
        event = _event()
        with pytest.raises(ValidationError, match="Invalid date"):
            event.update_field("date", "01-05-2025")
        assert event.date == "2025-05-01"

    def test_unknown_field_rejected(self):
        with pytest.raises(ValidationError, match="cannot be edited"):
            _event().update_field("status", "3")

    def test_status_labels(self):
        assert EventStatus.CANCELED.label == "Canceled"
        assert EventStatus.UPCOMING.label == "Upcoming"
