"""Integration tests for the event use cases."""

import pytest

from ems.application.create_event import CreateEventHandler
from ems.application.delete_event import DeleteEventHandler
from ems.application.edit_event import EditEventHandler, UpdateEventStatusHandler
from ems.application.show_events import ShowEventsHandler
from ems.domain.exceptions import EntityNotFoundError, ValidationError
from ems.domain.model.attendee import Attendee
from ems.domain.model.event import Event, EventStatus
from ems.domain.model.inventory import InventoryItem
from tests.fakes import FakeAttendeeRepository, FakeEventRepository, FakeInventoryRepository


def _setup():
    events = FakeEventRepository(
        [
            Event(
                id=1, name="Tech Conference", date="2025-10-20", time="09:00",
                attendee_ids=[1, 99], allocated_inventory={1: 3, 50: 2},
            ),
            Event(id=2, name="Music Festival", date="2025-07-15", time="14:00"),
        ]
    )
    attendees = FakeAttendeeRepository(
        [Attendee(id=1, name="alice", contact_info="a@x.org", event_id=1, checked_in=True)]
    )
    inventory = FakeInventoryRepository(
        [InventoryItem(id=1, name="Projector", total_quantity=5, allocated_quantity=3)]
    )
    return events, attendees, inventory


class TestCreateEvent:

    def test_create_assigns_next_id(self):
        events, _, _ = _setup()
        event = CreateEventHandler(events).handle("Expo", "2025-05-01", "10:00", "Hall")
        assert event.id == 3
        assert events.get_by_id(3).status == EventStatus.UPCOMING

    def test_bad_time_not_saved(self):
        events, _, _ = _setup()
        with pytest.raises(ValidationError, match="Invalid time"):
            CreateEventHandler(events).handle("Expo", "2025-05-01", "7pm")
        assert len(events.list_all()) == 2


class TestEditEvent:

    def test_edit_field(self):
        events, _, _ = _setup()
        EditEventHandler(events).handle(2, "category", "Social")
        assert events.get_by_id(2).category == "Social"

    def test_edit_unknown_event(self):
        events, _, _ = _setup()
        with pytest.raises(EntityNotFoundError):
            EditEventHandler(events).handle(9, "name", "x")

    def test_status_is_free_form(self):
        events, _, _ = _setup()
        handler = UpdateEventStatusHandler(events)
        handler.handle(1, EventStatus.CANCELED)
        handler.handle(1, EventStatus.UPCOMING)
        assert events.get_by_id(1).status == EventStatus.UPCOMING


class TestShowEvents:

    def test_dangling_references_render_unknown(self):
        events, attendees, inventory = _setup()
        dto = ShowEventsHandler(events, attendees, inventory).handle(1)

        assert [(a.id, a.name, a.found) for a in dto.attendees] == [
            (1, "alice", True),
            (99, "Unknown", False),
        ]
        assert [(a.item_name, a.quantity, a.found) for a in dto.allocations] == [
            ("Projector", 3, True),
            ("Unknown", 2, False),
        ]
        assert dto.status == "Upcoming"

    def test_search_by_name_or_date(self):
        events, attendees, inventory = _setup()
        handler = ShowEventsHandler(events, attendees, inventory)

        assert [e.id for e in handler.search("MUSIC")] == [2]
        assert [e.id for e in handler.search("2025-10")] == [1]
        assert handler.search("nothing") == []


class TestDeleteEvent:

    def test_delete_cascades(self):
        events, attendees, inventory = _setup()

        DeleteEventHandler(events, attendees, inventory).handle(1)

        assert events.get_by_id(1) is None
        assert attendees.get_by_id(1) is None
        assert inventory.get_by_id(1).allocated_quantity == 0
