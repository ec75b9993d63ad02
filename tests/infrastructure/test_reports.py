"""Tests for the human-readable report writers."""

from ems.application.dto import (
    AllocationLineDTO,
    AttendeeLineDTO,
    EventAllocationDTO,
    EventDTO,
    InventoryLineDTO,
    InventoryReportDTO,
)
from ems.infrastructure.reports import (
    attendee_export_filename,
    format_inventory_report,
    write_attendee_list,
)


def _event(attendees):
    return EventDTO(
        id=3, name="Expo", date="2025-05-01", time="10:00", location="Hall",
        description="", category="", status="Upcoming",
        attendees=attendees, allocations=[],
    )


class TestAttendeeExport:

    def test_filename(self):
        assert attendee_export_filename(12) == "attendees_event_12.txt"

    def test_lists_known_attendees_only(self, tmp_path):
        path = tmp_path / attendee_export_filename(3)
        write_attendee_list(
            path,
            _event(
                [
                    AttendeeLineDTO(id=1, name="user1", contact_info="u1@x.org", checked_in=True),
                    AttendeeLineDTO(id=9, name="Unknown", contact_info="", checked_in=False, found=False),
                    AttendeeLineDTO(id=2, name="user2", contact_info="u2@x.org", checked_in=False),
                ]
            ),
        )

        lines = path.read_text(encoding="utf-8").splitlines()
        assert lines[0] == "Attendee List for Event: Expo (ID: 3)"
        assert lines[3:] == [
            "ID,Name,ContactInfo,CheckedInStatus",
            "1,user1,u1@x.org,Checked In",
            "2,user2,u2@x.org,Not Checked In",
        ]

    def test_empty_event(self, tmp_path):
        path = tmp_path / "out.txt"
        write_attendee_list(path, _event([]))
        assert "No attendees registered for this event." in path.read_text(encoding="utf-8")


class TestInventoryReport:

    def test_totals_and_breakdown(self):
        report = InventoryReportDTO(
            items=[
                InventoryLineDTO(id=1, name="Projector", total=5, allocated=2, available=3, description="HD"),
            ],
            total=5,
            allocated=2,
            available=3,
            per_event=[
                EventAllocationDTO(
                    event_id=1,
                    event_name="Expo",
                    allocations=[AllocationLineDTO(item_id=1, item_name="Projector", quantity=2)],
                )
            ],
        )

        lines = format_inventory_report(report)

        assert "Overall Totals: Total: 5, Allocated: 2, Available: 3" in lines
        assert lines[-2:] == ["  Event: Expo (ID: 1)", "    - Projector: 2 units"]

    def test_nothing_allocated(self):
        report = InventoryReportDTO(items=[], total=0, allocated=0, available=0, per_event=[])
        assert format_inventory_report(report)[-1] == "  No inventory currently allocated to any event."
