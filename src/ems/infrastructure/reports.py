"""Human-readable report files.

These files are write-only: nothing in the system reads them back, so
they follow no line format beyond being readable.
"""

from __future__ import annotations

from pathlib import Path

from ems.application.dto import EventDTO, InventoryReportDTO

RULE = "-" * 57


def attendee_export_filename(event_id: int) -> str:
    return f"attendees_event_{event_id}.txt"


def write_attendee_list(path: Path, event: EventDTO) -> None:
    """Export one event's attendees; unknown attendee ids are left out."""
    lines = [
        f"Attendee List for Event: {event.name} (ID: {event.id})",
        f"Date: {event.date} Time: {event.time}",
        RULE,
    ]
    if not event.attendees:
        lines.append("No attendees registered for this event.")
    else:
        lines.append("ID,Name,ContactInfo,CheckedInStatus")
        for attendee in event.attendees:
            if not attendee.found:
                continue
            status = "Checked In" if attendee.checked_in else "Not Checked In"
            lines.append(f"{attendee.id},{attendee.name},{attendee.contact_info},{status}")
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


def format_inventory_report(report: InventoryReportDTO) -> list[str]:
    lines = [
        f"{'Item ID':<8}| {'Name':<17}| {'Total':>5} | {'Allocated':>9} | {'Available':>9} | Description",
        "-" * 71,
    ]
    for item in report.items:
        lines.append(
            f"{item.id:<8}| {item.name:<17}| {item.total:>5} | {item.allocated:>9} "
            f"| {item.available:>9} | {item.description}"
        )
    lines.append("-" * 71)
    lines.append(
        f"Overall Totals: Total: {report.total}, Allocated: {report.allocated}, "
        f"Available: {report.available}"
    )
    lines.append("")
    lines.append("Allocation per Event:")
    if not report.per_event:
        lines.append("  No inventory currently allocated to any event.")
    for event in report.per_event:
        lines.append(f"  Event: {event.event_name} (ID: {event.event_id})")
        for allocation in event.allocations:
            lines.append(f"    - {allocation.item_name}: {allocation.quantity} units")
    return lines


def write_inventory_report(path: Path, report: InventoryReportDTO) -> None:
    path.write_text("\n".join(format_inventory_report(report)) + "\n", encoding="utf-8")
