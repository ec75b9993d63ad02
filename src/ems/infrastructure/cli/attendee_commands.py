"""CLI commands for registrations, check-ins and attendee reports."""

from __future__ import annotations

from pathlib import Path

import click

from ems.application.access import Operation
from ems.application.attendance_report import AttendanceReportHandler
from ems.application.cancel_registration import CancelRegistrationHandler
from ems.application.check_in_attendee import CheckInAttendeeHandler
from ems.application.register_attendee import RegisterAttendeeHandler
from ems.application.show_events import ShowEventsHandler
from ems.application.update_contact_info import UpdateContactInfoHandler
from ems.domain.exceptions import DomainException
from ems.infrastructure.cli.context import CliContext, pass_cli_context
from ems.infrastructure.reports import attendee_export_filename, write_attendee_list


@click.command("register")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@click.option("--contact", required=True, help="Contact info (email/phone).")
@pass_cli_context
def attendee_register(ctx: CliContext, event_id: int, contact: str) -> None:
    """Register yourself for an event (regular users)."""
    handler = RegisterAttendeeHandler(
        attendee_repo=ctx.store.attendees,
        event_repo=ctx.store.events,
    )

    try:
        user = ctx.acting_user(Operation.REGISTER)
        result = handler.handle(user, event_id, contact)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.already_registered:
        click.echo(f"Attendee ID {result.attendee_id} already registered for event '{result.event_name}'.")
    elif result.created:
        click.echo(
            f"Registered as new attendee '{result.attendee_name}' (ID: {result.attendee_id}) "
            f"for event '{result.event_name}'."
        )
    else:
        click.echo(
            f"You are already associated with an attendee profile. "
            f"Registration confirmed for event '{result.event_name}'."
        )


@click.command("cancel")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@pass_cli_context
def attendee_cancel(ctx: CliContext, event_id: int) -> None:
    """Cancel your own registration (regular users)."""
    handler = CancelRegistrationHandler(
        attendee_repo=ctx.store.attendees,
        event_repo=ctx.store.events,
    )

    try:
        user = ctx.acting_user(Operation.CANCEL_REGISTRATION)
        handler.handle(user, event_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Your registration for event ID {event_id} has been canceled.")


@click.command("contact")
@click.option("--contact", required=True, help="New contact info (email/phone).")
@pass_cli_context
def attendee_contact(ctx: CliContext, contact: str) -> None:
    """Update your attendee contact info (regular users)."""
    handler = UpdateContactInfoHandler(
        attendee_repo=ctx.store.attendees,
        event_repo=ctx.store.events,
    )

    try:
        user = ctx.acting_user(Operation.UPDATE_CONTACT_INFO)
        handler.handle(user, contact)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Your attendee contact information has been updated.")


@click.command("check-in")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@click.option("--attendee", "attendee_id", required=True, type=int, help="Attendee ID.")
@pass_cli_context
def attendee_check_in(ctx: CliContext, event_id: int, attendee_id: int) -> None:
    """Check an attendee in for an event (admin only)."""
    handler = CheckInAttendeeHandler(
        attendee_repo=ctx.store.attendees,
        event_repo=ctx.store.events,
    )

    try:
        ctx.acting_user(Operation.CHECK_IN)
        result = handler.handle(attendee_id, event_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.already_checked_in:
        click.echo(f"{result.attendee_name} is already checked in for event ID {event_id}.")
    else:
        click.echo(f"{result.attendee_name} checked in successfully for event ID {event_id}.")


@click.command("list")
@pass_cli_context
def attendee_list(ctx: CliContext) -> None:
    """Show the attendee list of every event (admin only)."""
    try:
        ctx.acting_user(Operation.VIEW_ATTENDEES)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    events = ShowEventsHandler(
        ctx.store.events, ctx.store.attendees, ctx.store.inventory
    ).list_all()
    if not events:
        click.echo("No events available to view attendee lists.")
        return
    for dto in events:
        click.echo(f"Event: {dto.name} (ID: {dto.id})")
        if not dto.attendees:
            click.echo("  No attendees registered.")
        for a in dto.attendees:
            if a.found:
                click.echo(
                    f"    - {a.name} (ID: {a.id}, Contact: {a.contact_info}, "
                    f"Checked-in: {'Yes' if a.checked_in else 'No'})"
                )
            else:
                click.echo(f"    - Unknown Attendee (ID: {a.id})")
        click.echo("-" * 33)


@click.command("report")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@pass_cli_context
def attendee_report(ctx: CliContext, event_id: int) -> None:
    """Attendance report for one event (admin only)."""
    handler = AttendanceReportHandler(
        event_repo=ctx.store.events,
        attendee_repo=ctx.store.attendees,
    )

    try:
        ctx.acting_user(Operation.ATTENDANCE_REPORT)
        report = handler.handle(event_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Attendance Report for Event: {report.event_name} (ID: {report.event_id})")
    if not report.attendees:
        click.echo("No attendees registered for this event.")
        return
    for a in report.attendees:
        if a.found:
            click.echo(
                f"  - Name: {a.name}, Contact: {a.contact_info}, "
                f"Checked-in: {'Yes' if a.checked_in else 'No'}"
            )
        else:
            click.echo(f"  - Unknown Attendee (ID: {a.id})")
    click.echo("-" * 38)
    click.echo(f"Total Registered: {report.registered}")
    click.echo(f"Total Checked-in: {report.checked_in}")
    click.echo(f"Attendance Percentage: {report.percentage:.1f}%")


@click.command("export")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@click.option(
    "--output-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=Path("."),
    show_default=True,
    help="Directory to write the export file into.",
)
@pass_cli_context
def attendee_export(ctx: CliContext, event_id: int, output_dir: Path) -> None:
    """Export one event's attendee list to a text file (admin only)."""
    try:
        ctx.acting_user(Operation.ATTENDANCE_REPORT)
        dto = ShowEventsHandler(
            ctx.store.events, ctx.store.attendees, ctx.store.inventory
        ).handle(event_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    path = output_dir / attendee_export_filename(event_id)
    try:
        write_attendee_list(path, dto)
    except OSError as exc:
        raise click.ClickException(f"Could not open {path} for writing: {exc}")
    click.echo(f"Attendee list for event '{dto.name}' exported to {path}")
