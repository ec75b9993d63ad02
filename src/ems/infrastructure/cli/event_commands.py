"""CLI commands for the Event aggregate."""

from __future__ import annotations

import click

from ems.application.access import Operation
from ems.application.create_event import CreateEventHandler
from ems.application.delete_event import DeleteEventHandler
from ems.application.dto import EventDTO
from ems.application.edit_event import EditEventHandler, UpdateEventStatusHandler
from ems.application.show_events import ShowEventsHandler
from ems.domain.exceptions import DomainException
from ems.domain.model.event import EDITABLE_FIELDS, EventStatus
from ems.infrastructure.cli.context import CliContext, pass_cli_context


def _show_handler(ctx: CliContext) -> ShowEventsHandler:
    return ShowEventsHandler(
        event_repo=ctx.store.events,
        attendee_repo=ctx.store.attendees,
        inventory_repo=ctx.store.inventory,
    )


def _display_event(dto: EventDTO) -> None:
    """Shared formatting for displaying an event."""
    click.echo(f"Event ID: {dto.id}")
    click.echo(f"Name: {dto.name}")
    click.echo(f"Date: {dto.date}")
    click.echo(f"Time: {dto.time}")
    click.echo(f"Location: {dto.location}")
    click.echo(f"Description: {dto.description}")
    click.echo(f"Category: {dto.category}")
    click.echo(f"Status: {dto.status}")

    if dto.attendees:
        names = ", ".join(
            f"{a.name} (ID:{a.id}{' - Checked In' if a.checked_in else ''})"
            if a.found
            else f"Unknown Attendee (ID:{a.id})"
            for a in dto.attendees
        )
    else:
        names = "None"
    click.echo(f"  Attendees ({len(dto.attendees)}): {names}")

    if dto.allocations:
        items = ", ".join(
            f"{a.item_name} ({a.quantity} units)"
            if a.found
            else f"Unknown Item (ID:{a.item_id}) ({a.quantity} units)"
            for a in dto.allocations
        )
    else:
        items = "None"
    click.echo(f"  Allocated Inventory: {items}")


@click.command("create")
@click.option("--name", required=True, help="Event name.")
@click.option("--date", required=True, help="Date as YYYY-MM-DD.")
@click.option("--time", required=True, help="Time as HH:MM (24h).")
@click.option("--location", default="", help="Location.")
@click.option("--description", default="", help="Description.")
@click.option("--category", default="", help="Category.")
@pass_cli_context
def event_create(
    ctx: CliContext,
    name: str,
    date: str,
    time: str,
    location: str,
    description: str,
    category: str,
) -> None:
    """Create a new event (admin only)."""
    try:
        ctx.acting_user(Operation.CREATE_EVENT)
        created = CreateEventHandler(event_repo=ctx.store.events).handle(
            name, date, time, location, description, category
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Event '{created.name}' created (ID: {created.id}).")


@click.command("list")
@pass_cli_context
def event_list(ctx: CliContext) -> None:
    """List all events."""
    try:
        ctx.acting_user(Operation.VIEW_EVENTS)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    events = _show_handler(ctx).list_all()
    if not events:
        click.echo("No events.")
        return
    for dto in events:
        _display_event(dto)
        click.echo("-" * 19)


@click.command("search")
@click.argument("term")
@pass_cli_context
def event_search(ctx: CliContext, term: str) -> None:
    """Search events by name or date."""
    try:
        ctx.acting_user(Operation.VIEW_EVENTS)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    events = _show_handler(ctx).search(term)
    if not events:
        click.echo(f"No events found matching '{term}'.")
        return
    for dto in events:
        _display_event(dto)
        click.echo("-" * 19)


@click.command("show")
@click.option("--id", "event_id", required=True, type=int, help="Event ID to display.")
@pass_cli_context
def event_show(ctx: CliContext, event_id: int) -> None:
    """Show details of one event."""
    try:
        ctx.acting_user(Operation.VIEW_EVENTS)
        dto = _show_handler(ctx).handle(event_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_event(dto)


@click.command("edit")
@click.option("--id", "event_id", required=True, type=int, help="Event ID to edit.")
@click.option("--field", "field_name", required=True, type=click.Choice(EDITABLE_FIELDS))
@click.option("--value", required=True, help="New value.")
@pass_cli_context
def event_edit(ctx: CliContext, event_id: int, field_name: str, value: str) -> None:
    """Edit one field of an event (admin only)."""
    try:
        ctx.acting_user(Operation.EDIT_EVENT)
        EditEventHandler(event_repo=ctx.store.events).handle(event_id, field_name, value)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Event details updated successfully.")


@click.command("status")
@click.option("--id", "event_id", required=True, type=int, help="Event ID.")
@click.option(
    "--status",
    required=True,
    type=click.Choice([s.name for s in EventStatus], case_sensitive=False),
)
@pass_cli_context
def event_status(ctx: CliContext, event_id: int, status: str) -> None:
    """Change an event's status (admin only)."""
    try:
        ctx.acting_user(Operation.UPDATE_EVENT_STATUS)
        updated = UpdateEventStatusHandler(event_repo=ctx.store.events).handle(
            event_id, EventStatus[status.upper()]
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Status updated to {updated.status.label}.")


@click.command("delete")
@click.option("--id", "event_id", required=True, type=int, help="Event ID to delete.")
@pass_cli_context
def event_delete(ctx: CliContext, event_id: int) -> None:
    """Delete an event with its registrations (admin only)."""
    handler = DeleteEventHandler(
        event_repo=ctx.store.events,
        attendee_repo=ctx.store.attendees,
        inventory_repo=ctx.store.inventory,
    )

    try:
        ctx.acting_user(Operation.DELETE_EVENT)
        deletion = handler.handle(event_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Event '{deletion.event.name}' (ID: {event_id}) and its associated "
        f"registrations deleted."
    )
