"""CLI commands for inventory management."""

from __future__ import annotations

from pathlib import Path

import click

from ems.application.access import Operation
from ems.application.add_inventory_item import AddInventoryItemHandler
from ems.application.allocate_inventory import (
    AllocateInventoryHandler,
    DeallocateInventoryHandler,
)
from ems.application.show_inventory import InventoryReportHandler, ShowInventoryHandler
from ems.application.update_inventory_item import UpdateInventoryItemHandler
from ems.domain.exceptions import DomainException
from ems.infrastructure.cli.context import CliContext, pass_cli_context
from ems.infrastructure.reports import format_inventory_report, write_inventory_report


@click.command("add")
@click.option("--name", required=True, help="Item name.")
@click.option("--quantity", required=True, type=int, help="Total quantity.")
@click.option("--description", default="", help="Description.")
@pass_cli_context
def inventory_add(ctx: CliContext, name: str, quantity: int, description: str) -> None:
    """Add a new inventory item (admin only)."""
    try:
        ctx.acting_user(Operation.MANAGE_INVENTORY)
        item = AddInventoryItemHandler(inventory_repo=ctx.store.inventory).handle(
            name, quantity, description
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Inventory item '{item.name}' added (ID: {item.id}).")


@click.command("update")
@click.option("--id", "item_id", required=True, type=int, help="Item ID.")
@click.option("--name", default=None, help="New name.")
@click.option("--quantity", default=None, type=int, help="New total quantity.")
@click.option("--description", default=None, help="New description.")
@pass_cli_context
def inventory_update(
    ctx: CliContext,
    item_id: int,
    name: str | None,
    quantity: int | None,
    description: str | None,
) -> None:
    """Update an item's name, total quantity or description (admin only)."""
    handler = UpdateInventoryItemHandler(
        inventory_repo=ctx.store.inventory,
        event_repo=ctx.store.events,
    )

    try:
        ctx.acting_user(Operation.MANAGE_INVENTORY)
        handler.handle(item_id, name=name, total_quantity=quantity, description=description)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("Inventory item updated successfully.")


@click.command("show")
@pass_cli_context
def inventory_show(ctx: CliContext) -> None:
    """Show current inventory levels (admin only)."""
    try:
        ctx.acting_user(Operation.VIEW_INVENTORY)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    lines = ShowInventoryHandler(inventory_repo=ctx.store.inventory).handle()
    if not lines:
        click.echo("No inventory items.")
        return

    click.echo(f"{'ID':<6} {'Item':<20} {'Total':>8} {'Allocated':>10} {'Available':>10}")
    click.echo("-" * 58)
    for line in lines:
        click.echo(
            f"{line.id:<6} {line.name:<20} {line.total:>8} {line.allocated:>10} {line.available:>10}"
        )


@click.command("allocate")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@click.option("--item", "item_id", required=True, type=int, help="Inventory item ID.")
@click.option("--quantity", required=True, type=int, help="Quantity to allocate.")
@pass_cli_context
def inventory_allocate(ctx: CliContext, event_id: int, item_id: int, quantity: int) -> None:
    """Allocate inventory to an event (admin only)."""
    handler = AllocateInventoryHandler(
        inventory_repo=ctx.store.inventory,
        event_repo=ctx.store.events,
    )

    try:
        ctx.acting_user(Operation.ALLOCATE_INVENTORY)
        available = handler.handle(event_id, item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{quantity} of item {item_id} allocated to event {event_id} ({available} left).")


@click.command("deallocate")
@click.option("--event", "event_id", required=True, type=int, help="Event ID.")
@click.option("--item", "item_id", required=True, type=int, help="Inventory item ID.")
@click.option("--quantity", required=True, type=int, help="Quantity to return.")
@pass_cli_context
def inventory_deallocate(ctx: CliContext, event_id: int, item_id: int, quantity: int) -> None:
    """Return allocated inventory from an event to the pool (admin only)."""
    handler = DeallocateInventoryHandler(
        inventory_repo=ctx.store.inventory,
        event_repo=ctx.store.events,
    )

    try:
        ctx.acting_user(Operation.ALLOCATE_INVENTORY)
        removed = handler.handle(event_id, item_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{removed} of item {item_id} deallocated from event {event_id}.")


@click.command("report")
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the report to this file.",
)
@pass_cli_context
def inventory_report(ctx: CliContext, output: Path | None) -> None:
    """Full inventory report with per-event allocations (admin only)."""
    handler = InventoryReportHandler(
        inventory_repo=ctx.store.inventory,
        event_repo=ctx.store.events,
    )

    try:
        ctx.acting_user(Operation.VIEW_INVENTORY)
        report = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not report.items:
        click.echo("No inventory items to report.")
        return
    for line in format_inventory_report(report):
        click.echo(line)
    if output is not None:
        try:
            write_inventory_report(output, report)
        except OSError as exc:
            raise click.ClickException(f"Could not open {output} for writing: {exc}")
        click.echo(f"Inventory report written to {output}")
