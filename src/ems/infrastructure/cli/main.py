import logging
from pathlib import Path

import click

from ems.infrastructure.cli.attendee_commands import (
    attendee_cancel,
    attendee_check_in,
    attendee_contact,
    attendee_export,
    attendee_list,
    attendee_register,
    attendee_report,
)
from ems.infrastructure.cli.context import CliContext
from ems.infrastructure.cli.event_commands import (
    event_create,
    event_delete,
    event_edit,
    event_list,
    event_search,
    event_show,
    event_status,
)
from ems.infrastructure.cli.export_commands import export_table
from ems.infrastructure.cli.inventory_commands import (
    inventory_add,
    inventory_allocate,
    inventory_deallocate,
    inventory_report,
    inventory_show,
    inventory_update,
)
from ems.infrastructure.cli.user_commands import user_create, user_delete, user_list


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory holding the data files (default: ./data).",
)
@click.option("--user", "username", default=None, help="Username of the acting user.")
@click.option("--password", default=None, help="Password of the acting user.")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Show informational logs.")
@click.pass_context
def cli(
    ctx: click.Context,
    data_dir: Path | None,
    username: str | None,
    password: str | None,
    verbose: bool,
) -> None:
    """EMS — Event Management System"""
    logging.basicConfig(
        level=logging.INFO if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = CliContext(data_dir=data_dir, username=username, password=password)


@cli.group()
def user() -> None:
    """Manage user accounts."""


@cli.group()
def event() -> None:
    """Manage events."""


@cli.group()
def attendee() -> None:
    """Manage registrations and check-ins."""


@cli.group()
def inventory() -> None:
    """Manage inventory."""


@cli.group()
def export() -> None:
    """Export data files."""


# Register subcommands
user.add_command(user_create)
user.add_command(user_delete)
user.add_command(user_list)
event.add_command(event_create)
event.add_command(event_delete)
event.add_command(event_edit)
event.add_command(event_list)
event.add_command(event_search)
event.add_command(event_show)
event.add_command(event_status)
attendee.add_command(attendee_cancel)
attendee.add_command(attendee_check_in)
attendee.add_command(attendee_contact)
attendee.add_command(attendee_export)
attendee.add_command(attendee_list)
attendee.add_command(attendee_register)
attendee.add_command(attendee_report)
inventory.add_command(inventory_add)
inventory.add_command(inventory_allocate)
inventory.add_command(inventory_deallocate)
inventory.add_command(inventory_report)
inventory.add_command(inventory_show)
inventory.add_command(inventory_update)
export.add_command(export_table)
