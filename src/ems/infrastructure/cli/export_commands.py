"""CLI commands for exporting whole tables."""

from __future__ import annotations

from pathlib import Path

import click

from ems.application.access import Operation
from ems.domain.exceptions import DomainException
from ems.infrastructure.cli.context import CliContext, pass_cli_context

TABLES = ("users", "events", "inventory", "attendees")


@click.command("table")
@click.argument("table", type=click.Choice(TABLES))
@click.option(
    "--output",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Destination file (default: <table>_export.txt).",
)
@pass_cli_context
def export_table(ctx: CliContext, table: str, output: Path | None) -> None:
    """Write a copy of one data table (admin only)."""
    try:
        ctx.acting_user(Operation.EXPORT_DATA)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    path = output or Path(f"{table}_export.txt")
    if not ctx.store.export_table(table, path):
        raise click.ClickException(f"Could not open {path} for writing")
    click.echo(f"{table.title()} data exported to {path}")
