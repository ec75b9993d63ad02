"""CLI commands for user accounts."""

from __future__ import annotations

import click

from ems.application.access import Operation
from ems.application.create_user import CreateUserHandler
from ems.application.delete_user import DeleteUserHandler
from ems.domain.exceptions import DomainException
from ems.domain.model.user import Role
from ems.infrastructure.cli.context import CliContext, pass_cli_context

ROLE_CHOICES = {"admin": Role.ADMIN, "regular": Role.REGULAR_USER}


@click.command("create")
@click.option("--username", required=True, help="New username.")
@click.option("--password", "new_password", required=True, help="Password (min 6 chars).")
@click.option(
    "--role",
    type=click.Choice(sorted(ROLE_CHOICES)),
    default="regular",
    show_default=True,
    help="Account type.",
)
@pass_cli_context
def user_create(ctx: CliContext, username: str, new_password: str, role: str) -> None:
    """Register a new user account."""
    handler = CreateUserHandler(user_repo=ctx.store.users)

    try:
        created = handler.handle(username, new_password, ROLE_CHOICES[role])
    except DomainException as exc:
        raise click.ClickException(str(exc))

    kind = "Admin" if created.is_admin else "User"
    click.echo(f"{kind} '{created.username}' created (ID: {created.id}).")


@click.command("delete")
@click.option("--username", required=True, help="Username to delete.")
@pass_cli_context
def user_delete(ctx: CliContext, username: str) -> None:
    """Delete a user account (admin only)."""
    try:
        acting = ctx.acting_user(Operation.MANAGE_USERS)
        DeleteUserHandler(user_repo=ctx.store.users).handle(username, acting)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User '{username}' deleted.")


@click.command("list")
@pass_cli_context
def user_list(ctx: CliContext) -> None:
    """List all user accounts (admin only)."""
    try:
        ctx.acting_user(Operation.MANAGE_USERS)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    users = ctx.store.users.list_all()
    if not users:
        click.echo("No users.")
        return

    click.echo(f"{'ID':<6} {'Username':<20} {'Role':<12}")
    click.echo("-" * 40)
    for u in users:
        click.echo(f"{u.id:<6} {u.username:<20} {u.role.name:<12}")
