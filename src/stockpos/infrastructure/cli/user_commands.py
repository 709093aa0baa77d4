"""CLI commands for the user directory."""

from __future__ import annotations

import click

from stockpos.application.manage_users import (
    AddUserHandler,
    DeleteUserHandler,
    ListUsersHandler,
    UpdateUserHandler,
)
from stockpos.domain.exceptions import DomainException
from stockpos.domain.model.user import Role, UserStatus
from stockpos.infrastructure.bootstrap import json_services

_ROLES = click.Choice([r.value for r in Role], case_sensitive=False)
_STATUSES = click.Choice([s.value for s in UserStatus], case_sensitive=False)


@click.command("add")
@click.option("--name", required=True, help="Full name.")
@click.option("--email", required=True, help="Email address.")
@click.option("--role", type=_ROLES, default=Role.STAFF.value, show_default=True)
@click.option("--status", type=_STATUSES, default=UserStatus.ACTIVE.value, show_default=True)
def user_add(name: str, email: str, role: str, status: str) -> None:
    """Add a user to the directory."""
    handler = AddUserHandler(json_services().users)

    try:
        user = handler.handle(name=name, email=email, role=role, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.id} '{user.name}' added as {user.role.value}")


@click.command("list")
@click.option("--search", default=None, help="Match name or email.")
def user_list(search: str | None) -> None:
    """List users."""
    users = ListUsersHandler(json_services().users).handle(search=search)

    if not users:
        click.echo("No users found.")
        return

    click.echo(f"{'ID':<32} {'Name':<20} {'Email':<28} {'Role':<8} {'Status':<8}")
    click.echo("-" * 100)
    for u in users:
        click.echo(
            f"{u.id:<32} {u.name:<20} {u.email:<28} {u.role.value:<8} {u.status.value:<8}"
        )


@click.command("update")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.option("--name", default=None)
@click.option("--email", default=None)
@click.option("--role", type=_ROLES, default=None)
@click.option("--status", type=_STATUSES, default=None)
def user_update(
    user_id: str,
    name: str | None,
    email: str | None,
    role: str | None,
    status: str | None,
) -> None:
    """Edit a user's details."""
    handler = UpdateUserHandler(json_services().users)

    try:
        user = handler.handle(user_id, name=name, email=email, role=role, status=status)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user.id} updated: {user.name} ({user.role.value}, {user.status.value})")


@click.command("delete")
@click.option("--id", "user_id", required=True, help="User ID.")
@click.confirmation_option(prompt="Are you sure you want to delete this user?")
def user_delete(user_id: str) -> None:
    """Remove a user from the directory."""
    handler = DeleteUserHandler(json_services().users)

    try:
        handler.handle(user_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"User {user_id} deleted.")
