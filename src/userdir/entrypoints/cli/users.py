"""USERDIR users CLI: user directory operations.

Each command bootstraps the application for ``USERDIR_DB_URL``, initialises
the connection, runs one service operation and disconnects on exit.

Output
- Data (user info, counts) goes to **stdout**.
- Human-oriented notices go to **stderr**.

Failure modes
- Missing ``USERDIR_DB_URL`` or a refused connection → ``ClickException``.
- A rejected operation → ``ClickException`` carrying the backend's last error.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click
import click_extra as clickx

from userdir import config
from userdir.bootstrap import bootstrap

from .helpers import success, warn

if TYPE_CHECKING:
    from userdir.bootstrap import AppContainer

MISSING_DB_URL_MSG = (
    "USERDIR_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export USERDIR_DB_URL='sqlite:///users.db'\n"
    "  or in PowerShell:\n"
    "  $env:USERDIR_DB_URL='sqlite:///users.db'"
)

CANNOT_CONNECT_MSG = (
    "USERDIR_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

EPHEMERAL_DB_MSG = "memory:// databases are discarded when the command exits."


def _open_directory(ctx: click.Context) -> AppContainer:
    try:
        container = bootstrap()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e

    if config.is_memory_descriptor(container.descriptor):
        warn(EPHEMERAL_DB_MSG)
    ctx.call_on_close(container.backend.disconnect)
    if not container.directory.initialize_connection(container.descriptor):
        raise click.ClickException(_with_reason(CANNOT_CONNECT_MSG, container))
    return container


def _with_reason(message: str, container: AppContainer) -> str:
    if reason := container.backend.get_last_error():
        return f"{message}\nReason: {reason}"
    return message


@click.group(cls=clickx.ExtraGroup)
def users() -> None:
    """User directory commands."""


@users.command()
@click.argument("name")
@click.argument("age", type=int)
@click.pass_context
def add(ctx: click.Context, name: str, age: int) -> None:
    """Create a user called NAME aged AGE."""
    container = _open_directory(ctx)
    if not container.directory.create_user(name, age):
        raise click.ClickException(
            _with_reason(f"Could not create user {name!r}.", container)
        )
    success(f"Created user {name}.")


@users.command()
@click.argument("user_id", type=int)
@click.pass_context
def show(ctx: click.Context, user_id: int) -> None:
    """Print the name and age of USER_ID."""
    container = _open_directory(ctx)
    if not (info := container.directory.get_user_info(user_id)):
        raise click.ClickException(f"User {user_id} not found.")
    click.echo(info)


@users.command()
@click.argument("user_id", type=int)
@click.pass_context
def remove(ctx: click.Context, user_id: int) -> None:
    """Delete USER_ID."""
    container = _open_directory(ctx)
    if not container.directory.remove_user(user_id):
        raise click.ClickException(
            _with_reason(f"Could not remove user {user_id}.", container)
        )
    success(f"Removed user {user_id}.")


@users.command()
@click.pass_context
def count(ctx: click.Context) -> None:
    """Print the number of users."""
    container = _open_directory(ctx)
    total = container.directory.get_total_users()
    if total < 0:
        raise click.ClickException(_with_reason("Could not count users.", container))
    click.echo(total)
