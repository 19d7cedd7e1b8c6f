"""Command: resolve group membership."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dyngroups.commands._base import DynCommand

if TYPE_CHECKING:
    from dyngroups.commands._context import AppContext


@click.command(
    cls=DynCommand,
    examples="""\
  dyngroups resolve
  dyngroups resolve admins staff
  dyngroups --json resolve
  dyngroups -c teams.toml resolve everyone""",
)
@click.argument("names", nargs=-1)
@click.pass_obj
def resolve(app: AppContext, names: tuple[str, ...]) -> None:
    """Resolve members of every group, or of the named GROUPS."""
    app.emit(app.service.resolve(names))
