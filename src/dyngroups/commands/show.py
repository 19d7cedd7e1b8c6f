"""Command: show normalized group specifications."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dyngroups.commands._base import DynCommand

if TYPE_CHECKING:
    from dyngroups.commands._context import AppContext


@click.command(
    cls=DynCommand,
    examples="""\
  dyngroups show
  dyngroups show everyone
  dyngroups --json show admins staff""",
)
@click.argument("names", nargs=-1)
@click.pass_obj
def show(app: AppContext, names: tuple[str, ...]) -> None:
    """Show normalized specifications of every group, or of the named GROUPS."""
    app.emit(app.service.describe(names))
