"""Command: members of a single group."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dyngroups.commands._base import DynCommand

if TYPE_CHECKING:
    from dyngroups.commands._context import AppContext


@click.command(
    cls=DynCommand,
    examples="""\
  dyngroups group admins
  dyngroups -q group admins | xargs -n1 echo""",
)
@click.argument("name")
@click.pass_obj
def group(app: AppContext, name: str) -> None:
    """Print the members of group NAME (fails if NAME is not defined)."""
    app.emit(app.service.get_group(name))
