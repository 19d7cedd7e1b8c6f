"""Command: list every known item."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from dyngroups.commands._base import DynCommand

if TYPE_CHECKING:
    from dyngroups.commands._context import AppContext


@click.command(
    cls=DynCommand,
    examples="""\
  dyngroups items
  dyngroups --json items""",
)
@click.pass_obj
def items(app: AppContext) -> None:
    """List known items plus every item a group includes directly."""
    app.emit(app.service.list_items())
