"""Subcommand modules for dyngroups.

Provides register_commands() which uses deferred imports to keep
``dyngroups --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register every standalone command on the root CLI group."""
    from dyngroups.commands.group import group
    from dyngroups.commands.items import items
    from dyngroups.commands.resolve import resolve
    from dyngroups.commands.show import show

    cli.add_command(resolve)
    cli.add_command(group)
    cli.add_command(items)
    cli.add_command(show)
