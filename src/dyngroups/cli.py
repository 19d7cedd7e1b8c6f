"""Root CLI group for dyngroups with global flags and command registration."""

from __future__ import annotations

from pathlib import Path

import click
from pydantic import ValidationError

from dyngroups import __version__
from dyngroups.commands import register_commands
from dyngroups.commands._context import AppContext
from dyngroups.config.settings import DynGroupsSettings


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="dyngroups")
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-q", "--quiet", is_flag=True, help="Minimal output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug logging.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("--strict", is_flag=True, help="Reject unrecognized specification keys.")
@click.option("--no-color", is_flag=True, help="Disable colored output.")
@click.option("-c", "--config", "config_path", default=None, help="Definitions file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    strict: bool,
    no_color: bool,
    config_path: str | None,
) -> None:
    """dyngroups — resolve named groups built from items and other groups."""
    if config_path and not Path(config_path).is_file():
        msg = f"Definitions file not found: {config_path}"
        raise click.ClickException(msg)
    flags = {
        "json_output": json_output,
        "quiet": quiet,
        "verbose": verbose,
        "log_json": log_json,
        "strict": strict,
        "no_color": no_color,
    }
    try:
        # Unset flags stay out of init kwargs so env vars can still enable them.
        settings = DynGroupsSettings.from_cli(
            config_path=config_path, **{k: v for k, v in flags.items() if v}
        )
    except ValidationError as exc:
        msg = f"Invalid definitions: {exc}"
        raise click.ClickException(msg) from exc
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
