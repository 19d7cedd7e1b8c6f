"""AppContext — shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``.  Loads the group definitions lazily and centralizes
result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NoReturn

import click

from dyngroups.config.logging import configure_logging
from dyngroups.domain.errors import GroupSetError
from dyngroups.output.formatters import OutputSettings, format_result
from dyngroups.services.result import ServiceResult

if TYPE_CHECKING:
    from dyngroups.config.settings import DynGroupsSettings
    from dyngroups.services.groups import GroupService


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The definitions are only normalized on first access to
    :attr:`service`, so ``--help`` and ``--version`` never touch them.
    """

    def __init__(self, settings: DynGroupsSettings) -> None:
        self.settings = settings
        self._service: GroupService | None = None
        configure_logging(
            verbose=settings.verbose,
            quiet=settings.quiet,
            log_json=settings.log_json,
        )

    @property
    def service(self) -> GroupService:
        """GroupService over the loaded definitions.

        A definitions file that fails to normalize is emitted as a
        ``load_definitions`` error (exit code 1).
        """
        if self._service is None:
            from dyngroups.services.groups import GroupService

            try:
                self._service = GroupService.from_config(
                    self.settings.definitions, strict=self.settings.strict_keys
                )
            except GroupSetError as exc:
                path = self.settings.config_path
                detail = {"path": str(path)} if path is not None else {}
                self.fail(ServiceResult.failure("load_definitions", exc, **detail))
        return self._service

    def _output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
            no_color=self.settings.no_color,
        )

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: stdout; warnings go to stderr unless in JSON mode.
        * Failure: stderr, exit code 1.
        """
        settings = self._output_settings()
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            self.fail(result, output=output)

    def fail(self, result: ServiceResult, *, output: str | None = None) -> NoReturn:
        """Write a failed result to stderr and exit with code 1."""
        if output is None:
            output = format_result(result, settings=self._output_settings())
        click.echo(output, err=True)
        raise SystemExit(1)
