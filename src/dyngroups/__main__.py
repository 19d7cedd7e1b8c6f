"""Allow ``python -m dyngroups``."""

from dyngroups.cli import cli

cli()
