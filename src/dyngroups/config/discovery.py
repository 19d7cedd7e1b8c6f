"""Locating and reading the ``dyngroups.toml`` definitions file.

Lookup order: the ``DYNGROUPS_CONFIG`` env var, then a walk up the
directory tree from the start directory, the way git finds ``.git/``.
An explicit ``--config`` path bypasses both (see ``DynGroupsSettings``).
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any

import click

CONFIG_FILENAME = "dyngroups.toml"
CONFIG_ENV_VAR = "DYNGROUPS_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the definitions file governing *start* (default: CWD), or None.

    A ``DYNGROUPS_CONFIG`` that names a missing file disables the walk-up.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def read_definitions(path: Path) -> dict[str, Any]:
    """Parse a definitions file into raw TOML tables.

    Raises:
        click.ClickException: The file is not valid TOML.
    """
    try:
        return tomllib.loads(path.read_text(encoding="utf-8"))
    except tomllib.TOMLDecodeError as exc:
        msg = f"Invalid TOML in {path}: {exc}"
        raise click.ClickException(msg) from exc
