"""Shared pytest fixtures and test helpers for dyngroups tests."""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from pathlib import Path

import pytest
import structlog
from click.testing import CliRunner

from dyngroups.config.discovery import CONFIG_FILENAME
from dyngroups.domain.groupset import GroupSet

SAMPLE_DEFINITIONS = """\
items = ["alice", "bob", "carol", "dave"]

[groups]
admins = ["alice", "bob"]
ops = "carol"

[groups.staff]
in = ["admins", "ops"]
not = "bob"

[groups.guests]
not_in = ["admins", "ops"]
"""


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer DYNGROUPS_* variables out of every test."""
    for key in list(os.environ):
        if key.startswith("DYNGROUPS_"):
            monkeypatch.delenv(key)


@pytest.fixture(autouse=True)
def _restore_root_logging() -> Iterator[None]:
    """Drop the handler configure_logging installs on each CLI invocation."""
    root = logging.getLogger()
    pkg = logging.getLogger("dyngroups")
    levels = (root.level, pkg.level)
    yield
    for handler in root.handlers[:]:
        if isinstance(handler.formatter, structlog.stdlib.ProcessorFormatter):
            root.removeHandler(handler)
    root.setLevel(levels[0])
    pkg.setLevel(levels[1])


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def groupset() -> GroupSet:
    """An empty GroupSet."""
    return GroupSet()


@pytest.fixture
def definitions_root(tmp_path: Path) -> Path:
    """Temporary directory holding the sample ``dyngroups.toml``."""
    (tmp_path / CONFIG_FILENAME).write_text(SAMPLE_DEFINITIONS, encoding="utf-8")
    return tmp_path


@pytest.fixture
def _isolated_definitions(definitions_root: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Change CWD to the sample definitions root so the CLI discovers it.

    Use via ``@pytest.mark.usefixtures("_isolated_definitions")``.
    """
    monkeypatch.chdir(definitions_root)


def write_definitions(root: Path, text: str) -> Path:
    """Write *text* as the definitions file under *root* and return its path."""
    path = root / CONFIG_FILENAME
    path.write_text(text, encoding="utf-8")
    return path
