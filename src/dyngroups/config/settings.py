"""Unified settings — CLI flags, env vars, and the definitions file in one object.

Priority chain (highest to lowest):
  1. Init kwargs  — CLI flags passed by Click
  2. Env vars     — ``DYNGROUPS_*`` prefix
  3. TOML file    — ``dyngroups.toml`` discovered via walk-up
  4. Code defaults — baked into the section models

The TOML source reuses :func:`dyngroups.config.discovery.find_config` and
:func:`dyngroups.config.discovery.read_definitions`.
"""

from __future__ import annotations

import threading
from pathlib import Path
from typing import Any

from pydantic import Field
from pydantic_settings import BaseSettings, PydanticBaseSettingsSource

from dyngroups.config.discovery import find_config, read_definitions
from dyngroups.config.models import DefinitionsConfig, ResolutionConfig


class TomlSettingsSource(PydanticBaseSettingsSource):
    """Read settings from a ``dyngroups.toml`` file."""

    def __init__(self, settings_cls: type[BaseSettings], toml_path: Path | None) -> None:
        super().__init__(settings_cls)
        self._data: dict[str, Any] = {}
        if toml_path and toml_path.is_file():
            self._data = read_definitions(toml_path)

    def get_field_value(self, field: Any, field_name: str) -> tuple[Any, str, bool]:
        """Return ``(value, field_name, value_is_complex)``."""
        val = self._data.get(field_name)
        return val, field_name, field_name in self._data

    def __call__(self) -> dict[str, Any]:
        return self._data


# TOML path handed to settings_customise_sources during construction.
_tls = threading.local()


class DynGroupsSettings(BaseSettings):
    """Settings for the dyngroups CLI.

    Attributes:
        root: Directory holding the definitions file (or CWD if none found).
        config_path: The definitions file that was loaded, if any.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "DYNGROUPS_",
        "env_nested_delimiter": "__",
    }

    root: Path = Field(default_factory=Path.cwd)
    config_path: Path | None = None

    # --- CLI flags ---
    json_output: bool = False
    quiet: bool = False
    verbose: bool = False
    log_json: bool = False
    strict: bool = False
    no_color: bool = False

    # --- Definitions file ---
    items: list[str] = Field(default_factory=list)
    resolution: ResolutionConfig = Field(default_factory=ResolutionConfig)
    groups: dict[str, Any] = Field(default_factory=dict)

    @property
    def strict_keys(self) -> bool:
        """``--strict`` or ``[resolution] strict = true``."""
        return self.strict or self.resolution.strict

    @property
    def definitions(self) -> DefinitionsConfig:
        return DefinitionsConfig(items=self.items, resolution=self.resolution, groups=self.groups)

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        """Insert TOML source between env vars and defaults."""
        return (
            init_settings,
            env_settings,
            TomlSettingsSource(settings_cls, getattr(_tls, "toml_path", None)),
        )

    @classmethod
    def from_cli(
        cls,
        *,
        config_path: str | None = None,
        root: Path | None = None,
        **cli_flags: Any,
    ) -> DynGroupsSettings:
        """Construct settings from a CLI invocation.

        Uses *config_path* when it names an existing file, otherwise
        discovers ``dyngroups.toml`` by walking up from *root* (or CWD).
        """
        toml_path: Path | None = None
        if config_path:
            p = Path(config_path)
            if p.is_file():
                toml_path = p
        else:
            toml_path = find_config(root)

        if root is None:
            root = toml_path.parent if toml_path else Path.cwd()

        _tls.toml_path = toml_path
        try:
            return cls(root=root, config_path=toml_path, **cli_flags)
        finally:
            _tls.toml_path = None
