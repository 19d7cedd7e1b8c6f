"""Tests for DynGroupsSettings — unified settings with TOML source."""

from pathlib import Path

import click
import pytest

from dyngroups.config.settings import DynGroupsSettings


class TestDefaults:
    def test_all_defaults(self, tmp_path: Path) -> None:
        """With no TOML and no env vars, all fields use code defaults."""
        settings = DynGroupsSettings.from_cli(root=tmp_path)
        assert settings.root == tmp_path
        assert settings.config_path is None
        assert settings.json_output is False
        assert settings.quiet is False
        assert settings.verbose is False
        assert settings.strict is False
        assert settings.items == []
        assert settings.groups == {}

    def test_frozen(self, tmp_path: Path) -> None:
        settings = DynGroupsSettings.from_cli(root=tmp_path)
        with pytest.raises(Exception):
            settings.quiet = True  # type: ignore[misc]


class TestTomlSource:
    def test_loads_definitions(self, tmp_path: Path) -> None:
        toml = tmp_path / "dyngroups.toml"
        toml.write_text('items = ["k"]\n[groups]\nadmins = ["alice"]\n')
        settings = DynGroupsSettings.from_cli(root=tmp_path)
        assert settings.items == ["k"]
        assert settings.groups == {"admins": ["alice"]}
        assert settings.config_path == toml

    def test_definitions_view(self, tmp_path: Path) -> None:
        (tmp_path / "dyngroups.toml").write_text(
            '[resolution]\naliases = { only = "include" }\n[groups]\na = "x"\n'
        )
        definitions = DynGroupsSettings.from_cli(root=tmp_path).definitions
        assert definitions.groups == {"a": "x"}
        assert definitions.resolution.aliases == {"only": "include"}

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom" / "teams.toml"
        custom.parent.mkdir(parents=True)
        custom.write_text('[groups]\nteam = "x"\n')
        settings = DynGroupsSettings.from_cli(config_path=str(custom), root=tmp_path)
        assert settings.groups == {"team": "x"}
        assert settings.config_path == custom

    def test_root_from_toml_location(self, tmp_path: Path) -> None:
        subdir = tmp_path / "sub" / "deep"
        subdir.mkdir(parents=True)
        (tmp_path / "dyngroups.toml").write_text("")
        settings = DynGroupsSettings.from_cli(config_path=str(tmp_path / "dyngroups.toml"))
        assert settings.root == tmp_path

    def test_invalid_toml(self, tmp_path: Path) -> None:
        (tmp_path / "dyngroups.toml").write_text("[groups\n")
        with pytest.raises(click.ClickException, match="Invalid TOML"):
            DynGroupsSettings.from_cli(root=tmp_path)


class TestStrictKeys:
    def test_cli_flag(self, tmp_path: Path) -> None:
        assert DynGroupsSettings.from_cli(root=tmp_path, strict=True).strict_keys is True

    def test_resolution_section(self, tmp_path: Path) -> None:
        (tmp_path / "dyngroups.toml").write_text("[resolution]\nstrict = true\n")
        assert DynGroupsSettings.from_cli(root=tmp_path).strict_keys is True

    def test_default(self, tmp_path: Path) -> None:
        assert DynGroupsSettings.from_cli(root=tmp_path).strict_keys is False


class TestEnvVars:
    def test_env_var_override(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DYNGROUPS_QUIET", "true")
        settings = DynGroupsSettings.from_cli(root=tmp_path)
        assert settings.quiet is True

    def test_no_color_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DYNGROUPS_NO_COLOR", "1")
        assert DynGroupsSettings.from_cli(root=tmp_path).no_color is True

    def test_cli_flags_override_env(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("DYNGROUPS_VERBOSE", "false")
        settings = DynGroupsSettings.from_cli(root=tmp_path, verbose=True)
        assert settings.verbose is True

    def test_nested_env_var(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("DYNGROUPS_RESOLUTION__STRICT", "true")
        settings = DynGroupsSettings.from_cli(root=tmp_path)
        assert settings.resolution.strict is True
