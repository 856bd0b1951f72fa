"""Tests for the Settings class: defaults, YAML layers and env overrides."""

import pathlib as _pathlib

import pydantic as _pydantic
import pytest as _pytest

import fson.config as config


class TestSettingsDefaults:
    """Built-in defaults with no config files and no environment."""

    def test_output_defaults(self, clean_settings: config.Settings) -> None:
        assert clean_settings.output.indent == 4
        assert clean_settings.output.sort_keys is False
        assert clean_settings.output.ensure_ascii is False
        assert clean_settings.output.format == "json"

    def test_path_defaults(self, clean_settings: config.Settings) -> None:
        assert clean_settings.paths.delimiters == "/."

    def test_log_level_default(self, clean_settings: config.Settings) -> None:
        assert clean_settings.log_level == "WARNING"

    def test_user_config_path_follows_env(
        self,
        clean_settings: config.Settings,
        user_config_file: _pathlib.Path,
    ) -> None:
        assert clean_settings.user_config_path == user_config_file


class TestSettingsLayers:
    """YAML config layers."""

    def test_user_layer(self, user_config_file: _pathlib.Path) -> None:
        user_config_file.write_text("output:\n  indent: 8\n")
        settings = config.Settings.construct_without_dotenv()
        assert settings.output.indent == 8

    def test_project_layer(self, project_config_file: _pathlib.Path) -> None:
        project_config_file.write_text("paths:\n  delimiters: ':'\n")
        settings = config.Settings.construct_without_dotenv()
        assert settings.paths.delimiters == ":"

    def test_project_overrides_user_key_by_key(
        self,
        user_config_file: _pathlib.Path,
        project_config_file: _pathlib.Path,
    ) -> None:
        """Sections merge deeply; only the keys the project sets win."""
        user_config_file.write_text("output:\n  indent: 8\n  sort_keys: true\n")
        project_config_file.write_text("output:\n  indent: 2\n")

        settings = config.Settings.construct_without_dotenv()

        assert settings.output.indent == 2
        assert settings.output.sort_keys is True

    def test_empty_file_is_ignored(self, project_config_file: _pathlib.Path) -> None:
        project_config_file.write_text("")
        settings = config.Settings.construct_without_dotenv()
        assert settings.output.indent == 4

    def test_malformed_yaml_raises(self, project_config_file: _pathlib.Path) -> None:
        project_config_file.write_text("output: [unclosed\n")
        with _pytest.raises(config.ConfigFileError, match=".fson.yaml"):
            config.Settings.construct_without_dotenv()

    def test_unknown_keys_are_kept(self, project_config_file: _pathlib.Path) -> None:
        """Typos survive validation so they can be reported."""
        project_config_file.write_text("output:\n  indnet: 2\n")
        settings = config.Settings.construct_without_dotenv()
        assert settings.output.collect_all_extra_fields("output") == {"output.indnet": 2}

    def test_collect_unknown_keys(self, project_config_file: _pathlib.Path) -> None:
        """Top-level and section typos are reported by dotted path."""
        project_config_file.write_text("colour: true\noutput:\n  indnet: 2\n  indent: 2\n")
        settings = config.Settings.construct_without_dotenv()
        assert settings.collect_unknown_keys() == {"colour": True, "output.indnet": 2}

    def test_no_unknown_keys_by_default(self, clean_settings: config.Settings) -> None:
        assert clean_settings.collect_unknown_keys() == {}


class TestSettingsEnvironmentOverride:
    """FSON_* environment variables."""

    def test_nested_env_var(
        self,
        isolated_config: _pathlib.Path,  # noqa: ARG002
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("FSON_OUTPUT__INDENT", "2")
        settings = config.Settings.construct_without_dotenv()
        assert settings.output.indent == 2

    def test_flat_env_var(
        self,
        isolated_config: _pathlib.Path,  # noqa: ARG002
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("FSON_LOG_LEVEL", "DEBUG")
        settings = config.Settings.construct_without_dotenv()
        assert settings.log_level == "DEBUG"

    def test_env_beats_config_files(
        self,
        project_config_file: _pathlib.Path,
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        project_config_file.write_text("output:\n  indent: 8\n  sort_keys: true\n")
        monkeypatch.setenv("FSON_OUTPUT__INDENT", "1")

        settings = config.Settings.construct_without_dotenv()

        assert settings.output.indent == 1
        assert settings.output.sort_keys is True

    def test_constructor_beats_env(
        self,
        isolated_config: _pathlib.Path,  # noqa: ARG002
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("FSON_LOG_LEVEL", "DEBUG")
        settings = config.Settings.construct_without_dotenv(log_level="ERROR")
        assert settings.log_level == "ERROR"


class TestSettingsValidation:
    """Invalid values are rejected."""

    def test_indent_out_of_range(self, project_config_file: _pathlib.Path) -> None:
        project_config_file.write_text("output:\n  indent: 99\n")
        with _pytest.raises(_pydantic.ValidationError):
            config.Settings.construct_without_dotenv()

    def test_unknown_format(
        self,
        isolated_config: _pathlib.Path,  # noqa: ARG002
        monkeypatch: _pytest.MonkeyPatch,
    ) -> None:
        monkeypatch.setenv("FSON_OUTPUT__FORMAT", "toml")
        with _pytest.raises(_pydantic.ValidationError):
            config.Settings.construct_without_dotenv()

    def test_empty_delimiters(self, project_config_file: _pathlib.Path) -> None:
        project_config_file.write_text("paths:\n  delimiters: ''\n")
        with _pytest.raises(_pydantic.ValidationError):
            config.Settings.construct_without_dotenv()
