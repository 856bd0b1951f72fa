"""
Shared pytest fixtures for fson tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import click.testing as _click_testing
import pytest as _pytest

import fson.config as config

# Environment keys that must not leak from the developer's shell into tests
ENV_KEYS_TO_CLEAR = [
    "FSON_CONFIG_DIR",
    "FSON_ENV_FILE",
    "FSON_LOG_LEVEL",
    "FSON_OUTPUT__INDENT",
    "FSON_OUTPUT__SORT_KEYS",
    "FSON_OUTPUT__ENSURE_ASCII",
    "FSON_OUTPUT__FORMAT",
    "FSON_PATHS__DELIMITERS",
]


@_pytest.fixture
def isolated_config(
    tmp_path: _pathlib.Path,
    monkeypatch: _pytest.MonkeyPatch,
) -> _typing.Generator[_pathlib.Path, None, None]:
    """
    Isolate settings from the real user config, project config and env.

    Yields the workspace directory, which is also the working directory
    (so .fson.yaml written there is the project layer). The user config
    directory is <tmp_path>/user-config.
    """
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)
    for key in list(_os.environ):
        if key.startswith("FSON_"):
            monkeypatch.delenv(key, raising=False)

    user_dir = tmp_path / "user-config"
    user_dir.mkdir()
    monkeypatch.setenv("FSON_CONFIG_DIR", str(user_dir))

    workspace = tmp_path / "workspace"
    workspace.mkdir()
    monkeypatch.chdir(workspace)

    yield workspace


@_pytest.fixture
def user_config_file(isolated_config: _pathlib.Path) -> _pathlib.Path:
    """Path of the (not yet written) user config file."""
    return isolated_config.parent / "user-config" / "config.yaml"


@_pytest.fixture
def project_config_file(isolated_config: _pathlib.Path) -> _pathlib.Path:
    """Path of the (not yet written) project config file."""
    return isolated_config / ".fson.yaml"


@_pytest.fixture
def clean_settings(isolated_config: _pathlib.Path) -> config.Settings:  # noqa: ARG001
    """
    Settings instance isolated from environment and config files.

    This fixture ensures tests get predictable default settings.
    """
    return config.Settings.construct_without_dotenv()


@_pytest.fixture
def cli_runner() -> _click_testing.CliRunner:
    """Click test runner for CLI tests."""
    return _click_testing.CliRunner()


@_pytest.fixture
def sample_file(tmp_path: _pathlib.Path) -> _pathlib.Path:
    """A small JSON document on disk."""
    path = tmp_path / "doc.json"
    path.write_text('{"name": "fson", "obj": {"foo": "bar"}, "list": [1, 2]}')
    return path
