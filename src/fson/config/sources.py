"""Custom pydantic-settings source for fson configuration.

Configuration layers (in precedence order, highest first):
1. Constructor arguments and environment variables (pydantic-settings)
2. Project config: .fson.yaml in the working directory
3. User config: ~/.config/fson/config.yaml (or FSON_CONFIG_DIR)

The YAML layers are merged with fson's own deep merge, so nested
sections combine key by key while other values override.

Environment variables:
- FSON_CONFIG_DIR: Override user config directory (default: ~/.config/fson)
"""

import logging as _logging
import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic.fields as _pydantic_fields
import pydantic_settings as _pydantic_settings

import fson.codecs as codecs
import fson.constants as constants
import fson.document as document

_logger = _logging.getLogger(__name__)

# Environment variable for overriding user config directory
ENV_CONFIG_DIR = "FSON_CONFIG_DIR"


class ConfigFileError(Exception):
    """Error loading or parsing a configuration file."""

    def __init__(self, path: _pathlib.Path, message: str) -> None:
        self.path = path
        super().__init__(f"Error in config file {path}: {message}")


def get_user_config_path() -> _pathlib.Path:
    """
    Get the path to the user config file.

    Respects FSON_CONFIG_DIR environment variable if set,
    otherwise uses XDG standard path.
    """
    config_dir_env = _os.environ.get(ENV_CONFIG_DIR)
    if config_dir_env:
        return _pathlib.Path(config_dir_env) / "config.yaml"
    return _pathlib.Path.home() / ".config" / "fson" / "config.yaml"


def get_project_config_path(project_root: _pathlib.Path) -> _pathlib.Path:
    """Get the path to the project config file (.fson.yaml in project_root)."""
    return project_root / constants.PROJECT_CONFIG_FILE


class YamlLayersSettingsSource(_pydantic_settings.PydanticBaseSettingsSource):
    """
    Settings source that loads layered YAML config files.

    Flow:
    1. Load each YAML file into a Document
    2. Merge the user layer, then the project layer on top of it
    3. Return the merged dict to pydantic-settings for validation
    """

    def __init__(
        self,
        settings_cls: type[_pydantic_settings.BaseSettings],
        project_root: _pathlib.Path | None = None,
        *,
        user_config_path: _pathlib.Path | None = None,
    ) -> None:
        """
        Initialize the settings source.

        Args:
            settings_cls: The Settings class being populated.
            project_root: Directory holding .fson.yaml. None skips the
                project layer.
            user_config_path: Override path for user config file (for testing).
        """
        super().__init__(settings_cls)
        self._project_root = project_root
        self._user_config_path = user_config_path
        self._loaded_layers: list[tuple[str, _pathlib.Path]] = []
        self._merged = self._load_config_layers()

    def _load_config_layers(self) -> document.Document:
        """Load config files, lowest precedence first, into one Document."""
        merged = document.Document()

        candidates: list[tuple[str, _pathlib.Path]] = [
            ("user", self._user_config_path or get_user_config_path()),
        ]
        if self._project_root is not None:
            candidates.append(("project", get_project_config_path(self._project_root)))

        for layer_name, path in candidates:
            if not path.exists():
                continue
            merged.merge(self._load_yaml_file(path))
            self._loaded_layers.append((layer_name, path))
            _logger.debug("loaded %s config from %s", layer_name, path)

        return merged

    def get_loaded_layers(self) -> list[tuple[str, _pathlib.Path]]:
        """Return (layer_name, path) for each layer that was loaded, lowest first."""
        return list(self._loaded_layers)

    def _load_yaml_file(self, path: _pathlib.Path) -> document.Document:
        """
        Load a YAML file into a Document.

        Raises:
            ConfigFileError: If the file cannot be read, is malformed YAML,
                or its top level is not a mapping.
        """
        try:
            content = path.read_bytes()
        except OSError as e:
            raise ConfigFileError(path, f"cannot read file: {e}") from e

        try:
            return document.Document(content, format="yaml")
        except document.DecodeError as e:
            raise ConfigFileError(path, str(e)) from e

    def get_field_value(
        self,
        field: _pydantic_fields.FieldInfo,  # noqa: ARG002 - required by pydantic-settings interface
        field_name: str,
    ) -> tuple[_typing.Any, str, bool]:
        """Get value for a top-level field from the merged layers."""
        value, found = self._merged.get((field_name,))
        if not found:
            return None, field_name, False
        return value, field_name, isinstance(value, (dict, list))

    def __call__(self) -> dict[str, _typing.Any]:
        """Return merged config as a plain dict for Pydantic validation."""
        return self._merged.to_dict()


def dump_settings(data: dict[str, _typing.Any], format: codecs.Format = "yaml") -> str:
    """Render a settings dict as YAML or indented JSON text."""
    return codecs.dumps(data, format, indent=2).decode("utf-8")
