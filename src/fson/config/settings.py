"""
Settings configuration using pydantic-settings.

Loads configuration from:
1. Constructor arguments (highest precedence)
2. Environment variables with FSON_ prefix
3. .env file (if FSON_ENV_FILE points at one)
4. Layered YAML config files:
   - Project config: ./.fson.yaml
   - User config: ~/.config/fson/config.yaml (lowest)

Nested config uses double underscore delimiter:
  FSON_OUTPUT__INDENT=2
  FSON_PATHS__DELIMITERS=/
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import pydantic as _pydantic
import pydantic_settings as _pydantic_settings

import fson.config.sources as sources
import fson.config.types as types
import fson.constants as constants


def _get_env_file() -> str | None:
    """Return FSON_ENV_FILE if it names an existing file, else None."""
    if env_file := _os.environ.get("FSON_ENV_FILE"):
        if _pathlib.Path(env_file).exists():
            return env_file
    return None


class Settings(_pydantic_settings.BaseSettings):
    """
    fson configuration settings.

    All settings can be overridden via environment variables with FSON_ prefix.
    For nested config, use double underscore: FSON_OUTPUT__INDENT=2

    Config precedence (highest to lowest):
    1. Constructor arguments
    2. Environment variables (FSON_*)
    3. .env file
    4. Project config (.fson.yaml)
    5. User config (~/.config/fson/config.yaml)
    6. Built-in defaults
    """

    model_config = _pydantic_settings.SettingsConfigDict(
        env_prefix=constants.ENV_PREFIX,
        env_file=_get_env_file(),
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # FSON_OUTPUT__INDENT
        extra="allow",
    )

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[_pydantic_settings.BaseSettings],
        init_settings: _pydantic_settings.PydanticBaseSettingsSource,
        env_settings: _pydantic_settings.PydanticBaseSettingsSource,
        dotenv_settings: _pydantic_settings.PydanticBaseSettingsSource,
        file_secret_settings: _pydantic_settings.PydanticBaseSettingsSource,
    ) -> tuple[_pydantic_settings.PydanticBaseSettingsSource, ...]:
        """
        Configure settings sources with precedence:
        1. init_settings (constructor args), highest
        2. env_settings (FSON_* env vars)
        3. dotenv_settings (.env file)
        4. YAML config layers
        5. (defaults via Field definitions), lowest
        """
        return (
            init_settings,
            env_settings,
            dotenv_settings,
            sources.YamlLayersSettingsSource(settings_cls, _pathlib.Path.cwd()),
            file_secret_settings,
        )

    @classmethod
    def construct_without_dotenv(cls, **kwargs: _typing.Any) -> "Settings":
        """Create Settings from environment variables only, without loading .env file."""
        return cls(_env_file=None, **kwargs)  # type: ignore[call-arg]

    # =========================================================================
    # Nested config sections
    # =========================================================================

    output: types.OutputConfig = _pydantic.Field(default_factory=types.OutputConfig)
    """Output settings (indent, sort_keys, ensure_ascii, format)."""

    paths: types.PathsConfig = _pydantic.Field(default_factory=types.PathsConfig)
    """Path string settings (delimiters)."""

    # =========================================================================
    # Flat fields
    # =========================================================================

    log_level: _typing.Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "WARNING"
    """Log level used by the CLI when --verbose is not given."""

    @property
    def user_config_path(self) -> _pathlib.Path:
        """Path of the user config file (may not exist)."""
        return sources.get_user_config_path()

    def collect_unknown_keys(self) -> dict[str, _typing.Any]:
        """
        Return config keys that no setting uses, keyed by dotted path.

        Typos such as `output.indnet` are kept by validation rather than
        rejected; `fson config show` reports them.
        """
        result: dict[str, _typing.Any] = dict(self.model_extra or {})
        for field_name in type(self).model_fields:
            section = getattr(self, field_name)
            if isinstance(section, types.ConfigBase):
                result.update(section.collect_all_extra_fields(field_name))
        return result
