"""Configuration type definitions for fson settings.

This module defines the Pydantic models used to represent configuration
sections nested within the main Settings class:

- OutputConfig: indent, sort_keys, ensure_ascii, format
- PathsConfig: delimiters used to split string paths

All types use `extra="allow"` to preserve unknown fields, so a config
file can be audited for typos with `collect_all_extra_fields()`.
"""

import typing as _typing

import pydantic as _pydantic

import fson.constants as constants

# =============================================================================
# Base class with introspection
# =============================================================================


class ConfigBase(_pydantic.BaseModel):
    """
    Base class for all config types.

    Unknown fields are preserved rather than silently dropped.
    """

    model_config = _pydantic.ConfigDict(extra="allow")

    def get_extra_fields(self) -> dict[str, _typing.Any]:
        """Return fields that were provided but not in the schema."""
        return dict(self.model_extra) if self.model_extra else {}

    def collect_all_extra_fields(
        self,
        prefix: str = "",
    ) -> dict[str, _typing.Any]:
        """
        Recursively collect extra fields from this config and nested configs.

        Returns a flat dict with dotted paths as keys, e.g.:
            {"output.indnet": 2}
        """
        result: dict[str, _typing.Any] = {}

        for key, value in self.get_extra_fields().items():
            path = f"{prefix}.{key}" if prefix else key
            result[path] = value

        for field_name in self.__class__.model_fields:
            value = getattr(self, field_name, None)
            if isinstance(value, ConfigBase):
                child_prefix = f"{prefix}.{field_name}" if prefix else field_name
                result.update(value.collect_all_extra_fields(child_prefix))

        return result


# =============================================================================
# Output Settings
# =============================================================================


class OutputConfig(ConfigBase):
    """
    How documents are written by the CLI and Document.save_file().

    YAML section: output.*
    """

    indent: int = _pydantic.Field(default=constants.DEFAULT_INDENT, ge=0, le=16)
    """Indentation for pretty output."""

    sort_keys: bool = False
    """Emit object keys in sorted order."""

    ensure_ascii: bool = False
    """Escape non-ASCII characters in JSON output."""

    format: _typing.Literal["json", "yaml"] = constants.DEFAULT_FORMAT
    """Format used by `fson show` when none is given."""


# =============================================================================
# Path Settings
# =============================================================================


class PathsConfig(ConfigBase):
    """
    How string paths are split into segments.

    YAML section: paths.*
    """

    delimiters: str = _pydantic.Field(
        default=constants.DEFAULT_PATH_DELIMITERS,
        min_length=1,
    )
    """Delimiters tried in order; the first one present in a path string wins."""
