"""
Shared constants for fson.

This module provides a single source of truth for default values
that are used across multiple modules.
"""

# Path handling
DEFAULT_PATH_DELIMITERS = "/."
"""Delimiters tried, in order, when a path is given as a string."""

# Output defaults
DEFAULT_INDENT = 4
"""Indentation used by pretty printing."""

DEFAULT_FORMAT = "json"
"""Default serialization format for files and CLI output."""

SUPPORTED_FORMATS = ("json", "yaml")
"""Serialization formats understood by fson.codecs."""

YAML_SUFFIXES = (".yaml", ".yml")
"""File suffixes that select the YAML codec."""

# Configuration files
ENV_PREFIX = "FSON_"
"""Prefix for environment variables read by Settings."""

PROJECT_CONFIG_FILE = ".fson.yaml"
"""Project-level config file, looked up in the working directory."""
