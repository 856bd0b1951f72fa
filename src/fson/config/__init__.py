"""
Configuration module for fson.

Uses pydantic-settings for environment variable loading.
"""

from fson.config.settings import Settings
from fson.config.sources import ConfigFileError

__all__ = ["ConfigFileError", "Settings"]
