"""
fson - path-addressable JSON documents

Load an untyped JSON (or YAML) document, then read, write, delete,
merge, filter and transform nested values by key path.
"""

import importlib.metadata as _metadata

# Version is defined in pyproject.toml - read it and parse into tuple (primary representation)
_raw_version = _metadata.version("fson")
__version_info__: tuple[int, int, int] = tuple(int(x) for x in _raw_version.split(".")[:3])  # type: ignore[assignment]
__version__: str = ".".join(str(x) for x in __version_info__)
__author__ = "fson Contributors"

from fson.config import Settings  # noqa: E402
from fson.document import (  # noqa: E402
    DecodeError,
    Document,
    FsonError,
    InvalidPathError,
    Lookup,
    PathConflictError,
    PathNotFoundError,
    WrongTypeError,
    split_path,
)

__all__ = [
    "__version__",
    "__version_info__",
    "DecodeError",
    "Document",
    "FsonError",
    "InvalidPathError",
    "Lookup",
    "PathConflictError",
    "PathNotFoundError",
    "Settings",
    "WrongTypeError",
    "split_path",
]
