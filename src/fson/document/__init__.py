"""
Document: path-addressable JSON-like trees.

Load an untyped document, navigate into nested fields by key paths and
read, write, delete, merge, filter or transform values.

Example:
    >>> from fson.document import Document
    >>> doc = Document(b'{"a": 1, "b": {"x": 1}}')
    >>> doc.merge(Document(b'{"b": {"y": 2}, "c": 3}'))
    >>> doc.to_dict()
    {'a': 1, 'b': {'x': 1, 'y': 2}, 'c': 3}
"""

from fson.document._document import Document
from fson.document._errors import (
    DecodeError,
    EncodeError,
    FsonError,
    InvalidPathError,
    InvalidValueError,
    PathConflictError,
    PathNotFoundError,
    WrongTypeError,
)
from fson.document._paths import as_path, split_path
from fson.document._resolve import Lookup
from fson.document._types import Path, ValueKind, kind_of

__all__ = [
    "DecodeError",
    "Document",
    "EncodeError",
    "FsonError",
    "InvalidPathError",
    "InvalidValueError",
    "Lookup",
    "Path",
    "PathConflictError",
    "PathNotFoundError",
    "ValueKind",
    "WrongTypeError",
    "as_path",
    "kind_of",
    "split_path",
]
