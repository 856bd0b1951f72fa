"""
Exception types raised by fson documents and codecs.

Every exception derives from FsonError so callers can catch the whole
family at once. Each one also derives from the builtin exception that
best describes it (KeyError, TypeError, ValueError), so code written
against plain dicts keeps working.

Absence is not an error for reads: Document.get() reports it through
Lookup.found. PathNotFoundError is only raised by item access
(document[path]).
"""

from __future__ import annotations

import typing as _typing


class FsonError(Exception):
    """Base class for all fson errors."""

    pass


class PathNotFoundError(FsonError, KeyError):
    """Raised by document[path] when the path does not resolve."""

    def __init__(self, path: tuple[str, ...]) -> None:
        self.path = path
        super().__init__(f"path not found: {'/'.join(path)}")

    def __str__(self) -> str:
        # KeyError.__str__ quotes its argument; keep the plain message
        return str(self.args[0])


class WrongTypeError(FsonError, TypeError):
    """Raised when a value exists but does not have the requested shape."""

    def __init__(self, path: tuple[str, ...], expected: str, actual: str) -> None:
        self.path = path
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"value at {'/'.join(path)} is {actual}, expected {expected}"
        )


class InvalidPathError(FsonError, ValueError):
    """Raised for an empty path or a path with non-string or empty segments."""

    pass


class PathConflictError(InvalidPathError):
    """
    Raised when a write would descend through a value that is not an object.

    Example:
        >>> doc = Document.from_dict({"a": 1})
        >>> doc.set(("a", "b"), 2)
        PathConflictError: cannot descend into a: value is scalar, not object
    """

    def __init__(self, prefix: tuple[str, ...], actual: str) -> None:
        self.prefix = prefix
        self.actual = actual
        super().__init__(
            f"cannot descend into {'/'.join(prefix)}: value is {actual}, not object"
        )


class InvalidValueError(FsonError, TypeError):
    """Raised when something that is not a JSON-like value enters a document."""

    def __init__(self, value: _typing.Any, reason: str | None = None) -> None:
        self.value = value
        detail = reason or f"unsupported type {type(value).__name__}"
        super().__init__(f"not a document value: {detail}")


class DecodeError(FsonError, ValueError):
    """Raised when input bytes cannot be decoded into a root object."""

    pass


class EncodeError(FsonError, ValueError):
    """Raised when a value tree cannot be encoded."""

    pass
