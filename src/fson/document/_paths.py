"""
Path normalisation for document operations.

Paths are tuples of string segments. Callers may also pass a list of
segments or a delimited string such as "a/b/c" or "a.b.c"; both are
turned into a tuple here before any tree walk starts.
"""

from __future__ import annotations

import collections.abc as _abc
import typing as _typing

import fson.constants as constants
import fson.document._errors as _errors
import fson.document._types as _types

PathLike: _typing.TypeAlias = str | _abc.Sequence[str]


def split_path(
    text: str,
    delimiters: str = constants.DEFAULT_PATH_DELIMITERS,
) -> _types.Path:
    """
    Split a delimited path string into segments.

    The first delimiter (in the order given) that occurs in the text is
    used, so with the default "/." a string containing a slash is split
    on slashes only and may keep dots inside its segments.

    Example:
        >>> split_path("a/b/c")
        ('a', 'b', 'c')
        >>> split_path("server.port")
        ('server', 'port')
        >>> split_path("files/setup.py")
        ('files', 'setup.py')

    Raises:
        InvalidPathError: If the text is empty or contains empty segments.
    """
    if not text:
        raise _errors.InvalidPathError("empty path")
    if not delimiters:
        raise _errors.InvalidPathError("no path delimiters configured")

    for delimiter in delimiters:
        if delimiter in text:
            segments = tuple(text.split(delimiter))
            break
    else:
        segments = (text,)

    if any(segment == "" for segment in segments):
        raise _errors.InvalidPathError(f"empty segment in path {text!r}")
    return segments


def as_path(
    path: PathLike,
    delimiters: str = constants.DEFAULT_PATH_DELIMITERS,
) -> _types.Path:
    """
    Normalise a path argument into a non-empty tuple of strings.

    Raises:
        InvalidPathError: If the path is empty or a segment is not a str.
    """
    if isinstance(path, str):
        return split_path(path, delimiters)

    if isinstance(path, (bytes, bytearray)) or not isinstance(path, _abc.Sequence):
        raise _errors.InvalidPathError(
            f"path must be a str or a sequence of str, got {type(path).__name__}"
        )

    segments = tuple(path)
    if not segments:
        raise _errors.InvalidPathError("empty path")
    for segment in segments:
        if not isinstance(segment, str):
            raise _errors.InvalidPathError(
                f"path segments must be strings, got {type(segment).__name__}"
            )
    return segments
