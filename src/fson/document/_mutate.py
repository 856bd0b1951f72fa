"""
In-place writes along a path.

set_at_path() is the only operation that edits a tree in place. It
creates missing intermediate objects (auto-vivification) and supports
an append mode that coalesces the existing value and the new one into
a list.
"""

from __future__ import annotations

import logging as _logging
import typing as _typing

import fson.document._errors as _errors
import fson.document._types as _types

_logger = _logging.getLogger(__name__)


def _check_descent(root: dict[str, _typing.Any], path: _types.Path) -> None:
    """
    Make sure every existing intermediate node along path is an object.

    Runs before anything is created so a failed write leaves the tree
    untouched.

    Raises:
        PathConflictError: If an intermediate key holds a non-object.
    """
    current: _typing.Any = root
    for depth, key in enumerate(path[:-1], start=1):
        if key not in current:
            return  # the rest will be created
        current = current[key]
        if not _types.is_object(current):
            raise _errors.PathConflictError(path[:depth], _types.describe(current))


def set_at_path(
    root: dict[str, _typing.Any],
    path: _types.Path,
    value: _typing.Any,
    *,
    append: bool = False,
) -> None:
    """
    Write value at path inside root.

    Replace mode overwrites or creates the final key. Append mode only
    touches a key that already exists: a list gets value appended, any
    other value v becomes [v, value]. Appending to a missing key is a
    no-op.

    Args:
        root: The object to modify in place.
        path: Non-empty tuple of keys.
        value: An already-validated value; stored as given.
        append: Use append mode instead of replace mode.

    Raises:
        PathConflictError: If an intermediate key holds a non-object.
    """
    _check_descent(root, path)

    final_key = path[-1]
    if not append:
        _vivify_parent(root, path)[final_key] = value
        return

    parent = _find_parent(root, path)
    if parent is None or final_key not in parent:
        _logger.debug("append to missing path %s ignored", "/".join(path))
        return

    existing = parent[final_key]
    if _types.kind_of(existing) is _types.ValueKind.ARRAY:
        parent[final_key] = [*existing, value]
    else:
        parent[final_key] = [existing, value]


def _find_parent(
    root: dict[str, _typing.Any],
    path: _types.Path,
) -> dict[str, _typing.Any] | None:
    """Return the object holding path[-1], or None if it does not exist yet."""
    current: dict[str, _typing.Any] = root
    for key in path[:-1]:
        if key not in current:
            return None
        current = current[key]
    return current


def _vivify_parent(
    root: dict[str, _typing.Any],
    path: _types.Path,
) -> dict[str, _typing.Any]:
    """Return the object holding path[-1], creating empty objects on the way."""
    current: dict[str, _typing.Any] = root
    for key in path[:-1]:
        if key not in current:
            current[key] = {}
        current = current[key]
    return current
