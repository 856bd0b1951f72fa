"""
Read-only path resolution.

resolve() walks a path from a root object. Every segment but the last
must name an object-valued key; the last must exist in the object it
lands on. A missing key and a non-object in the middle of the path are
both reported as "not found".
"""

from __future__ import annotations

import typing as _typing

import fson.document._types as _types


class Lookup(_typing.NamedTuple):
    """
    Result of a read: the value and whether the path resolved.

    Unpacks and compares like a plain (value, found) tuple:
        >>> value, found = doc.get(("a", "b"))
        >>> doc.get(("k",)) == ([100, 200], True)
        True
    """

    value: _typing.Any
    found: bool


NOT_FOUND = Lookup(None, False)


def resolve(root: dict[str, _typing.Any], path: _types.Path) -> Lookup:
    """
    Resolve a non-empty path against a root object.

    The returned value is the node inside root, not a copy. The Document
    façade copies it before handing it to callers.

    Args:
        root: The object to start from.
        path: Non-empty tuple of keys.

    Returns:
        Lookup(value, True) if the path resolves, NOT_FOUND otherwise.
    """
    current: _typing.Any = root
    for key in path[:-1]:
        if not _types.is_object(current) or key not in current:
            return NOT_FOUND
        current = current[key]

    if not _types.is_object(current) or path[-1] not in current:
        return NOT_FOUND
    return Lookup(current[path[-1]], True)
