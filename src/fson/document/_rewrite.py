"""
Whole-tree rewrites: delete, merge, filter and fmap.

Unlike set_at_path(), none of these functions modify their input. Each
returns a new tree built copy-on-write: nodes on the rewritten path are
fresh, untouched siblings are shared with the input tree. Callers that
hand the result to another owner must copy it first.
"""

from __future__ import annotations

import typing as _typing

import fson.document._types as _types


Predicate: _typing.TypeAlias = _typing.Callable[[_typing.Any], bool]
Transform: _typing.TypeAlias = _typing.Callable[[_typing.Any], _typing.Any]


def delete_path(node: _typing.Any, path: _types.Path) -> _typing.Any:
    """
    Return node without the key addressed by path.

    If the path runs through a non-object or the final key is absent,
    node itself is returned unchanged, so `result is node` tells the
    caller nothing was deleted.

    Example:
        >>> delete_path({"a": {"b": 1, "c": 2}}, ("a", "b"))
        {'a': {'c': 2}}
    """
    if not _types.is_object(node) or path[0] not in node:
        return node

    key = path[0]
    if len(path) == 1:
        return {k: v for k, v in node.items() if k != key}

    child = delete_path(node[key], path[1:])
    if child is node[key]:
        return node

    result = dict(node)
    result[key] = child
    return result


def deep_merge(
    base: dict[str, _typing.Any],
    override: _typing.Mapping[str, _typing.Any],
) -> dict[str, _typing.Any]:
    """
    Deep merge two objects, with override taking priority.

    - Keys only in base are kept.
    - Keys only in override are copied in.
    - When both sides hold an object, they are merged recursively.
    - Otherwise the override value wins. Lists are replaced, never
      concatenated.

    Values taken from override are copied, so the result never aliases
    override's containers.

    Args:
        base: The object being merged into (not modified).
        override: The object whose values win.

    Returns:
        New merged object.
    """
    result = dict(base)
    for key, value in override.items():
        existing = result.get(key)
        if _types.is_object(value) and key in result and _types.is_object(existing):
            result[key] = deep_merge(existing, value)
        else:
            result[key] = _types.normalize(value)
    return result


def filter_tree(root: dict[str, _typing.Any], predicate: Predicate) -> dict[str, _typing.Any]:
    """
    Return a copy of root keeping only the entries accepted by predicate.

    The predicate sees every value below the root, containers included.
    A rejected container is dropped with everything in it; an accepted
    container is kept and its own children are filtered in turn. The
    root object itself is never passed to the predicate.

    The predicate receives nodes of the source tree and must not modify
    them.

    Example:
        >>> keep_small = lambda v: not isinstance(v, (int, float)) or v <= 1
        >>> filter_tree({"a": 2, "b": {"bar": 1, "baz": [2, 1, 1]}}, keep_small)
        {'b': {'bar': 1, 'baz': [1, 1]}}
    """
    return _filter_children(root, predicate)


def _filter_children(node: _typing.Any, predicate: Predicate) -> _typing.Any:
    kind = _types.kind_of(node)
    if kind is _types.ValueKind.OBJECT:
        return {
            key: _filter_children(value, predicate)
            for key, value in node.items()
            if predicate(value)
        }
    if kind is _types.ValueKind.ARRAY:
        return [_filter_children(item, predicate) for item in node if predicate(item)]
    return node


def fmap_tree(root: dict[str, _typing.Any], transform: Transform) -> dict[str, _typing.Any]:
    """
    Return a copy of root with transform applied to every scalar leaf.

    Objects and arrays are rebuilt with the same keys and lengths and are
    never passed to transform.

    Raises:
        InvalidValueError: If transform returns something that is not a
            document value.
    """
    return _fmap_node(root, transform)


def _fmap_node(node: _typing.Any, transform: Transform) -> _typing.Any:
    kind = _types.kind_of(node)
    if kind is _types.ValueKind.OBJECT:
        return {key: _fmap_node(value, transform) for key, value in node.items()}
    if kind is _types.ValueKind.ARRAY:
        return [_fmap_node(item, transform) for item in node]
    return _types.normalize(transform(node))
