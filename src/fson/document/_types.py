"""
Value model for fson documents.

A document value is one of three kinds:
- OBJECT: dict mapping str keys to values
- ARRAY: list of values (tuples are accepted on input, stored as lists)
- SCALAR: str, int, float, bool or None

Values are plain Python containers. Every recursion site classifies a
node with kind_of() and dispatches on the returned ValueKind.
"""

from __future__ import annotations

import enum as _enum
import typing as _typing

import fson.document._errors as _errors

# Path alias for nested key paths
# Example: ("config", "model", "name") addresses config.model.name
Path: _typing.TypeAlias = tuple[str, ...]

Scalar: _typing.TypeAlias = str | int | float | bool | None

if _typing.TYPE_CHECKING:
    Value: _typing.TypeAlias = dict[str, "Value"] | list["Value"] | Scalar
else:
    Value: _typing.TypeAlias = _typing.Any

_SCALAR_TYPES = (str, int, float, bool, type(None))


class ValueKind(_enum.Enum):
    """The three node kinds of a document tree."""

    OBJECT = "object"
    ARRAY = "array"
    SCALAR = "scalar"


def kind_of(value: _typing.Any) -> ValueKind:
    """
    Classify a single node without looking at its children.

    Raises:
        InvalidValueError: If value is not a dict, list, tuple or scalar.
    """
    if isinstance(value, dict):
        return ValueKind.OBJECT
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, _SCALAR_TYPES):
        return ValueKind.SCALAR
    raise _errors.InvalidValueError(value)


def is_object(value: _typing.Any) -> bool:
    """Check if a value is an object node."""
    return isinstance(value, dict)


def is_array(value: _typing.Any) -> bool:
    """Check if a value is an array node."""
    return isinstance(value, (list, tuple))


def normalize(value: _typing.Any) -> Value:
    """
    Validate a value tree and return an independent copy of it.

    Dicts and lists are rebuilt, tuples become lists, scalars are
    returned as-is. The result shares no container with the input.

    Raises:
        InvalidValueError: If any node is not a document value or an
            object has a non-string key.
    """
    kind = kind_of(value)
    if kind is ValueKind.OBJECT:
        result: dict[str, Value] = {}
        for key, child in value.items():
            if not isinstance(key, str):
                raise _errors.InvalidValueError(
                    value, f"object key {key!r} is {type(key).__name__}, not str"
                )
            result[key] = normalize(child)
        return result
    if kind is ValueKind.ARRAY:
        return [normalize(item) for item in value]
    return value


def equal(left: _typing.Any, right: _typing.Any) -> bool:
    """
    Compare two value trees by kind and contents.

    Unlike ==, a boolean never equals a number: True and 1 are different
    scalars. Integers and floats are both numbers, so 1 equals 1.0.

    Raises:
        InvalidValueError: If either tree holds a non-document value.
    """
    kind = kind_of(left)
    if kind is not kind_of(right):
        return False
    if kind is ValueKind.OBJECT:
        return left.keys() == right.keys() and all(
            equal(value, right[key]) for key, value in left.items()
        )
    if kind is ValueKind.ARRAY:
        return len(left) == len(right) and all(
            equal(a, b) for a, b in zip(left, right)
        )
    if isinstance(left, bool) or isinstance(right, bool):
        return type(left) is type(right) and left == right
    return bool(left == right)


def describe(value: _typing.Any) -> str:
    """Return the kind name of a value for error messages."""
    return kind_of(value).value
