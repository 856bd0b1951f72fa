"""
Byte codecs for fson documents.

Two formats are supported:
- json: standard library json, compact output by default
- yaml: PyYAML safe loader/dumper

Decoding always produces a root object (dict); anything else is a
DecodeError. Encoding raises EncodeError; Document.to_bytes() turns that
into an empty result.
"""

from __future__ import annotations

import json as _json
import pathlib as _pathlib
import typing as _typing

import yaml as _yaml

import fson.constants as constants
import fson.document._errors as _errors
import fson.document._types as _types

Format: _typing.TypeAlias = _typing.Literal["json", "yaml"]


def _check_format(format: str) -> None:
    if format not in constants.SUPPORTED_FORMATS:
        raise ValueError(
            f"unsupported format {format!r}, expected one of "
            f"{', '.join(constants.SUPPORTED_FORMATS)}"
        )


def _reject_constant(name: str) -> _typing.NoReturn:
    # NaN and the infinities are not JSON
    raise ValueError(f"invalid JSON constant {name}")


def format_for_path(path: str | _pathlib.Path) -> Format:
    """Pick the codec for a file from its suffix (.yaml/.yml → yaml, else json)."""
    suffix = _pathlib.Path(path).suffix.lower()
    if suffix in constants.YAML_SUFFIXES:
        return "yaml"
    return "json"


def loads(data: bytes | str, format: Format = "json") -> dict[str, _typing.Any]:
    """
    Decode bytes or text into a root object.

    Args:
        data: Encoded document.
        format: "json" or "yaml".

    Returns:
        The decoded root object.

    Raises:
        DecodeError: If the input is malformed (including the non-JSON
            constants NaN and Infinity), the root is not an object,
            or the decoded tree contains values fson cannot represent
            (e.g. YAML timestamps or non-string keys).
    """
    _check_format(format)

    try:
        if format == "yaml":
            decoded = _yaml.safe_load(data)
            if decoded is None:
                # empty YAML stream
                decoded = {}
        else:
            decoded = _json.loads(data, parse_constant=_reject_constant)
    except (ValueError, _yaml.YAMLError) as e:
        raise _errors.DecodeError(f"malformed {format} input: {e}") from e

    if not _types.is_object(decoded):
        raise _errors.DecodeError(
            f"{format} root must be an object, got {type(decoded).__name__}"
        )

    try:
        return _types.normalize(decoded)
    except _errors.InvalidValueError as e:
        raise _errors.DecodeError(str(e)) from e


def dumps(
    value: _typing.Any,
    format: Format = "json",
    *,
    indent: int | None = None,
    sort_keys: bool = False,
    ensure_ascii: bool = False,
) -> bytes:
    """
    Encode a value tree.

    JSON output is compact (no spaces) unless indent is given. NaN and
    infinities are rejected rather than written as invalid JSON.

    Args:
        value: The tree to encode.
        format: "json" or "yaml".
        indent: Indentation for pretty output; None for compact JSON.
        sort_keys: Emit object keys in sorted order.
        ensure_ascii: Escape non-ASCII characters (JSON only).

    Returns:
        UTF-8 encoded bytes.

    Raises:
        EncodeError: If the tree cannot be encoded.
    """
    _check_format(format)

    try:
        if format == "yaml":
            text = _yaml.safe_dump(
                value,
                indent=indent or 2,
                sort_keys=sort_keys,
                allow_unicode=not ensure_ascii,
                default_flow_style=False,
            )
        elif indent is None:
            text = _json.dumps(
                value,
                separators=(",", ":"),
                sort_keys=sort_keys,
                ensure_ascii=ensure_ascii,
                allow_nan=False,
            )
        else:
            text = _json.dumps(
                value,
                indent=indent,
                sort_keys=sort_keys,
                ensure_ascii=ensure_ascii,
                allow_nan=False,
            )
    except (TypeError, ValueError, _yaml.YAMLError) as e:
        raise _errors.EncodeError(f"cannot encode as {format}: {e}") from e

    return text.encode("utf-8")


def pretty(data: bytes | str, indent: int = constants.DEFAULT_INDENT) -> str:
    """
    Re-indent encoded JSON.

    Empty input gives an empty string, which is what Document.to_bytes()
    returns for a tree that could not be encoded.

    Raises:
        DecodeError: If data is not valid JSON.
    """
    if not data:
        return ""
    try:
        decoded = _json.loads(data, parse_constant=_reject_constant)
    except ValueError as e:
        raise _errors.DecodeError(f"malformed json input: {e}") from e
    return _json.dumps(decoded, indent=indent, ensure_ascii=False)
