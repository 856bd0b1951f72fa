"""
Document: a mutable JSON-like tree addressed by key paths.

A Document owns exactly one root object. Reads (get, exists,
get_object, get_array) walk the tree without changing it and hand out
deep copies. Writes come in two flavours:

- set/append edit the tree in place along one path, creating missing
  intermediate objects.
- delete/merge/filter/fmap rebuild the root copy-on-write and swap it in.

Thread safety: NOT thread-safe. Concurrent readers are safe only while
no writer is active; there is no internal locking.
"""

from __future__ import annotations

import collections.abc as _abc
import copy as _copy
import logging as _logging
import pathlib as _pathlib
import typing as _typing

import fson.codecs as codecs
import fson.constants as constants
import fson.document._errors as _errors
import fson.document._mutate as _mutate
import fson.document._paths as _paths
import fson.document._resolve as _resolve
import fson.document._rewrite as _rewrite
import fson.document._types as _types

_logger = _logging.getLogger(__name__)


class Document:
    """
    A path-addressable JSON-like document.

    Paths are tuples (or lists) of keys, or delimited strings:
        >>> doc = Document(b'{"obj": {"foo": "bar"}}')
        >>> doc.get(("obj", "foo"))
        Lookup(value='bar', found=True)
        >>> doc.get("obj/foo").value
        'bar'
        >>> doc.set("once/twice/third", 100)
        >>> doc.append("once/twice/third", 200)
        >>> doc["once.twice.third"]
        [100, 200]

    Args:
        data: Optional encoded document (bytes or str). None gives an
            empty document.
        format: Codec used to decode data ("json" or "yaml").
        delimiters: Characters used to split string paths.

    Raises:
        DecodeError: If data is given and cannot be decoded.
    """

    __slots__ = ("_root", "_delimiters")

    def __init__(
        self,
        data: bytes | str | None = None,
        *,
        format: codecs.Format = "json",
        delimiters: str = constants.DEFAULT_PATH_DELIMITERS,
    ) -> None:
        self._root: dict[str, _typing.Any] = {}
        self._delimiters = delimiters
        if data is not None:
            self.load_bytes(data, format=format)

    # =========================================================================
    # Construction and loading
    # =========================================================================

    @classmethod
    def from_dict(
        cls,
        data: _abc.Mapping[str, _typing.Any],
        *,
        delimiters: str = constants.DEFAULT_PATH_DELIMITERS,
    ) -> Document:
        """
        Build a document from a mapping.

        The mapping is validated and deep-copied; later changes to it do
        not reach the document.

        Raises:
            InvalidValueError: If data contains non-document values.
        """
        doc = cls(delimiters=delimiters)
        doc._root = _types.normalize(dict(data))
        return doc

    @classmethod
    def load_file(
        cls,
        path: str | _pathlib.Path,
        *,
        delimiters: str = constants.DEFAULT_PATH_DELIMITERS,
    ) -> Document:
        """
        Read a document from a JSON or YAML file (chosen by suffix).

        Raises:
            OSError: If the file cannot be read.
            DecodeError: If its content cannot be decoded.
        """
        file_path = _pathlib.Path(path)
        return cls(
            file_path.read_bytes(),
            format=codecs.format_for_path(file_path),
            delimiters=delimiters,
        )

    def load_bytes(
        self,
        data: bytes | str | None,
        *,
        format: codecs.Format = "json",
    ) -> None:
        """
        Replace the whole tree with decoded data.

        The root is reset to {} first. It only receives the decoded tree
        if decoding succeeds; None just resets.

        Raises:
            DecodeError: If data cannot be decoded. The document is left
                empty.
        """
        self._root = {}
        if data is None:
            _logger.debug("document reset to empty object")
            return
        self._root = codecs.loads(data, format=format)
        _logger.debug("loaded %s document with %d top-level keys", format, len(self._root))

    # =========================================================================
    # Reads
    # =========================================================================

    def _path(self, path: _paths.PathLike) -> _types.Path:
        return _paths.as_path(path, self._delimiters)

    def get(self, path: _paths.PathLike) -> _resolve.Lookup:
        """
        Look up the value at path.

        A missing key and a non-object along the path are both reported
        as not found.

        Returns:
            Lookup(value, found). value is a deep copy, or None when not
            found.

        Raises:
            InvalidPathError: If path is empty or malformed.
        """
        lookup = _resolve.resolve(self._root, self._path(path))
        if not lookup.found:
            return lookup
        return _resolve.Lookup(_copy.deepcopy(lookup.value), True)

    def exists(self, path: _paths.PathLike) -> bool:
        """Return True if get(path) would find a value."""
        return _resolve.resolve(self._root, self._path(path)).found

    def get_object(self, path: _paths.PathLike) -> tuple[Document | None, bool]:
        """
        Look up an object and return it as an independent Document.

        Returns:
            (Document, True) if found, (None, False) if the path does not
            resolve.

        Raises:
            WrongTypeError: If the value exists but is not an object.
        """
        key_path = self._path(path)
        lookup = _resolve.resolve(self._root, key_path)
        if not lookup.found:
            return None, False
        if not _types.is_object(lookup.value):
            raise _errors.WrongTypeError(key_path, "object", _types.describe(lookup.value))
        doc = Document(delimiters=self._delimiters)
        doc._root = _copy.deepcopy(lookup.value)
        return doc, True

    def get_array(self, path: _paths.PathLike) -> tuple[list[_typing.Any] | None, bool]:
        """
        Look up an array.

        Returns:
            (list, True) if found (a deep copy), (None, False) if the path
            does not resolve.

        Raises:
            WrongTypeError: If the value exists but is not an array.
        """
        key_path = self._path(path)
        lookup = _resolve.resolve(self._root, key_path)
        if not lookup.found:
            return None, False
        if not _types.is_array(lookup.value):
            raise _errors.WrongTypeError(key_path, "array", _types.describe(lookup.value))
        return _copy.deepcopy(list(lookup.value)), True

    def __getitem__(self, path: _paths.PathLike) -> _typing.Any:
        """
        Return the value at path.

        Raises:
            PathNotFoundError: If the path does not resolve.
        """
        key_path = self._path(path)
        lookup = _resolve.resolve(self._root, key_path)
        if not lookup.found:
            raise _errors.PathNotFoundError(key_path)
        return _copy.deepcopy(lookup.value)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, _abc.Sequence)):
            return False
        try:
            return self.exists(path)
        except _errors.InvalidPathError:
            return False

    def to_dict(self) -> dict[str, _typing.Any]:
        """Return a deep copy of the root object."""
        return _copy.deepcopy(self._root)

    def copy(self) -> Document:
        """Return an independent copy of this document."""
        doc = Document(delimiters=self._delimiters)
        doc._root = _copy.deepcopy(self._root)
        return doc

    # =========================================================================
    # In-place writes
    # =========================================================================

    def set(
        self,
        path: _paths.PathLike,
        value: _typing.Any,
        append: bool = False,
    ) -> None:
        """
        Write value at path, creating missing intermediate objects.

        In append mode an existing list gets value appended and any other
        existing value v becomes [v, value]. Appending to a key that does
        not exist yet does nothing.

        The value is validated and copied; the document never shares
        containers with the caller.

        Raises:
            InvalidPathError: If path is empty or malformed.
            PathConflictError: If an intermediate key holds a non-object.
                The document is left unchanged.
            InvalidValueError: If value is not a document value.
        """
        key_path = self._path(path)
        _mutate.set_at_path(self._root, key_path, _types.normalize(value), append=append)

    def append(self, path: _paths.PathLike, value: _typing.Any) -> None:
        """Shorthand for set(path, value, append=True)."""
        self.set(path, value, append=True)

    def __setitem__(self, path: _paths.PathLike, value: _typing.Any) -> None:
        self.set(path, value)

    # =========================================================================
    # Whole-tree rewrites
    # =========================================================================

    def delete(self, path: _paths.PathLike) -> None:
        """
        Remove the key at path.

        Deleting a missing key, or a path that runs through a non-object,
        does nothing.

        Raises:
            InvalidPathError: If path is empty or malformed.
        """
        key_path = self._path(path)
        new_root = _rewrite.delete_path(self._root, key_path)
        if new_root is self._root:
            _logger.debug("delete of missing path %s ignored", "/".join(key_path))
            return
        self._root = new_root

    def __delitem__(self, path: _paths.PathLike) -> None:
        key_path = self._path(path)
        if not _resolve.resolve(self._root, key_path).found:
            raise _errors.PathNotFoundError(key_path)
        self.delete(key_path)

    def merge(self, other: Document | _abc.Mapping[str, _typing.Any]) -> None:
        """
        Deep merge another document (or mapping) into this one.

        Objects merge key by key; scalars, arrays and new keys from other
        win. Arrays are replaced, not concatenated. other is not modified.

        Raises:
            InvalidValueError: If other is a mapping with non-document values.
        """
        if isinstance(other, Document):
            override = other._root
        else:
            override = _types.normalize(dict(other))
        self._root = _rewrite.deep_merge(self._root, override)

    def filter(self, predicate: _rewrite.Predicate) -> None:
        """
        Keep only the values accepted by predicate.

        The predicate is called for every value below the root, containers
        included. Rejected containers are dropped whole; accepted ones are
        filtered recursively.
        """
        self._root = _rewrite.filter_tree(self._root, predicate)

    def fmap(self, transform: _rewrite.Transform) -> None:
        """
        Replace every scalar leaf v with transform(v).

        Objects and arrays keep their shape and are never passed to
        transform.

        Raises:
            InvalidValueError: If transform returns a non-document value.
                The document is left unchanged.
        """
        self._root = _rewrite.fmap_tree(self._root, transform)

    # =========================================================================
    # Serialization
    # =========================================================================

    def to_bytes(
        self,
        format: codecs.Format = "json",
        *,
        indent: int | None = None,
        sort_keys: bool = False,
    ) -> bytes:
        """
        Encode the document.

        Never raises for encoding problems: a tree that cannot be encoded
        (e.g. one holding NaN) gives b"" and a warning in the log.
        """
        try:
            return codecs.dumps(self._root, format, indent=indent, sort_keys=sort_keys)
        except _errors.EncodeError as e:
            _logger.warning("document could not be encoded: %s", e)
            return b""

    def pretty(self, indent: int = constants.DEFAULT_INDENT) -> str:
        """Return the JSON encoding re-indented for humans."""
        return codecs.pretty(self.to_bytes(), indent=indent)

    def save_file(
        self,
        path: str | _pathlib.Path,
        *,
        indent: int = constants.DEFAULT_INDENT,
        sort_keys: bool = False,
        ensure_ascii: bool = False,
    ) -> None:
        """
        Write the document to a JSON or YAML file (chosen by suffix).

        Raises:
            EncodeError: If the tree cannot be encoded. Nothing is written.
            OSError: If the file cannot be written.
        """
        file_path = _pathlib.Path(path)
        data = codecs.dumps(
            self._root,
            codecs.format_for_path(file_path),
            indent=indent,
            sort_keys=sort_keys,
            ensure_ascii=ensure_ascii,
        )
        file_path.write_bytes(data)

    def __str__(self) -> str:
        return self.to_bytes().decode("utf-8")

    def __repr__(self) -> str:
        return f"Document({self._root!r})"

    def __eq__(self, other: object) -> bool:
        """Compare by kind and contents; true and 1 are not equal."""
        if isinstance(other, Document):
            return _types.equal(self._root, other._root)
        if isinstance(other, _abc.Mapping):
            try:
                return _types.equal(self._root, dict(other))
            except _errors.InvalidValueError:
                return False
        return NotImplemented

    def __hash__(self) -> int:
        """Document is not hashable (it is mutable)."""
        raise TypeError(f"unhashable type: '{type(self).__name__}'")

    def __len__(self) -> int:
        """Return the number of top-level keys."""
        return len(self._root)

    def __iter__(self) -> _typing.Iterator[str]:
        """Iterate over top-level keys."""
        return iter(list(self._root))
