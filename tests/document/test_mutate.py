"""Tests for in-place writes."""

import pytest as _pytest

import fson.document as document
import fson.document._mutate as _mutate


class TestReplaceMode:
    """set_at_path() without append."""

    def test_overwrites_existing(self) -> None:
        root = {"a": 1}
        _mutate.set_at_path(root, ("a",), 2)
        assert root == {"a": 2}

    def test_creates_missing_key(self) -> None:
        root: dict = {}
        _mutate.set_at_path(root, ("a",), 2)
        assert root == {"a": 2}

    def test_vivifies_intermediate_objects(self) -> None:
        root: dict = {"keep": True}
        _mutate.set_at_path(root, ("once", "twice", "third"), 100)
        assert root == {"keep": True, "once": {"twice": {"third": 100}}}

    def test_descends_into_existing_objects(self) -> None:
        root = {"a": {"x": 1}}
        _mutate.set_at_path(root, ("a", "y"), 2)
        assert root == {"a": {"x": 1, "y": 2}}

    def test_replaces_object_with_scalar(self) -> None:
        root = {"a": {"x": 1}}
        _mutate.set_at_path(root, ("a",), "flat")
        assert root == {"a": "flat"}


class TestAppendMode:
    """set_at_path(append=True)."""

    def test_missing_key_is_noop(self) -> None:
        root: dict = {}
        _mutate.set_at_path(root, ("a",), 1, append=True)
        assert root == {}

    def test_missing_intermediate_is_noop(self) -> None:
        """Append mode never vivifies."""
        root: dict = {}
        _mutate.set_at_path(root, ("a", "b"), 1, append=True)
        assert root == {}

    def test_scalar_becomes_pair(self) -> None:
        root = {"k": 100}
        _mutate.set_at_path(root, ("k",), 200, append=True)
        assert root == {"k": [100, 200]}

    def test_object_becomes_pair(self) -> None:
        root = {"k": {"a": 1}}
        _mutate.set_at_path(root, ("k",), 2, append=True)
        assert root == {"k": [{"a": 1}, 2]}

    def test_null_becomes_pair(self) -> None:
        """An existing null is a value like any other."""
        root = {"k": None}
        _mutate.set_at_path(root, ("k",), 1, append=True)
        assert root == {"k": [None, 1]}

    def test_array_is_extended(self) -> None:
        root = {"k": [1]}
        _mutate.set_at_path(root, ("k",), 2, append=True)
        assert root == {"k": [1, 2]}

    def test_appending_array_nests_it(self) -> None:
        """The value is appended as one element, not spliced in."""
        root = {"k": [1]}
        _mutate.set_at_path(root, ("k",), [2, 3], append=True)
        assert root == {"k": [1, [2, 3]]}


class TestPathConflict:
    """Descending through a non-object."""

    def test_scalar_intermediate_raises(self) -> None:
        root = {"a": 1}
        with _pytest.raises(document.PathConflictError) as exc_info:
            _mutate.set_at_path(root, ("a", "b"), 2)
        assert exc_info.value.prefix == ("a",)
        assert exc_info.value.actual == "scalar"

    def test_array_intermediate_raises(self) -> None:
        root = {"a": {"b": [1]}}
        with _pytest.raises(document.PathConflictError) as exc_info:
            _mutate.set_at_path(root, ("a", "b", "c"), 2)
        assert exc_info.value.prefix == ("a", "b")

    def test_conflict_leaves_tree_unchanged(self) -> None:
        """Nothing is created before the conflict is detected."""
        root = {"a": 1}
        with _pytest.raises(document.PathConflictError):
            _mutate.set_at_path(root, ("a", "b", "c"), 2)
        assert root == {"a": 1}

    def test_conflict_in_append_mode(self) -> None:
        root = {"a": "text"}
        with _pytest.raises(document.PathConflictError):
            _mutate.set_at_path(root, ("a", "b"), 2, append=True)

    def test_conflict_is_invalid_path(self) -> None:
        with _pytest.raises(document.InvalidPathError):
            _mutate.set_at_path({"a": 1}, ("a", "b"), 2)
