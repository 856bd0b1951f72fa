"""
Shared fixtures for Document tests.
"""

import pytest as _pytest

import fson.document as document

SAMPLE = b'{"boo": true, "hello": "world", "obj": {"foo": "bar"}, "baz": [400, 2, 3]}'


@_pytest.fixture
def sample_doc() -> document.Document:
    """Flat-ish document with every value kind."""
    return document.Document(SAMPLE)


@_pytest.fixture
def nested_doc() -> document.Document:
    """Document with objects nested several levels deep."""
    return document.Document.from_dict(
        {
            "foo": 1,
            "foo2": {
                "bar": 1,
                "baz": {"v": 1, "vv": {"vvv": 1}},
            },
        }
    )


@_pytest.fixture
def empty_doc() -> document.Document:
    """Document with no data."""
    return document.Document()
