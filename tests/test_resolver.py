"""Tests for selection validation."""

import pytest

from common.types import BlobRef, ResolvedItem
from share.exceptions import ValidationError
from share.resolver import parse_bool, resolve_selection


def test_resolve_preserves_order_and_flags():
    items = [
        {"blobRef": "sha1-bbb", "isDir": "true"},
        {"blobRef": "sha1-aaa", "isDir": "false"},
    ]

    resolved = resolve_selection(items)

    assert resolved == [
        ResolvedItem(BlobRef.parse("sha1-bbb"), True),
        ResolvedItem(BlobRef.parse("sha1-aaa"), False),
    ]


def test_resolve_empty_selection_fails():
    with pytest.raises(ValidationError, match="nothing selected"):
        resolve_selection([])


def test_resolve_missing_blobref():
    with pytest.raises(ValidationError, match="missing a blobRef"):
        resolve_selection([{"isDir": "false"}])


def test_resolve_invalid_blobref():
    with pytest.raises(ValidationError, match="not a valid blobRef"):
        resolve_selection([{"blobRef": "not-a-ref!", "isDir": "false"}])


def test_resolve_missing_is_dir():
    with pytest.raises(ValidationError, match="missing an isDir"):
        resolve_selection([{"blobRef": "sha1-aaa"}])


@pytest.mark.parametrize("value", ["yes", "", "2", None, "tRuE"])
def test_resolve_non_boolean_is_dir(value):
    with pytest.raises(ValidationError, match="invalid boolean value"):
        resolve_selection([{"blobRef": "sha1-aaa", "isDir": value}])


def test_resolve_rejects_later_bad_item():
    items = [
        {"blobRef": "sha1-aaa", "isDir": "false"},
        {"blobRef": "sha1-bbb", "isDir": "maybe"},
    ]

    with pytest.raises(ValidationError):
        resolve_selection(items)


def test_resolve_rejects_non_mapping_item():
    with pytest.raises(ValidationError):
        resolve_selection(["sha1-aaa"])


@pytest.mark.parametrize("value,expected", [
    ("1", True), ("t", True), ("T", True), ("TRUE", True), ("true", True), ("True", True),
    ("0", False), ("f", False), ("F", False), ("FALSE", False), ("false", False), ("False", False),
    (True, True), (False, False),
])
def test_parse_bool(value, expected):
    assert parse_bool(value) is expected
