"""Validation of the raw selection handed over by the selection source."""

from typing import Iterable, List

from common.constants import SELECTION_IS_DIR_KEY, SELECTION_REF_KEY
from common.types import BlobRef, ResolvedItem, SharedItem
from share.exceptions import ValidationError

_TRUE_STRINGS = frozenset({"1", "t", "T", "TRUE", "true", "True"})
_FALSE_STRINGS = frozenset({"0", "f", "F", "FALSE", "false", "False"})


def parse_bool(value) -> bool:
    """
    Interpret a selection flag as a boolean.

    Raises:
        ValueError: If value is neither a bool nor one of the accepted strings
    """
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        if value in _TRUE_STRINGS:
            return True
        if value in _FALSE_STRINGS:
            return False
    raise ValueError(f"invalid syntax: {value!r}")


def resolve_selection(items: Iterable[SharedItem]) -> List[ResolvedItem]:
    """
    Validate selected items and convert them to typed refs.

    Args:
        items: Selected items, each a mapping with "blobRef" and "isDir" keys

    Returns:
        Resolved items, in selection order

    Raises:
        ValidationError: If the selection is empty or any item is malformed
    """
    resolved = []
    for item in items:
        if not isinstance(item, dict) or SELECTION_REF_KEY not in item:
            raise ValidationError("cannot share item, it's missing a blobRef")
        raw_ref = item[SELECTION_REF_KEY]
        ref = BlobRef.parse(raw_ref)
        if ref is None:
            raise ValidationError(f"cannot share {raw_ref!r}, not a valid blobRef")

        if SELECTION_IS_DIR_KEY not in item:
            raise ValidationError(f"cannot share {raw_ref!r}, it's missing an isDir value")
        raw_is_dir = item[SELECTION_IS_DIR_KEY]
        try:
            is_dir = parse_bool(raw_is_dir)
        except ValueError as e:
            raise ValidationError(f"invalid boolean value {raw_is_dir!r} for isDir: {e}") from e

        resolved.append(ResolvedItem(ref=ref, is_dir=is_dir))

    if not resolved:
        raise ValidationError("nothing selected to share")
    return resolved
