"""Shared data type definitions (BlobRef, ResolvedItem, SharedItem)."""

import hashlib
import re
from dataclasses import dataclass
from typing import Dict, Optional, Union

_BLOBREF_RE = re.compile(r"([a-z][a-z0-9]*)-([0-9a-f]+)")

# A selected item as handed over by the selection source:
#   {"blobRef": "sha224-...", "isDir": "true"}
SharedItem = Dict[str, Union[str, bool]]


@dataclass(frozen=True)
class BlobRef:
    """
    Content reference of an immutable blob: a hash name and its hex digest.
    """
    hash_name: str
    digest: str

    @classmethod
    def parse(cls, value: str) -> Optional['BlobRef']:
        """
        Parse a blobref string such as "sha224-abc123".

        Args:
            value: Candidate blobref string

        Returns:
            BlobRef, or None if the string is not a syntactically valid ref
        """
        if not isinstance(value, str):
            return None
        match = _BLOBREF_RE.fullmatch(value)
        if match is None:
            return None
        return cls(hash_name=match.group(1), digest=match.group(2))

    @classmethod
    def for_bytes(cls, data: bytes, hash_name: str = 'sha224') -> 'BlobRef':
        """Compute the content reference of a payload."""
        return cls(hash_name=hash_name, digest=hashlib.new(hash_name, data).hexdigest())

    def __str__(self) -> str:
        return f"{self.hash_name}-{self.digest}"


@dataclass(frozen=True)
class ResolvedItem:
    """
    A validated selection entry.
    """
    ref: BlobRef
    is_dir: bool
