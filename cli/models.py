"""Command request data types for CLI."""

from dataclasses import dataclass
from typing import Literal

from common.constants import SELECTION_IS_DIR_KEY, SELECTION_REF_KEY
from common.types import SharedItem


@dataclass(frozen=True)
class ShareCommand:
    """Share one or more blobs. Each item is a (blobref, "true"|"false") pair."""

    items: tuple[tuple[str, str], ...]
    command: Literal["share"] = "share"

    def to_selection(self) -> list[SharedItem]:
        """Selection in the shape the share core consumes."""
        return [
            {SELECTION_REF_KEY: ref, SELECTION_IS_DIR_KEY: is_dir}
            for ref, is_dir in self.items
        ]


@dataclass(frozen=True)
class SetTokenCommand:
    """Store the auth token used against the blob server."""

    token: str
    command: Literal["set-token"] = "set-token"


CommandRequest = ShareCommand | SetTokenCommand
