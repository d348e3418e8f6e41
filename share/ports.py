"""Interfaces of the collaborators a share operation depends on."""

from typing import Callable, List, Protocol

from common.types import BlobRef, SharedItem


class StorageClient(Protocol):
    """Content-addressed blob store."""

    async def upload(self, data: bytes) -> BlobRef:
        """Store an immutable payload and return its reference. Idempotent."""
        ...

    async def get_server_identity_ref(self) -> BlobRef:
        """Return the ref of the server's public key blob."""
        ...

    async def get_share_root_path(self) -> str:
        """Return the path prefix of the server's share handler."""
        ...


class Signer(Protocol):
    """Signing service for JSON claims."""

    async def sign(self, payload: bytes) -> bytes:
        ...


class ShareNotifier(Protocol):
    """Receives the outcome of a background share operation."""

    def show_shared_url(self, url: str, anchor_text: str) -> None:
        ...

    def show_error(self, message: str) -> None:
        ...


SelectionSource = Callable[[], List[SharedItem]]
