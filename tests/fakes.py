"""In-memory collaborators for share tests."""

import asyncio
import json

from common.types import BlobRef
from share.schema import StaticSetBlob

SERVER_IDENTITY = "sha224-" + "5e" * 28


class FakeStorage:
    """In-memory content-addressed store recording every call."""

    def __init__(self, share_root: str = "/share/"):
        self.share_root = share_root
        self.blobs: dict[str, bytes] = {}
        self.events: list[tuple[str, str]] = []
        self.calls = 0
        self.fail_upload_types: set[str] = set()
        self.fail_identity = False
        self.fail_share_root = False

    async def upload(self, data: bytes) -> BlobRef:
        self.calls += 1
        ref = BlobRef.for_bytes(data)
        kind = _blob_kind(data)
        self.events.append(("start", str(ref)))
        await asyncio.sleep(0)
        if kind in self.fail_upload_types:
            raise RuntimeError(f"storage refused {kind}")
        self.blobs[str(ref)] = data
        self.events.append(("done", str(ref)))
        return ref

    async def get_server_identity_ref(self) -> BlobRef:
        self.calls += 1
        if self.fail_identity:
            raise RuntimeError("no public key")
        return BlobRef.parse(SERVER_IDENTITY)

    async def get_share_root_path(self) -> str:
        self.calls += 1
        if self.fail_share_root:
            raise RuntimeError("no share handler")
        return self.share_root

    def json_blob(self, ref) -> dict:
        return json.loads(self.blobs[str(ref)])

    def blobs_of_type(self, camli_type: str) -> list[dict]:
        return [json.loads(data) for data in self.blobs.values() if _blob_kind(data) == camli_type]

    def flatten(self, ref) -> list[str]:
        """Leaf members of the static-set tree rooted at ref, in link order."""
        blob = StaticSetBlob.model_validate_json(self.blobs[str(ref)])
        if blob.members is not None:
            return list(blob.members)
        members = []
        for subset in blob.merge_sets:
            members.extend(self.flatten(subset))
        return members


class FakeSigner:
    """Signer that adds a date and a fixed signature to the claim JSON."""

    def __init__(self, fail: bool = False):
        self.fail = fail
        self.payloads: list[bytes] = []

    async def sign(self, payload: bytes) -> bytes:
        self.payloads.append(payload)
        if self.fail:
            raise RuntimeError("signing key locked")
        claim = json.loads(payload)
        claim["claimDate"] = "2024-01-31T23:59:59Z"
        claim["camliSig"] = "wsBcBAABCAAQBQJ"
        return json.dumps(claim).encode("utf-8")


class RecordingNotifier:
    """Notifier capturing what would be shown to the user."""

    def __init__(self):
        self.urls: list[tuple[str, str]] = []
        self.errors: list[str] = []

    def show_shared_url(self, url: str, anchor_text: str) -> None:
        self.urls.append((url, anchor_text))

    def show_error(self, message: str) -> None:
        self.errors.append(message)


def _blob_kind(data: bytes) -> str:
    try:
        return json.loads(data).get("camliType", "bytes")
    except ValueError:
        return "bytes"
