"""Assembly of an ordered list of refs into uploaded static-set blobs."""

import asyncio
from typing import List, Sequence

from common.constants import MAX_STATIC_SET_MEMBERS
from common.logging_config import get_logger
from common.types import BlobRef
from share.exceptions import UploadError
from share.ports import StorageClient
from share.schema import StaticSetBlob

logger = get_logger(__name__)


class StaticSetAssembler:
    """
    Builds a static-set over a list of refs, splitting it into linked
    subsets when it holds more than max_members entries.

    Subsets are uploaded level by level: all blobs of one level are uploaded
    concurrently, and the level above is only built from their refs once
    every upload of the level has completed.
    """

    def __init__(self, storage: StorageClient, max_members: int = MAX_STATIC_SET_MEMBERS):
        """
        Args:
            storage: Blob store the sets are uploaded to
            max_members: Largest number of entries in one static-set blob
        """
        if max_members < 2:
            raise ValueError(f"max_members must be at least 2, got {max_members}")
        self.storage = storage
        self.max_members = max_members

    async def assemble(self, refs: Sequence[BlobRef]) -> BlobRef:
        """
        Upload the static-set tree for refs and return the top-level set ref.

        Args:
            refs: At least two refs, in the order they should be listed

        Returns:
            Ref of the top-level static-set

        Raises:
            ValueError: If fewer than two refs are given
            UploadError: If any set blob fails to upload
        """
        if len(refs) < 2:
            raise ValueError(f"a static-set needs at least 2 members, got {len(refs)}")

        entries = [str(ref) for ref in refs]
        leaf_level = True
        depth = 0
        while len(entries) > self.max_members:
            blobs = [
                self._make_set(entries[i:i + self.max_members], leaf_level)
                for i in range(0, len(entries), self.max_members)
            ]
            logger.debug(f"Uploading {len(blobs)} static-set subsets at depth {depth}")
            subset_refs = await self._upload_all(blobs)
            entries = [str(ref) for ref in subset_refs]
            leaf_level = False
            depth += 1

        top_ref = await self._upload(self._make_set(entries, leaf_level))
        logger.debug(f"Uploaded static-set {top_ref} [members={len(refs)}, depth={depth}]")
        return top_ref

    def _make_set(self, entries: List[str], leaf_level: bool) -> StaticSetBlob:
        if leaf_level:
            return StaticSetBlob(members=entries)
        return StaticSetBlob(merge_sets=entries)

    async def _upload_all(self, blobs: List[StaticSetBlob]) -> List[BlobRef]:
        results = await asyncio.gather(
            *(self._upload(blob) for blob in blobs),
            return_exceptions=True
        )
        for result in results:
            if isinstance(result, BaseException):
                raise result
        return list(results)

    async def _upload(self, blob: StaticSetBlob) -> BlobRef:
        try:
            return await self.storage.upload(blob.to_blob())
        except Exception as e:
            logger.error(f"Static-set upload failed: {e}")
            raise UploadError(f"could not upload static-set: {e}", cause=e) from e
