"""Creation of the ephemeral directory holding a multi-item selection."""

from datetime import datetime, timezone
from typing import Callable, Optional

from common.constants import SHARED_DIR_PREFIX, SHARED_DIR_TIME_LAYOUT
from common.logging_config import get_logger
from common.types import BlobRef
from share.exceptions import UploadError
from share.ports import StorageClient
from share.schema import DirectoryBlob

logger = get_logger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def shared_dir_name(now: datetime) -> str:
    """Name of a shared selection directory created at now, e.g. shared-20240131235959."""
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    return SHARED_DIR_PREFIX + now.strftime(SHARED_DIR_TIME_LAYOUT)


class DirectoryAssembler:
    """Wraps an uploaded static-set in a freshly named directory blob."""

    def __init__(self, storage: StorageClient, clock: Optional[Clock] = None):
        self.storage = storage
        self.clock = clock or utc_now

    async def assemble(self, static_set_ref: BlobRef) -> BlobRef:
        """
        Upload a directory whose entries are static_set_ref.

        Returns:
            Ref of the new directory blob

        Raises:
            UploadError: If the directory blob fails to upload
        """
        blob = DirectoryBlob(file_name=shared_dir_name(self.clock()), entries=str(static_set_ref))
        try:
            dir_ref = await self.storage.upload(blob.to_blob())
        except Exception as e:
            logger.error(f"Directory upload failed: {e}")
            raise UploadError(f"could not upload directory {blob.file_name}: {e}", cause=e) from e

        logger.info(f"Created directory {blob.file_name} [ref={dir_ref}, entries={static_set_ref}]")
        return dir_ref
