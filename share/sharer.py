"""Top-level share operation: selection in, share URL out."""

import asyncio
import uuid
from dataclasses import dataclass
from typing import List, Optional

from common.constants import DEFAULT_UI_ROOT, MAX_STATIC_SET_MEMBERS
from common.logging_config import get_logger
from common.types import BlobRef, SharedItem
from share.claim import ClaimIssuer
from share.directory import Clock, DirectoryAssembler
from share.exceptions import PrefixResolutionError, ShareError, ShareRootError, ValidationError
from share.ports import SelectionSource, ShareNotifier, Signer, StorageClient
from share.resolver import resolve_selection
from share.static_set import StaticSetAssembler
from share.urls import anchor_text, build_share_path, build_share_url

logger = get_logger(__name__)


@dataclass(frozen=True)
class ShareResult:
    """Outcome of a successful share operation."""
    url: str
    anchor_text: str
    target: BlobRef
    claim: BlobRef
    is_dir: bool


class Sharer:
    """
    Shares a selection of blobs through a single signed share claim.

    One item is shared as is. Several items are first gathered in a new
    directory, which is then shared instead; the directory and its
    static-sets are not removed if a later step fails, they are left for
    the server's garbage collection.
    """

    def __init__(
        self,
        storage: StorageClient,
        signer: Signer,
        location: str,
        ui_root: str = DEFAULT_UI_ROOT,
        selection_source: Optional[SelectionSource] = None,
        max_static_set_members: int = MAX_STATIC_SET_MEMBERS,
        clock: Optional[Clock] = None,
    ):
        """
        Args:
            storage: Blob store holding the shared items
            signer: Signing service for the share claim
            location: Current UI location, used to make the share URL absolute
            ui_root: Path the UI is served under
            selection_source: Callable returning the current selection
            max_static_set_members: Static-set size limit before splitting
            clock: Time source for naming shared directories
        """
        self.storage = storage
        self.signer = signer
        self.location = location
        self.ui_root = ui_root
        self.selection_source = selection_source
        self.static_sets = StaticSetAssembler(storage, max_static_set_members)
        self.directories = DirectoryAssembler(storage, clock)
        self.claims = ClaimIssuer(storage, signer)

    async def share_selection(self, items: Optional[List[SharedItem]] = None) -> ShareResult:
        """
        Share items, or the current selection when items is None.

        Returns:
            ShareResult with the absolute share URL

        Raises:
            ShareError: If any step fails; see share.exceptions
        """
        share_id = uuid.uuid4().hex[:8]
        if items is None:
            if self.selection_source is None:
                raise ValidationError("no selection source configured")
            items = self.selection_source()

        resolved = resolve_selection(items)
        logger.info(f"Sharing {len(resolved)} item(s) [share_id={share_id}]")

        if len(resolved) == 1:
            target, is_dir = resolved[0].ref, resolved[0].is_dir
        else:
            set_ref = await self.static_sets.assemble([item.ref for item in resolved])
            target = await self.directories.assemble(set_ref)
            is_dir = True

        claim = await self.claims.issue(target)

        try:
            share_root = await self.storage.get_share_root_path()
        except Exception as e:
            raise ShareRootError(f"could not get share root: {e}", cause=e) from e

        share_path = build_share_path(share_root, claim, target, is_dir)
        logger.info(f"Share path ready: {share_path} [share_id={share_id}]")

        url = build_share_url(self.location, self.ui_root, share_path)
        return ShareResult(url=url, anchor_text=anchor_text(url), target=target, claim=claim, is_dir=is_dir)

    def start(self, notifier: ShareNotifier, items: Optional[List[SharedItem]] = None) -> asyncio.Task:
        """
        Run share_selection in the background of the running event loop.

        The outcome is reported to notifier rather than returned: the shared
        URL on success, an error message on failure. Must be called from
        within a running event loop.
        """
        return asyncio.get_running_loop().create_task(self._share_and_notify(notifier, items))

    async def _share_and_notify(
        self,
        notifier: ShareNotifier,
        items: Optional[List[SharedItem]]
    ) -> Optional[ShareResult]:
        try:
            result = await self.share_selection(items)
        except PrefixResolutionError as e:
            logger.warning(f"Share URL prefix not resolved: {e}")
            notifier.show_error(f"Cannot display full share URL: {e}")
            return None
        except ShareError as e:
            logger.warning(f"Share failed: {e}")
            notifier.show_error(str(e))
            return None
        except Exception as e:
            logger.error(f"Unexpected error while sharing: {e}", exc_info=True)
            notifier.show_error(f"Unexpected error while sharing: {e}")
            return None

        notifier.show_shared_url(result.url, result.anchor_text)
        return result
