"""Issuing of signed, transitive haveref share claims."""

from common.logging_config import get_logger
from common.types import BlobRef
from share.exceptions import IdentityError, SigningError, UploadError
from share.ports import Signer, StorageClient
from share.schema import ShareClaimBlob

logger = get_logger(__name__)


class ClaimIssuer:
    """
    Creates, signs, and uploads a share claim for a target ref.

    The three remote steps run strictly in sequence since each needs the
    result of the previous one. None of them is retried here.
    """

    def __init__(self, storage: StorageClient, signer: Signer):
        self.storage = storage
        self.signer = signer

    async def issue(self, target: BlobRef) -> BlobRef:
        """
        Issue a transitive haveref share claim for target.

        Args:
            target: Ref of the file or directory to share

        Returns:
            Ref of the uploaded signed claim

        Raises:
            IdentityError: If the signer identity cannot be retrieved
            SigningError: If the signing service fails
            UploadError: If the signed claim fails to upload
        """
        try:
            signer_ref = await self.storage.get_server_identity_ref()
        except Exception as e:
            raise IdentityError(f"could not get signer: {e}", cause=e) from e

        unsigned = ShareClaimBlob(target=str(target), camli_signer=str(signer_ref))

        try:
            signed = await self.signer.sign(unsigned.to_blob())
        except Exception as e:
            raise SigningError(f"could not get signed share claim: {e}", cause=e) from e

        try:
            claim_ref = await self.storage.upload(signed)
        except Exception as e:
            raise UploadError(f"could not upload share claim: {e}", cause=e) from e

        logger.info(f"Issued share claim {claim_ref} [target={target}, signer={signer_ref}]")
        return claim_ref
