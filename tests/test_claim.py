"""Tests for share claim issuing."""

import json

import pytest

from common.types import BlobRef
from share.claim import ClaimIssuer
from share.exceptions import IdentityError, SigningError, UploadError
from fakes import SERVER_IDENTITY

TARGET = BlobRef.parse("sha1-aaa")


@pytest.mark.asyncio
async def test_issue_signs_and_uploads_claim(storage, signer):
    claim_ref = await ClaimIssuer(storage, signer).issue(TARGET)

    unsigned = json.loads(signer.payloads[0])
    assert unsigned["camliType"] == "claim"
    assert unsigned["claimType"] == "share"
    assert unsigned["authType"] == "haveref"
    assert unsigned["transitive"] is True
    assert unsigned["target"] == "sha1-aaa"
    assert unsigned["camliSigner"] == SERVER_IDENTITY

    stored = storage.json_blob(claim_ref)
    assert stored["camliSig"] == "wsBcBAABCAAQBQJ"
    assert stored["target"] == "sha1-aaa"


@pytest.mark.asyncio
async def test_identity_failure_stops_before_signing(storage, signer):
    storage.fail_identity = True

    with pytest.raises(IdentityError, match="could not get signer") as exc_info:
        await ClaimIssuer(storage, signer).issue(TARGET)

    assert isinstance(exc_info.value.cause, RuntimeError)
    assert signer.payloads == []


@pytest.mark.asyncio
async def test_signing_failure_stops_before_upload(storage, signer):
    signer.fail = True

    with pytest.raises(SigningError, match="signing key locked"):
        await ClaimIssuer(storage, signer).issue(TARGET)

    assert storage.blobs == {}


@pytest.mark.asyncio
async def test_claim_upload_failure(storage, signer):
    storage.fail_upload_types.add("claim")

    with pytest.raises(UploadError, match="could not upload share claim"):
        await ClaimIssuer(storage, signer).issue(TARGET)

    assert len(signer.payloads) == 1
