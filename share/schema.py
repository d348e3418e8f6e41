"""Pydantic models for the JSON schema blobs written by a share operation."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from common.constants import SCHEMA_VERSION


class SchemaBlob(BaseModel):
    """Common envelope of every schema blob."""
    model_config = ConfigDict(populate_by_name=True, frozen=True)

    camli_version: int = Field(default=SCHEMA_VERSION, alias="camliVersion")

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=2)

    def to_blob(self) -> bytes:
        """Serialize to the bytes that get uploaded."""
        return self.to_json().encode("utf-8")


class StaticSetBlob(SchemaBlob):
    """
    Ordered set of refs. A leaf lists ``members``; an inner node lists the
    refs of its subsets in ``mergeSets``.
    """
    camli_type: Literal["static-set"] = Field(default="static-set", alias="camliType")
    members: Optional[List[str]] = None
    merge_sets: Optional[List[str]] = Field(default=None, alias="mergeSets")


class DirectoryBlob(SchemaBlob):
    """Named directory whose entries are a static-set."""
    camli_type: Literal["directory"] = Field(default="directory", alias="camliType")
    file_name: str = Field(alias="fileName")
    entries: str


class ShareClaimBlob(SchemaBlob):
    """Unsigned share claim granting have-reference access to target."""
    camli_type: Literal["claim"] = Field(default="claim", alias="camliType")
    claim_type: Literal["share"] = Field(default="share", alias="claimType")
    auth_type: Literal["haveref"] = Field(default="haveref", alias="authType")
    transitive: bool = True
    target: str
    camli_signer: str = Field(alias="camliSigner")
