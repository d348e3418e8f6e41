"""Exception classes for the share operation."""

from typing import Optional


class ShareError(Exception):
    """
    Base exception class for all share-related errors.
    """

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ValidationError(ShareError):
    """
    Raised when the selection is empty or an item has a missing or malformed field.
    """
    pass


class IdentityError(ShareError):
    """
    Raised when the server's signing identity cannot be retrieved.
    """
    pass


class SigningError(ShareError):
    """
    Raised when the signing service fails to sign a claim.
    """
    pass


class UploadError(ShareError):
    """
    Raised when a schema blob or signed claim cannot be uploaded.
    """
    pass


class ShareRootError(ShareError):
    """
    Raised when the server's share handler path cannot be retrieved.
    """
    pass


class PrefixResolutionError(ShareError):
    """
    Raised when the UI root cannot be located within the current location.
    """
    pass
