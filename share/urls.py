"""Construction of share URLs."""

from common.constants import ANCHOR_TEXT_EDGE, SHARE_ASSEMBLE_SUFFIX, SHARE_VIA_PARAM
from common.types import BlobRef
from share.exceptions import PrefixResolutionError


def build_share_path(share_root: str, claim: BlobRef, target: BlobRef, is_dir: bool) -> str:
    """
    Build the server-relative share URL.

    A directory is fetched through its claim alone (e.g. with pk-get -shared);
    a file URL names the file and the claim it is reached through, and asks
    the server to assemble the file contents.
    """
    if is_dir:
        return f"{share_root}{claim}"
    return f"{share_root}{target}?{SHARE_VIA_PARAM}={claim}{SHARE_ASSEMBLE_SUFFIX}"


def resolve_url_prefix(location: str, ui_root: str) -> str:
    """
    Derive the scheme and host part of the server URL from the current location.

    Args:
        location: Current UI location, e.g. "https://example.com/ui/"
        ui_root: Path the UI is served under, e.g. "/ui/"

    Returns:
        Everything in location before ui_root, e.g. "https://example.com"

    Raises:
        PrefixResolutionError: If ui_root does not occur in location
    """
    if location.endswith(ui_root):
        return location[:len(location) - len(ui_root)]
    idx = location.find(ui_root)
    if idx == -1:
        raise PrefixResolutionError(
            f"could not guess our URL prefix: {ui_root!r} not found in {location!r}"
        )
    return location[:idx]


def build_share_url(location: str, ui_root: str, share_path: str) -> str:
    """Resolve a server-relative share path into an absolute URL."""
    return resolve_url_prefix(location, ui_root) + share_path


def anchor_text(url: str) -> str:
    """Shortened form of url for display as link text."""
    if len(url) <= 2 * ANCHOR_TEXT_EDGE + 3:
        return url
    return url[:ANCHOR_TEXT_EDGE] + "..." + url[-ANCHOR_TEXT_EDGE:]
