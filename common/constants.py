"""Project-wide constants (schema blob fields, share URL format, limits)."""

SCHEMA_VERSION: int = 1

# Largest number of entries a single static-set blob may hold before the
# members are split over several linked subsets.
MAX_STATIC_SET_MEMBERS: int = 10000

SHARED_DIR_PREFIX: str = "shared-"
SHARED_DIR_TIME_LAYOUT: str = "%Y%m%d%H%M%S"

SELECTION_REF_KEY: str = "blobRef"
SELECTION_IS_DIR_KEY: str = "isDir"

SHARE_VIA_PARAM: str = "via"
SHARE_ASSEMBLE_SUFFIX: str = "&assemble=1"

ANCHOR_TEXT_EDGE: int = 20

DEFAULT_UI_ROOT: str = "/ui/"
