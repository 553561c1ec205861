"""RoboAvatar core -- digest, index derivation, variants and errors.

Public API re-exports for ``roboavatar.core``.
"""

from roboavatar.core.types import (
    ANY_BACKGROUND,
    BACKGROUND_SET_SLOT,
    BACKGROUND_SLOT,
    COLOUR_BEARING_SET,
    COLOUR_SLOT,
    FIRST_CATEGORY_SLOT,
    SET_SLOT,
    Colour,
    RoboSet,
    Selection,
)

from roboavatar.core.errors import (
    RoboAvatarError,
    MissingRequiredDataError,
    InvalidVariantError,
    ParseError,
    IndexExhaustedError,
    CatalogAccessError,
    ImageOpenError,
    EncodingError,
)

from roboavatar.core.digest import (
    DEFAULT_CHUNKS,
    sha512_digest,
    split_digest,
    derive_index_array,
)

__all__ = [
    # Types
    "ANY_BACKGROUND",
    "BACKGROUND_SET_SLOT",
    "BACKGROUND_SLOT",
    "COLOUR_BEARING_SET",
    "COLOUR_SLOT",
    "FIRST_CATEGORY_SLOT",
    "SET_SLOT",
    "Colour",
    "RoboSet",
    "Selection",
    # Errors
    "RoboAvatarError",
    "MissingRequiredDataError",
    "InvalidVariantError",
    "ParseError",
    "IndexExhaustedError",
    "CatalogAccessError",
    "ImageOpenError",
    "EncodingError",
    # Digest
    "DEFAULT_CHUNKS",
    "sha512_digest",
    "split_digest",
    "derive_index_array",
]
