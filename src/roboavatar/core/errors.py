"""RoboAvatar exception hierarchy.

All pipeline exceptions inherit from :class:`RoboAvatarError`.
"""

from __future__ import annotations


class RoboAvatarError(Exception):
    """Base exception for all avatar generation errors."""


class MissingRequiredDataError(RoboAvatarError):
    """Raised when a request lacks data needed before any I/O can start."""


class InvalidVariantError(RoboAvatarError, ValueError):
    """Raised when a set or colour name maps to no known variant."""


class ParseError(RoboAvatarError):
    """Raised when a digest chunk is not a valid base-16 number."""


class IndexExhaustedError(RoboAvatarError):
    """Raised when the category cursor runs past the end of the index array."""


class CatalogAccessError(RoboAvatarError):
    """Raised when a catalog directory or background file cannot be read."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class ImageOpenError(RoboAvatarError):
    """Raised when an asset file cannot be decoded as an image."""

    def __init__(self, message: str, path: str | None = None) -> None:
        super().__init__(message)
        self.path = path


class EncodingError(RoboAvatarError):
    """Raised when the composed canvas cannot be serialized to PNG."""
