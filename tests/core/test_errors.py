"""Tests for roboavatar.core.errors module."""

from __future__ import annotations

import pytest

from roboavatar.core.errors import (
    CatalogAccessError,
    EncodingError,
    ImageOpenError,
    IndexExhaustedError,
    InvalidVariantError,
    MissingRequiredDataError,
    ParseError,
    RoboAvatarError,
)


class TestHierarchy:
    @pytest.mark.parametrize(
        "exc_type",
        [
            MissingRequiredDataError,
            InvalidVariantError,
            ParseError,
            IndexExhaustedError,
            CatalogAccessError,
            ImageOpenError,
            EncodingError,
        ],
    )
    def test_is_robo_avatar_error(self, exc_type):
        assert issubclass(exc_type, RoboAvatarError)

    def test_invalid_variant_is_value_error(self):
        assert issubclass(InvalidVariantError, ValueError)


class TestMessages:
    def test_catalog_access_carries_path(self):
        err = CatalogAccessError("cannot list", path="/srv/sets/set9")
        assert str(err) == "cannot list"
        assert err.path == "/srv/sets/set9"

    def test_image_open_carries_path(self):
        err = ImageOpenError("bad png", path="eyes.png")
        assert err.path == "eyes.png"

    def test_path_optional(self):
        assert CatalogAccessError("x").path is None

    def test_no_message(self):
        assert str(RoboAvatarError()) == ""


class TestCatchability:
    def test_catch_parse_error_as_base(self):
        with pytest.raises(RoboAvatarError):
            raise ParseError("test")
