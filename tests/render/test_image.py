"""Tests for roboavatar.render.image module."""

from __future__ import annotations

import base64
import io
from unittest.mock import patch

import pytest
from PIL import Image

from roboavatar.core.errors import (
    CatalogAccessError,
    EncodingError,
    ImageOpenError,
    MissingRequiredDataError,
)
from roboavatar.render.image import build_image, encode_png, to_base64

PNG_MAGIC = b"\x89PNG\r\n\x1a\n"


# ---------------------------------------------------------------------------
# Compositor
# ---------------------------------------------------------------------------


class TestBuildImage:
    def test_canvas_size_and_mode(self, tmp_path, png_writer):
        part = png_writer(tmp_path / "body.png")
        img = build_image([part], width=64, height=32)
        assert img.size == (64, 32)
        assert img.mode == "RGBA"

    def test_default_size(self):
        img = build_image([])
        assert img.size == (1024, 1024)

    def test_no_parts_is_transparent(self):
        img = build_image([], width=4, height=4)
        assert img.getpixel((2, 2)) == (0, 0, 0, 0)

    def test_later_layers_draw_on_top(self, tmp_path, png_writer):
        body = png_writer(tmp_path / "body.png", (255, 0, 0, 255))
        eyes = png_writer(tmp_path / "eyes.png", (0, 0, 255, 255))
        assert build_image([body, eyes], width=8, height=8).getpixel((4, 4)) == (0, 0, 255, 255)
        assert build_image([eyes, body], width=8, height=8).getpixel((4, 4)) == (255, 0, 0, 255)

    def test_transparent_layer_keeps_lower(self, tmp_path, png_writer):
        body = png_writer(tmp_path / "body.png", (255, 0, 0, 255))
        clear = png_writer(tmp_path / "clear.png", (0, 255, 0, 0))
        assert build_image([body, clear], width=8, height=8).getpixel((4, 4)) == (255, 0, 0, 255)

    def test_layers_are_resized(self, tmp_path, png_writer):
        small = png_writer(tmp_path / "small.png", (10, 20, 30, 255), size=4)
        img = build_image([small], width=40, height=40)
        pixel = img.getpixel((39, 39))
        assert all(abs(a - b) <= 1 for a, b in zip(pixel, (10, 20, 30, 255)))

    def test_background_drawn_first(self, tmp_path, png_writer):
        bg = png_writer(tmp_path / "bg.png", (0, 255, 0, 255))
        clear = png_writer(tmp_path / "clear.png", (0, 0, 0, 0))
        img = build_image([clear], width=8, height=8, background=bg)
        assert img.getpixel((0, 0)) == (0, 255, 0, 255)

    def test_rgb_asset_converted(self, tmp_path):
        path = tmp_path / "rgb.png"
        Image.new("RGB", (4, 4), (1, 2, 3)).save(path)
        assert build_image([path], width=4, height=4).getpixel((1, 1)) == (1, 2, 3, 255)

    def test_missing_asset_raises(self, tmp_path):
        missing = tmp_path / "eyes.png"
        with pytest.raises(ImageOpenError) as exc_info:
            build_image([missing], width=8, height=8)
        assert exc_info.value.path == str(missing)

    def test_corrupt_asset_raises(self, tmp_path, png_writer):
        good = png_writer(tmp_path / "body.png")
        bad = tmp_path / "eyes.png"
        bad.write_bytes(b"definitely not a png")
        with pytest.raises(ImageOpenError):
            build_image([good, bad], width=8, height=8)

    def test_decompression_bomb_raises(self, tmp_path, png_writer):
        part = png_writer(tmp_path / "body.png")
        bomb = Image.DecompressionBombError("image size exceeds limit")
        with patch("roboavatar.render.image.Image.open", side_effect=bomb):
            with pytest.raises(ImageOpenError) as exc_info:
                build_image([part], width=8, height=8)
        assert exc_info.value.path == str(part)

    def test_missing_background_raises(self, tmp_path):
        with pytest.raises(CatalogAccessError):
            build_image([], width=8, height=8, background=tmp_path / "nope.png")

    @pytest.mark.parametrize("size", [(0, 8), (8, 0), (-1, -1)])
    def test_bad_size_raises(self, size):
        with pytest.raises(MissingRequiredDataError):
            build_image([], width=size[0], height=size[1])


# ---------------------------------------------------------------------------
# Encoder
# ---------------------------------------------------------------------------


class TestEncode:
    def test_png_bytes(self):
        data = encode_png(Image.new("RGBA", (4, 4), (1, 2, 3, 4)))
        assert data.startswith(PNG_MAGIC)

    def test_base64_decodes_to_same_png(self):
        canvas = Image.new("RGBA", (6, 5), (9, 9, 9, 255))
        text = to_base64(canvas)
        raw = base64.b64decode(text)
        assert raw == encode_png(canvas)
        assert Image.open(io.BytesIO(raw)).size == (6, 5)

    def test_deterministic(self):
        first = to_base64(Image.new("RGBA", (8, 8), (200, 100, 50, 255)))
        second = to_base64(Image.new("RGBA", (8, 8), (200, 100, 50, 255)))
        assert first == second

    def test_codec_failure_raises(self):
        canvas = Image.new("RGBA", (4, 4))
        with patch.object(canvas, "save", side_effect=OSError("encoder error -2")):
            with pytest.raises(EncodingError):
                encode_png(canvas)
