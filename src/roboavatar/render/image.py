"""Avatar compositing and PNG/base64 encoding.

Layers are resized to the canvas size and alpha-composited at the origin
in list order, so later layers draw over earlier ones.
"""

from __future__ import annotations

import base64
import io
import logging
from pathlib import Path
from typing import Sequence

from PIL import Image, UnidentifiedImageError

from roboavatar.core.errors import (
    CatalogAccessError,
    EncodingError,
    ImageOpenError,
    MissingRequiredDataError,
)

logger = logging.getLogger(__name__)

# Default canvas dimensions
DEFAULT_WIDTH = 1024
DEFAULT_HEIGHT = 1024


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _open_rgba(path: str | Path) -> Image.Image:
    """Decode *path* fully into an RGBA image."""
    try:
        with Image.open(path) as img:
            return img.convert("RGBA")
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError, ValueError) as exc:
        raise ImageOpenError(f"Cannot open image {path}: {exc}", path=str(path)) from exc


def _paste_layer(canvas: Image.Image, layer: Image.Image) -> None:
    """Resize *layer* to the canvas and composite it at the origin."""
    if layer.size != canvas.size:
        layer = layer.resize(canvas.size, Image.LANCZOS)
    canvas.alpha_composite(layer, (0, 0))


# ---------------------------------------------------------------------------
# Compositor
# ---------------------------------------------------------------------------


def build_image(
    parts: Sequence[str | Path],
    *,
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    background: str | Path | None = None,
) -> Image.Image:
    """Composite *parts* (back to front) onto a transparent RGBA canvas.

    Args:
        parts: Ordered asset paths; later entries draw over earlier ones.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        background: Optional image drawn first, stretched to the canvas.

    Returns:
        A ``width`` x ``height`` RGBA image.

    Raises:
        CatalogAccessError: If *background* does not exist.
        ImageOpenError: If any part or the background cannot be decoded.
    """
    if width <= 0 or height <= 0:
        raise MissingRequiredDataError(f"Canvas size must be positive, got {width}x{height}")

    canvas = Image.new("RGBA", (width, height), (0, 0, 0, 0))

    if background is not None:
        if not Path(background).is_file():
            raise CatalogAccessError(f"Background not found: {background}", path=str(background))
        _paste_layer(canvas, _open_rgba(background))

    for part in parts:
        _paste_layer(canvas, _open_rgba(part))

    logger.debug("Composited %d layers onto %dx%d canvas", len(parts), width, height)
    return canvas


# ---------------------------------------------------------------------------
# Encoder
# ---------------------------------------------------------------------------


def encode_png(canvas: Image.Image) -> bytes:
    """Serialize *canvas* to PNG bytes."""
    buf = io.BytesIO()
    try:
        canvas.save(buf, format="PNG")
    except (OSError, ValueError) as exc:
        raise EncodingError(f"PNG encoding failed: {exc}") from exc
    return buf.getvalue()


def to_base64(canvas: Image.Image) -> str:
    """Return the standard base64 text of the PNG encoding of *canvas*."""
    return base64.b64encode(encode_png(canvas)).decode("ascii")
