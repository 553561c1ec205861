"""High-level avatar generation.

Usage::

    from roboavatar import generate

    b64 = generate("alice@example.com", catalog_root="/srv/robots")

Each :class:`RoboHash` owns its own index array and canvas; nothing is
shared between requests and nothing is cached.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Sequence

from PIL import Image

from roboavatar.assets.selector import select
from roboavatar.core.digest import DEFAULT_CHUNKS, derive_index_array, sha512_digest
from roboavatar.core.errors import MissingRequiredDataError
from roboavatar.core.types import Colour, RoboSet, Selection
from roboavatar.render.image import (
    DEFAULT_HEIGHT,
    DEFAULT_WIDTH,
    build_image,
    encode_png,
    to_base64,
)

logger = logging.getLogger(__name__)


class RoboHash:
    """One avatar request: an index array plus the choices that shape it.

    Construction performs no I/O.  Validation of required data happens at
    the start of every assemble call, before the catalog is touched.
    """

    def __init__(
        self,
        index_array: Sequence[int],
        *,
        catalog_root: Path | str,
        set_choice: RoboSet | str = RoboSet.DEFAULT,
        colour_choice: Colour | str = Colour.ANY,
        width: int = DEFAULT_WIDTH,
        height: int = DEFAULT_HEIGHT,
        background: Path | str | None = None,
        background_set: str | None = None,
        digest: str | None = None,
    ) -> None:
        self.index_array = list(index_array)
        self.catalog_root = catalog_root
        self.set_choice = set_choice
        self.colour_choice = colour_choice
        self.width = width
        self.height = height
        self.background = background
        self.background_set = background_set
        self.digest = digest

    @classmethod
    def from_text(
        cls,
        text: str,
        *,
        chunks: int = DEFAULT_CHUNKS,
        duplicate_index: bool = True,
        **kwargs,
    ) -> RoboHash:
        """Hash *text* and derive the index array for a new request."""
        digest = sha512_digest(text)
        logger.debug("Digest for request: %s", digest)
        indices = derive_index_array(digest, chunks, duplicate=duplicate_index)
        return cls(indices, digest=digest, **kwargs)

    def _validate(self) -> tuple[RoboSet, Colour]:
        if not self.index_array:
            raise MissingRequiredDataError("Index array is empty")
        if self.catalog_root is None or not str(self.catalog_root):
            raise MissingRequiredDataError("Catalog root is empty")
        if self.width <= 0 or self.height <= 0:
            raise MissingRequiredDataError(
                f"Canvas size must be positive, got {self.width}x{self.height}"
            )
        return RoboSet.parse(self.set_choice), Colour.parse(self.colour_choice)

    def selection(self) -> Selection:
        """Resolve set, colour, background and ordered assets."""
        set_choice, colour_choice = self._validate()
        # An explicit background path wins over a background set pick
        explicit = self.background is not None and str(self.background) != ""
        chosen = select(
            self.index_array,
            self.catalog_root,
            set_choice=set_choice,
            colour_choice=colour_choice,
            background_set=None if explicit else self.background_set,
        )
        if explicit:
            chosen = replace(chosen, background=str(self.background))
        return chosen

    def assemble(self) -> Image.Image:
        """Compose the avatar into a new RGBA canvas."""
        chosen = self.selection()
        logger.debug("Assembling %s with %d layers", chosen.set_path, len(chosen.assets))
        return build_image(
            chosen.assets,
            width=self.width,
            height=self.height,
            background=chosen.background,
        )

    def assemble_png(self) -> bytes:
        return encode_png(self.assemble())

    def assemble_base64(self) -> str:
        return to_base64(self.assemble())


def generate(
    text: str,
    set_choice: RoboSet | str = RoboSet.DEFAULT,
    colour_choice: Colour | str = Colour.ANY,
    catalog_root: Path | str = ".",
    width: int = DEFAULT_WIDTH,
    height: int = DEFAULT_HEIGHT,
    background: Path | str | None = None,
    *,
    background_set: str | None = None,
    chunks: int = DEFAULT_CHUNKS,
    duplicate_index: bool = True,
) -> str:
    """Generate the base64-encoded PNG avatar for *text*.

    Raises:
        RoboAvatarError: Any pipeline failure; see :mod:`roboavatar.core.errors`.
    """
    robo = RoboHash.from_text(
        text,
        chunks=chunks,
        duplicate_index=duplicate_index,
        catalog_root=catalog_root,
        set_choice=set_choice,
        colour_choice=colour_choice,
        width=width,
        height=height,
        background=background,
        background_set=background_set,
    )
    return robo.assemble_base64()
