"""Shared test fixtures: a synthetic asset catalog built with Pillow."""

from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from roboavatar.core.digest import derive_index_array, sha512_digest

INITIAL_CHUNKS = [
    10083058600650,
    6468747187213,
    15005379333732,
    15693853337043,
    4203522531528,
    785662886836,
    7302933098498,
    4202144124027,
    14066663350451,
    4354761377019,
    1254520726801,
]

# Category directory -> (asset stem, number of assets)
CATEGORIES = {
    "000#00body": ("body", 3),
    "001#01fur": ("fur", 4),
    "002#02eyes": ("eyes", 5),
    "003#03mouth": ("mouth", 6),
    "004#04accessories": ("accessory", 7),
}

COLOURS = ["blue", "brown", "green", "grey", "orange", "pink", "purple", "red", "white", "yellow"]

ASSET_SIZE = 8


def write_png(path: Path, colour=(100, 150, 200, 255), size: int = ASSET_SIZE) -> Path:
    """Write a solid-colour RGBA PNG, creating parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    Image.new("RGBA", (size, size), colour).save(path, format="PNG")
    return path


def write_category(directory: Path, stem: str, count: int) -> None:
    for i in range(count):
        shade = 40 + 20 * i
        write_png(directory / f"{i:03d}#{stem}{i}.png", (shade, shade, shade, 255))


def build_catalog(root: Path) -> Path:
    """Create sets/set1..set5 (set1 split by colour) and two background sets."""
    for set_name in ("set2", "set3", "set4", "set5"):
        for category, (stem, count) in CATEGORIES.items():
            write_category(root / "sets" / set_name / category, stem, count)
    for colour in COLOURS:
        for category, (stem, count) in CATEGORIES.items():
            write_category(root / "sets" / "set1" / colour / category, stem, count)

    for i in range(2):
        write_png(root / "backgrounds" / "bg1" / f"{i:03d}#bg{i}.png", (0, 0, 200 + i, 255))
    for i in range(3):
        write_png(root / "backgrounds" / "bg2" / f"{i:03d}#bg{i}.png", (0, 200 + i, 0, 255))
    return root


@pytest.fixture(scope="session")
def catalog_root(tmp_path_factory) -> Path:
    """A populated, read-only catalog shared by the whole session."""
    return build_catalog(tmp_path_factory.mktemp("catalog"))


@pytest.fixture()
def initial_indices() -> list[int]:
    """The duplicated (22-entry) index array for ``initial_string``."""
    return INITIAL_CHUNKS + INITIAL_CHUNKS


@pytest.fixture()
def fresh_indices():
    """Build an index array for arbitrary text."""

    def _make(text: str) -> list[int]:
        return derive_index_array(sha512_digest(text))

    return _make


@pytest.fixture()
def png_writer():
    """Return :func:`write_png` for tests that build their own catalogs."""
    return write_png


@pytest.fixture()
def category_writer():
    """Return :func:`write_category` for tests that build their own catalogs."""
    return write_category
