"""Read-only access to the on-disk asset catalog.

Layout under a catalog root::

    sets/<set>[/<colour>]/<category>/<asset file>
    backgrounds/<background set>/<background file>

Every listing is sorted by name.  The order decides which index maps to
which pick, so it must never depend on directory enumeration order.
"""

from __future__ import annotations

from pathlib import Path

from roboavatar.core.errors import CatalogAccessError

SETS_DIR = "sets"
BACKGROUNDS_DIR = "backgrounds"


def _list_dir(path: Path, *, dirs: bool) -> list[str]:
    """Return sorted names of visible subdirectories (or files) in *path*."""
    try:
        entries = list(path.iterdir())
    except OSError as exc:
        raise CatalogAccessError(f"Cannot list {path}: {exc}", path=str(path)) from exc

    names = []
    for entry in entries:
        if entry.name.startswith("."):
            continue
        if (entry.is_dir() if dirs else entry.is_file()):
            names.append(entry.name)
    names.sort()
    return names


def sets_root(catalog_root: Path | str) -> Path:
    return Path(catalog_root) / SETS_DIR


def list_sets(catalog_root: Path | str) -> list[str]:
    """List the set directories of the catalog."""
    return _list_dir(sets_root(catalog_root), dirs=True)


def list_categories(catalog_root: Path | str, set_path: str) -> list[str]:
    """List category directories under ``sets/<set_path>``.

    Raises:
        CatalogAccessError: If the set directory cannot be read.
    """
    return _list_dir(sets_root(catalog_root) / set_path, dirs=True)


def list_assets(catalog_root: Path | str, set_path: str, category: str) -> list[str]:
    """List asset file paths in one category, sorted by file name.

    Raises:
        CatalogAccessError: If the category directory cannot be read.
    """
    category_dir = sets_root(catalog_root) / set_path / category
    return [str(category_dir / name) for name in _list_dir(category_dir, dirs=False)]


def list_background_sets(catalog_root: Path | str) -> list[str]:
    """List background set directories.  A catalog without any is valid."""
    backgrounds = Path(catalog_root) / BACKGROUNDS_DIR
    if not backgrounds.exists():
        return []
    return _list_dir(backgrounds, dirs=True)


def list_backgrounds(catalog_root: Path | str, background_set: str) -> list[str]:
    """List background file paths in one background set, sorted by name."""
    directory = Path(catalog_root) / BACKGROUNDS_DIR / background_set
    return [str(directory / name) for name in _list_dir(directory, dirs=False)]
