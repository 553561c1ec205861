"""Deterministic selection of set, colour, background and assets.

Every pick is ``index_array[slot] % len(candidates)`` over a sorted
catalog listing.  Slots 0-3 are reserved (see :mod:`roboavatar.core.types`);
categories consume slots from 4 onwards, one per category that actually
yields assets.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from roboavatar.assets import catalog
from roboavatar.core.errors import (
    CatalogAccessError,
    IndexExhaustedError,
    MissingRequiredDataError,
)
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

logger = logging.getLogger(__name__)


def _slot(indices: Sequence[int], slot: int) -> int:
    if slot >= len(indices):
        raise IndexExhaustedError(
            f"Index array has {len(indices)} entries, slot {slot} requested"
        )
    return indices[slot]


class IndexCursor:
    """Hands out consecutive index array entries, starting at *start*."""

    def __init__(self, indices: Sequence[int], start: int = FIRST_CATEGORY_SLOT) -> None:
        self._indices = indices
        self._position = start

    @property
    def position(self) -> int:
        return self._position

    def next(self) -> int:
        value = _slot(self._indices, self._position)
        self._position += 1
        return value


# ---------------------------------------------------------------------------
# Set and colour
# ---------------------------------------------------------------------------


def select_set(
    indices: Sequence[int],
    catalog_root: Path | str,
    set_choice: RoboSet = RoboSet.DEFAULT,
) -> str:
    """Return the set directory name: pinned, or picked with the set slot."""
    pinned = set_choice.catalog_name
    if pinned is not None:
        return pinned

    sets = catalog.list_sets(catalog_root)
    if not sets:
        root = catalog.sets_root(catalog_root)
        raise CatalogAccessError(f"No sets found in {root}", path=str(root))
    return sets[_slot(indices, SET_SLOT) % len(sets)]


def resolve_colour(
    indices: Sequence[int],
    set_name: str,
    colour_choice: Colour = Colour.ANY,
) -> Colour | None:
    """Decide the colour for *set_name*.

    A colour is drawn from the colour slot when the set is colour-bearing
    and no colour was requested, and also when the set is not
    colour-bearing but a concrete colour was requested.  Otherwise the
    requested colour is kept, with ``ANY`` resolving to ``None``.
    """
    colour_bearing = set_name == COLOUR_BEARING_SET
    any_colour = colour_choice is Colour.ANY

    if (colour_bearing and any_colour) or (not colour_bearing and not any_colour):
        candidates = Colour.candidates()
        return candidates[_slot(indices, COLOUR_SLOT) % len(candidates)]
    if any_colour:
        return None
    return colour_choice


def effective_set_path(set_name: str, colour: Colour | None) -> str:
    """Return ``<set>/<colour>`` for the colour-bearing set, else ``<set>``."""
    if set_name == COLOUR_BEARING_SET and colour is not None:
        return f"{set_name}/{colour.catalog_name}"
    return set_name


# ---------------------------------------------------------------------------
# Assets
# ---------------------------------------------------------------------------


def category_tag(path: str, catalog_root: Path | str | None = None) -> str:
    """Return the layering key of an asset path.

    Asset paths look like ``sets/set4/000#00body/003#body3.png``; the key is
    the second ``#``-delimited field (``00body/003``).  Paths without a
    ``#`` sort by their full text.
    """
    text = str(path)
    if catalog_root is not None:
        try:
            text = Path(path).relative_to(catalog_root).as_posix()
        except ValueError:
            pass
    fields = text.split("#")
    return fields[1] if len(fields) > 1 else text


def order_by_category(paths: Sequence[str], catalog_root: Path | str | None = None) -> list[str]:
    """Sort asset paths back-to-front by their category tag (stable)."""
    return sorted(paths, key=lambda p: category_tag(p, catalog_root))


def select_assets(
    indices: Sequence[int],
    catalog_root: Path | str,
    set_path: str,
) -> list[str]:
    """Pick one asset per non-empty category of *set_path*.

    Empty or unreadable categories are skipped without consuming an index.

    Raises:
        CatalogAccessError: If the set directory itself cannot be listed.
        IndexExhaustedError: If there are more categories than index slots.
    """
    categories = catalog.list_categories(catalog_root, set_path)
    cursor = IndexCursor(indices)
    picks = []

    for category in categories:
        try:
            assets = catalog.list_assets(catalog_root, set_path, category)
        except CatalogAccessError as exc:
            logger.warning("Skipping unreadable category %s/%s: %s", set_path, category, exc)
            continue
        if not assets:
            logger.warning("Skipping empty category %s/%s", set_path, category)
            continue

        slot = cursor.position
        choice = assets[cursor.next() % len(assets)]
        logger.debug("Category %s: slot %d picked %s", category, slot, choice)
        picks.append(choice)

    return order_by_category(picks, catalog_root)


# ---------------------------------------------------------------------------
# Background
# ---------------------------------------------------------------------------


def select_background(
    indices: Sequence[int],
    catalog_root: Path | str,
    background_set: str | None = None,
) -> str | None:
    """Pick a background file, or ``None`` when no background applies.

    ``"any"`` draws the background set from its reserved slot; any other
    name must exist under ``backgrounds/``.
    """
    if not background_set:
        return None

    if background_set == ANY_BACKGROUND:
        available = catalog.list_background_sets(catalog_root)
        if not available:
            logger.debug("No background sets in %s", catalog_root)
            return None
        background_set = available[_slot(indices, BACKGROUND_SET_SLOT) % len(available)]

    files = catalog.list_backgrounds(catalog_root, background_set)
    if not files:
        logger.warning("Background set %s is empty", background_set)
        return None
    return files[_slot(indices, BACKGROUND_SLOT) % len(files)]


# ---------------------------------------------------------------------------
# Full selection
# ---------------------------------------------------------------------------


def select(
    indices: Sequence[int],
    catalog_root: Path | str,
    set_choice: RoboSet = RoboSet.DEFAULT,
    colour_choice: Colour = Colour.ANY,
    background_set: str | None = None,
) -> Selection:
    """Map an index array and a catalog to a :class:`Selection`.

    Raises:
        MissingRequiredDataError: If *indices* or *catalog_root* is empty.
    """
    if not indices:
        raise MissingRequiredDataError("Index array is empty")
    if not str(catalog_root):
        raise MissingRequiredDataError("Catalog root is empty")

    set_name = select_set(indices, catalog_root, set_choice)
    colour = resolve_colour(indices, set_name, colour_choice)
    set_path = effective_set_path(set_name, colour)
    logger.debug("Selected set %s (colour=%s)", set_name, colour.value if colour else None)

    assets = select_assets(indices, catalog_root, set_path)
    background = select_background(indices, catalog_root, background_set)
    return Selection(
        set_name=set_name,
        colour=colour,
        set_path=set_path,
        assets=tuple(assets),
        background=background,
    )
