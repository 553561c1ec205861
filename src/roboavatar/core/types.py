"""Variant types, reserved index slots, and the selection result."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from roboavatar.core.errors import InvalidVariantError, MissingRequiredDataError


# Positions in the index array with a fixed meaning.  Categories consume
# slots from FIRST_CATEGORY_SLOT onwards, one per non-empty category.
COLOUR_SLOT = 0
SET_SLOT = 1
BACKGROUND_SET_SLOT = 2
BACKGROUND_SLOT = 3
FIRST_CATEGORY_SLOT = 4

# The only set whose assets are split into colour subdirectories.
COLOUR_BEARING_SET = "set1"

# Sentinel for "pick a background set from the digest".
ANY_BACKGROUND = "any"


class RoboSet(str, Enum):
    """Top-level style family.

    ``DEFAULT`` leaves the choice to the digest; every other member pins
    a catalog directory.
    """

    DEFAULT = "default"
    SET1 = "set1"
    SET2 = "set2"
    SET3 = "set3"
    SET4 = "set4"
    SET5 = "set5"

    @property
    def catalog_name(self) -> str | None:
        """Directory name under ``sets/``, or ``None`` when unpinned."""
        return _SET_DIRECTORIES[self]

    @classmethod
    def parse(cls, value: RoboSet | str) -> RoboSet:
        return _parse_variant(cls, value, "set")


class Colour(str, Enum):
    """Colour family for colour-bearing sets.  ``ANY`` is a sentinel."""

    ANY = "any"
    BLUE = "blue"
    BROWN = "brown"
    GREEN = "green"
    GREY = "grey"
    ORANGE = "orange"
    PINK = "pink"
    PURPLE = "purple"
    RED = "red"
    WHITE = "white"
    YELLOW = "yellow"

    @property
    def catalog_name(self) -> str | None:
        """Directory name under a colour-bearing set, or ``None`` for ANY."""
        return _COLOUR_DIRECTORIES[self]

    @classmethod
    def candidates(cls) -> list[Colour]:
        """Concrete colours a random pick may land on, in index order."""
        return [c for c in cls if c is not cls.ANY]

    @classmethod
    def parse(cls, value: Colour | str) -> Colour:
        return _parse_variant(cls, value, "colour")


_SET_DIRECTORIES: dict[RoboSet, str | None] = {
    RoboSet.DEFAULT: None,
    RoboSet.SET1: "set1",
    RoboSet.SET2: "set2",
    RoboSet.SET3: "set3",
    RoboSet.SET4: "set4",
    RoboSet.SET5: "set5",
}

_COLOUR_DIRECTORIES: dict[Colour, str | None] = {
    Colour.ANY: None,
    Colour.BLUE: "blue",
    Colour.BROWN: "brown",
    Colour.GREEN: "green",
    Colour.GREY: "grey",
    Colour.ORANGE: "orange",
    Colour.PINK: "pink",
    Colour.PURPLE: "purple",
    Colour.RED: "red",
    Colour.WHITE: "white",
    Colour.YELLOW: "yellow",
}


def _parse_variant(cls, value, kind: str):
    if isinstance(value, cls):
        return value
    normalized = str(value).strip().lower()
    if not normalized:
        raise MissingRequiredDataError(f"Empty {kind} name")
    try:
        return cls(normalized)
    except ValueError:
        valid = ", ".join(member.value for member in cls)
        raise InvalidVariantError(
            f"Unknown {kind} {value!r}. Must be one of: {valid}"
        ) from None


@dataclass(frozen=True)
class Selection:
    """The concrete picks for one generation request."""

    set_name: str
    colour: Colour | None
    set_path: str
    assets: tuple[str, ...] = field(default_factory=tuple)
    background: str | None = None
