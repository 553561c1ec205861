"""Avatar generation configuration via dataclass (no pydantic)."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from pathlib import Path

from roboavatar.core.digest import DEFAULT_CHUNKS
from roboavatar.core.types import Colour, RoboSet
from roboavatar.render.image import DEFAULT_HEIGHT, DEFAULT_WIDTH

logger = logging.getLogger(__name__)

_ENV_PREFIX = "ROBOAVATAR_"

_TRUE_VALUES = ("1", "true", "yes", "on")

_DEFAULTS: dict[str, object] = {
    "catalog_root": ".",
    "width": DEFAULT_WIDTH,
    "height": DEFAULT_HEIGHT,
    "set_choice": RoboSet.DEFAULT.value,
    "colour_choice": Colour.ANY.value,
    "background_set": None,
    "chunks": DEFAULT_CHUNKS,
    "duplicate_index": True,
    "log_level": "INFO",
}

# Field name -> environment variable suffix
_ENV_NAMES = {
    "catalog_root": "CATALOG_ROOT",
    "width": "WIDTH",
    "height": "HEIGHT",
    "set_choice": "SET",
    "colour_choice": "COLOUR",
    "background_set": "BACKGROUND_SET",
    "chunks": "CHUNKS",
    "duplicate_index": "DUPLICATE_INDEX",
    "log_level": "LOG_LEVEL",
}


@dataclass
class AvatarConfig:
    """Configuration for avatar generation.

    Every field left as ``None`` is filled in from, in priority order, a
    ``ROBOAVATAR_*`` environment variable, the ``[avatar]`` section of
    ``config.toml`` (path from ``config_path`` or ``ROBOAVATAR_CONFIG``),
    and finally the built-in default.
    """

    catalog_root: Path | str | None = None
    width: int | None = None
    height: int | None = None
    set_choice: RoboSet | str | None = None
    colour_choice: Colour | str | None = None
    background_set: str | None = None
    chunks: int | None = None
    duplicate_index: bool | None = None
    log_level: str | None = None
    config_path: Path | str | None = None

    def __post_init__(self) -> None:
        file_values = self._load_config_file()

        for f in fields(self):
            if f.name == "config_path" or getattr(self, f.name) is not None:
                continue
            env_value = os.getenv(_ENV_PREFIX + _ENV_NAMES[f.name])
            if env_value:
                setattr(self, f.name, env_value)
            elif f.name in file_values:
                setattr(self, f.name, file_values[f.name])
            else:
                setattr(self, f.name, _DEFAULTS[f.name])

        self.catalog_root = Path(self.catalog_root)
        self.width = _to_int("width", self.width)
        self.height = _to_int("height", self.height)
        self.chunks = _to_int("chunks", self.chunks)
        if isinstance(self.duplicate_index, str):
            self.duplicate_index = self.duplicate_index.strip().lower() in _TRUE_VALUES
        self.set_choice = RoboSet.parse(self.set_choice)
        self.colour_choice = Colour.parse(self.colour_choice)
        self.log_level = str(self.log_level).upper()

        if self.width <= 0 or self.height <= 0:
            raise ValueError(f"Invalid canvas size {self.width}x{self.height}")
        if self.chunks <= 0:
            raise ValueError(f"Invalid chunk count {self.chunks}")

    def _load_config_file(self) -> dict:
        """Read the ``[avatar]`` section of the optional config.toml."""
        if self.config_path is None:
            env_path = os.getenv(_ENV_PREFIX + "CONFIG")
            if not env_path:
                return {}
            self.config_path = env_path
        path = Path(self.config_path)
        if not path.exists():
            return {}

        try:
            import tomllib
        except ModuleNotFoundError:
            import tomli as tomllib  # type: ignore[no-redef]  # Python 3.10 fallback

        try:
            with open(path, "rb") as f:
                data = tomllib.load(f)
        except Exception:
            logger.warning("Failed to load config file %s", path, exc_info=True)
            return {}

        section = data.get("avatar", {})
        return {k: v for k, v in section.items() if k in _ENV_NAMES}


def _to_int(name: str, value) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"Invalid {name} {value!r}: must be an integer") from None
