"""Which grocery files to open on start-up.

The settings file is three lines: a marker, the grocery types path and the
grocery list path. It is rewritten with the defaults whenever it is missing,
has the wrong marker, or points at files that no longer exist.
"""

import logging
import os
from dataclasses import dataclass, replace
from pathlib import Path

from ..config import GROCERY_SETTINGS_MARKER, Settings

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GroceryPaths:
    types_file: Path
    list_file: Path

    @classmethod
    def defaults(cls, settings: Settings) -> "GroceryPaths":
        return cls(types_file=settings.grocery_types_file, list_file=settings.grocery_list_file)

    def with_types_file(self, path: str | Path) -> "GroceryPaths":
        path = Path(path)
        if not path.is_file():
            return self
        return replace(self, types_file=path)

    def with_list_file(self, path: str | Path) -> "GroceryPaths":
        path = Path(path)
        if not path.is_file():
            return self
        return replace(self, list_file=path)


def save_grocery_paths(settings_file: str | Path, paths: GroceryPaths) -> None:
    settings_file = Path(settings_file)
    os.makedirs(settings_file.parent, exist_ok=True)
    with open(settings_file, "w", encoding="utf-8") as f:
        f.write(f"{GROCERY_SETTINGS_MARKER}\n{paths.types_file}\n{paths.list_file}\n")


def _usable(raw: str, default: Path) -> bool:
    if not raw:
        return False
    return Path(raw).is_file() or Path(raw) == default


def read_grocery_paths(settings_file: str | Path, defaults: GroceryPaths) -> GroceryPaths | None:
    """Return the cached paths, or None when the settings file is unusable."""
    try:
        with open(settings_file, "r", encoding="utf-8") as f:
            lines = [ln.rstrip("\r\n") for ln in f.readlines()]
    except (OSError, UnicodeDecodeError):
        return None
    if len(lines) < 3 or lines[0] != GROCERY_SETTINGS_MARKER:
        return None
    types_line, list_line = lines[1].strip(), lines[2].strip()
    if not _usable(types_line, defaults.types_file) or not _usable(list_line, defaults.list_file):
        return None
    return GroceryPaths(types_file=Path(types_line), list_file=Path(list_line))


def load_grocery_paths(settings_file: str | Path, defaults: GroceryPaths) -> GroceryPaths:
    paths = read_grocery_paths(settings_file, defaults)
    if paths is not None:
        return paths
    logger.info("Repairing grocery settings file %s", settings_file)
    save_grocery_paths(settings_file, defaults)
    return defaults
