"""Grocery types and grocery lists, persisted as a marker line plus a JSON array."""

import json
import logging
import os
from pathlib import Path

from ..config import GROCERY_ITEMS_MARKER, GROCERY_TYPES_MARKER
from ..errors import FileFormatError, FileLoadError, FileParseError
from ..lookup import Found, NotFound, lookup
from .models import GroceryItem, GroceryType

logger = logging.getLogger(__name__)

# Prices from a Swedish grocery store; written when no types file exists.
TEMPLATE_GROCERY_TYPES = [
    ("Milk, 1.5L", 17.5),
    ("Cream, 5dl", 27.5),
    ("Eggs, 10p", 34.95),
    ("Salted Butter, 500g", 54.95),
    ("Household Cheese, 1.1kg", 126.5),
    ("Bananas, 200g", 5.99),
    ("Potatoes, 1kg", 16.95),
]


def encode_records(marker: str, records: list[dict]) -> str:
    body = "[" + "\n,".join(json.dumps(r, ensure_ascii=False) for r in records) + "]"
    return f"{marker}\n{body}"


def decode_records(marker: str, text: str) -> list[dict]:
    first, _, body = text.partition("\n")
    if first.strip() != marker:
        raise FileFormatError("The file is not readable by this program.")
    if not body.strip():
        return []
    try:
        data = json.loads(body)
    except json.JSONDecodeError as exc:
        raise FileParseError(f"File is corrupt - {exc}") from None
    if data is None:
        return []
    if not isinstance(data, list) or not all(isinstance(r, dict) for r in data):
        raise FileParseError("File is corrupt - expected a list of records.")
    return data


def _read_text(path: Path) -> str:
    try:
        with open(path, "r", encoding="utf-8") as f:
            return f.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise FileLoadError(f"The file could not be read: {exc}") from exc


def _write_text(path: Path, content: str) -> None:
    os.makedirs(path.parent, exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(content)


class _RecordStore:
    marker = ""
    record_cls = GroceryType

    def __init__(self):
        self._records: list = []

    def __len__(self) -> int:
        return len(self._records)

    def __iter__(self):
        return iter(tuple(self._records))

    def _get(self, index: int):
        return lookup(self._records, index)

    def _remove(self, index: int) -> None:
        if 0 <= index < len(self._records):
            del self._records[index]

    def clear(self) -> None:
        self._records.clear()

    def load(self, path: str | Path) -> None:
        """Replace the contents with the records in ``path``; untouched on failure."""
        path = Path(path)
        try:
            data = decode_records(self.marker, _read_text(path))
            loaded = [self.record_cls.from_dict(r) for r in data]
        except FileLoadError as exc:
            logger.warning("Rejected %s: %s", path, exc)
            raise
        self._records = loaded
        logger.info("Loaded %s record(s) from %s", len(loaded), path)

    def save(self, path: str | Path) -> None:
        path = Path(path)
        _write_text(path, encode_records(self.marker, [r.to_dict() for r in self._records]))
        logger.info("Saved %s record(s) to %s", len(self._records), path)

    def _default_records(self) -> list:
        return []

    def load_default(self, path: str | Path) -> None:
        """Load ``path``, recreating it first when missing or unreadable."""
        path = Path(path)
        try:
            self.load(path)
        except FileLoadError:
            logger.info("Recreating default file %s", path)
            self._records = self._default_records()
            self.save(path)
            self.load(path)


class GroceryTypeStore(_RecordStore):
    marker = GROCERY_TYPES_MARKER
    record_cls = GroceryType

    @property
    def types(self) -> tuple[GroceryType, ...]:
        return tuple(self._records)

    def get_type(self, index: int) -> Found[GroceryType] | NotFound:
        return self._get(index)

    def add_type(self, description: str | None, cost: float) -> GroceryType:
        grocery = GroceryType(description, cost)
        self._records.append(grocery)
        return grocery

    def remove_type(self, index: int) -> None:
        self._remove(index)

    def _default_records(self) -> list:
        return [GroceryType(d, c) for d, c in TEMPLATE_GROCERY_TYPES]


class GroceryItemStore(_RecordStore):
    marker = GROCERY_ITEMS_MARKER
    record_cls = GroceryItem

    @property
    def items(self) -> tuple[GroceryItem, ...]:
        return tuple(self._records)

    def get_item(self, index: int) -> Found[GroceryItem] | NotFound:
        return self._get(index)

    def add_item(self, description: str | None, cost: float, units: float) -> GroceryItem:
        item = GroceryItem(description, cost, units)
        self._records.append(item)
        return item

    def remove_item(self, index: int) -> None:
        self._remove(index)

    def total_cost(self) -> float:
        return sum(item.cost * item.units for item in self._records)
