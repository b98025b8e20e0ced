"""Result type for index lookups that may miss."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class Found(Generic[T]):
    value: T

    def __bool__(self) -> bool:
        return True


class NotFound:
    """Singleton returned when an index is out of range."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_FOUND"


NOT_FOUND = NotFound()


def lookup(items, index: int):
    """Return ``Found(items[index])`` for ``0 <= index < len(items)``, else ``NOT_FOUND``."""
    if 0 <= index < len(items):
        return Found(items[index])
    return NOT_FOUND
