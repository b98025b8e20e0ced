from datetime import datetime
from enum import Enum

DEFAULT_DESCRIPTION = "No description"


def normalize_description(value: str | None) -> str:
    """Empty or missing descriptions become ``"No description"``."""
    if not value:
        return DEFAULT_DESCRIPTION
    return value


class Priority(Enum):
    """Urgency levels, most urgent first. Values are the tokens written to files."""

    VERY_IMPORTANT = "Very_important"
    IMPORTANT = "Important"
    NORMAL = "Normal"
    LESS_IMPORTANT = "Less_important"
    NOT_IMPORTANT = "Not_important"

    @property
    def label(self) -> str:
        return self.value.replace("_", " ")

    @classmethod
    def labels(cls) -> list[str]:
        return [p.label for p in cls]

    @classmethod
    def parse(cls, raw: str | None) -> "Priority":
        """Accept a file token, a display label or a member name (any case)."""
        text = (raw or "").strip().lower()
        if text:
            for p in cls:
                if text in (p.value.lower(), p.label.lower(), p.name.lower()):
                    return p
        raise ValueError(f"Unknown priority: {raw!r}")


class Task:
    __slots__ = ("deadline", "priority", "_description")

    def __init__(self, deadline: datetime, priority: Priority, description: str | None):
        self.deadline = deadline
        self.priority = priority
        self.description = description

    @property
    def description(self) -> str:
        return self._description

    @description.setter
    def description(self, value: str | None) -> None:
        self._description = normalize_description(value)

    def is_overdue(self, now: datetime | None = None) -> bool:
        return self.deadline < (now or datetime.now())

    def __eq__(self, other):
        if not isinstance(other, Task):
            return NotImplemented
        return (self.deadline, self.priority, self.description) == (
            other.deadline,
            other.priority,
            other.description,
        )

    __hash__ = None

    def __repr__(self) -> str:
        return (
            f"Task(deadline={self.deadline!r}, priority={self.priority.name}, "
            f"description={self.description!r})"
        )
