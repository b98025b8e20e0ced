from datetime import date, datetime

from .models import Priority


def read_deadline(day: date, hour: str, minute: str) -> datetime:
    return datetime(day.year, day.month, day.day, int(hour), int(minute))


def validate_task_input(deadline: datetime, priority_label: str, description: str | None, *, now: datetime | None = None):
    """Return ``(priority, description)`` or raise ValueError listing every problem."""
    problems: list[str] = []
    if deadline <= (now or datetime.now()):
        problems.append("The date and time of the task precedes the current date and time.")
    priority = None
    try:
        priority = Priority.parse(priority_label)
    except ValueError:
        problems.append("Invalid priority value.")
    text = (description or "").strip()
    if not text:
        problems.append("The description is empty; a task needs a description.")
    if problems:
        raise ValueError("\n".join(problems))
    return priority, text
