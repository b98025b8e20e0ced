# tests/test_validation.py

from __future__ import annotations

from datetime import date, datetime

import pytest

from listkeeper.grocery.validation import format_money, parse_non_negative
from listkeeper.todo.models import Priority
from listkeeper.todo.validation import read_deadline, validate_task_input

NOW = datetime(2025, 6, 1, 12, 0)


def test_read_deadline_combines_date_and_menus() -> None:
    assert read_deadline(date(2025, 6, 2), "07", "05") == datetime(2025, 6, 2, 7, 5)


def test_valid_task_input() -> None:
    priority, description = validate_task_input(
        datetime(2025, 6, 1, 13, 0), "Less important", "  Book flights ", now=NOW
    )
    assert priority is Priority.LESS_IMPORTANT
    assert description == "Book flights"


def test_invalid_task_input_lists_every_problem() -> None:
    with pytest.raises(ValueError) as excinfo:
        validate_task_input(datetime(2025, 5, 31, 9, 0), "Whenever", "   ", now=NOW)

    message = str(excinfo.value)
    assert "precedes the current date and time" in message
    assert "Invalid priority value." in message
    assert "description is empty" in message


def test_deadline_equal_to_now_is_rejected() -> None:
    with pytest.raises(ValueError, match="precedes"):
        validate_task_input(NOW, "Normal", "Now", now=NOW)


@pytest.mark.parametrize(
    "raw, expected",
    [("12.5", 12.5), ("12,5", 12.5), (" 3 ", 3.0), ("1 000", 1000.0), ("0", 0.0)],
)
def test_parse_non_negative_accepts(raw: str, expected: float) -> None:
    assert parse_non_negative(raw, "Cost") == pytest.approx(expected)


@pytest.mark.parametrize("raw", ["", None, "abc", "-1", "nan", "inf"])
def test_parse_non_negative_rejects(raw) -> None:
    with pytest.raises(ValueError, match="The value of 'Cost' is invalid"):
        parse_non_negative(raw, "Cost")


def test_format_money() -> None:
    assert format_money(1234.5) == "1,234.50 kr"
    assert format_money(0) == "0.00 kr"
