"""Tests for owner, window, range and category filters."""

from __future__ import annotations

from datetime import date

import pytest

from expense_backend.errors import ValidationError
from expense_backend.filters import (
    filter_by_category,
    filter_by_owner_and_range,
    filter_by_owner_and_window,
)
from expense_backend.models import ExpenseRecord


def _expense(owner, amount, category, key, name="x"):
    return ExpenseRecord(owner_id=owner, name=name, amount=amount, category=category, date=key)


RECORDS = [
    _expense(1, 10, "Food", "31-01-2024"),
    _expense(1, 5, "Food", "01-02-2024"),
    _expense(2, 99, "Food", "01-02-2024"),
    _expense(1, 20, "Transport", "15-02-2024"),
    _expense(1, 7, "Bills", "01-03-2024"),
]


def test_window_filter_is_owner_scoped_and_set_based() -> None:
    keys = ["01-02-2024", "31-01-2024", "01-02-2024"]
    result = filter_by_owner_and_window(RECORDS, 1, keys)
    assert [r.amount for r in result] == [10, 5]


def test_window_filter_no_match_is_empty() -> None:
    assert filter_by_owner_and_window(RECORDS, 3, {"01-02-2024"}) == []
    assert filter_by_owner_and_window([], 1, {"01-02-2024"}) == []


def test_range_filter_spans_months_by_calendar() -> None:
    # "31-01-2024" > "15-02-2024" as text; the calendar test must still include it
    result = filter_by_owner_and_range(RECORDS, 1, "31-01-2024", "15-02-2024")
    assert [r.amount for r in result] == [10, 5, 20]


def test_range_filter_accepts_dates() -> None:
    result = filter_by_owner_and_range(RECORDS, 1, date(2024, 2, 1), date(2024, 3, 1))
    assert [r.amount for r in result] == [5, 20, 7]


def test_range_filter_start_after_end_is_empty() -> None:
    assert filter_by_owner_and_range(RECORDS, 1, "01-03-2024", "01-01-2024") == []


@pytest.mark.parametrize("start,end", [(None, "01-03-2024"), ("01-01-2024", None), ("", "")])
def test_range_filter_needs_both_bounds(start, end) -> None:
    with pytest.raises(ValidationError):
        filter_by_owner_and_range(RECORDS, 1, start, end)


def test_category_filter() -> None:
    assert len(filter_by_category(RECORDS, "All")) == len(RECORDS)
    assert len(filter_by_category(RECORDS, None)) == len(RECORDS)
    assert [r.amount for r in filter_by_category(RECORDS, "Transport")] == [20]
