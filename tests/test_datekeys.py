"""Tests for date keys, day windows and month bounds."""

from __future__ import annotations

from datetime import date, datetime, timedelta

import pytest

from expense_backend.datekeys import (
    NewestFirst,
    OldestFirst,
    month_bounds,
    parse_date_input,
    parse_key,
    to_key,
    window_keys,
)
from expense_backend.errors import ValidationError


def test_to_key_zero_pads() -> None:
    assert to_key(date(2024, 3, 2)) == "02-03-2024"
    assert to_key(date(1900, 1, 1)) == "01-01-1900"


def test_key_round_trip_1900_to_2100() -> None:
    day = date(1900, 1, 1)
    last = date(2100, 12, 31)
    while day <= last:
        assert parse_key(to_key(day)) == day
        day += timedelta(days=13)
    assert parse_key(to_key(last)) == last
    assert parse_key(to_key(date(2000, 2, 29))) == date(2000, 2, 29)


@pytest.mark.parametrize("bad", ["2024-03-02", "2-3-2024", "31-02-2024", "", None, "aa-bb-cccc"])
def test_parse_key_rejects_malformed(bad) -> None:
    with pytest.raises(ValidationError):
        parse_key(bad)


def test_parse_date_input_formats() -> None:
    assert parse_date_input("2024-03-02") == date(2024, 3, 2)
    assert parse_date_input("02-03-2024") == date(2024, 3, 2)
    assert parse_date_input("2024-03-02T18:30:00") == date(2024, 3, 2)
    assert parse_date_input(datetime(2024, 3, 2, 9, 0)) == date(2024, 3, 2)
    with pytest.raises(ValidationError):
        parse_date_input("March 2nd")
    with pytest.raises(ValidationError):
        parse_date_input(None)


def test_window_keys_newest_first_across_month_boundary() -> None:
    window = window_keys(date(2024, 3, 2), 3)
    assert isinstance(window, NewestFirst)
    assert window.keys == ["02-03-2024", "01-03-2024", "29-02-2024"]


def test_window_keys_year_rollover() -> None:
    window = window_keys(date(2024, 1, 1), 2).chronological()
    assert window.keys == ["31-12-2023", "01-01-2024"]


def test_chronological_reverses_order() -> None:
    window = window_keys(date(2024, 3, 2), 3).chronological()
    assert isinstance(window, OldestFirst)
    assert window.keys == ["29-02-2024", "01-03-2024", "02-03-2024"]
    assert window.newest_first() == window_keys(date(2024, 3, 2), 3)


def test_day_windows_reject_wrong_order() -> None:
    with pytest.raises(ValueError):
        OldestFirst([date(2024, 3, 2), date(2024, 3, 1)])
    with pytest.raises(ValueError):
        NewestFirst([date(2024, 3, 1), date(2024, 3, 2)])


@pytest.mark.parametrize("length", [0, -1, 2.5, True])
def test_window_keys_rejects_bad_length(length) -> None:
    with pytest.raises(ValidationError):
        window_keys(date(2024, 3, 2), length)


def test_month_bounds_december() -> None:
    assert month_bounds(date(2023, 12, 31)) == ("01-12-2023", "31-12-2023")


def test_month_bounds_leap_february() -> None:
    assert month_bounds(date(2024, 2, 10)) == ("01-02-2024", "29-02-2024")
    assert month_bounds(date(2023, 2, 10)) == ("01-02-2023", "28-02-2023")
