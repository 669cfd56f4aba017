# expense_backend/datekeys.py
"""
Date keys and day windows.

Records store their date as a ``DD-MM-YYYY`` key. The key is fine for
equality and set membership but does not sort chronologically, so every
ordering or range decision in this package goes through ``datetime.date``.
"""

import calendar
import re
from datetime import date, datetime, timedelta
from typing import Iterable, List, Tuple

from .errors import ValidationError

KEY_PATTERN = re.compile(r"^(\d{2})-(\d{2})-(\d{4})$")
INPUT_FORMATS = ["%Y-%m-%d", "%d-%m-%Y"]


def to_key(day: date) -> str:
    return f"{day.day:02d}-{day.month:02d}-{day.year:04d}"


def parse_key(key: str) -> date:
    """Inverse of ``to_key``. Raises ValidationError on anything else."""
    match = KEY_PATTERN.match(str(key).strip()) if key is not None else None
    if not match:
        raise ValidationError(f'Invalid date key {key!r}. Expected "DD-MM-YYYY".')
    day, month, year = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError:
        raise ValidationError(f"Invalid calendar date {key!r}")


def parse_date_input(value) -> date:
    """Turn a date coming from the client into a calendar date.

    Accepts date/datetime objects, ISO ``YYYY-MM-DD`` (with or without a
    time part) and ``DD-MM-YYYY``.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not value or not isinstance(value, str):
        raise ValidationError("Invalid or missing date")

    s = value.strip()
    for fmt in INPUT_FORMATS:
        try:
            return datetime.strptime(s, fmt).date()
        except ValueError:
            continue
    try:
        return datetime.fromisoformat(s).date()
    except ValueError:
        raise ValidationError(f"Invalid date {value!r}. Use YYYY-MM-DD or DD-MM-YYYY.")


def as_date(value) -> date:
    """Date objects pass through, strings are read as date keys."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return parse_key(value)


class _DayWindow:
    """Immutable run of consecutive calendar days in a fixed direction."""

    step = 0

    def __init__(self, days: Iterable[date]):
        days = tuple(days)
        for earlier, later in zip(days, days[1:]):
            if (later - earlier).days != self.step:
                raise ValueError(
                    f"{type(self).__name__} needs consecutive days stepping by {self.step}"
                )
        self._days = days

    @property
    def days(self) -> Tuple[date, ...]:
        return self._days

    @property
    def keys(self) -> List[str]:
        return [to_key(d) for d in self._days]

    def __len__(self):
        return len(self._days)

    def __iter__(self):
        return iter(self._days)

    def __getitem__(self, index):
        return self._days[index]

    def __eq__(self, other):
        return type(self) is type(other) and self._days == other._days

    def __hash__(self):
        return hash((type(self), self._days))

    def __repr__(self):
        return f"{type(self).__name__}({self.keys!r})"


class OldestFirst(_DayWindow):
    """Days in chronological order. The only order charts accept."""

    step = 1

    def newest_first(self) -> "NewestFirst":
        return NewestFirst(reversed(self._days))


class NewestFirst(_DayWindow):
    """Days in reverse-chronological order, as window generation walks them."""

    step = -1

    def chronological(self) -> OldestFirst:
        return OldestFirst(reversed(self._days))


def window_keys(reference: date, length: int) -> NewestFirst:
    """``length`` days ending at ``reference`` (inclusive), newest first."""
    if isinstance(length, bool) or not isinstance(length, int) or length < 1:
        raise ValidationError("Window length must be a positive whole number of days")
    return NewestFirst(reference - timedelta(days=offset) for offset in range(length))


def month_range(reference: date) -> Tuple[date, date]:
    last_day = calendar.monthrange(reference.year, reference.month)[1]
    return reference.replace(day=1), reference.replace(day=last_day)


def month_bounds(reference: date) -> Tuple[str, str]:
    """First and last day of ``reference``'s month, as date keys."""
    start, end = month_range(reference)
    return to_key(start), to_key(end)
