# expense_backend/filters.py
"""Owner and date-window selection over record snapshots."""

from typing import Iterable, List, Optional

from .datekeys import as_date
from .errors import ValidationError

ALL_CATEGORIES = "All"


def filter_by_owner(records: Iterable, owner_id) -> List:
    return [r for r in records if r.owner_id == owner_id]


def filter_by_owner_and_window(records: Iterable, owner_id, key_set: Iterable[str]) -> List:
    """Records of ``owner_id`` whose date key is one of ``key_set``."""
    wanted = set(key_set)
    return [r for r in records if r.owner_id == owner_id and r.date in wanted]


def filter_by_owner_and_range(records: Iterable, owner_id, start, end) -> List:
    """Records of ``owner_id`` dated between ``start`` and ``end`` inclusive.

    Bounds may be dates or date keys. Comparison is on calendar dates, so
    ranges spanning months or years work. ``start`` after ``end`` simply
    matches nothing.
    """
    if start in (None, "") or end in (None, ""):
        raise ValidationError("Please select both start and end dates.")
    start, end = as_date(start), as_date(end)
    if start > end:
        return []
    return [r for r in records if r.owner_id == owner_id and start <= r.day <= end]


def filter_by_category(records: Iterable, category: Optional[str]) -> List:
    if not category or category == ALL_CATEGORIES:
        return list(records)
    return [r for r in records if r.category == category]
