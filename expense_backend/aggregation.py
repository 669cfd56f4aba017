# expense_backend/aggregation.py
"""
Group-and-sum over expense records.

Results are plain dicts in first-seen group order (pandas ``sort=False``),
recomputed on every call.
"""

from typing import Dict, Iterable, List, Tuple

import pandas as pd

MONEY_PLACES = 2

GROUPINGS = {
    ("category",): "category",
    ("category", "date"): ["category", "date"],
}


def records_frame(records: Iterable) -> pd.DataFrame:
    rows = [
        {"category": r.category, "date": r.date, "amount": float(r.amount)}
        for r in records
    ]
    return pd.DataFrame(rows, columns=["category", "date", "amount"])


def aggregate(records: Iterable, group_by: Tuple[str, ...] = ("category",)) -> Dict:
    """Sum ``amount`` per category, or per (category, date key).

    Keys are category strings for ``("category",)`` and
    ``(category, date_key)`` tuples for ``("category", "date")``.
    """
    group_by = tuple(group_by)
    if group_by not in GROUPINGS:
        raise ValueError(f"Unsupported grouping {group_by!r}")

    df = records_frame(records)
    if df.empty:
        return {}

    sums = df.groupby(GROUPINGS[group_by], sort=False)["amount"].sum()
    return {key: money(value) for key, value in sums.items()}


def money(value) -> float:
    """Round to whole cents so sums of cent amounts compare exactly."""
    return round(float(value), MONEY_PLACES)


def total(mapping: Dict) -> float:
    return money(sum(mapping.values(), 0.0))


def observed_categories(records: Iterable) -> List[str]:
    seen = {}
    for r in records:
        seen.setdefault(r.category, None)
    return list(seen)


def category_rows(mapping: Dict) -> List[Dict]:
    return [{"category": category, "totalAmount": amount} for category, amount in mapping.items()]


def category_totals(records: Iterable) -> List[Dict]:
    return category_rows(aggregate(records))
