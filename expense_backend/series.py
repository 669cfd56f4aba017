# expense_backend/series.py
"""Zero-filled per-day series per category, ready for a bar/line chart."""

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional

from .aggregation import aggregate, money, observed_categories
from .categories import category_color
from .datekeys import OldestFirst
from .filters import filter_by_owner_and_window


@dataclass
class CategorySeries:
    category: str
    values: List[float]

    def to_dict(self) -> Dict:
        return {
            "label": self.category,
            "values": list(self.values),
            "color": category_color(self.category),
        }


@dataclass
class TimeSeries:
    days: List[str]
    series: List[CategorySeries] = field(default_factory=list)

    def totals(self) -> Dict[str, float]:
        return {s.category: money(sum(s.values, 0.0)) for s in self.series}

    def to_dict(self) -> Dict:
        return {"days": list(self.days), "series": [s.to_dict() for s in self.series]}


def build_series(
    records: Iterable, days: OldestFirst, categories: Optional[List[str]] = None
) -> TimeSeries:
    """Lay ``records`` out over ``days``, one value per day per category.

    Records dated outside ``days`` are ignored. ``categories`` defaults to
    the categories seen in the in-window records, in first-seen order.
    """
    if not isinstance(days, OldestFirst):
        raise TypeError(
            f"build_series needs OldestFirst days, got {type(days).__name__}; "
            "call .chronological() on a newest-first window"
        )

    keys = days.keys
    position = {key: i for i, key in enumerate(keys)}
    wanted = set(keys)
    in_window = [r for r in records if r.date in wanted]

    if categories is None:
        categories = observed_categories(in_window)

    values = {category: [0.0] * len(keys) for category in categories}
    for (category, key), amount in aggregate(in_window, ("category", "date")).items():
        if category in values:
            values[category][position[key]] = amount

    return TimeSeries(
        days=keys,
        series=[CategorySeries(category, values[category]) for category in categories],
    )


def owner_window_series(records: Iterable, owner_id, days: OldestFirst) -> TimeSeries:
    """``build_series`` over one owner's records in ``days``."""
    return build_series(filter_by_owner_and_window(records, owner_id, days.keys), days)
