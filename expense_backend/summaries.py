# expense_backend/summaries.py
"""
Read-side summaries served by the /reports endpoints.

Each function works on a snapshot of the owner's records fetched for the
current request:
- today's spend per category;
- this month's expense and savings totals;
- last-N-days chart series.
"""

from datetime import date
from typing import Dict, Iterable

from .aggregation import aggregate, category_rows, money, total
from .datekeys import month_range, to_key, window_keys
from .filters import filter_by_owner_and_range, filter_by_owner_and_window
from .series import TimeSeries, owner_window_series

DEFAULT_USERNAME = "User"


def today_summary(expenses: Iterable, owner_id, username, today: date) -> Dict:
    todays = filter_by_owner_and_window(expenses, owner_id, {to_key(today)})
    sums = aggregate(todays)
    return {
        "username": username or DEFAULT_USERNAME,
        "totalAmount": total(sums),
        "perCategory": category_rows(sums),
    }


def dashboard_summary(expenses: Iterable, savings: Iterable, owner_id, today: date) -> Dict:
    start, end = month_range(today)
    month_expenses = filter_by_owner_and_range(expenses, owner_id, start, end)
    month_savings = filter_by_owner_and_range(savings, owner_id, start, end)
    return {
        "totalExpenses": total(aggregate(month_expenses)),
        "totalSavings": money(sum((s.amount for s in month_savings), 0.0)),
    }


def window_summary(expenses: Iterable, owner_id, today: date, length: int) -> TimeSeries:
    days = window_keys(today, length).chronological()
    return owner_window_series(expenses, owner_id, days)
