# expense_backend/budget.py
"""
Budget admission: a new expense is refused when it would push the expense
total past the savings recorded for the current month.
"""

import logging
import threading
import weakref
from contextlib import contextmanager
from dataclasses import dataclass
from datetime import date
from typing import Iterable

from .aggregation import aggregate, money, total
from .datekeys import month_range
from .filters import filter_by_owner, filter_by_owner_and_range

logger = logging.getLogger("expense-backend")

EXPENSE_SCOPES = ("all_time", "month")
REFUSAL_MESSAGE = "Cannot add expense. Total expenses exceeds income."


def can_admit(proposed_amount: float, existing_expense_total: float, period_savings_total: float) -> bool:
    return money(existing_expense_total + proposed_amount) <= money(period_savings_total)


@dataclass(frozen=True)
class BudgetCheck:
    admitted: bool
    proposed_amount: float
    existing_expense_total: float
    period_savings_total: float

    def to_dict(self):
        return {
            "admitted": self.admitted,
            "proposedAmount": self.proposed_amount,
            "existingExpenses": self.existing_expense_total,
            "periodSavings": self.period_savings_total,
        }


def check_admission(
    proposed_amount: float,
    expenses: Iterable,
    savings: Iterable,
    owner_id,
    today: date,
    expense_scope: str = "all_time",
) -> BudgetCheck:
    """Decide whether ``owner_id`` may record ``proposed_amount`` today.

    Savings always count for the calendar month containing ``today``. With
    the default ``all_time`` scope the expense side is every expense the
    owner has ever recorded; ``month`` restricts it to the same month.
    """
    if expense_scope not in EXPENSE_SCOPES:
        raise ValueError(f"Unknown expense scope {expense_scope!r}")

    start, end = month_range(today)
    if expense_scope == "month":
        counted = filter_by_owner_and_range(expenses, owner_id, start, end)
    else:
        counted = filter_by_owner(expenses, owner_id)

    existing = total(aggregate(counted))
    ceiling = money(sum((s.amount for s in filter_by_owner_and_range(savings, owner_id, start, end)), 0.0))

    admitted = can_admit(proposed_amount, existing, ceiling)
    if not admitted:
        logger.warning(
            f"Budget refusal for user {owner_id}: {existing} + {proposed_amount} > {ceiling}"
        )
    return BudgetCheck(admitted, proposed_amount, existing, ceiling)


class OwnerLocks:
    """One lock per owner, so check-then-insert runs one at a time per owner.

    An owner's lock lives only while some request holds or waits on it.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks = weakref.WeakValueDictionary()

    @contextmanager
    def hold(self, owner_id):
        with self._guard:
            lock = self._locks.get(owner_id)
            if lock is None:
                lock = self._locks[owner_id] = threading.Lock()
        with lock:
            yield

    def __len__(self):
        return len(self._locks)
