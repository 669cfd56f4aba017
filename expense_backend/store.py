# expense_backend/store.py
"""
Owner-scoped record store on top of db.py.

Every read and write carries the owner id; a record that belongs to someone
else is reported exactly like a missing one.
"""

import logging
from typing import Any, Dict, List, Optional, Union

from . import db
from .errors import RecordNotFound
from .models import ExpenseRecord, SavingsRecord, User

logger = logging.getLogger("expense-backend")

EXPENSE_FIELDS = ("name", "amount", "category", "date")

Record = Union[ExpenseRecord, SavingsRecord]


def list_expenses(owner_id) -> List[ExpenseRecord]:
    rows = db.query_db(
        "SELECT id, user_id, name, amount, category, date FROM expenses WHERE user_id=? ORDER BY id",
        (owner_id,),
    )
    return [ExpenseRecord.from_row(r) for r in rows]


def list_savings(owner_id) -> List[SavingsRecord]:
    rows = db.query_db(
        "SELECT id, user_id, amount, date FROM savings WHERE user_id=? ORDER BY id",
        (owner_id,),
    )
    return [SavingsRecord.from_row(r) for r in rows]


def list_by_owner(owner_id) -> List[Record]:
    return list_expenses(owner_id) + list_savings(owner_id)


def insert(record: Record) -> Record:
    if isinstance(record, ExpenseRecord):
        record_id = db.execute_db(
            "INSERT INTO expenses (user_id, name, amount, category, date) VALUES (?,?,?,?,?)",
            (record.owner_id, record.name, record.amount, record.category, record.date),
        )
    elif isinstance(record, SavingsRecord):
        record_id = db.execute_db(
            "INSERT INTO savings (user_id, amount, date) VALUES (?,?,?)",
            (record.owner_id, record.amount, record.date),
        )
    else:
        raise TypeError(f"Cannot store {type(record).__name__}")
    return record.with_id(record_id)


def get_expense(record_id, owner_id) -> ExpenseRecord:
    row = db.query_db(
        "SELECT id, user_id, name, amount, category, date FROM expenses WHERE id=? AND user_id=?",
        (record_id, owner_id),
        one=True,
    )
    if not row:
        raise RecordNotFound("Expense not found or not authorized.")
    return ExpenseRecord.from_row(row)


def update_by_id(record_id, owner_id, patch: Dict[str, Any]) -> ExpenseRecord:
    """Replace any of name/amount/category/date on an owner's expense."""
    unknown = set(patch) - set(EXPENSE_FIELDS)
    if unknown:
        raise ValueError(f"Cannot patch fields {sorted(unknown)}")

    current = get_expense(record_id, owner_id)
    if not patch:
        return current

    updated = current.patched(patch)
    db.execute_db(
        "UPDATE expenses SET name=?, amount=?, category=?, date=? WHERE id=? AND user_id=?",
        (updated.name, updated.amount, updated.category, updated.date, record_id, owner_id),
    )
    return updated


def delete_by_id(record_id, owner_id) -> None:
    get_expense(record_id, owner_id)
    db.execute_db("DELETE FROM expenses WHERE id=? AND user_id=?", (record_id, owner_id))


# ---------------- Users ----------------
def _user_from_row(row) -> Optional[User]:
    if not row:
        return None
    return User(
        id=row["id"],
        username=row["username"],
        email=row["email"],
        password_hash=row["password_hash"],
        created_at=row["created_at"],
    )


def create_user(username, email, password_hash) -> int:
    return db.execute_db(
        "INSERT INTO users (username, email, password_hash) VALUES (?,?,?)",
        (username, email, password_hash),
    )


def find_user_by_username(username) -> Optional[User]:
    return _user_from_row(db.query_db("SELECT * FROM users WHERE username=?", (username,), one=True))


def find_user_by_email(email) -> Optional[User]:
    return _user_from_row(db.query_db("SELECT * FROM users WHERE email=?", (email,), one=True))


def get_user(user_id) -> Optional[User]:
    return _user_from_row(db.query_db("SELECT * FROM users WHERE id=?", (user_id,), one=True))
