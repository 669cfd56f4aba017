# expense_backend/models.py
# lightweight record classes (not DB-bound ORM)
from __future__ import annotations

from dataclasses import asdict, dataclass, replace
from datetime import date
from typing import Any, Dict, Optional

from .datekeys import parse_key


@dataclass(frozen=True)
class User:
    id: int
    username: str
    email: str
    password_hash: str
    created_at: Optional[str] = None


@dataclass(frozen=True)
class ExpenseRecord:
    owner_id: int
    name: str
    amount: float
    category: str
    date: str  # DD-MM-YYYY
    id: Optional[int] = None

    @property
    def day(self) -> date:
        return parse_key(self.date)

    def with_id(self, record_id: int) -> "ExpenseRecord":
        return replace(self, id=record_id)

    def patched(self, patch: Dict[str, Any]) -> "ExpenseRecord":
        return replace(self, **patch)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_row(cls, row) -> "ExpenseRecord":
        return cls(
            id=row["id"],
            owner_id=row["user_id"],
            name=row["name"],
            amount=float(row["amount"]),
            category=row["category"],
            date=row["date"],
        )


@dataclass(frozen=True)
class SavingsRecord:
    owner_id: int
    amount: float
    date: str  # DD-MM-YYYY
    id: Optional[int] = None

    @property
    def day(self) -> date:
        return parse_key(self.date)

    def with_id(self, record_id: int) -> "SavingsRecord":
        return replace(self, id=record_id)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_row(cls, row) -> "SavingsRecord":
        return cls(
            id=row["id"],
            owner_id=row["user_id"],
            amount=float(row["amount"]),
            date=row["date"],
        )
