"""Configuration for the expense backend.

Values are read from environment variables once, at import time.
``create_app`` accepts a mapping of overrides on top of these.
"""

from __future__ import annotations

import os
from datetime import timedelta
from pathlib import Path

_PROJECT_ROOT = Path(__file__).parent.parent.resolve()

DEFAULT_DB_PATH = _PROJECT_ROOT / "data" / "expense.db"


def _split_list(raw: str) -> list:
    return [item.strip() for item in raw.split(",") if item.strip()]


class Config:
    JWT_SECRET_KEY = os.environ.get(
        "JWT_SECRET_KEY", "dev-key-for-local-expense-tracker-only-change-me"
    )
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(
        hours=int(os.environ.get("JWT_EXPIRES_HOURS", "12"))
    )

    DATABASE = os.environ.get("DB_PATH", str(DEFAULT_DB_PATH))

    CORS_ORIGINS = _split_list(
        os.environ.get("CORS_ORIGINS", "http://localhost:3019,http://localhost:8501")
    )

    # Empty means the default palette in categories.py
    EXPENSE_CATEGORIES = _split_list(os.environ.get("EXPENSE_CATEGORIES", ""))

    # "all_time" compares every expense ever recorded against this month's
    # savings; "month" compares only this month's expenses.
    BUDGET_EXPENSE_SCOPE = os.environ.get("BUDGET_EXPENSE_SCOPE", "all_time")

    LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")
