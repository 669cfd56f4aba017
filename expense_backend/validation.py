# expense_backend/validation.py
"""Turn request payloads into records, or raise ValidationError."""

import math
from typing import Any, Dict, Iterable

from .categories import normalize_category
from .datekeys import parse_date_input, to_key
from .errors import ValidationError
from .models import ExpenseRecord, SavingsRecord

MAX_NAME_LENGTH = 200
MAX_AMOUNT = 10000000


def parse_amount(value) -> float:
    if isinstance(value, bool) or value is None:
        raise ValidationError("Amount is required and must be a number")
    try:
        amount = float(str(value).strip())
    except ValueError:
        raise ValidationError(f"Invalid amount format: {value!r}")
    if not math.isfinite(amount):
        raise ValidationError("Amount must be a finite number")
    if amount < 0:
        raise ValidationError("Amount cannot be negative")
    if amount > MAX_AMOUNT:
        raise ValidationError(f"Amount too large: {amount}")
    return amount


def parse_name(value) -> str:
    name = (value or "").strip() if isinstance(value, str) else ""
    if not name:
        raise ValidationError("Expense name is required")
    if len(name) > MAX_NAME_LENGTH:
        raise ValidationError(f"Expense name too long: {len(name)} characters, max {MAX_NAME_LENGTH}")
    return name


def require_json(data) -> Dict[str, Any]:
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def expense_from_payload(owner_id, data, accepted: Iterable[str]) -> ExpenseRecord:
    data = require_json(data)
    return ExpenseRecord(
        owner_id=owner_id,
        name=parse_name(data.get("name")),
        amount=parse_amount(data.get("amount")),
        category=normalize_category(data.get("category"), accepted),
        date=to_key(parse_date_input(data.get("date"))),
    )


def expense_patch_from_payload(data, accepted: Iterable[str]) -> Dict[str, Any]:
    """Validated subset of name/amount/category/date present in ``data``."""
    data = require_json(data)
    patch = {}
    if "name" in data:
        patch["name"] = parse_name(data["name"])
    if "amount" in data:
        patch["amount"] = parse_amount(data["amount"])
    if "category" in data:
        patch["category"] = normalize_category(data["category"], accepted)
    if "date" in data:
        patch["date"] = to_key(parse_date_input(data["date"]))
    if not patch:
        raise ValidationError("Nothing to update: send name, amount, category or date")
    return patch


def savings_from_payload(owner_id, data) -> SavingsRecord:
    data = require_json(data)
    return SavingsRecord(
        owner_id=owner_id,
        amount=parse_amount(data.get("amount")),
        date=to_key(parse_date_input(data.get("date"))),
    )
