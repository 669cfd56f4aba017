# expense_backend/categories.py
"""Expense categories and their chart colors.

The accepted set is configurable. Categories already stored are rendered
even if they have since left the accepted set; they just get the fallback
color.
"""

from difflib import get_close_matches
from typing import Dict, Iterable, List, Optional

from .errors import ValidationError

CATEGORY_COLORS = {
    "Food": "rgba(255, 99, 132, 1.0)",
    "Transport": "rgba(54, 162, 235, 1.0)",
    "Entertainment": "rgba(255, 206, 86, 1.0)",
    "Shopping": "rgba(75, 192, 192, 1.0)",
    "Bills": "rgba(153, 102, 255, 1.0)",
    "Health": "rgba(255, 159, 64, 1.0)",
}
FALLBACK_COLOR = "rgba(0, 0, 0, 1.0)"

DEFAULT_CATEGORIES = list(CATEGORY_COLORS)


def category_color(category: str) -> str:
    return CATEGORY_COLORS.get(category, FALLBACK_COLOR)


def accepted_categories(configured: Optional[Iterable[str]] = None) -> List[str]:
    configured = [c for c in (configured or []) if c]
    return configured or list(DEFAULT_CATEGORIES)


def normalize_category(cat, accepted: Iterable[str]) -> str:
    """Normalize category to the accepted list or raise ValidationError."""
    accepted = list(accepted)
    if not cat or not str(cat).strip():
        raise ValidationError("Category is required")
    cat = str(cat).strip()
    for c in accepted:
        if cat.lower() == c.lower():
            return c
    match = get_close_matches(cat, accepted, n=1, cutoff=0.8)
    if match:
        return match[0]
    raise ValidationError(
        f"Unknown category {cat!r}. Accepted: {', '.join(accepted)}"
    )


def describe(categories: Iterable[str]) -> List[Dict[str, str]]:
    return [{"name": c, "color": category_color(c)} for c in categories]
