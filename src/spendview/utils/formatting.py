"""Display formatting for amounts, dates and categories."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional, Union

from spendview.domain.aggregation import MONTH_ABBREVIATIONS, to_decimal
from spendview.domain.entities import FALLBACK_CATEGORY

CATEGORY_ICONS = {
    "Food": "fa-utensils",
    "Transport": "fa-car",
    "Utilities": "fa-bolt",
    "Entertainment": "fa-film",
    "Shopping": "fa-shopping-bag",
    "Healthcare": "fa-heart-pulse",
    "Other": "fa-circle",
}


def format_currency(amount: Union[Decimal, int, float]) -> str:
    """Format an amount as USD, e.g. ``$1,234.50`` or ``-$5.00``."""
    value = to_decimal(amount)
    if value < 0:
        return f"-${-value:,.2f}"
    return f"${value:,.2f}"


def format_date(value: Optional[Union[date, datetime]]) -> str:
    """Format a date for display, e.g. ``Jan 5, 2024``."""
    if value is None:
        return ""
    return f"{MONTH_ABBREVIATIONS[value.month - 1]} {value.day}, {value.year}"


def format_date_for_input(value: Optional[Union[date, datetime]]) -> str:
    """Format a date as ``YYYY-MM-DD``."""
    if value is None:
        return ""
    if isinstance(value, datetime):
        value = value.date()
    return value.isoformat()


def get_category_icon(category: str) -> str:
    """Return the icon for a category.

    Unknown categories use the ``Other`` icon. This fallback is for display
    only; aggregation keeps unknown categories as their own buckets.
    """
    return CATEGORY_ICONS.get(category, CATEGORY_ICONS[FALLBACK_CATEGORY])


def get_category_badge(category: str) -> str:
    """Return the badge class for a category."""
    return f"badge badge-{category.lower()}"
