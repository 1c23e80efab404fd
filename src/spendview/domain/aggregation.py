"""Aggregation of expense batches into derived summary views.

Every function here is a pure function of its arguments: the caller passes
the record batch (and the reference instant, where one matters) explicitly.
Nothing is cached between calls.
"""

from datetime import date, datetime
from decimal import Decimal
from typing import Iterable, Optional, Sequence, Union

from dateutil.relativedelta import relativedelta

from spendview.domain.entities import (
    ALL_CATEGORIES,
    AggregateView,
    ExpenseRecord,
    MonthlyTotal,
)

DEFAULT_MONTHS = 6
DEFAULT_RECENT_LIMIT = 5

# Fixed English abbreviations so labels do not depend on the process locale.
MONTH_ABBREVIATIONS = (
    "Jan",
    "Feb",
    "Mar",
    "Apr",
    "May",
    "Jun",
    "Jul",
    "Aug",
    "Sep",
    "Oct",
    "Nov",
    "Dec",
)

ZERO = Decimal("0")


def to_decimal(value) -> Decimal:
    """Convert a numeric amount to Decimal without binary float drift."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def format_month_label(year: int, month: int) -> str:
    """Return a short display label such as ``"Jan 2024"``."""
    return f"{MONTH_ABBREVIATIONS[month - 1]} {year}"


def calculate_total(expenses: Iterable[ExpenseRecord]) -> Decimal:
    """Sum the amount of every expense. An empty batch sums to zero."""
    total = ZERO
    for expense in expenses:
        total += to_decimal(expense.amount)
    return total


def calculate_category_totals(expenses: Iterable[ExpenseRecord]) -> dict[str, Decimal]:
    """Sum amounts per category.

    Only categories present in the batch appear in the result. Category
    strings are used verbatim as keys; unknown categories get their own
    bucket rather than being folded into ``Other``.
    """
    totals: dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, ZERO) + to_decimal(
            expense.amount
        )
    return totals


def _month_keys(months: int, now: Union[date, datetime]) -> list[tuple[int, int]]:
    """Return ``(year, month)`` keys for the trailing window, oldest first."""
    first_of_month = date(now.year, now.month, 1)
    keys = []
    for offset in range(months - 1, -1, -1):
        month_start = first_of_month - relativedelta(months=offset)
        keys.append((month_start.year, month_start.month))
    return keys


def calculate_monthly_totals(
    expenses: Iterable[ExpenseRecord],
    months: int = DEFAULT_MONTHS,
    now: Optional[Union[date, datetime]] = None,
) -> tuple[MonthlyTotal, ...]:
    """Sum amounts per calendar month over a trailing window.

    Args:
        expenses: Expense batch in any order
        months: Window size; the window ends with the month containing ``now``
        now: Reference instant (defaults to today)

    Returns:
        Exactly ``months`` buckets in ascending order, zero-filled. Expenses
        dated outside the window are left out of this view.
    """
    if months <= 0:
        return ()
    if now is None:
        now = date.today()

    keys = _month_keys(months, now)
    totals = {key: ZERO for key in keys}

    for expense in expenses:
        key = (expense.date.year, expense.date.month)
        if key in totals:
            totals[key] += to_decimal(expense.amount)

    return tuple(
        MonthlyTotal(
            year=year,
            month=month,
            label=format_month_label(year, month),
            amount=totals[(year, month)],
        )
        for year, month in keys
    )


def get_recent_expenses(
    expenses: Sequence[ExpenseRecord], limit: int = DEFAULT_RECENT_LIMIT
) -> tuple[ExpenseRecord, ...]:
    """Return the first ``limit`` expenses in the order given.

    No sorting happens here: callers must pass a newest-first batch for the
    result to mean "most recent".
    """
    if limit <= 0:
        return ()
    return tuple(expenses[:limit])


def filter_by_category(
    expenses: Sequence[ExpenseRecord], category: Optional[str]
) -> tuple[ExpenseRecord, ...]:
    """Return expenses whose category equals ``category`` exactly.

    ``"all"``, ``None`` and the empty string mean no filter and return the
    batch unchanged.
    """
    if not category or category == ALL_CATEGORIES:
        return tuple(expenses)
    return tuple(expense for expense in expenses if expense.category == category)


def build_aggregate_view(
    expenses: Sequence[ExpenseRecord],
    months: int = DEFAULT_MONTHS,
    recent_limit: int = DEFAULT_RECENT_LIMIT,
    category: Optional[str] = ALL_CATEGORIES,
    now: Optional[Union[date, datetime]] = None,
) -> AggregateView:
    """Compute every derived view for one batch."""
    return AggregateView(
        total=calculate_total(expenses),
        by_category=calculate_category_totals(expenses),
        by_month=calculate_monthly_totals(expenses, months=months, now=now),
        recent=get_recent_expenses(expenses, limit=recent_limit),
        filtered=filter_by_category(expenses, category),
    )
