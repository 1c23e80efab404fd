"""Summary domain service."""

from datetime import date, datetime
from typing import Optional, Union

from spendview.database.base import Database
from spendview.domain.aggregation import (
    DEFAULT_MONTHS,
    DEFAULT_RECENT_LIMIT,
    build_aggregate_view,
)
from spendview.domain.entities import ALL_CATEGORIES, AggregateView
from spendview.domain.expense import ExpenseService


class SummaryService:
    """Service that feeds an owner's expenses into the aggregation functions."""

    def __init__(self, db: Database):
        """Initialize summary service.

        Args:
            db: Database instance
        """
        self.db = db
        self.expense_service = ExpenseService(db)

    def build_summary(
        self,
        owner_id: str,
        months: int = DEFAULT_MONTHS,
        recent_limit: int = DEFAULT_RECENT_LIMIT,
        category: Optional[str] = ALL_CATEGORIES,
        now: Optional[Union[date, datetime]] = None,
    ) -> AggregateView:
        """Build the dashboard view for one owner.

        Args:
            owner_id: ID of the signed-in user
            months: Trailing window size for the monthly series
            recent_limit: Number of most recent expenses to include
            category: Category for the filtered list, or "all"
            now: Reference date for the monthly window (defaults to today)

        Returns:
            AggregateView computed from the owner's current expenses
        """
        expenses = self.expense_service.list_expenses(owner_id)
        return build_aggregate_view(
            expenses,
            months=months,
            recent_limit=recent_limit,
            category=category,
            now=now,
        )
