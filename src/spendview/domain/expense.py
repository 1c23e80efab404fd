"""Expense domain service (the write path)."""

from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Optional

from spendview.database.base import Database
from spendview.domain.aggregation import to_decimal
from spendview.domain.entities import ExpenseRecord
from spendview.domain.errors import (
    NotFoundError,
    ValidationError,
    expense_not_found,
    invalid_amount,
    missing_category,
    missing_date,
    missing_owner,
)
from spendview.utils.logger import get_logger

logger = get_logger(__name__)


class ExpenseService:
    """Service for creating, reading, updating and deleting expenses.

    All operations are scoped to an owner: another owner's expense is
    reported as not found.
    """

    def __init__(self, db: Database):
        """Initialize expense service.

        Args:
            db: Database instance
        """
        self.db = db

    @staticmethod
    def _validate_owner(owner_id: str) -> None:
        if not owner_id:
            raise ValidationError(missing_owner())

    @staticmethod
    def _validate_amount(amount: Optional[Decimal]) -> Decimal:
        if amount is None:
            raise ValidationError(invalid_amount(None))
        try:
            amount = to_decimal(amount)
        except (InvalidOperation, TypeError, ValueError) as e:
            raise ValidationError(invalid_amount(amount)) from e
        if not amount.is_finite() or amount <= 0:
            raise ValidationError(invalid_amount(amount))
        return amount

    @staticmethod
    def _validate_category(category: Optional[str]) -> str:
        if category is None or not category.strip():
            raise ValidationError(missing_category())
        return category.strip()

    @staticmethod
    def _validate_date(value: Optional[date]) -> date:
        if value is None:
            raise ValidationError(missing_date())
        if isinstance(value, datetime):
            return value.date()
        return value

    def add_expense(
        self,
        owner_id: str,
        amount: Decimal,
        category: str,
        date: date,
        description: str = "",
    ) -> str:
        """Create an expense.

        Args:
            owner_id: ID of the signed-in user
            amount: Positive amount
            category: Category name
            date: Day the expense occurred
            description: Optional free text

        Returns:
            Expense ID

        Raises:
            ValidationError: If any field is missing or the amount is not positive
        """
        self._validate_owner(owner_id)
        amount = self._validate_amount(amount)
        category = self._validate_category(category)
        date = self._validate_date(date)

        expense_id = self.db.create_expense(
            owner_id=owner_id,
            amount=amount,
            category=category,
            date=date,
            description=description or "",
        )
        logger.info("Expense added with ID: %s", expense_id)
        return expense_id

    def get_expense(self, owner_id: str, expense_id: str) -> Optional[ExpenseRecord]:
        """Get an expense owned by ``owner_id``, or None."""
        expense = self.db.get_expense(expense_id)
        if expense is None or expense.owner_id != owner_id:
            return None
        return expense

    def require_expense(self, owner_id: str, expense_id: str) -> ExpenseRecord:
        """Get an expense owned by ``owner_id``.

        Raises:
            NotFoundError: If the expense does not exist for this owner
        """
        expense = self.get_expense(owner_id, expense_id)
        if expense is None:
            raise NotFoundError(expense_not_found(expense_id))
        return expense

    def list_expenses(self, owner_id: str) -> list[ExpenseRecord]:
        """List the owner's expenses, newest first."""
        self._validate_owner(owner_id)
        return self.db.list_expenses(owner_id)

    def update_expense(
        self,
        owner_id: str,
        expense_id: str,
        amount: Optional[Decimal] = None,
        category: Optional[str] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update the provided fields of an expense.

        Raises:
            NotFoundError: If the expense does not exist for this owner
            ValidationError: If a provided field is invalid
        """
        self.require_expense(owner_id, expense_id)

        if amount is not None:
            amount = self._validate_amount(amount)
        if category is not None:
            category = self._validate_category(category)
        if date is not None:
            date = self._validate_date(date)

        self.db.update_expense(
            expense_id,
            amount=amount,
            category=category,
            date=date,
            description=description,
        )
        logger.info("Expense updated: %s", expense_id)

    def delete_expense(self, owner_id: str, expense_id: str) -> None:
        """Delete an expense.

        Raises:
            NotFoundError: If the expense does not exist for this owner
        """
        self.require_expense(owner_id, expense_id)
        self.db.delete_expense(expense_id)
        logger.info("Expense deleted: %s", expense_id)
