"""Tests for database mappers."""

from datetime import datetime, date, UTC
from decimal import Decimal

from spendview.database.models import Expense as ORMExpense, new_expense_id
from spendview.database.mappers import expense_to_domain
from spendview.domain.entities import ExpenseRecord


class TestExpenseMapper:
    """Tests for Expense mapper."""

    def test_expense_to_domain(self):
        """Test converting ORM Expense to domain ExpenseRecord."""
        created_at = datetime.now(UTC)
        orm_expense = ORMExpense(
            id="abc123",
            owner_id="user-1",
            amount=Decimal("42.10"),
            category="Utilities",
            date=date(2024, 2, 1),
            description="Power bill",
            created_at=created_at,
        )

        expense = expense_to_domain(orm_expense)

        assert isinstance(expense, ExpenseRecord)
        assert expense.id == "abc123"
        assert expense.owner_id == "user-1"
        assert expense.amount == Decimal("42.10")
        assert expense.category == "Utilities"
        assert expense.date == date(2024, 2, 1)
        assert expense.description == "Power bill"
        assert expense.created_at == created_at

    def test_missing_description_becomes_empty(self):
        """Test that a NULL description maps to an empty string."""
        orm_expense = ORMExpense(
            id="abc123",
            owner_id="user-1",
            amount=Decimal("1"),
            category="Other",
            date=date(2024, 2, 1),
            description=None,
        )

        assert expense_to_domain(orm_expense).description == ""

    def test_new_expense_id_is_hex(self):
        """Test that generated IDs are 32-character hex strings."""
        expense_id = new_expense_id()
        assert len(expense_id) == 32
        int(expense_id, 16)
