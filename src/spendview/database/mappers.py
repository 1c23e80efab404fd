"""Mapper functions to convert SQLAlchemy rows into domain entities.

Only domain entities leave the database package, so aggregation code never
depends on the ORM.
"""

from decimal import Decimal

from spendview.database.models import Expense as ORMExpense
from spendview.domain.entities import ExpenseRecord


def expense_to_domain(orm_expense: ORMExpense) -> ExpenseRecord:
    """Convert SQLAlchemy Expense model to domain ExpenseRecord entity."""
    return ExpenseRecord(
        id=orm_expense.id,
        owner_id=orm_expense.owner_id,
        amount=Decimal(orm_expense.amount),
        category=orm_expense.category,
        date=orm_expense.date,
        description=orm_expense.description or "",
        created_at=orm_expense.created_at,
    )
