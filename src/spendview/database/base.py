"""Abstract database interface."""

from abc import ABC, abstractmethod
from datetime import date
from decimal import Decimal
from typing import Optional

from spendview.domain.entities import ExpenseRecord


class Database(ABC):
    """Abstract expense store for spendview."""

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def create_expense(
        self,
        owner_id: str,
        amount: Decimal,
        category: str,
        date: date,
        description: str = "",
    ) -> str:
        """Create an expense. Returns expense ID."""
        pass

    @abstractmethod
    def get_expense(self, expense_id: str) -> Optional[ExpenseRecord]:
        """Get expense by ID."""
        pass

    @abstractmethod
    def list_expenses(self, owner_id: str) -> list[ExpenseRecord]:
        """List all expenses of one owner, newest first.

        Ordered by expense date descending, then creation time descending.
        """
        pass

    @abstractmethod
    def count_expenses(self, owner_id: str) -> int:
        """Count expenses of one owner."""
        pass

    @abstractmethod
    def update_expense(
        self,
        expense_id: str,
        amount: Optional[Decimal] = None,
        category: Optional[str] = None,
        date: Optional[date] = None,
        description: Optional[str] = None,
    ) -> None:
        """Update the provided fields of an expense."""
        pass

    @abstractmethod
    def delete_expense(self, expense_id: str) -> None:
        """Delete an expense."""
        pass
