"""Domain model entities for spendview.

These are pure data classes representing business concepts, independent of
the store schema. Aggregation and notification code only ever sees these
types, never ORM rows.
"""

from dataclasses import dataclass, field
from datetime import datetime, date
from decimal import Decimal
from enum import Enum
from typing import Optional, Union

EXPENSE_CATEGORIES = (
    "Food",
    "Transport",
    "Utilities",
    "Entertainment",
    "Shopping",
    "Healthcare",
    "Other",
)

FALLBACK_CATEGORY = "Other"

ALL_CATEGORIES = "all"


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense record domain entity."""

    id: str
    owner_id: str
    amount: Decimal
    category: str
    date: Union[date, datetime]
    description: str = ""
    created_at: Optional[datetime] = None


@dataclass(frozen=True)
class MonthlyTotal:
    """One calendar-month bucket of a trailing window.

    Buckets are identified by ``(year, month)``; ``label`` is for display only.
    """

    year: int
    month: int
    label: str
    amount: Decimal

    @property
    def key(self) -> tuple[int, int]:
        return (self.year, self.month)


@dataclass(frozen=True)
class AggregateView:
    """Derived summary of one expense batch."""

    total: Decimal
    by_category: dict[str, Decimal] = field(default_factory=dict)
    by_month: tuple[MonthlyTotal, ...] = ()
    recent: tuple[ExpenseRecord, ...] = ()
    filtered: tuple[ExpenseRecord, ...] = ()

    def monthly_series(self) -> list[tuple[str, Decimal]]:
        """Return ``(label, amount)`` pairs in chronological order."""
        return [(bucket.label, bucket.amount) for bucket in self.by_month]


class NotificationLevel(str, Enum):
    """Severity of a notification."""

    INFO = "info"
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


class NotificationState(str, Enum):
    """Lifecycle state of a notification."""

    CREATED = "created"
    VISIBLE = "visible"
    DISMISSING = "dismissing"
    REMOVED = "removed"


@dataclass(frozen=True)
class Notification:
    """Transient user-facing message."""

    id: int
    level: NotificationLevel
    message: str
    created_at: datetime
    ttl: float
