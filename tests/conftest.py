"""Shared pytest fixtures for spendview tests."""

import tempfile
import os
from datetime import UTC, date, datetime
from decimal import Decimal

import pytest

from spendview.database.factories import create_sqlite_database
from spendview.domain.entities import ExpenseRecord
from spendview.domain.expense import ExpenseService
from spendview.domain.scheduling import ManualScheduler
from spendview.domain.notifications import NotificationManager
from spendview.domain.summary import SummaryService


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    db = create_sqlite_database(database_path=db_path)
    # Store the path for CLI tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def expense_service(temp_db):
    """Create an ExpenseService with a temporary database."""
    return ExpenseService(temp_db)


@pytest.fixture
def summary_service(temp_db):
    """Create a SummaryService with a temporary database."""
    return SummaryService(temp_db)


@pytest.fixture
def scheduler():
    """Create a manual scheduler starting at a fixed instant."""
    return ManualScheduler(start=datetime(2024, 1, 1, 9, 0, tzinfo=UTC))


@pytest.fixture
def notifier(scheduler):
    """Create a NotificationManager driven by the manual scheduler."""
    return NotificationManager(scheduler)


@pytest.fixture
def make_expense():
    """Factory for in-memory expense records."""
    counter = iter(range(1, 10_000))

    def _make(amount, category="Food", day=date(2024, 1, 15), description="", owner_id="user-1"):
        return ExpenseRecord(
            id=f"exp-{next(counter)}",
            owner_id=owner_id,
            amount=Decimal(str(amount)),
            category=category,
            date=day,
            description=description,
        )

    return _make


@pytest.fixture
def scenario_batch(make_expense):
    """The three-record batch used throughout the aggregation tests."""
    return [
        make_expense(10, "Food", date(2024, 1, 5)),
        make_expense(20, "Food", date(2024, 2, 10)),
        make_expense(5, "Transport", date(2024, 2, 15)),
    ]


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()
