"""SQLAlchemy models for the spendview expense store."""

import uuid
from datetime import datetime, UTC

from sqlalchemy import Column, String, DateTime, Date, Numeric, Index, create_engine
from sqlalchemy.orm import declarative_base, sessionmaker, Session

Base = declarative_base()


def new_expense_id() -> str:
    """Generate an opaque expense identifier."""
    return uuid.uuid4().hex


class Expense(Base):
    """Expense model."""

    __tablename__ = "expenses"

    id = Column(String(32), primary_key=True, default=new_expense_id)
    owner_id = Column(String, nullable=False)
    amount = Column(Numeric(12, 2), nullable=False)
    category = Column(String, nullable=False)
    date = Column(Date, nullable=False)
    description = Column(String, nullable=False, default="")
    created_at = Column(DateTime, default=lambda: datetime.now(UTC), nullable=False)

    __table_args__ = (Index("ix_expenses_owner_date", "owner_id", "date"),)


def create_session_factory(database_url: str) -> sessionmaker[Session]:
    """Create a SQLAlchemy session factory."""
    engine = create_engine(database_url, echo=False)
    Base.metadata.create_all(engine)
    return sessionmaker(bind=engine)
