"""Shared domain error messages and error types."""

from decimal import Decimal
from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for callers that only catch ValueError.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist for this owner."""


def expense_not_found(expense_id: str) -> str:
    """Return message for missing expense."""
    return f"Expense {expense_id} not found"


def invalid_amount(amount: Optional[Decimal]) -> str:
    """Return message for a missing or non-positive amount."""
    if amount is None:
        return "Please enter a valid amount"
    return f"Please enter a valid amount (got {amount}, must be greater than zero)"


def missing_category() -> str:
    """Return message for a missing category."""
    return "Please select a category"


def missing_date() -> str:
    """Return message for a missing expense date."""
    return "Please select a date"


def missing_owner() -> str:
    """Return message when no user is signed in."""
    return "User not authenticated"
