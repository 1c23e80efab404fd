"""Utility functions for spendview."""

from spendview.utils.date_parser import parse_date
from spendview.utils.amount_parser import parse_amount
from spendview.utils.logger import configure_logging, get_logger

__all__ = ["parse_date", "parse_amount", "configure_logging", "get_logger"]
