"""Utility functions for myfinance."""

from myfinance.utils.date_parser import parse_datetime, get_date_range
from myfinance.utils.amount_parser import parse_amount

__all__ = ["parse_datetime", "get_date_range", "parse_amount"]
