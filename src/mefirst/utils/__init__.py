"""Utility functions for mefirst."""

from mefirst.utils.date_parser import (
    parse_date,
    parse_local_date,
    last_day_of_month,
    add_months,
    format_short,
)
from mefirst.utils.amount_parser import parse_amount, format_amount

__all__ = [
    "parse_date",
    "parse_local_date",
    "last_day_of_month",
    "add_months",
    "format_short",
    "parse_amount",
    "format_amount",
]
