"""Utility functions for ledgepro."""

from ledgepro.utils.date_parser import parse_date, coerce_calendar_date
from ledgepro.utils.amount_parser import parse_amount, parse_amount_or_zero

__all__ = ["parse_date", "coerce_calendar_date", "parse_amount", "parse_amount_or_zero"]
