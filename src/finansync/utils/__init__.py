"""Utility functions for finansync."""

from finansync.utils.date_parser import parse_date
from finansync.utils.amount_parser import parse_amount, canonicalize_amount

__all__ = ["parse_date", "parse_amount", "canonicalize_amount"]
