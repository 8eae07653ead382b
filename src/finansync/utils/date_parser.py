"""Date parsing utilities."""

import re
from datetime import date, datetime

STATEMENT_DATE_FORMAT = "%d/%m/%Y"

# strptime alone would also accept "1/2/2023"
_STATEMENT_DATE_RE = re.compile(r"^\d{2}/\d{2}/\d{4}$")


def parse_date(date_str: str) -> date:
    """Parse a statement date in day/month/year form.

    Only the fixed pattern "dd/mm/yyyy" is accepted, e.g. "25/12/2023".

    Args:
        date_str: Date string from the statement

    Returns:
        Date object

    Raises:
        ValueError: If date string does not match the pattern or is not a
            real calendar date
    """
    value = date_str.strip()
    if not _STATEMENT_DATE_RE.match(value):
        raise ValueError(f"Could not parse date '{value}': expected dd/mm/yyyy")

    try:
        return datetime.strptime(value, STATEMENT_DATE_FORMAT).date()
    except ValueError as e:
        raise ValueError(f"Could not parse date '{value}': {e}")
