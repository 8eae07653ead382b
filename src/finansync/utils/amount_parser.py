"""Amount parsing utilities."""

from decimal import Decimal, InvalidOperation


def canonicalize_amount(amount_str: str) -> str:
    """Convert a Brazilian-format amount into canonical decimal notation.

    The statement uses "." as thousands separator and "," as decimal
    separator, e.g. "1.234,56" becomes "1234.56".

    Args:
        amount_str: Amount string as exported by the bank

    Returns:
        Canonical amount string with "." as the only decimal separator
    """
    return amount_str.replace(".", "").replace(",", ".").strip()


def parse_amount(amount_str: str) -> Decimal:
    """Parse a Brazilian-format amount string into a Decimal.

    Handles:
    - "2.500,00"
    - "-50,00"
    - "0,99"
    - "1234" (no separators)

    Args:
        amount_str: Amount string

    Returns:
        Exact Decimal amount

    Raises:
        ValueError: If amount string cannot be parsed or is not finite
    """
    if not amount_str or not amount_str.strip():
        raise ValueError("Empty amount string")

    canonical = canonicalize_amount(amount_str)

    try:
        amount = Decimal(canonical)
    except InvalidOperation:
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")

    # Decimal happily accepts "NaN" and "Infinity"
    if not amount.is_finite():
        raise ValueError(f"Could not parse amount '{amount_str.strip()}'")
    return amount
