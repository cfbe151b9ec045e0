"""
Utility functions and constants for receipt processing.
"""

import datetime as dt
from decimal import Decimal, InvalidOperation
from typing import Optional, Union

# Default locations
CREDENTIALS_FILE = "credentials.txt"
RECEIPTS_DIR = "receipts"
RULES_FILE = "rules.json"

# Pattern constants for parsing
# description, horizontal whitespace, amount with exactly two decimals
LINE_ITEM_PATTERN = r"(.+?)[ \t]+(\d+\.\d{2})"

DATE_PATTERNS = [
    r"\b(\d{4})[-/](\d{1,2})[-/](\d{1,2})\b",            # YYYY-MM-DD or YYYY/MM/DD
    r"\b(\d{1,2})[-/](\d{1,2})[-/](\d{2,4})\b",          # MM/DD/YYYY or DD/MM/YYYY (heuristic later)
    r"\b([A-Za-z]{3,9})\s+(\d{1,2}),\s*(\d{4})\b",       # Month DD, YYYY
]

# Thresholding
THRESHOLD_CUTOFF = 150
THRESHOLD_MAX = 255

# YNAB API
YNAB_API_BASE = "https://api.youneedabudget.com/v1"
DEFAULT_TIMEOUT = 30.0
MILLIUNITS_PER_UNIT = 1000


def to_decimal(s: Union[str, Decimal, int, float]) -> Decimal:
    """Parse an amount into a Decimal, raising ValueError on bad input."""
    if isinstance(s, Decimal):
        return s
    try:
        value = Decimal(str(s).replace(",", "").strip())
    except InvalidOperation:
        raise ValueError(f"Invalid amount: {s!r}")
    if not value.is_finite():
        raise ValueError(f"Invalid amount: {s!r}")
    return value


def today_iso() -> str:
    """Return today's date as YYYY-MM-DD."""
    return dt.date.today().isoformat()


def money_fmt(v: Optional[Decimal]) -> str:
    """Format amount as currency."""
    return f"${v:,.2f}" if v is not None else ""
