"""
Parsers for extracting line items and dates from receipt text.
"""

import re
import datetime as dt
from typing import Optional, List

from .models import LineItem
from .utils import DATE_PATTERNS, LINE_ITEM_PATTERN, to_decimal

_LINE_ITEM_RE = re.compile(LINE_ITEM_PATTERN, flags=re.MULTILINE)


def parse_line_items(text: str, source_file: str = "") -> List[LineItem]:
    """
    Extract (description, amount) pairs from receipt text.

    Every match of LINE_ITEM_PATTERN becomes one LineItem, in the order it
    appears in the text. Lines without a trailing two-decimal amount are
    dropped, so items OCR'd without a readable price are lost.

    Args:
        text: OCR'd receipt text
        source_file: Name of the receipt the text came from

    Returns:
        List of uncategorized LineItems
    """
    items = []
    for m in _LINE_ITEM_RE.finditer(text or ""):
        items.append(LineItem(
            description=m.group(1).strip(),
            amount=to_decimal(m.group(2)),
            source_file=source_file,
        ))
    return items


def parse_date(text: str) -> Optional[str]:
    """Extract the first recognizable date from receipt text as YYYY-MM-DD."""
    for pat in DATE_PATTERNS:
        for m in re.finditer(pat, text or "", flags=re.IGNORECASE):
            g = m.groups()
            try:
                if pat.startswith(r"\b(\d{4})"):
                    y, mo, d = int(g[0]), int(g[1]), int(g[2])
                elif pat.startswith(r"\b(\d{1,2})"):
                    mo, d, y = int(g[0]), int(g[1]), int(g[2])
                    if y < 100:  # YY -> 20YY
                        y += 2000
                    # DD/MM when the first field can't be a month
                    if mo > 12 and d <= 12:
                        mo, d = d, mo
                else:
                    mn, d, y = g[0], int(g[1]), int(g[2])
                    mo = dt.datetime.strptime(mn[:3], "%b").month
                return dt.date(y, mo, d).isoformat()
            except ValueError:
                continue
    return None
