"""
Console and CSV reporting of parsed line items.
"""

import csv
from collections import defaultdict
from decimal import Decimal
from pathlib import Path
from typing import List

from .models import LineItem
from .utils import money_fmt


def write_csv(items: List[LineItem], out_csv: Path):
    """Write line items to CSV file."""
    fieldnames = ["source_file", "description", "amount", "category"]
    with out_csv.open("w", newline="", encoding="utf-8") as f:
        w = csv.DictWriter(f, fieldnames=fieldnames)
        w.writeheader()
        for item in items:
            d = item.to_dict()
            w.writerow({k: d.get(k) for k in fieldnames})


def category_totals(items: List[LineItem]) -> dict:
    """Sum amounts per category, in order of first appearance."""
    totals = defaultdict(Decimal)
    for item in items:
        totals[item.category] += item.amount
    return dict(totals)


def print_summary(items: List[LineItem]):
    """Print line items grouped by receipt, then per-category totals."""
    current = None
    for item in items:
        if item.source_file != current:
            current = item.source_file
            print(f"[INFO] {current}:")
        print(f"    {item.description[:40]:<40} {money_fmt(item.amount):>12}  {item.category}")

    totals = category_totals(items)
    if not totals:
        return
    print("[INFO] Totals by category:")
    for category, total in totals.items():
        print(f"    {category:<20} {money_fmt(total):>12}")
