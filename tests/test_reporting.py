"""Tests for console and CSV reporting."""

import csv
from decimal import Decimal

from receipt_budget_sync.core.models import LineItem
from receipt_budget_sync.core.reporting import category_totals, print_summary, write_csv

ITEMS = [
    LineItem("Whole Foods", Decimal("23.45"), "groceries", "r1.png"),
    LineItem("Walmart", Decimal("10.00"), "groceries", "r2.png"),
    LineItem("Cafe Luna", Decimal("12.50"), "dining", "r2.png"),
]


def test_category_totals() -> None:
    assert category_totals(ITEMS) == {"groceries": Decimal("33.45"), "dining": Decimal("12.50")}


def test_write_csv(tmp_path) -> None:
    out = tmp_path / "items.csv"
    write_csv(ITEMS, out)
    with out.open(newline="", encoding="utf-8") as f:
        rows = list(csv.DictReader(f))
    assert rows[0] == {"source_file": "r1.png", "description": "Whole Foods",
                       "amount": "23.45", "category": "groceries"}
    assert len(rows) == 3


def test_print_summary(capsys) -> None:
    print_summary(ITEMS)
    out = capsys.readouterr().out
    assert "[INFO] r1.png:" in out
    assert "$33.45" in out
    assert "Cafe Luna" in out


def test_print_summary_empty(capsys) -> None:
    print_summary([])
    assert capsys.readouterr().out == ""
