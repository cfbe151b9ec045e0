"""
Receipt Budget Sync

A local, scriptable utility that OCRs a folder of receipt images, categorizes
the line items it finds and optionally adds them to a YNAB budget.
"""

__version__ = "1.0.0"
__author__ = "Receipt Budget Sync Contributors"

from receipt_budget_sync.core.models import LineItem, Transaction, Credentials

__all__ = ["LineItem", "Transaction", "Credentials"]
