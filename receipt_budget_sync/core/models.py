"""
Data models for receipt line items and budget transactions.
"""

from dataclasses import dataclass, asdict, replace
from decimal import Decimal
from typing import Optional

UNCATEGORIZED = "uncategorized"


@dataclass(frozen=True)
class LineItem:
    """One (description, amount) pair parsed from receipt text."""
    description: str
    amount: Decimal
    category: str = UNCATEGORIZED
    source_file: str = ""

    def with_category(self, category: str) -> "LineItem":
        return replace(self, category=category)

    def to_dict(self):
        """Convert to dictionary."""
        d = asdict(self)
        d["amount"] = str(self.amount)
        return d


@dataclass(frozen=True)
class Transaction:
    """A transaction in the shape the YNAB API accepts."""
    account_id: str
    date: str
    amount: int
    payee_name: str
    category_id: Optional[str]
    memo: str = "Imported from receipt"
    cleared: str = "cleared"
    approved: bool = True

    def to_dict(self):
        """Convert to dictionary."""
        return asdict(self)


@dataclass(frozen=True)
class Credentials:
    """YNAB API credentials, loaded once per run."""
    access_token: str
    budget_id: str
    account_id: str

    def __repr__(self):
        return (f"Credentials(access_token='***', budget_id={self.budget_id!r}, "
                f"account_id={self.account_id!r})")
