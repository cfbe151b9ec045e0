"""
Submission of categorized line items to the YNAB transactions API.
"""

from typing import Dict, Iterable, List, Optional

import requests

from .models import Credentials, LineItem, Transaction
from .utils import YNAB_API_BASE, DEFAULT_TIMEOUT, MILLIUNITS_PER_UNIT, to_decimal

SUCCESS_STATUSES = (200, 201)


class SubmissionError(Exception):
    """The YNAB API rejected or never received a transaction batch."""


def to_milliunits(amount) -> int:
    """Convert a currency amount to YNAB's integer milliunits."""
    return int(to_decimal(amount) * MILLIUNITS_PER_UNIT)


def transactions_url(budget_id: str, base_url: str = YNAB_API_BASE) -> str:
    return f"{base_url.rstrip('/')}/budgets/{budget_id}/transactions"


def build_transactions(items: Iterable[LineItem], credentials: Credentials, date: str,
                       category_ids: Optional[Dict[str, str]] = None) -> List[Transaction]:
    """
    Turn line items into YNAB transactions.

    Category labels are looked up in category_ids; labels without a mapping
    are sent without a category so YNAB leaves them for manual review.
    """
    category_ids = category_ids or {}
    return [
        Transaction(
            account_id=credentials.account_id,
            date=date,
            amount=to_milliunits(item.amount),
            payee_name=item.description,
            category_id=category_ids.get(item.category),
        )
        for item in items
    ]


def build_payload(transactions: Iterable[Transaction]) -> Dict:
    return {"transactions": [t.to_dict() for t in transactions]}


def submit_transactions(items: Iterable[LineItem], credentials: Credentials, date: str,
                        category_ids: Optional[Dict[str, str]] = None,
                        timeout: float = DEFAULT_TIMEOUT,
                        base_url: str = YNAB_API_BASE,
                        session: Optional[requests.Session] = None) -> int:
    """
    POST line items to YNAB as one batch.

    Args:
        items: Categorized line items
        credentials: YNAB credentials
        date: Transaction date (YYYY-MM-DD)
        category_ids: Map from category label to YNAB category id
        timeout: Request timeout in seconds
        base_url: API root, overridable for testing
        session: Optional requests session

    Returns:
        Number of transactions sent

    Raises:
        ValueError: An amount could not be converted
        SubmissionError: Transport failure or non-success response
    """
    transactions = build_transactions(items, credentials, date, category_ids)
    if not transactions:
        return 0

    url = transactions_url(credentials.budget_id, base_url)
    headers = {
        "Authorization": f"Bearer {credentials.access_token}",
        "Content-Type": "application/json",
    }
    http = session or requests
    try:
        response = http.post(url, headers=headers, json=build_payload(transactions), timeout=timeout)
    except requests.RequestException as e:
        raise SubmissionError(f"failed to add transactions: {e}") from e

    if response.status_code not in SUCCESS_STATUSES:
        raise SubmissionError(
            f"failed to add transactions (HTTP {response.status_code}): {response.text}"
        )

    return len(transactions)
