"""
Startup configuration: YNAB credentials and the receipts directory.
"""

from pathlib import Path

from .models import Credentials


class CredentialsError(Exception):
    """Credentials file is missing or malformed."""


class ReceiptsDirError(Exception):
    """Receipts directory is missing or unreadable."""


class RulesError(Exception):
    """Rules file is not valid JSON or has the wrong shape."""


def load_credentials(path: Path) -> Credentials:
    """
    Load YNAB credentials from a plain text file.

    Line 1 is the access token, line 2 the budget id, line 3 the account id.
    """
    path = Path(path)
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as e:
        raise CredentialsError(f"failed to read credentials file {path}: {e}") from e

    lines = [ln.strip() for ln in content.splitlines()]
    if len(lines) < 3 or not all(lines[:3]):
        raise CredentialsError(
            f"credentials file {path} should contain at least three lines: "
            "YNAB_ACCESS_TOKEN, BUDGET_ID, ACCOUNT_ID"
        )

    return Credentials(access_token=lines[0], budget_id=lines[1], account_id=lines[2])


def check_receipts_dir(path: Path) -> Path:
    """Make sure the receipts directory exists and can be listed."""
    path = Path(path)
    if not path.is_dir():
        raise ReceiptsDirError(f"failed to read receipts folder {path}: not a directory")
    try:
        next(path.iterdir(), None)
    except OSError as e:
        raise ReceiptsDirError(f"failed to read receipts folder {path}: {e}") from e
    return path
