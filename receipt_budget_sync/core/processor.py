"""
Main receipt processing orchestration.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Tuple

from .config import ReceiptsDirError
from .models import Credentials, LineItem
from .utils import DEFAULT_TIMEOUT, money_fmt, today_iso
from .ocr import ocr_receipt
from .parsers import parse_line_items, parse_date
from .categorization import categorize_items, CategoryRule, DEFAULT_CATEGORY_RULES
from .ynab import submit_transactions


@dataclass
class ProcessingResult:
    """Outcome of a run over the receipts directory."""
    items: List[LineItem] = field(default_factory=list)
    processed: List[str] = field(default_factory=list)
    failed: List[str] = field(default_factory=list)
    submit_failed: List[str] = field(default_factory=list)
    submitted: int = 0


class ReceiptProcessor:
    """Sequential OCR, parsing, categorization and submission of receipts."""

    def __init__(self, receipts_dir: Path, credentials: Optional[Credentials] = None,
                 rules: Optional[Sequence[CategoryRule]] = None,
                 category_ids: Optional[Dict[str, str]] = None,
                 submit: bool = False,
                 timeout: float = DEFAULT_TIMEOUT,
                 verbose: bool = False):
        """
        Initialize receipt processor.

        Args:
            receipts_dir: Directory with receipt files
            credentials: YNAB credentials (required when submit is set)
            rules: Ordered (category, keywords) pairs
            category_ids: Map from category label to YNAB category id
            submit: Whether to post transactions to YNAB
            timeout: HTTP timeout in seconds for submissions
            verbose: Whether to show verbose debugging output
        """
        if submit and credentials is None:
            raise ValueError("credentials are required to submit transactions")
        self.receipts_dir = receipts_dir
        self.credentials = credentials
        self.rules = rules if rules is not None else DEFAULT_CATEGORY_RULES
        self.category_ids = category_ids or {}
        self.submit = submit
        self.timeout = timeout
        self.verbose = verbose

    def discover_files(self) -> List[Path]:
        """List files in the receipts directory, sorted by name; subdirectories are skipped."""
        try:
            entries = sorted(self.receipts_dir.iterdir(), key=lambda p: p.name)
        except OSError as e:
            raise ReceiptsDirError(f"failed to read receipts folder {self.receipts_dir}: {e}") from e

        files = [p for p in entries if not p.is_dir()]
        print(f"[INFO] Found {len(files)} file(s) in {self.receipts_dir}")
        return files

    def process_file(self, path: Path) -> Tuple[str, List[LineItem]]:
        """
        OCR and parse a single receipt file.

        Returns:
            Tuple of (ocr_text, categorized line items)
        """
        print(f"[INFO] Processing {path.name}")

        text = ocr_receipt(path)
        items = categorize_items(parse_line_items(text, source_file=path.name), self.rules)

        if self.verbose:
            print(f"  [DEBUG] {len(items)} line item(s)")
            for item in items:
                print(f"  [DEBUG] {item.description!r} {money_fmt(item.amount)} -> {item.category}")
            if not items:
                print(f"  [DEBUG] First 5 lines of OCR text:")
                for i, line in enumerate(text.splitlines()[:5], 1):
                    print(f"    {i}: {line[:80]}")

        return text, items

    def submit_file(self, text: str, items: List[LineItem]) -> int:
        """Send one receipt's items to YNAB, dated from the receipt when possible."""
        if not items:
            return 0
        date = parse_date(text) or today_iso()
        sent = submit_transactions(items, self.credentials, date,
                                   category_ids=self.category_ids,
                                   timeout=self.timeout)
        print(f"  [OK] Submitted {sent} transaction(s) dated {date}")
        return sent

    def process_all(self) -> ProcessingResult:
        """
        Process every receipt.

        A receipt that can't be read is logged and skipped. A receipt whose
        submission fails keeps its parsed items and is listed in submit_failed.
        """
        result = ProcessingResult()
        files = self.discover_files()
        if not files:
            print("No receipt files found.")
            return result

        for file_path in files:
            try:
                text, items = self.process_file(file_path)
            except Exception as e:
                print(f"[ERROR] Failed {file_path.name}: {e}")
                result.failed.append(file_path.name)
                continue
            result.items.extend(items)
            result.processed.append(file_path.name)

            if not self.submit:
                continue
            try:
                result.submitted += self.submit_file(text, items)
            except Exception as e:
                print(f"[ERROR] Failed to submit {file_path.name}: {e}")
                result.submit_failed.append(file_path.name)

        return result
