#!/usr/bin/env python3
"""
Main CLI entrypoint for receipt budget sync.
"""

import argparse
import os
import sys
from pathlib import Path

from receipt_budget_sync.core.utils import CREDENTIALS_FILE, RECEIPTS_DIR, RULES_FILE, DEFAULT_TIMEOUT
from receipt_budget_sync.core.config import (load_credentials, check_receipts_dir,
                                             CredentialsError, ReceiptsDirError, RulesError)
from receipt_budget_sync.core.categorization import load_rules
from receipt_budget_sync.core.processor import ReceiptProcessor
from receipt_budget_sync.core.reporting import print_summary, write_csv


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="OCR receipt images, categorize line items and optionally add them to YNAB",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Parse and categorize receipts in ./receipts (nothing is sent)
  receipt-sync

  # Also post the transactions to YNAB
  receipt-sync --submit

  # Custom locations, with a CSV export
  receipt-sync --receipts ./scans --credentials ./ynab.txt --csv items.csv
        """
    )
    parser.add_argument("--receipts",
                       help=f"Folder with receipt images (default: ./{RECEIPTS_DIR}, or RECEIPTS_DIR env var)")
    parser.add_argument("--credentials",
                       help=f"Credentials file: token, budget id, account id "
                            f"(default: ./{CREDENTIALS_FILE}, or YNAB_CREDENTIALS_FILE env var)")
    parser.add_argument("--rules", default=f"./{RULES_FILE}",
                       help=f"{RULES_FILE} with category keywords and YNAB category ids (default: ./{RULES_FILE})")
    parser.add_argument("--submit", action="store_true",
                       help="Post parsed transactions to YNAB")
    parser.add_argument("--timeout", type=float,
                       help=f"HTTP timeout in seconds (default: {DEFAULT_TIMEOUT:g}, or YNAB_TIMEOUT env var)")
    parser.add_argument("--csv",
                       help="Also write parsed line items to this CSV file")
    parser.add_argument("--verbose", "-v", action="store_true",
                       help="Show detailed parsing information for debugging")
    return parser


def main(argv=None):
    """Main CLI entrypoint."""
    args = build_parser().parse_args(argv)

    receipts_dir = Path(args.receipts or os.getenv("RECEIPTS_DIR", RECEIPTS_DIR))
    credentials_file = Path(args.credentials or os.getenv("YNAB_CREDENTIALS_FILE", CREDENTIALS_FILE))

    timeout = args.timeout
    if timeout is None:
        try:
            timeout = float(os.getenv("YNAB_TIMEOUT", DEFAULT_TIMEOUT))
        except ValueError:
            print(f"[ERROR] Invalid YNAB_TIMEOUT: {os.getenv('YNAB_TIMEOUT')}")
            return 1

    try:
        credentials = load_credentials(credentials_file)
        check_receipts_dir(receipts_dir)
        rules = load_rules(Path(args.rules))
    except (CredentialsError, ReceiptsDirError, RulesError) as e:
        print(f"[ERROR] {e}")
        return 1

    print(f"[INFO] Using {len(rules['categories'])} category rule(s)")
    if args.submit:
        print(f"[INFO] Submitting to YNAB budget {credentials.budget_id}")
    else:
        print("[INFO] Dry run: transactions will not be sent to YNAB (use --submit)")

    processor = ReceiptProcessor(
        receipts_dir=receipts_dir,
        credentials=credentials,
        rules=rules["categories"],
        category_ids=rules["category_ids"],
        submit=args.submit,
        timeout=timeout,
        verbose=args.verbose,
    )

    try:
        result = processor.process_all()
    except ReceiptsDirError as e:
        print(f"[ERROR] {e}")
        return 1

    print_summary(result.items)

    if args.csv:
        out_csv = Path(args.csv)
        write_csv(result.items, out_csv)
        print(f"[OK] Wrote {out_csv}")

    print(f"[OK] Processed {len(result.processed)} receipt(s), {len(result.failed)} failed")
    if args.submit:
        print(f"[OK] Submitted {result.submitted} transaction(s) to YNAB")
        if result.submit_failed:
            print(f"[WARN] Not submitted: {', '.join(result.submit_failed)}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
