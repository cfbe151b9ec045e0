"""
Keyword-based categorization of receipt line items.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Tuple

from .config import RulesError
from .models import LineItem, UNCATEGORIZED

CategoryRule = Tuple[str, Tuple[str, ...]]

# Order matters: when a description hits keywords from several categories,
# the category listed first wins.
DEFAULT_CATEGORY_RULES: Tuple[CategoryRule, ...] = (
    ("groceries", ("walmart", "whole foods", "grocery")),
    ("dining", ("restaurant", "cafe", "diner")),
    ("electronics", ("best buy", "electronics", "tech")),
)


def load_rules(path: Path) -> Dict:
    """
    Load categorization rules from JSON file.

    Expected format:
        {
          "categories": [
            {"name": "groceries", "keywords": ["walmart", "grocery"]},
            {"name": "dining", "keywords": ["cafe"]}
          ],
          "category_ids": {"groceries": "<ynab category id>"}
        }

    Returns:
        Dict with "categories" (ordered rule tuple) and "category_ids"

    Raises:
        RulesError: The file is unreadable, not JSON, or has the wrong shape
    """
    if not path.exists():
        return {"categories": DEFAULT_CATEGORY_RULES, "category_ids": {}}
    try:
        with path.open("r", encoding="utf-8-sig") as f:
            raw = json.load(f)
    except (OSError, ValueError) as e:
        raise RulesError(f"failed to read rules file {path}: {e}") from e

    if not isinstance(raw, dict):
        raise RulesError(f"rules file {path} must contain a JSON object")
    categories = raw.get("categories") or []
    category_ids = raw.get("category_ids") or {}
    if not isinstance(categories, list) or not isinstance(category_ids, dict):
        raise RulesError(f"rules file {path}: \"categories\" must be a list and \"category_ids\" an object")

    rules = []
    for entry in categories:
        if not isinstance(entry, dict):
            raise RulesError(f"rules file {path}: category entries must be objects")
        name = entry.get("name") or ""
        keywords = entry.get("keywords") or []
        if not isinstance(name, str) or not isinstance(keywords, list) \
                or not all(isinstance(k, str) for k in keywords):
            raise RulesError(f"rules file {path}: category names and keywords must be strings")
        name = name.strip()
        keywords = tuple(k.lower() for k in keywords if k)
        if name and keywords:
            rules.append((name, keywords))

    if not all(isinstance(k, str) and isinstance(v, str) for k, v in category_ids.items()):
        raise RulesError(f"rules file {path}: category ids must be strings")

    return {
        "categories": tuple(rules) if rules else DEFAULT_CATEGORY_RULES,
        "category_ids": dict(category_ids),
    }


def categorize(description: str,
               rules: Optional[Sequence[CategoryRule]] = None) -> str:
    """
    Return the category for a line item description.

    The first rule with a keyword contained in the lowercased description
    wins; "uncategorized" when nothing matches.
    """
    if rules is None:
        rules = DEFAULT_CATEGORY_RULES
    d = (description or "").lower()
    for category, keywords in rules:
        for keyword in keywords:
            if keyword.lower() in d:
                return category
    return UNCATEGORIZED


def categorize_items(items: Iterable[LineItem],
                     rules: Optional[Sequence[CategoryRule]] = None) -> List[LineItem]:
    """Assign a category to each line item."""
    return [item.with_category(categorize(item.description, rules)) for item in items]
