"""Tests for keyword categorization and rules loading."""

import json
from decimal import Decimal

import pytest

from receipt_budget_sync.core.categorization import (
    DEFAULT_CATEGORY_RULES, categorize, categorize_items, load_rules,
)
from receipt_budget_sync.core.config import RulesError
from receipt_budget_sync.core.models import LineItem


class TestCategorize:
    @pytest.mark.parametrize("description,expected", [
        ("Whole Foods", "groceries"),
        ("WALMART SUPERCENTER", "groceries"),
        ("Cafe Luna", "dining"),
        ("Joe's Diner", "dining"),
        ("Best Buy", "electronics"),
        ("TechMart cable", "electronics"),
        ("Shell gas", "uncategorized"),
        ("", "uncategorized"),
    ])
    def test_default_rules(self, description, expected) -> None:
        assert categorize(description) == expected

    def test_first_configured_category_wins(self) -> None:
        # "tech" (electronics) and "cafe" (dining) both match
        assert categorize("Tech Cafe") == "dining"
        rules = (("electronics", ("tech",)), ("dining", ("cafe",)))
        assert categorize("Tech Cafe", rules) == "electronics"

    def test_uppercase_keywords_still_match(self) -> None:
        assert categorize("corner bookshop", (("books", ("BOOK",)),)) == "books"

    def test_categorize_items(self) -> None:
        items = [LineItem("Whole Foods", Decimal("23.45")), LineItem("Parking", Decimal("5.00"))]
        result = categorize_items(items)
        assert [i.category for i in result] == ["groceries", "uncategorized"]
        assert items[0].category == "uncategorized"


class TestLoadRules:
    def test_missing_file_uses_defaults(self, tmp_path) -> None:
        rules = load_rules(tmp_path / "rules.json")
        assert rules["categories"] == DEFAULT_CATEGORY_RULES
        assert rules["category_ids"] == {}

    def test_load_from_file(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({
            "categories": [
                {"name": "fuel", "keywords": ["Shell", "chevron"]},
                {"name": "empty", "keywords": []},
            ],
            "category_ids": {"fuel": "cat-fuel"},
        }), encoding="utf-8")

        rules = load_rules(path)
        assert rules["categories"] == (("fuel", ("shell", "chevron")),)
        assert rules["category_ids"] == {"fuel": "cat-fuel"}
        assert categorize("SHELL #123", rules["categories"]) == "fuel"

    def test_empty_categories_fall_back_to_defaults(self, tmp_path) -> None:
        path = tmp_path / "rules.json"
        path.write_text(json.dumps({"category_ids": {"dining": "cat-dining"}}), encoding="utf-8")
        rules = load_rules(path)
        assert rules["categories"] == DEFAULT_CATEGORY_RULES
        assert rules["category_ids"] == {"dining": "cat-dining"}

    @pytest.mark.parametrize("content", [
        "{not json",
        '["groceries"]',
        '{"categories": {"name": "fuel"}}',
        '{"categories": ["fuel"]}',
        '{"categories": [{"name": 3, "keywords": ["shell"]}]}',
        '{"categories": [{"name": "fuel", "keywords": [5]}]}',
        '{"categories": [{"name": "fuel", "keywords": "shell"}]}',
        '{"category_ids": {"fuel": 12}}',
    ])
    def test_malformed_file(self, tmp_path, content) -> None:
        path = tmp_path / "rules.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(RulesError):
            load_rules(path)
