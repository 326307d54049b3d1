"""Tests for the spending aggregation engine."""

from datetime import datetime
from decimal import Decimal

from ledger.analytics import (
    analyze,
    category_totals,
    highest_spending_category,
    month_year_key,
    monthly_totals,
)
from ledger.models import CategoryAmount
from ledger.store import LedgerStore


def _ledger(*rows):
    store = LedgerStore()
    for category, amount, when in rows:
        store.append(category, Decimal(str(amount)), when)
    return store.all()


def test_reference_example():
    expenses = _ledger(
        ("Food", 50, datetime(2024, 1, 10)),
        ("Food", 30, datetime(2024, 1, 20)),
        ("Travel", 100, datetime(2024, 2, 5)),
    )
    analysis = analyze(expenses)

    assert analysis.category_totals == {"Food": Decimal("80"), "Travel": Decimal("100")}
    assert analysis.highest_spending_category == CategoryAmount("Travel", Decimal("100"))
    assert analysis.monthly_totals == {"1-2024": Decimal("80"), "2-2024": Decimal("100")}
    assert analysis.to_dict() == {
        "categoryTotals": {"Food": 80, "Travel": 100},
        "highestSpendingCategory": {"category": "Travel", "amount": 100},
        "monthlyTotals": {"1-2024": 80, "2-2024": 100},
    }


def test_category_totals_follow_first_seen_order():
    expenses = _ledger(
        ("Utilities", 1, datetime(2024, 1, 1)),
        ("Education", 2, datetime(2024, 1, 2)),
        ("Food", 3, datetime(2024, 1, 3)),
        ("Education", 4, datetime(2024, 1, 4)),
    )
    assert list(category_totals(expenses)) == ["Utilities", "Education", "Food"]


def test_tie_keeps_first_encountered_category():
    expenses = _ledger(
        ("Health", 50, datetime(2024, 1, 1)),
        ("Food", 50, datetime(2024, 1, 2)),
    )
    assert highest_spending_category(expenses) == CategoryAmount("Health", Decimal("50"))


def test_later_category_must_be_strictly_greater():
    totals = {"Food": Decimal("20"), "Travel": Decimal("20.01"), "Health": Decimal("20.01")}
    assert highest_spending_category(totals).category == "Travel"


def test_monthly_keys_are_unpadded_and_in_encounter_order():
    expenses = _ledger(
        ("Food", 5, datetime(2024, 11, 3)),
        ("Food", 7, datetime(2023, 3, 9)),
        ("Travel", 1.5, datetime(2024, 11, 30)),
    )
    assert month_year_key(expenses[1]) == "3-2023"
    assert monthly_totals(expenses) == {"11-2024": Decimal("6.5"), "3-2023": Decimal("7")}
    assert list(monthly_totals(expenses)) == ["11-2024", "3-2023"]


def test_empty_input():
    analysis = analyze([])
    assert analysis.to_dict() == {
        "categoryTotals": {},
        "highestSpendingCategory": {"category": "", "amount": 0},
        "monthlyTotals": {},
    }
