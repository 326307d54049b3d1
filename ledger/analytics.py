"""Spending aggregation over ordered sequences of expenses.

Every mapping returned here is keyed in first-seen order of the scanned
sequence, never alphabetically or by registry position.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Dict, Iterable, Mapping, Sequence, Union

from .models import CategoryAmount, Expense, SpendingAnalysis

__all__ = [
    "analyze",
    "category_totals",
    "highest_spending_category",
    "month_year_key",
    "monthly_totals",
]


def month_year_key(expense: Expense) -> str:
    """Bucket key such as ``"1-2024"``: unpadded month, then full year."""
    return f"{expense.date.month}-{expense.date.year}"


def category_totals(expenses: Iterable[Expense]) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = {}
    for expense in expenses:
        totals[expense.category] = totals.get(expense.category, Decimal("0")) + expense.amount
    return totals


def highest_spending_category(
    source: Union[Mapping[str, Decimal], Sequence[Expense]],
) -> CategoryAmount:
    """Return the category with the strictly greatest total.

    Accepts either precomputed totals or raw expenses. On a tie the category
    encountered first keeps the lead; with no data the result is ``("", 0)``.
    """
    totals = source if isinstance(source, Mapping) else category_totals(source)
    leader = CategoryAmount("", Decimal("0"))
    for name, total in totals.items():
        if total > leader.amount:
            leader = CategoryAmount(name, total)
    return leader


def monthly_totals(expenses: Iterable[Expense]) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = {}
    for expense in expenses:
        key = month_year_key(expense)
        totals[key] = totals.get(key, Decimal("0")) + expense.amount
    return totals


def analyze(expenses: Sequence[Expense]) -> SpendingAnalysis:
    totals = category_totals(expenses)
    return SpendingAnalysis(
        category_totals=totals,
        highest_spending_category=highest_spending_category(totals),
        monthly_totals=monthly_totals(expenses),
    )
