"""Data models for the expense ledger domain."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime, timezone
from decimal import Decimal
from typing import Any, Dict

from dateutil import parser as date_parser

__all__ = [
    "CategoryAmount",
    "Expense",
    "PeriodSummary",
    "SpendingAnalysis",
    "isoformat_utc",
    "parse_datetime",
    "to_utc",
]

# Components missing from a parsed string are taken from here rather than today.
_PARSE_DEFAULT = datetime(1970, 1, 1)
_ALT_PARSE_DEFAULT = datetime(1971, 1, 1)


def isoformat_utc(dt: datetime) -> str:
    """Return an ISO 8601 string with trailing Z for UTC-aware datetimes."""
    iso = to_utc(dt).isoformat(timespec="milliseconds")
    # datetime.isoformat renders +00:00 for UTC; replace with the shorter Z form.
    return iso.replace("+00:00", "Z")


def to_utc(value: date) -> datetime:
    """Normalise a date or datetime into a UTC-aware datetime."""
    if not isinstance(value, datetime):
        value = datetime(value.year, value.month, value.day)
    if value.tzinfo is None:
        # Treat naive datetimes as UTC to avoid accidental timezone drift.
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def parse_datetime(value: str) -> datetime:
    """Parse a free-form date string into a UTC-aware datetime.

    Raises ``ValueError`` when the string does not describe a valid calendar
    date (including out-of-range components such as ``2024-02-30``), names no
    year, or falls outside the range UTC datetimes can represent.
    """
    text = value.strip()
    try:
        dt = date_parser.parse(text, default=_PARSE_DEFAULT)
        # A string without a year takes it from the default; a second default
        # exposes that.
        if date_parser.parse(text, default=_ALT_PARSE_DEFAULT).year != dt.year:
            raise ValueError(f"Date has no year: {value!r}")
        return to_utc(dt)
    except OverflowError as exc:
        raise ValueError(f"Date out of range: {value!r}") from exc


def _number(amount: Decimal) -> Any:
    """Render a Decimal as a JSON number, keeping integral amounts integral."""
    if amount == amount.to_integral_value():
        return int(amount)
    return float(amount)


@dataclass(frozen=True)
class Expense:
    id: str
    category: str
    amount: Decimal
    date: datetime

    def to_dict(self) -> Dict[str, Any]:
        """Serialise the expense to JSON-friendly natives."""
        return {
            "id": self.id,
            "category": self.category,
            "amount": _number(self.amount),
            "date": isoformat_utc(self.date),
        }


@dataclass(frozen=True)
class CategoryAmount:
    category: str
    amount: Decimal

    def to_dict(self) -> Dict[str, Any]:
        return {"category": self.category, "amount": _number(self.amount)}


@dataclass(frozen=True)
class SpendingAnalysis:
    """Aggregate statistics over a sequence of expenses."""

    category_totals: Dict[str, Decimal] = field(default_factory=dict)
    highest_spending_category: CategoryAmount = field(
        default_factory=lambda: CategoryAmount("", Decimal("0"))
    )
    monthly_totals: Dict[str, Decimal] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "categoryTotals": {
                name: _number(total) for name, total in self.category_totals.items()
            },
            "highestSpendingCategory": self.highest_spending_category.to_dict(),
            "monthlyTotals": {
                key: _number(total) for key, total in self.monthly_totals.items()
            },
        }


@dataclass(frozen=True)
class PeriodSummary:
    period: str
    total: Decimal
    count: int

    def to_dict(self) -> Dict[str, Any]:
        return {"period": self.period, "total": _number(self.total), "count": self.count}
