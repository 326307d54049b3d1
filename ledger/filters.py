"""Category and date-range filtering over sequences of expenses."""

from __future__ import annotations

from datetime import date, datetime
from typing import Iterable, List, Optional, Tuple, Union

from .categories import is_registered_category
from .exceptions import InvalidRangeError
from .models import Expense, parse_datetime, to_utc

__all__ = ["expenses_since", "filter_expenses", "parse_date_range"]

DateInput = Union[str, date, None]


def _parse_bound(value: Union[str, date]) -> datetime:
    if not isinstance(value, (str, date)):
        raise InvalidRangeError(f"Invalid date range bound: {value!r}")
    try:
        if isinstance(value, date):
            return to_utc(value)
        return parse_datetime(value)
    except (OverflowError, ValueError) as exc:
        raise InvalidRangeError(f"Invalid date range bound: {value!r}") from exc


def parse_date_range(
    start_date: DateInput, end_date: DateInput
) -> Optional[Tuple[datetime, datetime]]:
    """Parse an inclusive ``(start, end)`` pair.

    Returns ``None`` unless both bounds are supplied; a range with only one
    bound does not filter at all.
    """
    if not start_date or not end_date:
        return None
    return _parse_bound(start_date), _parse_bound(end_date)


def filter_expenses(
    expenses: Iterable[Expense],
    category: Optional[str] = None,
    start_date: DateInput = None,
    end_date: DateInput = None,
) -> List[Expense]:
    """Return the expenses matching every supplied filter, order preserved.

    An unregistered ``category`` is ignored rather than matching nothing.
    """
    # Parse bounds before scanning so a bad range fails even on an empty ledger.
    date_range = parse_date_range(start_date, end_date)
    wanted = category if category and is_registered_category(category) else None

    def matches(expense: Expense) -> bool:
        if wanted is not None and expense.category != wanted:
            return False
        if date_range is not None:
            start, end = date_range
            if not start <= expense.date <= end:
                return False
        return True

    return list(filter(matches, expenses))


def expenses_since(expenses: Iterable[Expense], start: datetime) -> List[Expense]:
    """Return expenses dated at or after ``start`` with no upper bound."""
    start = to_utc(start)
    return [expense for expense in expenses if expense.date >= start]
