"""Period summaries computed for the weekly and monthly reports."""

from __future__ import annotations

from datetime import datetime, timedelta
from decimal import Decimal
from typing import Iterable

from .filters import expenses_since
from .models import Expense, PeriodSummary, to_utc

__all__ = ["PERIODS", "period_start", "scheduled_summary"]

PERIODS = ("week", "month")


def period_start(period: str, now: datetime) -> datetime:
    """Return the UTC instant at which ``period`` began relative to ``now``.

    ``week`` anchors on the most recent Sunday at midnight (today when ``now``
    is a Sunday); ``month`` anchors on the first of the current month.
    """
    now = to_utc(now)
    midnight = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if period == "week":
        # datetime.weekday() counts from Monday; shift so Sunday is 0.
        days_since_sunday = (now.weekday() + 1) % 7
        return midnight - timedelta(days=days_since_sunday)
    if period == "month":
        return midnight.replace(day=1)
    raise ValueError(f"period must be one of: {', '.join(PERIODS)}")


def scheduled_summary(expenses: Iterable[Expense], period: str, now: datetime) -> PeriodSummary:
    """Total and count every expense dated since the start of ``period``."""
    selected = expenses_since(expenses, period_start(period, now))
    total = sum((expense.amount for expense in selected), start=Decimal("0"))
    return PeriodSummary(period=period, total=total, count=len(selected))
