"""Framework-agnostic business services for the expense ledger."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional, Tuple

from .analytics import analyze
from .categories import CATEGORIES
from .filters import DateInput, filter_expenses
from .models import Expense, PeriodSummary, SpendingAnalysis
from .store import LedgerStore
from .summary import scheduled_summary
from .validators import validate_expense

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExpenseService:
    """Records expenses and answers listing, analysis and summary queries."""

    def __init__(self, store: Optional[LedgerStore] = None, clock: Clock = utcnow) -> None:
        self._store = store if store is not None else LedgerStore()
        self._clock = clock

    # Public API -----------------------------------------------------------
    def create_expense(self, payload: Dict[str, object]) -> Expense:
        data = validate_expense(payload)
        expense = self._store.append(data["category"], data["amount"], data["date"])  # type: ignore[arg-type]
        logger.info("Recorded %s expense %s", expense.category, expense.id)
        return expense

    def list_expenses(
        self,
        category: Optional[str] = None,
        start_date: DateInput = None,
        end_date: DateInput = None,
    ) -> List[Expense]:
        return filter_expenses(self._store.all(), category, start_date, end_date)

    def analyze(
        self,
        category: Optional[str] = None,
        start_date: DateInput = None,
        end_date: DateInput = None,
    ) -> SpendingAnalysis:
        """Aggregate the whole ledger, or the subset selected by the filters."""
        return analyze(self.list_expenses(category, start_date, end_date))

    def summary(self, period: str) -> PeriodSummary:
        result = scheduled_summary(self._store.all(), period, self._clock())
        logger.debug("Computed %s summary over %d expenses", period, result.count)
        return result

    def categories(self) -> Tuple[str, ...]:
        return CATEGORIES

    @property
    def store(self) -> LedgerStore:
        return self._store

    @property
    def clock(self) -> Clock:
        return self._clock
