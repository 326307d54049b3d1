"""In-memory, append-only storage for expense records."""

from __future__ import annotations

import logging
import threading
from datetime import date
from decimal import Decimal
from typing import List, Tuple
from uuid import uuid4

from .models import Expense, to_utc

logger = logging.getLogger(__name__)


class LedgerStore:
    """Insertion-ordered collection of validated expenses.

    Records are never updated or removed. ``append`` and ``all`` share a single
    lock so the store can sit behind a threaded server and the summary timer.
    """

    def __init__(self) -> None:
        self._expenses: List[Expense] = []
        self._lock = threading.RLock()

    def append(self, category: str, amount: Decimal, date: date) -> Expense:
        expense = Expense(
            id=str(uuid4()),
            category=category,
            amount=amount,
            date=to_utc(date),
        )
        with self._lock:
            self._expenses.append(expense)
            size = len(self._expenses)
        logger.debug("Stored expense %s (ledger size %d)", expense.id, size)
        return expense

    def all(self) -> Tuple[Expense, ...]:
        """Return a snapshot of every stored expense in insertion order."""
        with self._lock:
            return tuple(self._expenses)

    def __len__(self) -> int:
        with self._lock:
            return len(self._expenses)
