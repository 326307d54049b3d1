"""Wall-clock triggers for the weekly and monthly spending summaries."""

from __future__ import annotations

import logging
import threading
from datetime import datetime, timedelta
from typing import Callable, Dict, Optional

from .models import PeriodSummary, to_utc
from .services import Clock, ExpenseService
from .summary import PERIODS, period_start

logger = logging.getLogger(__name__)

SummarySink = Callable[[PeriodSummary], None]


def log_summary(summary: PeriodSummary) -> None:
    """Default reporting sink: one INFO line per summary."""
    label = "Weekly" if summary.period == "week" else "Monthly"
    logger.info("%s Summary: %s", label, summary.to_dict())


def next_trigger(period: str, now: datetime) -> datetime:
    """Return the first trigger instant strictly after ``now``.

    Weekly summaries fire on Sunday at 00:00, monthly ones on the 1st at 00:00.
    """
    start = period_start(period, now)
    if period == "week":
        return start + timedelta(days=7)
    if start.month == 12:
        return start.replace(year=start.year + 1, month=1)
    return start.replace(month=start.month + 1)


class SummaryScheduler:
    """Fires ``ExpenseService.summary`` at each weekly and monthly trigger.

    One daemon ``threading.Timer`` is armed per period and re-armed after it
    fires. Summaries are handed to ``sink`` and are not stored anywhere.
    """

    def __init__(
        self,
        service: ExpenseService,
        sink: Optional[SummarySink] = None,
        clock: Optional[Clock] = None,
    ) -> None:
        self._service = service
        self._sink = sink or log_summary
        self._clock = clock or service.clock
        self._timers: Dict[str, threading.Timer] = {}
        self._lock = threading.Lock()
        self._running = False

    def run(self, period: str) -> PeriodSummary:
        summary = self._service.summary(period)
        self._sink(summary)
        return summary

    def start(self) -> None:
        with self._lock:
            if self._running:
                return
            self._running = True
            now = to_utc(self._clock())
            for period in PERIODS:
                self._arm(period, next_trigger(period, now), now)
        logger.info("Summary scheduler started")

    def stop(self) -> None:
        with self._lock:
            self._running = False
            timers = list(self._timers.values())
            self._timers.clear()
        for timer in timers:
            timer.cancel()
        logger.info("Summary scheduler stopped")

    @property
    def running(self) -> bool:
        return self._running

    def next_run(self, period: str) -> datetime:
        return next_trigger(period, self._clock())

    # Internal helpers -----------------------------------------------------
    def _arm(self, period: str, trigger_at: datetime, now: datetime) -> None:
        delay = max((trigger_at - now).total_seconds(), 0.0)
        timer = threading.Timer(delay, self._fire, args=(period, trigger_at))
        timer.daemon = True
        self._timers[period] = timer
        timer.start()
        logger.debug("Next %s summary at %s", period, trigger_at.isoformat())

    def _fire(self, period: str, trigger_at: datetime) -> None:
        try:
            self.run(period)
        finally:
            with self._lock:
                if self._running:
                    now = to_utc(self._clock())
                    # Re-arm from the trigger itself so an early wake-up cannot fire twice.
                    self._arm(period, next_trigger(period, max(now, trigger_at)), now)
