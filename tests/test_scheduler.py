"""Tests for the weekly and monthly summary triggers."""

import threading
from datetime import datetime, timedelta, timezone

import pytest

from ledger.scheduler import SummaryScheduler, log_summary, next_trigger
from ledger.services import ExpenseService

UTC = timezone.utc


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2024, 2, 14, 15, 30, tzinfo=UTC), datetime(2024, 2, 18, tzinfo=UTC)),
        (datetime(2024, 2, 17, 23, 59, tzinfo=UTC), datetime(2024, 2, 18, tzinfo=UTC)),
        (datetime(2024, 2, 18, 0, 0, tzinfo=UTC), datetime(2024, 2, 25, tzinfo=UTC)),
    ],
)
def test_next_weekly_trigger_is_next_sunday_midnight(now, expected):
    assert next_trigger("week", now) == expected


@pytest.mark.parametrize(
    "now, expected",
    [
        (datetime(2024, 2, 14, tzinfo=UTC), datetime(2024, 3, 1, tzinfo=UTC)),
        (datetime(2024, 3, 1, 0, 0, tzinfo=UTC), datetime(2024, 4, 1, tzinfo=UTC)),
        (datetime(2024, 12, 31, 22, 0, tzinfo=UTC), datetime(2025, 1, 1, tzinfo=UTC)),
    ],
)
def test_next_monthly_trigger_is_first_of_next_month(now, expected):
    assert next_trigger("month", now) == expected


def test_run_hands_summary_to_sink(service):
    received = []
    scheduler = SummaryScheduler(service, sink=received.append)
    service.create_expense({"category": "Food", "amount": 12, "date": "2024-02-12"})

    summary = scheduler.run("week")

    assert received == [summary]
    assert summary.to_dict() == {"period": "week", "total": 12, "count": 1}


def test_default_sink_logs(caplog, service):
    with caplog.at_level("INFO", logger="ledger.scheduler"):
        log_summary(service.summary("month"))
    assert "Monthly Summary: {'period': 'month', 'total': 0, 'count': 0}" in caplog.text


def test_start_and_stop(service):
    scheduler = SummaryScheduler(service, sink=lambda summary: None)
    scheduler.start()
    try:
        assert scheduler.running
        assert scheduler.next_run("week") == datetime(2024, 2, 18, tzinfo=UTC)
    finally:
        scheduler.stop()
    assert not scheduler.running


def test_timer_fires_at_trigger():
    just_before_sunday = datetime(2024, 2, 18, tzinfo=UTC) - timedelta(milliseconds=50)
    service = ExpenseService(clock=lambda: just_before_sunday)
    fired = threading.Event()
    received = []

    def sink(summary):
        received.append(summary)
        fired.set()

    scheduler = SummaryScheduler(service, sink=sink)
    scheduler.start()
    try:
        assert fired.wait(timeout=5)
    finally:
        scheduler.stop()
    assert received[0].period == "week"
