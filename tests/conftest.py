"""Shared fixtures for the expense ledger tests."""

from datetime import datetime, timezone

import pytest

from api.app import create_app
from ledger.services import ExpenseService

# A Wednesday: the week began Sunday 2024-02-11, the month on 2024-02-01.
FIXED_NOW = datetime(2024, 2, 14, 15, 30, tzinfo=timezone.utc)


@pytest.fixture
def clock():
    return lambda: FIXED_NOW


@pytest.fixture
def service(clock) -> ExpenseService:
    return ExpenseService(clock=clock)


@pytest.fixture
def app(service):
    app = create_app(service, enable_scheduler=False)
    app.config.update(TESTING=True)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
