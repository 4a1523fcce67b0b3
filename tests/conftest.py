"""
Pytest configuration and fixtures for the expense tracker model tests.

This module provides:
- Settings isolation between tests
- Factory helpers for transactions
- Recording listeners that capture notifications
- Model and application context fixtures
"""

from datetime import datetime
from decimal import Decimal
from typing import Callable, Optional

import pytest
import pytz

from expense_tracker.app_context import AppContext
from expense_tracker.config.settings import Settings, reset_settings
from expense_tracker.domain.models import Category, ListenerErrorPolicy, Transaction
from expense_tracker.model import ExpenseTrackerModel


# =============================================================================
# TIME HELPERS
# =============================================================================


EASTERN_TZ = pytz.timezone("US/Eastern")


def eastern_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 10,
    minute: int = 0,
) -> datetime:
    """Create a timezone-aware datetime in US/Eastern."""
    return EASTERN_TZ.localize(datetime(year, month, day, hour, minute))


@pytest.fixture
def fixed_now() -> datetime:
    return eastern_datetime(2024, 6, 15, 12, 0)


# =============================================================================
# SETTINGS
# =============================================================================


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Start every test from default settings, ignoring the environment."""
    monkeypatch.delenv("EXPENSE_TRACKER_LISTENER_ERROR_POLICY", raising=False)
    monkeypatch.delenv("EXPENSE_TRACKER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("EXPENSE_TRACKER_TIMEZONE", raising=False)
    reset_settings()
    yield
    reset_settings()


# =============================================================================
# LISTENERS
# =============================================================================


class RecordingListener:
    """Listener that records every model it is notified with."""

    def __init__(self, name: str, journal: Optional[list] = None):
        self.name = name
        self.calls: list[ExpenseTrackerModel] = []
        # Shared journal lets tests check ordering across listeners
        self.journal = journal if journal is not None else []

    def update(self, model: ExpenseTrackerModel) -> None:
        self.calls.append(model)
        self.journal.append(self.name)

    def __repr__(self) -> str:
        return f"RecordingListener({self.name!r})"


class FailingListener(RecordingListener):
    """Listener that records the call and then raises."""

    def update(self, model: ExpenseTrackerModel) -> None:
        super().update(model)
        raise RuntimeError(f"{self.name} failed")


@pytest.fixture
def journal() -> list:
    return []


@pytest.fixture
def listener_factory(journal) -> Callable[..., RecordingListener]:
    def _create(name: str, failing: bool = False) -> RecordingListener:
        cls = FailingListener if failing else RecordingListener
        return cls(name, journal)

    return _create


# =============================================================================
# TRANSACTIONS
# =============================================================================


@pytest.fixture
def transaction_factory(fixed_now) -> Callable[..., Transaction]:
    def _create(
        amount: str = "10.00",
        category: Category = Category.FOOD,
        timestamp: Optional[datetime] = None,
        note: Optional[str] = None,
    ) -> Transaction:
        return Transaction(
            amount=Decimal(amount),
            category=category,
            timestamp=timestamp or fixed_now,
            note=note,
        )

    return _create


# =============================================================================
# MODEL
# =============================================================================


@pytest.fixture
def model() -> ExpenseTrackerModel:
    return ExpenseTrackerModel(listener_error_policy=ListenerErrorPolicy.PROPAGATE)


@pytest.fixture
def populated_model(model, transaction_factory) -> ExpenseTrackerModel:
    """Model holding three distinct transactions."""
    model.add_transaction(transaction_factory("5.00", Category.FOOD))
    model.add_transaction(transaction_factory("120.00", Category.TRAVEL))
    model.add_transaction(transaction_factory("60.50", Category.BILLS))
    return model


@pytest.fixture
def app_context() -> AppContext:
    return AppContext(settings=Settings())
