"""Pytest configuration and shared fixtures for Furfolio tests.

This module provides database fixtures, record factories and helper utilities
for testing the history, reporting and repository layers without touching a
real application database.
"""

from __future__ import annotations

import logging
import tempfile
from datetime import datetime
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from furfolio.infra.database import create_session_factory
from furfolio.infra.repositories import SQLModelChargeRepository, SQLModelExpenseRepository
from furfolio.models import Charge, Expense, PaymentMethod


@pytest.fixture(autouse=True)
def isolated_environment(tmp_path, monkeypatch):
    """Point configuration at a throwaway data directory for every test."""

    monkeypatch.setenv("FURFOLIO_DATA_DIR", str(tmp_path / "instance"))
    monkeypatch.delenv("FURFOLIO_DATABASE_URL", raising=False)
    monkeypatch.delenv("FURFOLIO_WEEK_START", raising=False)
    monkeypatch.delenv("FURFOLIO_AUDIT_CAPACITY", raising=False)
    yield
    # setup_logging attaches file handlers; release them so tmp dirs can go
    root = logging.getLogger("furfolio")
    for handler in list(root.handlers):
        root.removeHandler(handler)
        handler.close()


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Transactional session scopes bound to the test database."""

    return create_session_factory(db_engine)


@pytest.fixture
def charge_repo(session_factory) -> SQLModelChargeRepository:
    return SQLModelChargeRepository(session_factory)


@pytest.fixture
def expense_repo(session_factory) -> SQLModelExpenseRepository:
    return SQLModelExpenseRepository(session_factory)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def charge_factory():
    """Factory for building (unsaved) charges.

    Returns:
        Callable: Function that creates Charge instances with sensible defaults
    """

    def _create_charge(
        amount: float = 75.0,
        charge_type: str = "Full Package",
        occurred_at: datetime | None = None,
        payment_method: PaymentMethod = PaymentMethod.CASH,
        owner_id: int | None = None,
        dog_id: int | None = None,
        notes: str | None = None,
        id: int | None = None,
    ) -> Charge:
        """Create a charge.

        Args:
            amount: Non-negative amount charged
            charge_type: Service label used for grouping
            occurred_at: Charge timestamp (defaults to 2025-03-12 10:00)
            payment_method: How the charge was settled
        """
        return Charge(
            id=id,
            amount=amount,
            charge_type=charge_type,
            occurred_at=occurred_at or datetime(2025, 3, 12, 10, 0),
            payment_method=payment_method,
            owner_id=owner_id,
            dog_id=dog_id,
            notes=notes,
        )

    return _create_charge


@pytest.fixture
def expense_factory():
    """Factory for building (unsaved) expenses."""

    def _create_expense(
        amount: float = 20.0,
        category: str = "Supplies",
        occurred_at: datetime | None = None,
        memo: str = "",
    ) -> Expense:
        return Expense(
            amount=amount,
            category=category,
            occurred_at=occurred_at or datetime(2025, 3, 12, 9, 0),
            memo=memo,
        )

    return _create_expense
