"""Pytest configuration and shared fixtures for FinLedger tests.

This module provides database fixtures, test data factories, and helper utilities
for testing calculators, repositories and routes without touching the real app database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from decimal import Decimal
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from finledger import create_app

# Import all models to ensure they're registered with SQLModel metadata
from finledger.models import (
    Budget,
    EntrepreneurshipProject,
    ExpenseRecord,
    IncomeRecord,
    ProjectFinancialRecord,
)
from finledger.infra.database import create_session_factory

OWNER_ID = "tester-owner"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated SQLite database file for each test.

    Yields:
        Engine: SQLModel engine connected to test database
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
    """Transactional session factory matching what repositories expect."""
    return create_session_factory(db_engine)


@pytest.fixture
def owner_id() -> str:
    return OWNER_ID


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def income_factory(session_factory):
    """Factory for creating income records.

    Returns:
        Callable: Function that creates and persists IncomeRecord instances
    """

    def _create_income(
        amount: str | int = "1000",
        occurred_on: date = date(2024, 1, 15),
        type: str = "salary",
        category: str = "base",
        owner: str = OWNER_ID,
        is_planned: bool = False,
    ) -> IncomeRecord:
        record = IncomeRecord(
            owner_id=owner,
            type=type,
            category=category,
            amount=Decimal(str(amount)),
            occurred_on=occurred_on,
            is_planned=is_planned,
        )
        with session_factory() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            session.expunge(record)
        return record

    return _create_income


@pytest.fixture
def expense_factory(session_factory):
    """Factory for creating expense records."""

    def _create_expense(
        amount: str | int = "100",
        occurred_on: date = date(2024, 1, 20),
        category: str = "living",
        owner: str = OWNER_ID,
        description: str | None = None,
    ) -> ExpenseRecord:
        record = ExpenseRecord(
            owner_id=owner,
            category=category,
            amount=Decimal(str(amount)),
            occurred_on=occurred_on,
            description=description,
        )
        with session_factory() as session:
            session.add(record)
            session.commit()
            session.refresh(record)
            session.expunge(record)
        return record

    return _create_expense


@pytest.fixture
def budget_factory(session_factory):
    def _create_budget(
        category: str = "living",
        amount: str | int = "500",
        period: str = "monthly",
        owner: str = OWNER_ID,
    ) -> Budget:
        budget = Budget(owner_id=owner, category=category, amount=Decimal(str(amount)), period=period)
        with session_factory() as session:
            session.add(budget)
            session.commit()
            session.refresh(budget)
            session.expunge(budget)
        return budget

    return _create_budget


@pytest.fixture
def project_factory(session_factory):
    """Factory for creating a project, optionally with ledger rows.

    ``records`` is a list of ``(type, category, amount, is_planned)`` tuples.
    """

    def _create_project(
        name: str = "Side hustle",
        owner: str = OWNER_ID,
        start_date: date = date(2024, 1, 1),
        records: list[tuple[str, str, str, bool]] | None = None,
    ) -> EntrepreneurshipProject:
        project = EntrepreneurshipProject(owner_id=owner, name=name, start_date=start_date)
        with session_factory() as session:
            session.add(project)
            session.flush()
            for record_type, category, amount, is_planned in records or []:
                session.add(
                    ProjectFinancialRecord(
                        project_id=project.id,
                        type=record_type,
                        category=category,
                        amount=Decimal(amount),
                        occurred_on=start_date,
                        is_planned=is_planned,
                    )
                )
            session.commit()
            session.refresh(project)
            session.expunge(project)
        return project

    return _create_project


# =============================================================================
# Flask Fixtures
# =============================================================================


@pytest.fixture()
def app(tmp_path, monkeypatch: pytest.MonkeyPatch):
    db_path = tmp_path / "finledger.db"
    monkeypatch.setenv("FINLEDGER_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FINLEDGER_DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.delenv("FINLEDGER_DEMO_USER_ID", raising=False)
    monkeypatch.delenv("FINLEDGER_DEFAULT_MONTHLY_INCOME", raising=False)
    return create_app("testing")


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client


# =============================================================================
# Helper Utilities
# =============================================================================


def assert_float_equal(actual: float, expected: float, tolerance: float = 0.01):
    """Assert that two floats are equal within a tolerance.

    Args:
        actual: Actual value
        expected: Expected value
        tolerance: Maximum allowed difference (default 0.01 = 1 cent)
    """
    assert (
        abs(actual - expected) < tolerance
    ), f"Expected {expected}, got {actual} (diff: {abs(actual - expected)})"
