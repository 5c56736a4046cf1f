"""Demo data for a fresh install (income, expenses, budgets and one project)."""

from __future__ import annotations

from contextlib import AbstractContextManager
from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Callable

from sqlalchemy import func
from sqlmodel import Session, select

from ..logging_config import get_logger
from ..models import (
    Budget,
    EntrepreneurshipProject,
    ExpenseRecord,
    IncomeRecord,
    ProjectFinancialRecord,
)

SessionFactory = Callable[[], AbstractContextManager[Session]]

logger = get_logger(__name__)


@dataclass(frozen=True)
class SeedSummary:
    """Aggregate counts returned after demo seeding."""

    income: int
    expenses: int
    budgets: int
    projects: int
    project_records: int


def _month_start(today: date, months_back: int) -> date:
    year, month = divmod(today.year * 12 + today.month - 1 - months_back, 12)
    return date(year, month + 1, 1)


def _seed_income(session: Session, owner_id: str, today: date) -> None:
    for back in range(3):
        first = _month_start(today, back)
        session.add(
            IncomeRecord(
                owner_id=owner_id,
                type="salary",
                category="base",
                amount=Decimal("90000"),
                occurred_on=first.replace(day=5),
                notes="Monthly salary",
            )
        )
    session.add_all(
        [
            IncomeRecord(
                owner_id=owner_id,
                type="investment",
                category="dividend",
                amount=Decimal("12500"),
                occurred_on=_month_start(today, 1).replace(day=20),
                notes="Quarterly dividend",
            ),
            IncomeRecord(
                owner_id=owner_id,
                type="business",
                category="consulting",
                amount=Decimal("18000"),
                occurred_on=_month_start(today, 0).replace(day=2),
            ),
        ]
    )


def _seed_expenses(session: Session, owner_id: str, today: date) -> None:
    monthly = [
        ("living", "18500", "Groceries and utilities", 3),
        ("loan", "22478", "Mortgage payment", 10),
        ("insurance", "3200", "Health insurance", 15),
        ("entertainment", "2400", "Movies and dining", 22),
    ]
    for back in range(3):
        first = _month_start(today, back)
        for category, amount, description, day in monthly:
            session.add(
                ExpenseRecord(
                    owner_id=owner_id,
                    category=category,
                    amount=Decimal(amount),
                    occurred_on=first.replace(day=day),
                    description=description,
                )
            )
    session.add(
        ExpenseRecord(
            owner_id=owner_id,
            category="investment",
            amount=Decimal("10000"),
            occurred_on=_month_start(today, 0).replace(day=1),
            description="Index fund contribution",
        )
    )


def _seed_budgets(session: Session, owner_id: str) -> None:
    planned = {
        "living": "20000",
        "loan": "23000",
        "insurance": "3500",
        "investment": "10000",
        "entertainment": "3000",
        "other": "2000",
    }
    session.add_all(
        Budget(owner_id=owner_id, category=category, amount=Decimal(amount), period="monthly")
        for category, amount in planned.items()
    )


def _seed_project(session: Session, owner_id: str, today: date) -> None:
    start = _month_start(today, 2)
    project = EntrepreneurshipProject(
        owner_id=owner_id,
        name="Weekend coffee stand",
        description="Pop-up stand at the farmers market",
        start_date=start,
        status="active",
    )
    session.add(project)
    session.flush()

    rows = [
        ("revenue", "sales_revenue", "60000", True, 0),
        ("revenue", "sales_revenue", "54000", False, 0),
        ("expense", "cost_of_goods_sold", "20000", True, 0),
        ("expense", "cost_of_goods_sold", "23500", False, 0),
        ("expense", "rent_expense", "8000", True, 1),
        ("expense", "rent_expense", "8000", False, 1),
        ("expense", "equipment_expense", "15000", False, 1),
    ]
    for record_type, category, amount, is_planned, month in rows:
        session.add(
            ProjectFinancialRecord(
                project_id=project.id,
                type=record_type,
                category=category,
                amount=Decimal(amount),
                occurred_on=_month_start(start, -month).replace(day=15),
                is_planned=is_planned,
            )
        )


def _count(session: Session, model, column, value) -> int:
    return session.exec(select(func.count()).select_from(model).where(column == value)).one()


def _build_seed_summary(session: Session, *, owner_id: str) -> SeedSummary:
    """Compile counts for tables populated by the demo seed."""

    project_ids = session.exec(
        select(EntrepreneurshipProject.id).where(EntrepreneurshipProject.owner_id == owner_id)
    ).all()
    project_records = 0
    if project_ids:
        project_records = session.exec(
            select(func.count())
            .select_from(ProjectFinancialRecord)
            .where(ProjectFinancialRecord.project_id.in_(project_ids))  # type: ignore[attr-defined]
        ).one()
    return SeedSummary(
        income=_count(session, IncomeRecord, IncomeRecord.owner_id, owner_id),
        expenses=_count(session, ExpenseRecord, ExpenseRecord.owner_id, owner_id),
        budgets=_count(session, Budget, Budget.owner_id, owner_id),
        projects=len(project_ids),
        project_records=project_records,
    )


def seed_demo_data(
    session_factory: SessionFactory,
    owner_id: str,
    *,
    today: date | None = None,
    force: bool = False,
) -> SeedSummary:
    """Seed demo data for ``owner_id`` and return counts.

    Seeding is skipped when the owner already has income records, unless
    ``force`` is set.
    """

    today = today or date.today()
    with session_factory() as session:
        if not force:
            existing = session.exec(
                select(IncomeRecord.id).where(IncomeRecord.owner_id == owner_id)
            ).first()
            if existing is not None:
                logger.info("Demo data already present", extra={"owner_id": owner_id})
                return _build_seed_summary(session, owner_id=owner_id)

        _seed_income(session, owner_id, today)
        _seed_expenses(session, owner_id, today)
        _seed_budgets(session, owner_id)
        _seed_project(session, owner_id, today)
        session.commit()
        summary = _build_seed_summary(session, owner_id=owner_id)

    logger.info("Demo data seeded", extra={"owner_id": owner_id, "income": summary.income})
    return summary
