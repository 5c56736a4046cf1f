"""Tests for the SQLModel repositories (owner scoping, ordering, partial updates)."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
from sqlmodel import select

from finledger.infra.repositories import (
    SQLModelBudgetRepository,
    SQLModelExpenseRepository,
    SQLModelIncomeRepository,
    SQLModelProjectRepository,
)
from finledger.models import ProjectFinancialRecord
from tests.conftest import OWNER_ID


class TestIncomeRepository:
    def test_create_assigns_id_and_owner(self, session_factory):
        repo = SQLModelIncomeRepository(session_factory)
        record = repo.create(
            {
                "type": "salary",
                "category": "base",
                "amount": Decimal("90000"),
                "occurred_on": date(2024, 1, 5),
            },
            owner_id=OWNER_ID,
        )

        assert len(record.id) == 36
        assert record.owner_id == OWNER_ID
        assert record.created_at is not None
        fetched = repo.get_by_id(record.id, owner_id=OWNER_ID)
        assert fetched is not None
        assert fetched.amount == Decimal("90000")

    def test_list_is_newest_first_and_owner_scoped(self, session_factory, income_factory):
        income_factory(amount=1, occurred_on=date(2024, 1, 1))
        income_factory(amount=3, occurred_on=date(2024, 3, 1))
        income_factory(amount=2, occurred_on=date(2024, 2, 1))
        income_factory(amount=99, occurred_on=date(2024, 2, 1), owner="someone-else")

        records = SQLModelIncomeRepository(session_factory).list_for_owner(owner_id=OWNER_ID)
        assert [int(r.amount) for r in records] == [3, 2, 1]

    def test_date_range_is_inclusive(self, session_factory, income_factory):
        for day in (1, 15, 31):
            income_factory(amount=day, occurred_on=date(2024, 1, day))
        income_factory(amount=100, occurred_on=date(2024, 2, 1))

        repo = SQLModelIncomeRepository(session_factory)
        january = repo.list_for_owner(
            owner_id=OWNER_ID, start_date=date(2024, 1, 1), end_date=date(2024, 1, 31)
        )
        assert sorted(int(r.amount) for r in january) == [1, 15, 31]
        assert len(repo.list_for_owner(owner_id=OWNER_ID, start_date=date(2024, 1, 31))) == 2

    def test_update_replaces_only_supplied_fields(self, session_factory, income_factory):
        record = income_factory(amount="500", category="base")
        repo = SQLModelIncomeRepository(session_factory)

        updated = repo.update(record.id, {"amount": Decimal("750")}, owner_id=OWNER_ID)

        assert updated is not None
        assert updated.amount == Decimal("750")
        assert updated.category == "base"
        assert updated.occurred_on == record.occurred_on

    def test_update_ignores_protected_fields(self, session_factory, income_factory):
        record = income_factory()
        repo = SQLModelIncomeRepository(session_factory)
        updated = repo.update(record.id, {"owner_id": "thief", "id": "x"}, owner_id=OWNER_ID)
        assert updated.owner_id == OWNER_ID
        assert updated.id == record.id

    def test_update_rejects_unknown_field(self, session_factory, income_factory):
        record = income_factory()
        with pytest.raises(AttributeError):
            SQLModelIncomeRepository(session_factory).update(
                record.id, {"colour": "red"}, owner_id=OWNER_ID
            )

    def test_other_owner_cannot_touch_record(self, session_factory, income_factory):
        record = income_factory()
        repo = SQLModelIncomeRepository(session_factory)

        assert repo.get_by_id(record.id, owner_id="intruder") is None
        assert repo.update(record.id, {"notes": "x"}, owner_id="intruder") is None
        assert repo.delete(record.id, owner_id="intruder") is False
        assert repo.get_by_id(record.id, owner_id=OWNER_ID) is not None

    def test_delete(self, session_factory, income_factory):
        record = income_factory()
        repo = SQLModelIncomeRepository(session_factory)
        assert repo.delete(record.id, owner_id=OWNER_ID) is True
        assert repo.delete(record.id, owner_id=OWNER_ID) is False


class TestExpenseRepository:
    def test_filter_by_category(self, session_factory, expense_factory):
        expense_factory(category="living", occurred_on=date(2024, 1, 1))
        expense_factory(category="living", occurred_on=date(2024, 2, 1))
        expense_factory(category="loan")

        rows = SQLModelExpenseRepository(session_factory).filter_by_category(
            "living", owner_id=OWNER_ID
        )
        assert [r.occurred_on for r in rows] == [date(2024, 2, 1), date(2024, 1, 1)]


class TestBudgetRepository:
    def test_list_and_category_lookup(self, session_factory, budget_factory):
        first = budget_factory(category="living", amount="100")
        budget_factory(category="living", amount="900")
        budget_factory(category="loan", amount="5000", owner="someone-else")

        repo = SQLModelBudgetRepository(session_factory)
        assert len(repo.list_for_owner(owner_id=OWNER_ID)) == 2
        assert repo.get_for_category("living", owner_id=OWNER_ID).id == first.id
        assert repo.get_for_category("loan", owner_id=OWNER_ID) is None

    def test_update_period(self, session_factory, budget_factory):
        budget = budget_factory()
        updated = SQLModelBudgetRepository(session_factory).update(
            budget.id, {"period": "yearly"}, owner_id=OWNER_ID
        )
        assert updated.period == "yearly"
        assert updated.amount == Decimal("500")


class TestProjectRepository:
    def _record_payload(self, **overrides):
        payload = {
            "type": "revenue",
            "category": "sales_revenue",
            "amount": Decimal("100"),
            "occurred_on": date(2024, 1, 10),
            "is_planned": False,
        }
        payload.update(overrides)
        return payload

    def test_records_are_scoped_through_project_owner(self, session_factory, project_factory):
        project = project_factory()
        repo = SQLModelProjectRepository(session_factory)

        record = repo.create_record(project.id, self._record_payload(), owner_id=OWNER_ID)
        assert record is not None
        assert record.project_id == project.id

        assert repo.create_record(project.id, self._record_payload(), owner_id="intruder") is None
        assert repo.list_records(project.id, owner_id="intruder") is None
        assert repo.get_record(record.id, owner_id="intruder") is None
        assert repo.update_record(record.id, {"amount": Decimal("1")}, owner_id="intruder") is None
        assert repo.delete_record(record.id, owner_id="intruder") is False

    def test_list_records_date_range_newest_first(self, session_factory, project_factory):
        project = project_factory()
        repo = SQLModelProjectRepository(session_factory)
        for day in (5, 20, 12):
            repo.create_record(
                project.id, self._record_payload(occurred_on=date(2024, 1, day)), owner_id=OWNER_ID
            )

        rows = repo.list_records(project.id, owner_id=OWNER_ID)
        assert [r.occurred_on.day for r in rows] == [20, 12, 5]
        ranged = repo.list_records(
            project.id, owner_id=OWNER_ID, start_date=date(2024, 1, 6), end_date=date(2024, 1, 12)
        )
        assert [r.occurred_on.day for r in ranged] == [12]

    def test_update_record(self, session_factory, project_factory):
        project = project_factory(records=[("expense", "rent_expense", "800", True)])
        repo = SQLModelProjectRepository(session_factory)
        record = repo.list_records(project.id, owner_id=OWNER_ID)[0]

        updated = repo.update_record(record.id, {"is_planned": False}, owner_id=OWNER_ID)
        assert updated.is_planned is False
        assert updated.category == "rent_expense"

    def test_delete_project_cascades_to_records(self, session_factory, project_factory):
        project = project_factory(
            records=[
                ("revenue", "sales_revenue", "100", False),
                ("expense", "rent_expense", "40", False),
            ]
        )
        survivor = project_factory(name="Other", records=[("revenue", "sales_revenue", "5", False)])
        repo = SQLModelProjectRepository(session_factory)

        assert repo.delete(project.id, owner_id=OWNER_ID) is True
        assert repo.get_by_id(project.id, owner_id=OWNER_ID) is None

        with session_factory() as session:
            remaining = session.exec(select(ProjectFinancialRecord)).all()
        assert [r.project_id for r in remaining] == [survivor.id]

    def test_list_projects_for_owner(self, session_factory, project_factory):
        project_factory(name="Old", start_date=date(2023, 1, 1))
        project_factory(name="New", start_date=date(2024, 6, 1))
        project_factory(name="Foreign", owner="someone-else")

        names = [p.name for p in SQLModelProjectRepository(session_factory).list_for_owner(owner_id=OWNER_ID)]
        assert names == ["New", "Old"]
