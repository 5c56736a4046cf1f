"""SQLModel implementation of the budget repository."""

from __future__ import annotations

from typing import Optional

from sqlmodel import select

from ...models.budget import Budget
from .records import SQLModelOwnedRecordRepository


class SQLModelBudgetRepository(SQLModelOwnedRecordRepository[Budget]):
    """Category budgets scoped to an owner."""

    model = Budget

    def list_for_owner(self, *, owner_id: str) -> list[Budget]:  # type: ignore[override]
        """List budgets in creation order so first-match lookups are stable."""
        with self.session_factory() as session:
            statement = (
                select(Budget)
                .where(Budget.owner_id == owner_id)
                .order_by(Budget.created_at.asc())  # type: ignore
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows

    def get_for_category(self, category: str, *, owner_id: str) -> Optional[Budget]:
        """Return the first budget for ``category``."""
        with self.session_factory() as session:
            obj = session.exec(
                select(Budget)
                .where(Budget.owner_id == owner_id)
                .where(Budget.category == category)
                .order_by(Budget.created_at.asc())  # type: ignore
            ).first()
            if obj:
                session.expunge(obj)
            return obj
