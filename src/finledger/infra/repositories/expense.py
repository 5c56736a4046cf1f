"""SQLModel implementation of the expense repository."""

from __future__ import annotations

from sqlmodel import select

from ...models.expense import ExpenseRecord
from .records import SQLModelOwnedRecordRepository


class SQLModelExpenseRepository(SQLModelOwnedRecordRepository[ExpenseRecord]):
    """Expense rows scoped to an owner."""

    model = ExpenseRecord

    def filter_by_category(self, category: str, *, owner_id: str) -> list[ExpenseRecord]:
        """Get all expenses for a specific category, newest first."""
        with self.session_factory() as session:
            statement = (
                select(ExpenseRecord)
                .where(ExpenseRecord.owner_id == owner_id)
                .where(ExpenseRecord.category == category)
                .order_by(
                    ExpenseRecord.occurred_on.desc(),  # type: ignore
                    ExpenseRecord.created_at.desc(),  # type: ignore
                )
            )
            rows = list(session.exec(statement).all())
            session.expunge_all()
            return rows
