"""SQLModel implementation of the income repository."""

from __future__ import annotations

from ...models.income import IncomeRecord
from .records import SQLModelOwnedRecordRepository


class SQLModelIncomeRepository(SQLModelOwnedRecordRepository[IncomeRecord]):
    """Income rows scoped to an owner."""

    model = IncomeRecord
