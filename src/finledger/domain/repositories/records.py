"""Income and expense repository protocols."""

from __future__ import annotations

from datetime import date
from typing import Any, Mapping, Optional, Protocol

from ...models.expense import ExpenseRecord
from ...models.income import IncomeRecord


class IncomeRepository(Protocol):
    """Repository for managing income records."""

    def get_by_id(self, record_id: str, *, owner_id: str) -> Optional[IncomeRecord]:
        """Retrieve an income record by ID."""
        ...

    def list_for_owner(
        self,
        *,
        owner_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[IncomeRecord]:
        """List income records within an optional date range, newest first."""
        ...

    def create(self, payload: Mapping[str, Any], *, owner_id: str) -> IncomeRecord:
        """Create a new income record."""
        ...

    def update(
        self, record_id: str, changes: Mapping[str, Any], *, owner_id: str
    ) -> Optional[IncomeRecord]:
        """Update the supplied fields of an income record."""
        ...

    def delete(self, record_id: str, *, owner_id: str) -> bool:
        """Delete an income record by ID."""
        ...


class ExpenseRepository(Protocol):
    """Repository for managing expense records."""

    def get_by_id(self, record_id: str, *, owner_id: str) -> Optional[ExpenseRecord]:
        ...

    def list_for_owner(
        self,
        *,
        owner_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
    ) -> list[ExpenseRecord]:
        ...

    def filter_by_category(self, category: str, *, owner_id: str) -> list[ExpenseRecord]:
        """List expenses in a single category."""
        ...

    def create(self, payload: Mapping[str, Any], *, owner_id: str) -> ExpenseRecord:
        ...

    def update(
        self, record_id: str, changes: Mapping[str, Any], *, owner_id: str
    ) -> Optional[ExpenseRecord]:
        ...

    def delete(self, record_id: str, *, owner_id: str) -> bool:
        ...
