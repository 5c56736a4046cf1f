"""Expense ledger table."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from .income import _new_id, _utcnow


class ExpenseRecord(SQLModel, table=True):
    """Money spent in one of the fixed expense categories."""

    __tablename__: ClassVar[str] = "expense_record"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    owner_id: str = Field(nullable=False, index=True, max_length=64)
    category: str = Field(nullable=False, index=True, max_length=32)
    amount: Decimal = Field(nullable=False, max_digits=12, decimal_places=2)
    occurred_on: date = Field(nullable=False, index=True)
    description: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=500)
    is_planned: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
