"""Income ledger table."""

from __future__ import annotations

from datetime import date, datetime, timezone
from decimal import Decimal
from typing import ClassVar, Optional
from uuid import uuid4

from sqlmodel import Field, SQLModel


def _new_id() -> str:
    return str(uuid4())


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class IncomeRecord(SQLModel, table=True):
    """Money received, tagged with an income type and a type-specific category."""

    __tablename__: ClassVar[str] = "income_record"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    owner_id: str = Field(nullable=False, index=True, max_length=64)
    type: str = Field(nullable=False, max_length=16, description="salary | investment | business")
    category: str = Field(nullable=False, max_length=32)
    amount: Decimal = Field(nullable=False, max_digits=12, decimal_places=2)
    occurred_on: date = Field(nullable=False, index=True)
    notes: Optional[str] = Field(default=None, max_length=500)
    is_planned: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
