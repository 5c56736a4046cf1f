"""Budgeting table."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import ClassVar

from sqlmodel import Field, SQLModel

from .income import _new_id, _utcnow


class Budget(SQLModel, table=True):
    """Spending allowance for one expense category.

    One budget per (owner, category) is expected; lookups take the first match.
    """

    __tablename__: ClassVar[str] = "budget"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    owner_id: str = Field(nullable=False, index=True, max_length=64)
    category: str = Field(nullable=False, index=True, max_length=32)
    amount: Decimal = Field(nullable=False, max_digits=12, decimal_places=2)
    period: str = Field(default="monthly", nullable=False, max_length=16)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
