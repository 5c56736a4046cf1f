"""Entrepreneurship project ledger tables."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal
from typing import ClassVar, Optional

from sqlmodel import Field, SQLModel

from .income import _new_id, _utcnow


class EntrepreneurshipProject(SQLModel, table=True):
    """A side business or venture with its own revenue/expense ledger."""

    __tablename__: ClassVar[str] = "entrepreneurship_project"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    owner_id: str = Field(nullable=False, index=True, max_length=64)
    name: str = Field(nullable=False, max_length=120)
    description: Optional[str] = Field(default=None, max_length=500)
    start_date: date = Field(nullable=False)
    status: str = Field(default="active", nullable=False, max_length=16)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)


class ProjectFinancialRecord(SQLModel, table=True):
    """Planned or actual revenue/expense entry inside a project ledger."""

    __tablename__: ClassVar[str] = "project_financial_record"

    id: str = Field(default_factory=_new_id, primary_key=True, max_length=36)
    project_id: str = Field(
        foreign_key="entrepreneurship_project.id", nullable=False, index=True, max_length=36
    )
    type: str = Field(nullable=False, max_length=16, description="revenue | expense")
    category: str = Field(nullable=False, max_length=32)
    sub_category: Optional[str] = Field(default=None, max_length=64)
    amount: Decimal = Field(nullable=False, max_digits=12, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=255)
    occurred_on: date = Field(nullable=False, index=True)
    is_planned: bool = Field(default=False, nullable=False)
    created_at: datetime = Field(default_factory=_utcnow, nullable=False)
