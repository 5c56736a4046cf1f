"""Expense form definitions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants.categories import EXPENSE_CATEGORIES, is_expense_category


class ExpenseForm(BaseModel):
    """Form model for creating or editing an expense record."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    category: str
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    occurred_on: date = Field(alias="date")
    description: Optional[str] = Field(default=None, max_length=255)
    notes: Optional[str] = Field(default=None, max_length=500)
    is_planned: bool = Field(default=False, alias="isPlanned")

    @field_validator("category")
    @classmethod
    def validate_category(cls, value: str) -> str:
        if not is_expense_category(value):
            raise ValueError(f"Choose one of: {', '.join(EXPENSE_CATEGORIES)}.")
        return value


__all__ = ["ExpenseForm"]
