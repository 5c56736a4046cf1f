"""Budget form definitions."""

from __future__ import annotations

from decimal import Decimal
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ...constants.categories import EXPENSE_CATEGORIES, is_expense_category


class BudgetForm(BaseModel):
    """Spending limit for one expense category."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    category: str
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    period: Literal["monthly", "yearly"] = "monthly"

    @field_validator("category")
    @classmethod
    def validate_category(cls, value: str) -> str:
        if not is_expense_category(value):
            raise ValueError(f"Choose one of: {', '.join(EXPENSE_CATEGORIES)}.")
        return value


__all__ = ["BudgetForm"]
