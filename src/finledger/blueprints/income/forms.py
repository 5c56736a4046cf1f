"""Income form definitions."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ...constants.categories import validate_income_category


class IncomeForm(BaseModel):
    """Form model for creating or editing an income record.

    The category must belong to the category set of the chosen income type;
    a mismatched pair raises ``InvalidInputError`` rather than a field error.
    """

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    type: str = Field(description="salary | investment | business")
    category: str
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    occurred_on: date = Field(alias="date")
    notes: Optional[str] = Field(default=None, max_length=500)
    is_planned: bool = Field(default=False, alias="isPlanned")

    @model_validator(mode="after")
    def ensure_category_matches_type(self) -> "IncomeForm":
        validate_income_category(self.type, self.category)
        return self


__all__ = ["IncomeForm"]
