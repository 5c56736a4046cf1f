"""Entrepreneurship project and ledger record forms."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ...constants.categories import validate_project_category


class ProjectForm(BaseModel):
    """Form model for creating or editing a project."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    name: str = Field(max_length=120)
    description: Optional[str] = Field(default=None, max_length=500)
    start_date: date = Field(alias="startDate")
    status: Literal["active", "completed", "paused"] = "active"

    @field_validator("name")
    @classmethod
    def validate_name(cls, value: str) -> str:
        if not value:
            raise ValueError("Please provide a project name.")
        return value


class ProjectRecordForm(BaseModel):
    """Planned or actual revenue/expense line for a project ledger."""

    model_config = ConfigDict(populate_by_name=True, str_strip_whitespace=True, extra="ignore")

    type: str = Field(description="revenue | expense")
    category: str
    sub_category: Optional[str] = Field(default=None, alias="subCategory", max_length=64)
    amount: Decimal = Field(ge=0, max_digits=12, decimal_places=2)
    description: Optional[str] = Field(default=None, max_length=255)
    occurred_on: date = Field(alias="date")
    is_planned: bool = Field(default=False, alias="isPlanned")

    @model_validator(mode="after")
    def ensure_category_matches_type(self) -> "ProjectRecordForm":
        validate_project_category(self.type, self.category)
        return self


__all__ = ["ProjectForm", "ProjectRecordForm"]
